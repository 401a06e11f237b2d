import itertools
from typing import Any, Dict, List

# In-memory catalog, keyed by integer product id.

PRODUCTS: Dict[int, Dict[str, Any]] = {}
_IDS = itertools.count(1)

SAMPLE_PRODUCTS: List[Dict[str, Any]] = [
    {
        "title": "Fjallraven Foldsack No. 1 Backpack",
        "price": 109.95,
        "description": "Your perfect pack for everyday use and walks in the forest. Stash your laptop (up to 15 inches) in the padded sleeve.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
    },
    {
        "title": "Mens Casual Premium Slim Fit T-Shirts",
        "price": 22.3,
        "description": "Slim-fitting style, contrast raglan long sleeve, three-button henley placket, light weight and soft fabric.",
        "category": "men's clothing",
        "image": "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SX._UX._SY._UY_.jpg",
    },
    {
        "title": "John Hardy Women's Legends Naga Bracelet",
        "price": 695.0,
        "description": "From our Legends Collection, the Naga was inspired by the mythical water dragon that protects the ocean's pearl.",
        "category": "jewelery",
        "image": "https://fakestoreapi.com/img/71pWzhdJNwL._AC_UL640_QL65_ML3_.jpg",
    },
    {
        "title": "WD 2TB Elements Portable External Hard Drive",
        "price": 64.0,
        "description": "USB 3.0 and USB 2.0 compatibility, fast data transfers, improve PC performance, high capacity.",
        "category": "electronics",
        "image": "https://fakestoreapi.com/img/61IBBVJvSDL._AC_SY879_.jpg",
    },
]


def add_product(fields: Dict[str, Any]) -> Dict[str, Any]:
    pid = next(_IDS)
    PRODUCTS[pid] = {"id": pid, **fields}
    return PRODUCTS[pid]


def reset():
    global _IDS
    PRODUCTS.clear()
    _IDS = itertools.count(1)


def seed():
    for p in SAMPLE_PRODUCTS:
        add_product(dict(p))
