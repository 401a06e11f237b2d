# storefront/cart.py
"""
Cart state updates.

Every operation takes the current cart and returns a new list; nothing here
mutates its input. The caller replaces its cart with the returned value.
"""
import logging
from typing import List, Union

from storefront.models import CartItem, Product

logger = logging.getLogger(__name__)


def add_to_cart(items: List[CartItem], clicked_item: Union[Product, CartItem]) -> List[CartItem]:
    # 1. Already in the cart: bump its amount
    if any(item.id == clicked_item.id for item in items):
        logger.debug("incrementing cart item %s", clicked_item.id)
        return [
            item.model_copy(update={"amount": item.amount + 1})
            if item.id == clicked_item.id
            else item
            for item in items
        ]

    # 2. First time this product is added
    logger.debug("adding cart item %s", clicked_item.id)
    fields = clicked_item.model_dump(exclude={"amount"})
    return [*items, CartItem(**fields, amount=1)]


def remove_from_cart(items: List[CartItem], item_id: int) -> List[CartItem]:
    out: List[CartItem] = []
    for item in items:
        if item.id != item_id:
            out.append(item)
        elif item.amount == 1:
            # dropped without confirmation
            logger.debug("removing cart item %s", item_id)
        else:
            logger.debug("decrementing cart item %s", item_id)
            out.append(item.model_copy(update={"amount": item.amount - 1}))
    return out


def get_total_items(items: List[CartItem]) -> int:
    return sum(item.amount for item in items)


def calculate_total(items: List[CartItem]) -> float:
    return sum(item.subtotal for item in items)
