# storefront/coordinator.py
import logging
from typing import List, Optional, Union

from rich.console import Group
from rich.table import Table

from sdk.catalog import CatalogClient
from storefront.cart import add_to_cart, get_total_items, remove_from_cart
from storefront.models import CartItem, Product
from storefront.query import ProductQuery
from storefront import views

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit", "exit")
COMMANDS = ["add", "+", "remove", "-", "cart", "open", "close", "help", *QUIT_COMMANDS]


class Storefront:
    """
    Owns the product query, the cart and the drawer visibility, and turns
    them into one renderable screen.
    """

    def __init__(self, client: CatalogClient):
        self.query = ProductQuery(client)
        self.cart_items: List[CartItem] = []
        self.cart_open = False
        self.status_message: Optional[str] = None

    # ---------------------------
    # Lifecycle
    # ---------------------------
    def mount(self) -> ProductQuery:
        return self.query.fetch()

    @property
    def products(self) -> List[Product]:
        return self.query.data or []

    @property
    def total_items(self) -> int:
        return get_total_items(self.cart_items)

    # ---------------------------
    # Event handlers
    # ---------------------------
    def handle_add_to_cart(self, clicked_item: Union[Product, CartItem]):
        self.cart_items = add_to_cart(self.cart_items, clicked_item)

    def handle_remove_from_cart(self, item_id: int):
        self.cart_items = remove_from_cart(self.cart_items, item_id)

    def open_cart(self):
        self.cart_open = True

    def close_cart(self):
        self.cart_open = False

    def _find_product(self, item_id: int) -> Optional[Product]:
        return next((p for p in self.products if p.id == item_id), None)

    def _find_cart_item(self, item_id: int) -> Optional[CartItem]:
        return next((i for i in self.cart_items if i.id == item_id), None)

    # ---------------------------
    # Command dispatch
    # ---------------------------
    def dispatch(self, command: str) -> bool:
        """
        Apply one typed command. Returns False when the session should end.

        add <id> / + <id> add one, remove <id> / - <id> take one away,
        cart / open and close toggle the drawer, q quits.
        """
        logger.debug("command %r", command)
        parts = command.strip().split()
        self.status_message = None
        if not parts:
            return True

        verb = parts[0].lower()
        if verb in QUIT_COMMANDS:
            return False
        if verb in ("cart", "open"):
            self.open_cart()
            return True
        if verb == "close":
            self.close_cart()
            return True
        if verb == "help":
            self.status_message = "Commands: add <id>, + <id>, remove <id>, - <id>, cart, close, q"
            return True

        if verb not in ("add", "+", "remove", "-"):
            self.status_message = f"Unknown command: {verb}"
            return True
        if len(parts) != 2:
            self.status_message = f"Usage: {verb} <id>"
            return True
        try:
            item_id = int(parts[1])
        except ValueError:
            # malformed ids are a no-op
            self.status_message = f"Not a product id: {parts[1]}"
            return True

        if verb == "add":
            product = self._find_product(item_id)
            if product is not None:
                self.handle_add_to_cart(product)
            else:
                self.status_message = f"No product with id {item_id}"
        elif verb == "+":
            cart_item = self._find_cart_item(item_id)
            if cart_item is not None:
                self.handle_add_to_cart(cart_item)
            else:
                self.status_message = f"Product {item_id} is not in the cart"
        else:
            self.handle_remove_from_cart(item_id)
        return True

    # ---------------------------
    # Rendering
    # ---------------------------
    def render(self):
        if self.query.is_loading:
            return views.render_loading()
        if self.query.is_error:
            return views.render_error()

        header = Table.grid(expand=True)
        header.add_column(justify="left")
        header.add_column(justify="right")
        header.add_row("[bold magenta]🛍️ Storefront[/bold magenta]", views.render_badge(self.cart_items))

        parts = [header]
        if self.cart_open:
            parts.append(views.render_cart(self.cart_items))
        parts.append(views.render_grid(self.products))
        return Group(*parts)
