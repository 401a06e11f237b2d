# storefront/views.py
from typing import List

from rich import box
from rich.align import Align
from rich.columns import Columns
from rich.console import Group
from rich.panel import Panel
from rich.spinner import Spinner
from rich.table import Table
from rich.text import Text

from storefront.cart import calculate_total, get_total_items
from storefront.models import CartItem, Product

ERROR_MESSAGE = "Something went wrong..."
CARD_WIDTH = 38
DESCRIPTION_LIMIT = 140


def _shorten(text: str, limit: int) -> str:
    text = " ".join(text.split())
    if len(text) <= limit:
        return text
    return text[: limit - 1].rstrip() + "…"


# ---------------------------
# Page states
# ---------------------------
def render_loading():
    return Align.center(Spinner("dots", text="Loading products..."), vertical="middle")


def render_error():
    return Text(ERROR_MESSAGE)


# ---------------------------
# Product grid
# ---------------------------
def render_item(item: Product) -> Panel:
    body = Text()
    body.append(f"${item.price:.2f}\n", style="bold green")
    body.append(_shorten(item.description, DESCRIPTION_LIMIT) + "\n", style="dim")
    body.append(item.image + "\n", style="blue underline")
    body.append(f"➕ Add to cart: add {item.id}", style="bold cyan")
    return Panel(
        body,
        title=Text(item.title, style="bold"),
        subtitle=Text(item.category, style="italic"),
        box=box.ROUNDED,
        width=CARD_WIDTH,
    )


def render_grid(products: List[Product]):
    if not products:
        return Text("No products found", style="italic yellow")
    return Columns([render_item(p) for p in products], padding=(1, 2))


# ---------------------------
# Cart drawer
# ---------------------------
def render_cart(cart_items: List[CartItem]) -> Panel:
    title = Text("🛒 Your Shopping Cart", style="bold")

    if not cart_items:
        return Panel(Text("No items in cart."), title=title, border_style="blue", width=100)

    table = Table(box=box.ROUNDED, header_style="bold blue", show_lines=True)
    table.add_column("ID", style="dim", justify="right", width=4)
    table.add_column("Product", style="bold", width=30)
    table.add_column("Price", justify="right", width=10)
    table.add_column("Amount", justify="right", width=8)
    table.add_column("Total", justify="right", width=10)
    table.add_column("", width=12)

    for item in cart_items:
        table.add_row(
            str(item.id),
            Text(item.title),
            f"${item.price:.2f}",
            str(item.amount),
            f"${item.subtotal:.2f}",
            f"- {item.id}  + {item.id}",
        )

    footer = Text(f"Total: ${calculate_total(cart_items):.2f}", style="bold green")
    return Panel(Group(table, footer), title=title, border_style="blue", width=100)


def render_badge(cart_items: List[CartItem]) -> Panel:
    count = get_total_items(cart_items)
    badge = Text()
    badge.append("🛒 ")
    badge.append(f" {count} ", style="bold white on red")
    return Panel.fit(badge, title="Cart", subtitle="cart / close", border_style="red")
