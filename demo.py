#!/usr/bin/env python
from rich.console import Console

from sdk.catalog import CatalogClient
from storefront.coordinator import Storefront

console = Console()


def main():
    # expects the local catalog running: python -m app.main
    c = CatalogClient(base_url="http://127.0.0.1:8085")

    # -----------------------------
    # Reset and seed the catalog
    # -----------------------------
    print("Seeding catalog...")
    c.session.post(f"{c.base_url}/reset")
    c.session.post(f"{c.base_url}/seed")

    # -----------------------------
    # Mount the storefront
    # -----------------------------
    store = Storefront(c)
    store.mount()
    if not store.query.is_success:
        console.print(store.render())
        return
    first = store.products[0]

    # -----------------------------
    # Fill and drain the cart
    # -----------------------------
    script = [f"add {first.id}", f"add {first.id}", "cart", f"- {first.id}", f"remove {first.id}"]
    for command in script:
        print(f"\n> {command}")
        store.dispatch(command)
        console.print(store.render())
        print(f"Badge: {store.total_items}")

    c.close()


if __name__ == "__main__":
    main()
