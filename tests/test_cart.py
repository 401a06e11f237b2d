# tests/test_cart.py
from storefront.cart import add_to_cart, calculate_total, get_total_items, remove_from_cart
from storefront.models import CartItem, Product


def product(pid, price=10.0):
    return Product(
        id=pid,
        category="electronics",
        description=f"product {pid}",
        image=f"https://example.com/{pid}.jpg",
        price=price,
        title=f"Item {pid}",
    )


def cart_item(pid, amount, price=10.0):
    return CartItem(**product(pid, price).model_dump(), amount=amount)


def test_first_add_appends_with_amount_one():
    items = add_to_cart([], product(1))
    assert len(items) == 1
    assert items[0].id == 1
    assert items[0].amount == 1
    assert items[0].title == "Item 1"


def test_adding_twice_keeps_one_entry_and_adds_two():
    start = [cart_item(2, 1), cart_item(1, 3)]
    items = add_to_cart(add_to_cart(start, product(1)), product(1))
    matching = [i for i in items if i.id == 1]
    assert len(matching) == 1
    assert matching[0].amount == 5
    assert [i.id for i in items] == [2, 1]


def test_add_from_drawer_ignores_clicked_amount():
    items = add_to_cart([], cart_item(7, 4))
    assert items[0].amount == 1
    items = add_to_cart(items, items[0])
    assert items[0].amount == 2


def test_add_does_not_mutate_input():
    start = [cart_item(1, 1)]
    add_to_cart(start, product(1))
    add_to_cart(start, product(2))
    assert start == [cart_item(1, 1)]


def test_new_items_go_to_the_end():
    items = add_to_cart(add_to_cart(add_to_cart([], product(3)), product(1)), product(2))
    assert [i.id for i in items] == [3, 1, 2]


def test_remove_at_amount_one_drops_entry():
    items = remove_from_cart([cart_item(1, 1), cart_item(2, 2)], 1)
    assert [i.id for i in items] == [2]


def test_remove_decrements_and_preserves_order():
    start = [cart_item(1, 2), cart_item(2, 4), cart_item(3, 1)]
    items = remove_from_cart(start, 2)
    assert [(i.id, i.amount) for i in items] == [(1, 2), (2, 3), (3, 1)]
    assert items[0] == start[0]
    assert items[2] == start[2]


def test_remove_absent_id_is_noop():
    start = [cart_item(1, 2), cart_item(2, 1)]
    assert remove_from_cart(start, 99) == start
    assert remove_from_cart([], 1) == []


def test_total_items():
    assert get_total_items([cart_item(1, 2), cart_item(2, 3)]) == 5
    assert get_total_items([]) == 0


def test_calculate_total_and_subtotal():
    items = [cart_item(1, 2, price=9.99), cart_item(2, 1, price=0.02)]
    assert round(items[0].subtotal, 2) == 19.98
    assert round(calculate_total(items), 2) == 20.00
