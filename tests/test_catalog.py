import pytest

from lojainfo.catalog import (
    CATEGORIES,
    MAX_CART_ITEMS,
    Cart,
    CartFullError,
    CartItem,
    Product,
)


def test_six_categories_of_three_products():
    cart = Cart(capacity=18)
    for category in CATEGORIES:
        for product in category.products:
            cart.add(product, 1)
    assert len(CATEGORIES) == 6
    assert len(cart) == 18
    assert cart.is_full() is True


def test_source_prices_are_kept():
    cart = Cart()
    first = cart.add(CATEGORIES[0].products[0], 1)
    rtx = cart.add(CATEGORIES[1].products[2], 1)
    assert first.product.name == "Ryzen 5 3600"
    assert first.subtotal == 700.0
    assert rtx.subtotal == 5400.0
    assert cart.total() == 6100.0


def test_label_defaults_to_name_and_can_differ():
    assert Product("RX 580", 540.0).label == "RX 580"
    samsung = CATEGORIES[3].products[2]
    assert samsung.name == "SSD Samsung 2TB NVMe"
    assert samsung.label == "SSD Samsung 2TB"


def test_names_fit_their_column():
    for category in CATEGORIES:
        cart = Cart()
        items = [cart.add(product, 1) for product in category.products]
        assert len(cart) == 3
        assert all(len(item.product.name) <= category.name_width for item in items)


def test_cart_item_subtotal():
    product = Product("Widget", 2.5)
    item = CartItem(product, 4)
    assert item.subtotal == product.price * item.quantity


def test_cart_add_and_total():
    cart = Cart()
    a = cart.add(Product("A", 100.0), 2)
    b = cart.add(Product("B", 50.0), 1)
    assert list(cart) == [a, b]
    assert len(cart) == 2
    assert cart.total() == a.subtotal + b.subtotal


def test_empty_cart_total_is_zero():
    assert Cart().total() == 0.0


@pytest.mark.parametrize("quantity", [0, -1])
def test_cart_rejects_non_positive_quantity(quantity):
    cart = Cart()
    with pytest.raises(ValueError):
        cart.add(Product("A", 1.0), quantity)
    assert len(cart) == 0


def test_cart_fills_up():
    cart = Cart()
    product = CATEGORIES[0].products[0]
    for _ in range(MAX_CART_ITEMS):
        assert cart.is_full() is False
        cart.add(product, 1)
    assert cart.is_full() is True
    with pytest.raises(CartFullError):
        cart.add(product, 1)
    assert len(cart) == MAX_CART_ITEMS


def test_custom_capacity():
    cart = Cart(capacity=1)
    cart.add(Product("A", 1.0), 1)
    with pytest.raises(CartFullError):
        cart.add(Product("B", 1.0), 1)