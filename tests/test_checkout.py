import pytest

from lojainfo.catalog import Cart, CartItem, Product
from lojainfo.checkout import (
    Customer,
    Order,
    PaymentMethod,
    format_item_line,
    has_free_freight,
    render_cart,
    render_receipt,
)


def _cart() -> Cart:
    cart = Cart()
    cart.add(Product("RX 580", 540.0), 2)
    cart.add(Product("Ryzen 5 3600", 700.0), 1)
    return cart


def _customer(uf: str = "SP") -> Customer:
    return Customer(name="Maria", city="Campinas", uf=uf, street="Rua A", number=42)


def test_payment_options_map_to_methods():
    assert PaymentMethod.from_option(1) is PaymentMethod.PIX
    assert PaymentMethod.from_option(2) is PaymentMethod.DEBITO
    assert PaymentMethod.from_option(3) is PaymentMethod.CREDITO


@pytest.mark.parametrize("option", [0, 4, -1])
def test_invalid_payment_option_raises(option):
    with pytest.raises(ValueError):
        PaymentMethod.from_option(option)


@pytest.mark.parametrize("option,percent", [(1, 10), (2, 5), (3, 0)])
def test_discount_percentages(option, percent):
    assert PaymentMethod.from_option(option).discount_percent == percent


@pytest.mark.parametrize("uf,expected", [("SC", True), ("PR", True), ("RS", True), ("SP", False), ("RJ", False)])
def test_free_freight_states(uf, expected):
    assert has_free_freight(uf) is expected


def test_customer_rejects_invalid_uf():
    with pytest.raises(ValueError):
        _customer(uf="XX")


@pytest.mark.parametrize("field,value", [("name", ""), ("city", ""), ("street", ""), ("number", 0)])
def test_customer_rejects_missing_fields(field, value):
    data = dict(name="Maria", city="Campinas", uf="SP", street="Rua A", number=42)
    data[field] = value
    with pytest.raises(ValueError):
        Customer(**data)


def test_format_item_line_layout():
    line = format_item_line(CartItem(Product("RX 580", 540.0), 2))
    assert line.startswith(" Produto: RX 580" + " " * 30 + " | Preco: R$ 540.00   | ")
    assert "| Qntd: 2   |" in line
    assert line.endswith(" \n")


def test_render_cart_empty():
    text = render_cart(Cart())
    assert text.endswith(" Nao ha itens no carrinho! \n")
    assert "CARRINHO" in text


def test_render_cart_lists_items_and_total():
    cart = _cart()
    text = render_cart(cart)
    for item in cart:
        assert format_item_line(item) in text
    assert f"\n Total: R$ {cart.total():.2f}\n" in text


def test_pix_order_totals():
    order = Order(_cart(), _customer("SP"), PaymentMethod.PIX)
    assert order.discount == pytest.approx(order.items_total * 0.10)
    assert order.freight == pytest.approx(order.items_total * 0.05)
    assert order.total == pytest.approx(order.items_total - order.discount + order.freight)
    assert order.installment_value is None


def test_free_freight_order():
    order = Order(_cart(), _customer("SC"), PaymentMethod.DEBITO)
    assert order.freight == 0.0
    assert order.total == pytest.approx(order.items_total * 0.95)


def test_credit_order_installments():
    order = Order(_cart(), _customer("SP"), PaymentMethod.CREDITO, installments=3)
    assert order.discount == 0.0
    assert order.installment_value * 3 == pytest.approx(order.total)


@pytest.mark.parametrize("installments", [0, 13, -2])
def test_credit_order_rejects_bad_installments(installments):
    with pytest.raises(ValueError):
        Order(_cart(), _customer(), PaymentMethod.CREDITO, installments=installments)


def test_empty_cart_order_rejected():
    with pytest.raises(ValueError):
        Order(Cart(), _customer(), PaymentMethod.PIX)


def test_receipt_for_pix_outside_south():
    order = Order(_cart(), _customer("SP"), PaymentMethod.PIX)
    text = render_receipt(order)
    for item in order.cart:
        assert format_item_line(item) in text
    assert "\n Cliente: Maria" in text
    assert "\n Cidade: Campinas - SP" in text
    assert "\n Endereco: Rua A, 42" in text
    assert "\n Forma de Pagamento: PIX" in text
    assert "\n DESCONTO: 10.0%" in text
    assert "\n FRETE: 5%" in text
    assert f"\n TOTAL DO PEDIDO: R$ {order.total:.2f}" in text
    assert "PAGAMENTO: " not in text.split("TOTAL DO PEDIDO")[1]
    assert text.endswith("\n ------------------------------------------\n\n")


def test_receipt_for_credit_in_south():
    order = Order(_cart(), _customer("RS"), PaymentMethod.CREDITO, installments=3)
    text = render_receipt(order)
    assert text.count("\n Quantidade de Parcelas: 3x") == 2
    assert "\n FRETE: GRATIS" in text
    assert "\n Frete: GRATIS" in text
    assert "DESCONTO" not in text
    assert f"\n PAGAMENTO: 3x de R$ {order.installment_value:.2f}" in text