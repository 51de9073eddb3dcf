"""Payment options, customer details and the rendering of cart and receipt screens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .catalog import Cart, CartItem
from .inputs import is_valid_uf

MAX_INSTALLMENTS = 12
FREIGHT_PERCENT = 5.0
FREE_FREIGHT_UFS = frozenset({"SC", "PR", "RS"})

_STARS = " ******************************************"
_SEPARATOR = "\n ------------------------------------------\n\n"

CART_TITLE = " **              CARRINHO                **"
RECEIPT_TITLE = " **             PEDIDO FECHADO           **"
CUSTOMER_TITLE = " **                CLIENTE               **"
PAYMENT_TITLE = " **               PAGAMENTO              **"
FREIGHT_TITLE = " **                FRETE                 **"
TOTAL_TITLE = " **             VALOR TOTAL              **"

EMPTY_CART_MESSAGE = " Nao ha itens no carrinho! \n"


def _banner(title_line: str) -> str:
    return f"\n{_STARS}\n{title_line}\n{_STARS}\n"


class PaymentMethod(Enum):
    """How the order is paid; cash-like methods earn a discount."""

    PIX = "PIX"
    DEBITO = "DEBITO"
    CREDITO = "CREDITO"

    @property
    def discount_percent(self) -> float:
        return _DISCOUNTS[self]

    @property
    def is_credit(self) -> bool:
        return self is PaymentMethod.CREDITO

    @classmethod
    def from_option(cls, option: int) -> PaymentMethod:
        """Map the menu choice 1, 2 or 3 to a payment method."""
        try:
            return _OPTIONS[option]
        except KeyError:
            raise ValueError(f"invalid payment option: {option}") from None


_DISCOUNTS = {
    PaymentMethod.PIX: 10.0,
    PaymentMethod.DEBITO: 5.0,
    PaymentMethod.CREDITO: 0.0,
}

_OPTIONS = {
    1: PaymentMethod.PIX,
    2: PaymentMethod.DEBITO,
    3: PaymentMethod.CREDITO,
}


def has_free_freight(uf: str) -> bool:
    """Tell whether deliveries to state ``uf`` ship for free."""
    return uf in FREE_FREIGHT_UFS


@dataclass(frozen=True)
class Customer:
    """Who receives the order and where."""

    name: str
    city: str
    uf: str
    street: str
    number: int

    def __post_init__(self) -> None:
        for label, value in (("name", self.name), ("city", self.city), ("street", self.street)):
            if not value:
                raise ValueError(f"{label} must not be empty")
        if not is_valid_uf(self.uf):
            raise ValueError(f"invalid state code: {self.uf!r}")
        if self.number <= 0:
            raise ValueError("number must be positive")


@dataclass(frozen=True)
class Order:
    """A closed order: cart contents, customer, and payment terms."""

    cart: Cart
    customer: Customer
    payment: PaymentMethod
    installments: int = 0

    def __post_init__(self) -> None:
        if len(self.cart) == 0:
            raise ValueError("cannot close an order with an empty cart")
        if self.payment.is_credit and not 1 <= self.installments <= MAX_INSTALLMENTS:
            raise ValueError(f"installments must be between 1 and {MAX_INSTALLMENTS}")

    @property
    def items_total(self) -> float:
        return self.cart.total()

    @property
    def discount(self) -> float:
        if self.payment.is_credit:
            return 0.0
        return (self.payment.discount_percent / 100) * self.items_total

    @property
    def free_freight(self) -> bool:
        return has_free_freight(self.customer.uf)

    @property
    def freight(self) -> float:
        if self.free_freight:
            return 0.0
        return (FREIGHT_PERCENT / 100) * self.items_total

    @property
    def total(self) -> float:
        return self.items_total - self.discount + self.freight

    @property
    def installment_value(self) -> float | None:
        """Amount of each installment for credit payments, otherwise None."""
        if not self.payment.is_credit:
            return None
        return self.total / self.installments


def format_item_line(item: CartItem) -> str:
    """One cart line with name, unit price, quantity and subtotal."""
    return (
        f" Produto: {item.product.name:<36} | Preco: R$ {item.product.price:<8.2f} | "
        f"Qntd: {item.quantity:<3d} | Subtotal: R$ {item.subtotal:<8.2f} \n"
    )


def _item_lines(cart: Cart) -> str:
    return "".join(format_item_line(item) for item in cart)


def render_cart(cart: Cart) -> str:
    """The cart screen: banner, item lines and total, or the empty-cart notice."""
    body = _banner(CART_TITLE) + "\n"
    if len(cart) == 0:
        return body + EMPTY_CART_MESSAGE
    return body + _item_lines(cart) + f"\n Total: R$ {cart.total():.2f}\n"


def render_receipt(order: Order) -> str:
    """The closed-order screen with items, customer, payment, freight and totals."""
    customer = order.customer
    credit = order.payment.is_credit
    parts = [
        _banner(RECEIPT_TITLE),
        "\n",
        _item_lines(order.cart),
        f"\n Subtotal: R$ {order.items_total:.2f}",
        "\n",
        _banner(CUSTOMER_TITLE),
        f"\n Cliente: {customer.name}",
        f"\n Cidade: {customer.city} - {customer.uf}",
        f"\n Endereco: {customer.street}, {customer.number}",
        "\n",
        _banner(PAYMENT_TITLE),
        f"\n Forma de Pagamento: {order.payment.value}",
    ]
    if credit:
        parts.append(f"\n Quantidade de Parcelas: {order.installments}x")
    else:
        parts.append(f"\n DESCONTO: {order.payment.discount_percent:.1f}%")
    parts.append("\n")

    parts.append(_banner(FREIGHT_TITLE))
    parts.append("\n FRETE: GRATIS" if order.free_freight else f"\n FRETE: {FREIGHT_PERCENT:.0f}%")
    parts.append("\n")

    parts.append(_banner(TOTAL_TITLE))
    parts.append(f"\n Total dos Itens: R$ {order.items_total:.2f}")
    if credit:
        parts.append(f"\n Quantidade de Parcelas: {order.installments}x")
    else:
        parts.append(f"\n Desconto a Vista: R$ {order.discount:.2f}")
    parts.append("\n")
    parts.append("\n Frete: GRATIS" if order.free_freight else f"\n Frete: R$ {order.freight:.2f}")
    parts.append("\n")
    parts.append(f"\n TOTAL DO PEDIDO: R$ {order.total:.2f}")
    if credit:
        parts.append(f"\n PAGAMENTO: {order.installments}x de R$ {order.installment_value:.2f}")
    parts.append("\n")
    parts.append(_SEPARATOR)
    return "".join(parts)