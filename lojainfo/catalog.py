"""Products on sale, their categories and the shopping cart."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

MAX_CART_ITEMS = 32


@dataclass(frozen=True)
class Product:
    """An item for sale; ``label`` is the name used in cart notices."""

    name: str
    price: float
    label: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", self.name)


@dataclass(frozen=True)
class Category:
    """A menu section with its banner, name column width and products."""

    menu_label: str
    banner: str
    name_width: int
    products: tuple[Product, ...]


CATEGORIES: tuple[Category, ...] = (
    Category(
        "Processadores",
        " **             PROCESSADORES            **",
        20,
        (
            Product("Ryzen 5 3600", 700.0),
            Product("Ryzen 7 5700X", 1200.0),
            Product("Intel Core i9 13400", 2450.0),
        ),
    ),
    Category(
        "Placas de Video",
        " **            PLACAS DE VIDEO           **",
        24,
        (
            Product("Geforce GTX 1660 Super", 1100.0),
            Product("RX 580", 540.0),
            Product("Geforce RTX 4080 TI", 5400.0),
        ),
    ),
    Category(
        "Placas Mae",
        " **               PLACAS MÃE             **",
        36,
        (
            Product("Gigabyte B550M Aorus Elite AM4", 900.0),
            Product("Biostar A320MH AM4", 390.0),
            Product("Gigabyte B760M Aorus Elite LGA 1700", 1200.0),
        ),
    ),
    Category(
        "Armazenamento",
        " **             ARMAZENAMENTO            **",
        20,
        (
            Product("SSD Kingston 240GB", 130.0),
            Product("SSD Crucial 1TB", 470.0),
            Product("SSD Samsung 2TB NVMe", 1250.0, "SSD Samsung 2TB"),
        ),
    ),
    Category(
        "Memoria",
        " **                 MEMORIA              **",
        32,
        (
            Product("XPG 3200Mhz 8GB", 140.0, "XPG 3200Mhz 1x8GB"),
            Product("Corsair Vengeance 3200Mhz 16GB", 360.0),
            Product("G.SKILL Trident 6000Mhz 32GB", 1250.0),
        ),
    ),
    Category(
        "Fontes de Alimentacao",
        " **         FONTE DE ALIMENTACAO         **",
        22,
        (
            Product("Corsair CV450 450W", 240.0),
            Product("Cooler Master 650W", 350.0),
            Product("XPG Core Reactor 600W", 650.0),
        ),
    ),
)


@dataclass(frozen=True)
class CartItem:
    """A product with the quantity ordered and the resulting subtotal."""

    product: Product
    quantity: int
    subtotal: float = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "subtotal", self.quantity * self.product.price)


class CartFullError(Exception):
    """Raised when adding to a cart that already holds its maximum of lines."""


@dataclass
class Cart:
    """Ordered cart lines, limited to ``capacity`` entries."""

    capacity: int = MAX_CART_ITEMS
    items: list[CartItem] = field(default_factory=list)

    def add(self, product: Product, quantity: int) -> CartItem:
        """Append a line for ``product``; raise CartFullError when full."""
        if quantity <= 0:
            raise ValueError("quantity must be positive")
        if self.is_full():
            raise CartFullError("Carrinho cheio!")
        item = CartItem(product, quantity)
        self.items.append(item)
        return item

    def total(self) -> float:
        """Sum of all line subtotals."""
        return sum((item.subtotal for item in self.items), 0.0)

    def is_full(self) -> bool:
        return len(self.items) >= self.capacity

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[CartItem]:
        return iter(self.items)