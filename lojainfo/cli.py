"""Interactive terminal storefront: browse categories, fill the cart, close the order."""

from __future__ import annotations

import argparse
import subprocess
import sys
import time
from typing import Callable, Iterable, TextIO

from .catalog import CATEGORIES, Cart, CartFullError, Category
from .checkout import MAX_INSTALLMENTS, Customer, Order, PaymentMethod, render_cart, render_receipt
from .inputs import read_int, read_uf

TEXT_LINE_LIMIT = 99
LOADING_STEP_SECONDS = 0.25

_STARS = " ******************************************"
SHOP_TITLE = " **          LOJA DE INFORMATICA         **"
INFO_TITLE = " **           SUAS INFORMACOES           **"

INVALID_OPTION = "Escolha uma opcao valida!"
CART_FULL = "Carrinho cheio!"
OPTION_PROMPT = " Insira uma opcao: "
QUANTITY_PROMPT = " Insira a quantidade: "

_DASHES = "\n ------------------------------------ \n"

PAYMENT_MENU = (
    "\n"
    " 1 - PIX (10% de Desconto) \n"
    " 2 - DEBITO (5% de Desconto) \n"
    " 3 - CREDITO (Ate 12 Vezes; Sem Desconto) \n"
)


def _banner(title_line: str) -> str:
    return f"\n{_STARS}\n{title_line}\n{_STARS}\n"


def clear_screen() -> int:
    """Clear the terminal using the system's clear command; return its exit status."""
    return subprocess.run("clear || cls", shell=True, check=False).returncode


def _animate(
    message: str,
    out: TextIO,
    pause: Callable[[float], None],
    clear: Callable[[], object],
) -> None:
    for _ in range(3):
        for dots in (".", "..", "..."):
            clear()
            out.write(f" {message}{dots} \n")
            out.flush()
            pause(LOADING_STEP_SECONDS)
        clear()


def loading(
    message: str,
    out: TextIO | None = None,
    pause: Callable[[float], None] | None = None,
) -> None:
    """Show ``message`` followed by growing dots, three times over."""
    _animate(
        message,
        out if out is not None else sys.stdout,
        pause if pause is not None else time.sleep,
        clear_screen,
    )


class _FlushingWriter:
    """Wraps a text stream so that prompts show up before input is read."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def write(self, text: str) -> int:
        written = self._stream.write(text)
        self._stream.flush()
        return written

    def flush(self) -> None:
        self._stream.flush()


class Shop:
    """The store's menu loop over an input and an output stream."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        *,
        clear: Callable[[], object] | None = None,
        pause: Callable[[float], None] | None = None,
        cart: Cart | None = None,
        categories: Iterable[Category] = CATEGORIES,
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = _FlushingWriter(stdout if stdout is not None else sys.stdout)
        self._clear = clear if clear is not None else clear_screen
        self._pause = pause if pause is not None else time.sleep
        self.cart = cart if cart is not None else Cart()
        self.categories = tuple(categories)
        self._warning = ""

    def run(self) -> int:
        """Run the menu until the user leaves or an order is closed; return the exit status."""
        cart_option = len(self.categories) + 1
        exit_option = cart_option + 1
        while True:
            self._clear()
            self._show_main_menu(cart_option, exit_option)
            option = self._read_int()
            self._clear()

            if option == exit_option:
                _animate("Encerrando", self._out, self._pause, self._clear)
                self._write("Ate mais!\n\n")
                return 0
            if 1 <= option <= len(self.categories):
                self._browse(self.categories[option - 1])
            elif option == cart_option:
                if self._view_cart():
                    return 0
            else:
                self._warning = INVALID_OPTION
            self._write("\n")

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _write_warning(self) -> None:
        if self._warning:
            self._write(f"\n {self._warning}\n\n")
            self._warning = ""
        else:
            self._write("\n")

    def _read_int(self) -> int:
        return read_int(self._in)

    def _read_positive(self, prompt: str) -> int:
        while True:
            self._write(prompt)
            value = self._read_int()
            if value > 0:
                return value

    def _read_text(self, prompt: str) -> str:
        while True:
            self._write(prompt)
            line = self._in.readline(TEXT_LINE_LIMIT)
            if line == "":
                raise EOFError("no more input")
            text = line.split("\n", 1)[0]
            if text:
                return text

    def _show_main_menu(self, cart_option: int, exit_option: int) -> None:
        self._write(_banner(SHOP_TITLE))
        self._write_warning()
        for number, category in enumerate(self.categories, 1):
            self._write(f" {number} - {category.menu_label}\n")
        self._write(" \n")
        self._write(f" {cart_option} - Ver Carrinho\n")
        self._write(" \n")
        self._write(f" {exit_option} - Sair\n")
        self._write(" \n")
        self._write(OPTION_PROMPT)

    def _browse(self, category: Category) -> None:
        back = len(category.products) + 1
        while True:
            self._clear()
            self._write(_banner(category.banner))
            self._write_warning()
            for number, product in enumerate(category.products, 1):
                self._write(
                    f" {number} - {product.name:<{category.name_width}} | R$ {product.price:.2f} \n"
                )
            self._write(f"\n {back} - Voltar \n\n{OPTION_PROMPT}")
            choice = self._read_int()

            if choice == back:
                return
            if not 1 <= choice < back:
                self._warning = INVALID_OPTION
                continue

            quantity = self._read_positive(QUANTITY_PROMPT)
            self._write("\n")
            self._clear()

            product = category.products[choice - 1]
            try:
                self.cart.add(product, quantity)
            except CartFullError:
                self._warning = CART_FULL
            else:
                self._warning = f"{product.label} adicionado ao carrinho!"

    def _view_cart(self) -> bool:
        """Show the cart; return True when an order was closed."""
        self._clear()
        self._write(render_cart(self.cart))

        if len(self.cart) == 0:
            self._write(_DASHES)
            self._write("\n ENTER - Voltar ao Menu \n")
            self._write("\n Digite ENTER: ")
            self._read_int()
            return False

        self._write(_DASHES)
        self._write("\n OUTRA TECLA - Fechar Pedido \n")
        self._write("\n ENTER - Voltar ao Menu \n")
        self._write("\n Insira uma OPCAO: ")
        if self._read_int() == 0:
            return False

        order = self._collect_order()
        self._clear()
        self._write(render_receipt(order))
        return True

    def _show_info_header(self) -> None:
        self._clear()
        self._write(_banner(INFO_TITLE))

    def _collect_order(self) -> Order:
        self._show_info_header()
        name = self._read_text("\n Insira seu NOME: ")

        self._show_info_header()
        uf = read_uf(self._in, self._out)

        self._show_info_header()
        city = self._read_text("\n Insira a CIDADE: ")

        self._show_info_header()
        street = self._read_text("\n Insira a RUA: ")

        self._show_info_header()
        number = self._read_positive("\n Insira o NUMERO: ")

        self._show_info_header()
        self._write(PAYMENT_MENU)
        while True:
            self._write("\n Insira a FORMA DE PAGAMENTO: ")
            option = self._read_int()
            if option in (1, 2, 3):
                break
        payment = PaymentMethod.from_option(option)

        installments = 0
        if payment.is_credit:
            while not 1 <= installments <= MAX_INSTALLMENTS:
                self._write(f"\n Insira a QUANTIDADE DE VEZES (ate {MAX_INSTALLMENTS}X): ")
                installments = self._read_int()

        customer = Customer(name=name, city=city, uf=uf, street=street, number=number)
        return Order(self.cart, customer, payment, installments)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive store on the terminal."""
    parser = argparse.ArgumentParser(
        prog="lojainfo", description="Loja de informatica no terminal."
    )
    parser.parse_args(argv)
    try:
        return Shop().run()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())