# lojainfo

lojainfo is a terminal store for computer parts. You browse six categories of
products, add items to a cart, review the cart, and close an order with
delivery details and a payment method. All prompts and messages are in
Brazilian Portuguese.

## Installing

```
pip install .
```

## Running

```
lojainfo
```

The command takes no options apart from `--help`. It returns exit status 0
when you leave through the menu or close an order. If input ends or you press
Ctrl-C, it returns 1. Screens are cleared by running `clear || cls` through
the system shell.

The main menu offers:

1. Processadores
2. Placas de Video
3. Placas Mae
4. Armazenamento
5. Memoria
6. Fontes de Alimentacao
7. Ver Carrinho
8. Sair

Each category lists three products with their prices. Choose 1 to 3, then
enter a quantity. The store asks again until the quantity is positive. Choose
4 to return to the main menu.

If an option is invalid, the store shows "Escolha uma opcao valida!". When you
add a product, the store confirms it. The cart holds at most 32 lines. After
that the store shows "Carrinho cheio!".

Numeric input is read one line at a time. A leading integer is taken from the
line, and a line that does not start with a number counts as 0.

### Closing an order

In the cart view, press ENTER (or enter 0) to go back. Enter any other number
to close the order. The store then asks for:

- your name
- the state (UF): a two-letter Brazilian state code, converted to upper case
  and checked against the 27 valid codes
- the city and the street
- the house number, which must be positive

Empty answers are asked again. Then you choose a payment method:

| Option | Method  | Effect                            |
|--------|---------|-----------------------------------|
| 1      | PIX     | 10% discount                      |
| 2      | DEBITO  | 5% discount                       |
| 3      | CREDITO | no discount, 1 to 12 instalments  |

Freight is free for SC, PR and RS. Every other state pays 5% of the item
total. The receipt shows:

- the items
- the customer
- the payment
- the freight
- the order total
- with credit, the value of each instalment

The program ends after it prints the receipt.

## Using it as a library

### `lojainfo.catalog`

- `Product(name, price, label="")` is a product. `label` is the name used in
  the "added to cart" notice, and it defaults to `name`.
- `Category` holds a menu label, a banner, a column width and its products.
- `CATEGORIES` holds the six categories on sale.
- `CartItem(product, quantity)` computes `subtotal` for you.
- `Cart(capacity=32)` has these methods:
  - `add(product, quantity)` returns the new `CartItem`. It raises
    `ValueError` when the quantity is not positive, and `CartFullError` when
    the cart is full.
  - `total()` returns the sum of the line subtotals.
  - `is_full()` tells whether the cart has reached its capacity.
  - Carts also support `len()` and iteration.

### `lojainfo.checkout`

- `PaymentMethod` has the values `PIX`, `DEBITO` and `CREDITO`, with
  `discount_percent`, `is_credit` and `from_option(1 | 2 | 3)`.
- `Customer(name, city, uf, street, number)` checks its fields and raises
  `ValueError` on bad data.
- `Order(cart, customer, payment, installments=0)` rejects an empty cart. It
  also rejects credit with an instalment count outside 1 to 12. It exposes
  `items_total`, `discount`, `freight`, `free_freight`, `total` and
  `installment_value`.
- `has_free_freight(uf)` tells whether a state ships for free.
- `format_item_line(item)` returns the text of one cart line.
- `render_cart(cart)` and `render_receipt(order)` return the text screens.

### `lojainfo.inputs`

- `parse_int(text)` returns the integer at the start of `text`.
- `read_int(stream)` reads a line and parses it. It raises `EOFError` when
  input is exhausted.
- `is_valid_uf(uf)` checks a state code.
- `read_uf(stream, out)` prompts on `out` until a valid state code is read.

### `lojainfo.cli`

- `Shop(stdin=None, stdout=None, *, clear=None, pause=None, cart=None, categories=CATEGORIES)`
  runs the interactive session with `run()`. The streams, screen clearing,
  pause function and cart can all be replaced.
- `loading(message, out=None, pause=None)` shows the dotted animation.
- `clear_screen()` clears the terminal.
- `main(argv=None)` is the command's entry point.

## What it does not do

Orders, carts and customer details are kept only in memory while the program
runs. Nothing is saved to disk. You cannot list, change or cancel an order
after its receipt is printed. Products and prices are fixed in
`lojainfo.catalog`. Removing items from the cart is not supported.

## Tests

```
pip install .[test]
pytest
```