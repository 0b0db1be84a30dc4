# warungkasir

An interactive cashier for a small food stall, run in the terminal. It
offers a fixed menu of food (makanan), drinks (minuman) and snacks, lets
you add items to a cart, shows the running total and prints a receipt at
checkout. The prompts are in Indonesian.

## Installation

```
pip install .
```

## Running

```
warungkasir
```

The main menu offers:

1. **Order Menu** – pick a category, then browse it page by page (five
   items per page). Type `>` for the next page, `<` for the previous one,
   an item's number (any number from the category, not only those on the
   current page) to add it to the cart, or `0` to go back.
2. **Lihat Keranjang** – list the cart with its total; if the cart is not
   empty, offer to check out straight away.
3. **Checkout** – show the cart, confirm with `y` or `Y` to print the
   receipt and empty the cart; any other answer cancels.
4. **search** – find items across all categories whose names contain a
   keyword (case-insensitive), then add one of them by number.
5. **Filter** – list all items or one category, sorted by highest or lowest
   price, or by name A–Z or Z–A, then add one of them by number.
0. **Keluar** – quit.

Input that is not a valid number counts as `0`, and end of input is treated
as going back.

## Use as a library

The building blocks can be used on their own:

```python
from warungkasir.models import all_items
from warungkasir.cart import Cart
from warungkasir.search import SortOrder, find_items, sort_items

cart = Cart()
for item in find_items("kopi", all_items()):
    cart.add(item)

print(cart.total())
cheapest_first = sort_items(all_items(), SortOrder.PRICE_LOWEST)
```

- `warungkasir.models` – `Item` (a frozen dataclass with `name`, `price` in
  rupiah and `category`), the `Category` enum, and `all_makanan()`,
  `all_minuman()`, `all_snack()` and `all_items()` (food, then drinks, then
  snacks).
- `warungkasir.cart` – `Cart` with `add()`, `total()` and `clear()`; it also
  supports `len()` and iteration. `show_cart(cart)` prints the cart and
  returns its total; `checkout(cart)` runs the interactive checkout.
- `warungkasir.search` – `find_items(keyword, items)`,
  `sort_items(items, order)` with `SortOrder` (`PRICE_HIGHEST`,
  `PRICE_LOWEST`, `NAME_ASC`, `NAME_DESC`), and the interactive screens
  `search_menu(cart)` and `filter_menu(cart)`.
- `warungkasir.terminal` – `clear_terminal()` and
  `paginate(title, items, per_page)`, which returns the chosen item or
  `None`; `per_page` must be at least 1.
- `warungkasir.menu` – `main_menu(cart)`, `order_menu(cart)`,
  `category_menu(title, items, cart)` and `main()`, the command's entry
  point.

## What it does not do

The menu is fixed in code and cannot be edited from the program. Carts and
receipts live only in memory: nothing is saved, and the receipt is only
printed to the screen. There is no payment handling, stock tracking or
removal of single items from the cart.

## Tests

```
pip install .[test]
pytest
```