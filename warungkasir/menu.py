"""The interactive main menu and the ordering screens."""

from __future__ import annotations

from collections.abc import Sequence

from warungkasir.cart import Cart, checkout, show_cart
from warungkasir.models import Item, all_makanan, all_minuman, all_snack
from warungkasir.search import filter_menu, search_menu
from warungkasir.terminal import clear_terminal, paginate

_PER_PAGE = 5

_MAIN_MENU = """
========== Menu Utama ==========
1. Order Menu
2. Lihat Keranjang
3. Checkout
4. search
5. Filter
0. Keluar
"""

_ORDER_MENU = """
=============== Menu Utama ==============
1. Menu Makanan
2. Menu Minuman
3. Menu Snack
0. Kembali
"""


def _ask(prompt: str) -> str:
    try:
        return input(prompt).strip()
    except EOFError:
        return ""


def _ask_number(prompt: str) -> int:
    try:
        return int(_ask(prompt))
    except ValueError:
        return 0


def _unavailable() -> None:
    print("Pilihan tidak tersedia")
    _ask("Tekan ENTER untuk kembali...")


def category_menu(title: str, items: Sequence[Item], cart: Cart) -> None:
    """Let the user page through ``items`` and add picks to ``cart``."""
    while True:
        clear_terminal()
        item = paginate(title, items, _PER_PAGE)
        if item is None:
            return
        cart.add(item)
        print(f"✅ {item.name} berhasil ditambahkan ke keranjang")
        _ask("Tekan ENTER untuk kembali ...")


def order_menu(cart: Cart) -> None:
    """Choose a category to order from until the user goes back."""
    screens = {
        1: ("🍽️ Menu Makanan", all_makanan),
        2: ("🥤 Menu Makanan", all_minuman),
        3: ("🍿 Menu Makanan", all_snack),
    }
    while True:
        clear_terminal()
        print(_ORDER_MENU)
        choice = _ask_number("Silahkan Masukkan Pilihan anda: ")
        if choice == 0:
            return
        screen = screens.get(choice)
        if screen is None:
            _unavailable()
            continue
        title, source = screen
        category_menu(title, source(), cart)


def main_menu(cart: Cart) -> None:
    """Run the main menu loop until the user exits."""
    while True:
        clear_terminal()
        print(_MAIN_MENU)
        choice = _ask_number("Silahkan Masukkan Pilihan Anda: ")

        if choice == 1:
            order_menu(cart)
        elif choice == 2:
            if show_cart(cart) > 0:
                if _ask("Ingin langsung checkout? (y/n): ") in ("y", "Y"):
                    checkout(cart)
        elif choice == 3:
            checkout(cart)
        elif choice == 4:
            search_menu(cart)
        elif choice == 5:
            filter_menu(cart)
        elif choice == 0:
            print("Terima kasih telah menggunakan aplikasi kami")
            return
        else:
            _unavailable()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the cashier application with an empty cart."""
    main_menu(Cart())
    return 0