"""Keyword search and sorted, category-filtered browsing of the menu."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from warungkasir.cart import Cart
from warungkasir.models import Item, all_items, all_makanan, all_minuman, all_snack
from warungkasir.terminal import clear_terminal


class SortOrder(Enum):
    """Ways the filtered list can be ordered, numbered as on screen."""

    PRICE_HIGHEST = 1
    PRICE_LOWEST = 2
    NAME_ASC = 3
    NAME_DESC = 4


_CATEGORIES = {
    1: all_items,
    2: all_makanan,
    3: all_minuman,
    4: all_snack,
}


def _ask(prompt: str) -> str:
    try:
        return input(prompt).strip()
    except EOFError:
        return ""


def _ask_number(prompt: str) -> int:
    """Read a whole number; anything unreadable counts as 0."""
    try:
        return int(_ask(prompt))
    except ValueError:
        return 0


def find_items(keyword: str, items: Iterable[Item]) -> list[Item]:
    """Return the items whose name contains ``keyword``, ignoring case."""
    needle = keyword.strip().lower()
    return [item for item in items if needle in item.name.lower()]


def sort_items(items: Iterable[Item], order: SortOrder) -> list[Item]:
    """Return a new list of ``items`` arranged by ``order``."""
    order = SortOrder(order)
    if order is SortOrder.PRICE_HIGHEST:
        return sorted(items, key=lambda item: item.price, reverse=True)
    if order is SortOrder.PRICE_LOWEST:
        return sorted(items, key=lambda item: item.price)
    if order is SortOrder.NAME_ASC:
        return sorted(items, key=lambda item: item.name.lower())
    return sorted(items, key=lambda item: item.name.lower(), reverse=True)


def _pick(prompt: str, choices: Sequence[Item]) -> Item | None:
    number = _ask_number(prompt)
    if 0 < number <= len(choices):
        return choices[number - 1]
    return None


def search_menu(cart: Cart) -> None:
    """Ask for a keyword, list the matches and add the chosen one to ``cart``."""
    clear_terminal()
    print("🔎 Cari Menu")

    keyword = _ask("Masukkan keyword: ")
    found = find_items(keyword, all_items())

    if not found:
        print("❌ Tidak ditemukan")
        return

    print("\nHasil pencarian:")
    for number, item in enumerate(found, start=1):
        print(f"{number}. {item.name} - Rp{item.price}")

    chosen = _pick("Pilih nomor untuk ditambahkan ke keranjang (0 batal): ", found)
    if chosen is not None:
        cart.add(chosen)
        print("✅ Berhasil ditambahkan ke keranjang.")
    else:
        print("❌ Dibatalkan")
    _ask("Tekan ENTER untuk kembali ...")


def filter_menu(cart: Cart) -> None:
    """Browse a category in a chosen order and add items to ``cart``."""
    clear_terminal()

    while True:
        clear_terminal()
        print("🔎 Cari Menu dengan Filter\n")
        print("Pilih kategori:")
        print("1. Semua")
        print("2. Makanan")
        print("3. Minuman")
        print("4. Snack")
        print("0. Kembali")

        category = _ask_number("Masukkan pilihan: ")
        if category == 0:
            return

        source = _CATEGORIES.get(category)
        if source is None:
            print("❌ Pilihan kategori tidak valid.")
            _ask("Tekan ENTER untuk kembali...")
            continue

        clear_terminal()
        print("\nUrutkan berdasarkan:")
        print("1. Harga Tertinggi")
        print("2. Harga Terendah")
        print("3. Nama (A-Z)")
        print("4. Nama (Z-A)")
        choice = _ask_number("Masukkan pilihan filter: ")

        try:
            order = SortOrder(choice)
        except ValueError:
            print("❌ Pilihan filter tidak valid.")
            _ask("Tekan ENTER untuk kembali...")
            continue

        items = sort_items(source(), order)

        clear_terminal()
        print("📋 Hasil Filter:\n")
        for number, item in enumerate(items, start=1):
            print(f"{number}. {item.name:<20} Rp. {item.price}")

        chosen = _pick("\nPilih nomor untuk ditambahkan ke keranjang (0 batal): ", items)
        if chosen is not None:
            cart.add(chosen)
            print("✅ Berhasil ditambahkan ke keranjang.")
        else:
            print("❌ Dibatalkan.")
        _ask("Tekan ENTER untuk kembali...")