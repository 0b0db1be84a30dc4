"""Menu items offered by the shop, grouped by category."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """The kind of item on the menu."""

    MAKANAN = "makanan"
    MINUMAN = "minuman"
    SNACK = "snack"


@dataclass(frozen=True)
class Item:
    """A menu item with its name and price in rupiah."""

    name: str
    price: int
    category: Category


_MAKANAN = (
    ("Nasi Goreng", 18000),
    ("Nasi Padang", 15000),
    ("Nasi Pecel", 12000),
    ("Nasi Rames", 13000),
    ("Nasi Ayam", 17000),
    ("Nasi Telur", 10000),
    ("Nasi Bakar", 12000),
    ("Bakso", 14000),
    ("Mie Ayam", 13000),
    ("Sate Ayam", 19000),
)

_MINUMAN = (
    ("Es Teh Manis", 5000),
    ("Teh Tarik", 7000),
    ("Teh Hijau", 8000),
    ("Es Jeruk", 6000),
    ("Air Mineral", 4000),
    ("Kopi Hitam", 7000),
    ("Kopi Susu", 8000),
    ("Cappuccino", 10000),
    ("Latte", 10000),
    ("Americano", 9000),
    ("Espresso", 8500),
    ("Mochaccino", 11000),
    ("Es Coklat", 9000),
    ("Coklat Hazelnut", 11000),
    ("Thai Tea", 10000),
    ("Green Tea Latte", 10500),
    ("Taro Latte", 9500),
    ("Boba Brown Sugar", 12000),
    ("Boba Milk Tea", 11000),
    ("Red Velvet Latte", 10500),
)

_SNACK = (
    ("Keripik Singkong", 5000),
    ("Keripik Kentang", 6000),
    ("Roti Bakar", 8000),
    ("Pisang Goreng", 6000),
    ("Pisang Coklat Keju", 9000),
    ("Cireng", 7000),
    ("Cimol", 7000),
    ("Seblak", 10000),
    ("Sosis Bakar", 8000),
    ("Kentang Goreng", 9000),
    ("Bakwan", 5000),
    ("Tahu Crispy", 6000),
    ("Otak-Otak", 8000),
    ("Singkong Keju", 7000),
    ("Tahu Bulat", 5000),
    ("Martabak Mini", 9000),
    ("Kue Cubit", 7000),
    ("Telur Gulung", 6000),
    ("Churros", 10000),
    ("Takoyaki", 11000),
)


def _build(entries: tuple[tuple[str, int], ...], category: Category) -> tuple[Item, ...]:
    return tuple(Item(name, price, category) for name, price in entries)


_CATALOGUE = {
    Category.MAKANAN: _build(_MAKANAN, Category.MAKANAN),
    Category.MINUMAN: _build(_MINUMAN, Category.MINUMAN),
    Category.SNACK: _build(_SNACK, Category.SNACK),
}


def all_makanan() -> list[Item]:
    """Return the food items in menu order."""
    return list(_CATALOGUE[Category.MAKANAN])


def all_minuman() -> list[Item]:
    """Return the drink items in menu order."""
    return list(_CATALOGUE[Category.MINUMAN])


def all_snack() -> list[Item]:
    """Return the snack items in menu order."""
    return list(_CATALOGUE[Category.SNACK])


def all_items() -> list[Item]:
    """Return food, then drinks, then snacks."""
    return all_makanan() + all_minuman() + all_snack()