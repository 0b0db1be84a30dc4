"""The shopping cart and its interactive views."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from warungkasir.models import Item
from warungkasir.terminal import clear_terminal


@dataclass
class Cart:
    """Items chosen by the customer, in the order they were added."""

    items: list[Item] = field(default_factory=list)

    def add(self, item: Item) -> None:
        """Append an item to the cart."""
        self.items.append(item)

    def total(self) -> int:
        """Return the sum of all item prices."""
        return sum(item.price for item in self.items)

    def clear(self) -> None:
        """Remove every item."""
        self.items.clear()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)


def _ask(prompt: str) -> str:
    try:
        return input(prompt).strip()
    except EOFError:
        return ""


def show_cart(cart: Cart) -> int:
    """Print the cart contents and return its total, 0 when empty."""
    clear_terminal()

    if not cart:
        print("🛒 Keranjang kosong")
        return 0

    print("📦 Daftar Isi Keranjang:\n")
    for number, item in enumerate(cart, start=1):
        print(f"{number}. {item.name} Rp.{item.price} ")

    total = cart.total()
    print(f"\n💰 Total: Rp.{total}")
    return total


def checkout(cart: Cart) -> None:
    """Ask for confirmation, print a receipt and empty the cart."""
    clear_terminal()

    if not cart:
        print("🛒 Keranjang masih kosong, tidak bisa checkout")
        _ask("Tekan ENTER untuk kembali...")
        return

    total = show_cart(cart)

    answer = _ask("Yakin ingin melakukan checkout? (y/n): ")
    if answer not in ("y", "Y"):
        print("❌ Checkout dibatalkan")
        _ask("Tekan ENTER untuk kembali...")
        return

    clear_terminal()
    print("===========================")
    print("        STRUK BELANJA      ")
    print("===========================")
    for number, item in enumerate(cart, start=1):
        print(f"{number}. {item.name} - Rp.{item.price}")
    print("---------------------------")
    print(f"Total Bayar: Rp.{total}")
    print("===========================")
    print("Terima kasih 🙏")
    print()

    cart.clear()

    _ask("Tekan ENTER untuk kembali ke menu utama...")