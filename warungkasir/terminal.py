"""Terminal helpers: screen clearing and paged item selection."""

from __future__ import annotations

import re
import subprocess
import sys
from collections.abc import Sequence

from warungkasir.models import Item

_INTEGER = re.compile(r"[+-]?\d+")


def clear_terminal() -> None:
    """Clear the terminal screen, ignoring any failure to do so."""
    platform = sys.platform
    if platform.startswith("linux") or platform == "darwin":
        command = ["clear"]
    elif platform == "win32":
        command = ["cmd", "/c", "cls"]
    else:
        print("\033[H\033[2J", end="")
        return
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


def paginate(title: str, items: Sequence[Item], per_page: int) -> Item | None:
    """Show ``items`` a page at a time and return the one the user picks.

    ``>`` and ``<`` move between pages, ``0`` (or end of input) returns
    ``None``, and any number from 1 to ``len(items)`` picks that item,
    whichever page is shown.
    """
    if per_page < 1:
        raise ValueError("per_page must be at least 1")

    total = len(items)
    page = 0

    while True:
        clear_terminal()
        print()
        print(title)
        print("-" * 30)

        start = page * per_page
        end = min(start + per_page, total)
        for number, item in enumerate(items[start:end], start=start + 1):
            print(f"{number}. {item.name} - Rp {item.price}")

        print("\n> Next | < Prev | 0 Kembali")
        try:
            choice = input("Pilih nomor: ").strip()
        except EOFError:
            return None

        if choice == ">":
            if end < total:
                page += 1
        elif choice == "<":
            if page > 0:
                page -= 1
        elif choice == "0":
            return None
        elif _INTEGER.fullmatch(choice) and 0 < int(choice) <= total:
            return items[int(choice) - 1]
        else:
            print("❌ Pilihan tidak valid")