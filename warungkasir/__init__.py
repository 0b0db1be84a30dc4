"""Terminal cashier for a small food stall: menu, cart, search, filter and checkout."""

__version__ = "0.1.0"
__all__ = ["__version__"]