"""Terminal point-of-sale for a small computer parts store: catalog, cart, checkout and interactive menu."""

__version__ = "1.0.0"
__all__ = ["catalog", "checkout", "cli", "inputs"]