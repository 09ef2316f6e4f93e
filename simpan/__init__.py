"""Terminal warehouse ledger: stored items, their collection history and takings."""

__version__ = "0.1.0"
__all__ = ["cli", "storage", "terminal"]