"""Firearm rental desk: inventory, a transaction ledger, record files and a terminal menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]