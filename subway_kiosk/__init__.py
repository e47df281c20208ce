"""Subway ticket vending kiosk: fare quotes, coin payment with change, and a terminal front end."""

__version__ = "0.1.0"
__all__ = ["fares", "kiosk"]