"""kitty adapter for niriglue."""

from .client import KittyClient
from .models import KittyOsWindow, KittyTab, KittyWindow, find_focused_window

__all__ = [
    "KittyClient",
    "KittyOsWindow",
    "KittyTab",
    "KittyWindow",
    "find_focused_window",
]
