"""niri adapter for niriglue."""

from .actions import NiriActionDirection
from .client import NiriClient
from .models import Mode, Output, Window, Workspace
from .outputs import get_output_mode_of_window

__all__ = [
    "NiriActionDirection",
    "NiriClient",
    "Mode",
    "Output",
    "Window",
    "Workspace",
    "get_output_mode_of_window",
]
