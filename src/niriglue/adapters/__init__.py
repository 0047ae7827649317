"""Collaborator adapters

- EditorClient / WindowManagerClient: interfaces used by the layout core
- PaneGeometry: editor pane rectangle
- TerminalClient: terminal remote-control interface used by the launcher
- nvim: pynvim-backed editor client and session discovery
- niri: niri IPC client, models and actions
- kitty: kitty remote-control client and models
"""

from .base import EditorClient, PaneGeometry, TerminalClient, WindowManagerClient

__all__ = [
    "EditorClient",
    "TerminalClient",
    "WindowManagerClient",
    "PaneGeometry",
]
