"""Collaborator interfaces

The layout core and the launcher talk to three external programs:
- the editor (Neovim RPC): pane geometry, options, input, close
- the outer window manager (niri IPC): windows, workspaces, outputs, actions
- the terminal (kitty remote control): focused window, cwd, environment

Design:
1. Minimal surface: only what the layout, sizing and navigation code uses
2. Synchronous: every call blocks until the peer answers or fails
3. Failures surface as ``niriglue.errors`` exceptions, never as None
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .kitty.models import KittyOsWindow, KittyWindow
    from .niri.models import Output, Window, Workspace


@dataclass(frozen=True)
class PaneGeometry:
    """Screen rectangle of one editor pane, in symbol units.

    Attributes:
        handle: editor-owned pane identity (opaque)
        row, col: top-left cell
        width, height: size in cells
    """

    handle: Any
    row: int
    col: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.col + self.width

    @property
    def bottom(self) -> int:
        return self.row + self.height


class EditorClient(ABC):
    """Editor RPC interface.

    Usage:
        editor = NvimClient.attach(path)
        for pane in editor.list_panes():
            print(pane.col, pane.width)
    """

    @abstractmethod
    def list_panes(self) -> list[PaneGeometry]:
        """Panes of the current tab, in editor order."""

    @abstractmethod
    def current_pane(self) -> PaneGeometry:
        """The focused pane."""

    @abstractmethod
    def get_pane_config(self, handle: Any) -> dict[str, Any]:
        """Window-local configuration mapping (``nvim_win_get_config``)."""

    @abstractmethod
    def get_buffer_option(self, handle: Any, name: str) -> Any:
        """Option value of the buffer shown in pane ``handle``."""

    @abstractmethod
    def send_input(self, keys: str) -> None:
        """Feed raw keys to the focused pane."""

    @abstractmethod
    def close_pane(self, force: bool = False) -> None:
        """Close the focused pane."""

    @abstractmethod
    def get_cwd(self) -> str:
        """Working directory of the editor."""

    @abstractmethod
    def get_pid(self) -> int:
        """Process id of the editor itself."""


class TerminalClient(ABC):
    """Terminal remote-control interface.

    Usage:
        terminal = KittyClient.for_pid(pid)
        window = terminal.focused_window()
        print(window.cwd)
    """

    @abstractmethod
    def list_os_windows(self) -> "list[KittyOsWindow]":
        """OS windows of the terminal with their tabs and windows."""

    @abstractmethod
    def focused_window(self) -> "KittyWindow | None":
        """The focused terminal window, or None when nothing is focused."""

    @abstractmethod
    def cwds(self) -> list[str]:
        """Working directories of every terminal window."""


class WindowManagerClient(ABC):
    """Outer window manager IPC interface."""

    @abstractmethod
    def request(self, request: Any) -> Any:
        """Send a raw request and return the unwrapped ``Ok`` payload."""

    @abstractmethod
    def send_action(self, action: dict[str, Any]) -> None:
        """Ask the window manager to perform ``action``."""

    @abstractmethod
    def focused_window(self) -> "Window | None":
        """The focused window, or None when nothing is focused."""

    @abstractmethod
    def windows(self) -> "list[Window]":
        """All windows."""

    @abstractmethod
    def workspaces(self) -> "list[Workspace]":
        """All workspaces."""

    @abstractmethod
    def outputs(self) -> "dict[str, Output]":
        """Outputs keyed by connector name."""

    @abstractmethod
    def version(self) -> str:
        """Window manager version string (availability check)."""
