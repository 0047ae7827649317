"""kitty remote-control data models

DTOs for ``kitty @ ls``: OS windows contain tabs, tabs contain windows.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class KittyWindow:
    """kitty window (one shell)"""

    id: int
    is_focused: bool = False
    cwd: str | None = None
    pid: int | None = None
    title: str | None = None
    env: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KittyWindow":
        return cls(
            id=int(data["id"]),
            is_focused=bool(data.get("is_focused", False)),
            cwd=data.get("cwd"),
            pid=data.get("pid"),
            title=data.get("title"),
            env={str(k): str(v) for k, v in (data.get("env") or {}).items()},
        )


@dataclass
class KittyTab:
    """kitty tab"""

    id: int
    is_focused: bool = False
    windows: list[KittyWindow] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KittyTab":
        return cls(
            id=int(data["id"]),
            is_focused=bool(data.get("is_focused", False)),
            windows=[KittyWindow.from_dict(w) for w in data.get("windows", [])],
        )


@dataclass
class KittyOsWindow:
    """kitty OS window (what niri sees as a window)"""

    id: int
    is_focused: bool = False
    tabs: list[KittyTab] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "KittyOsWindow":
        return cls(
            id=int(data["id"]),
            is_focused=bool(data.get("is_focused", False)),
            tabs=[KittyTab.from_dict(t) for t in data.get("tabs", [])],
        )


def find_focused_window(os_windows: list[KittyOsWindow]) -> KittyWindow | None:
    """Focused window of the focused tab of the focused OS window."""
    for os_window in os_windows:
        if not os_window.is_focused:
            continue
        for tab in os_window.tabs:
            if not tab.is_focused:
                continue
            for window in tab.windows:
                if window.is_focused:
                    return window
    return None
