"""niri IPC data models

DTOs for the replies niriglue reads: Window, Workspace, Output, Mode.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Window:
    """niri window"""

    id: int
    title: str | None = None
    app_id: str | None = None
    pid: int | None = None
    workspace_id: int | None = None
    is_focused: bool = False
    is_floating: bool = False
    view_offset: float = 0.0  # horizontal scroll of the window's view, px

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Window":
        return cls(
            id=int(data["id"]),
            title=data.get("title"),
            app_id=data.get("app_id"),
            pid=data.get("pid"),
            workspace_id=data.get("workspace_id"),
            is_focused=bool(data.get("is_focused", False)),
            is_floating=bool(data.get("is_floating", False)),
            view_offset=float(data.get("view_offset") or 0.0),
        )


@dataclass
class Workspace:
    """niri workspace"""

    id: int
    idx: int = 0
    name: str | None = None
    output: str | None = None  # None for workspaces on a disconnected output
    is_active: bool = False
    is_focused: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Workspace":
        return cls(
            id=int(data["id"]),
            idx=int(data.get("idx", 0)),
            name=data.get("name"),
            output=data.get("output"),
            is_active=bool(data.get("is_active", False)),
            is_focused=bool(data.get("is_focused", False)),
        )


@dataclass
class Mode:
    """Output display mode"""

    width: int
    height: int
    refresh_rate: int = 0  # mHz
    is_preferred: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Mode":
        return cls(
            width=int(data["width"]),
            height=int(data["height"]),
            refresh_rate=int(data.get("refresh_rate", 0)),
            is_preferred=bool(data.get("is_preferred", False)),
        )


@dataclass
class Output:
    """niri output (monitor)"""

    name: str
    modes: list[Mode] = field(default_factory=list)
    current_mode: int | None = None  # index into modes, None when disabled

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Output":
        return cls(
            name=data["name"],
            modes=[Mode.from_dict(mode) for mode in data.get("modes", [])],
            current_mode=data.get("current_mode"),
        )
