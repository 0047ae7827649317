"""niri action builders

Actions are sent as ``{"Action": {<Name>: {<fields>}}}``.
"""

from typing import Any

from niriglue.direction import Direction


def action(name: str, **fields: Any) -> dict[str, Any]:
    """Build an action body: ``{name: fields}``."""
    return {name: fields}


def set_window_width(window_id: int | None, pixels: int) -> dict[str, Any]:
    return action("SetWindowWidth", id=window_id, change={"SetFixed": pixels})


def view_offset(window_id: int | None, offset: float) -> dict[str, Any]:
    return action("ViewOffset", id=window_id, offset=offset)


def close_window(window_id: int | None = None) -> dict[str, Any]:
    return action("CloseWindow", id=window_id)


def focus_window(window_id: int) -> dict[str, Any]:
    return action("FocusWindow", id=window_id)


class NiriActionDirection:
    """One niri action per direction.

    ``new_focus()`` and ``new_move()`` give the actions used when a command
    leaves the editor and is handed over to niri.
    """

    def __init__(self, up: str, down: str, left: str, right: str):
        self._names = {
            Direction.UP: up,
            Direction.DOWN: down,
            Direction.LEFT: left,
            Direction.RIGHT: right,
        }

    @classmethod
    def new_focus(cls) -> "NiriActionDirection":
        return cls(
            up="FocusWindowOrWorkspaceUp",
            down="FocusWindowOrWorkspaceDown",
            left="FocusColumnOrMonitorLeft",
            right="FocusColumnOrMonitorRight",
        )

    @classmethod
    def new_move(cls) -> "NiriActionDirection":
        return cls(
            up="MoveWindowUpOrToWorkspaceUp",
            down="MoveWindowDownOrToWorkspaceDown",
            left="MoveColumnLeftOrToMonitorLeft",
            right="MoveColumnRightOrToMonitorRight",
        )

    def mk_action(self, direction: Direction) -> dict[str, Any]:
        return action(self._names[direction])
