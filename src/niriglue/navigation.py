"""Navigation resolver

Decides whether a directional command stays inside the editor or is handed
over to niri. A pane touching the edge of the editor in the requested
direction has nowhere to go inside the editor, so the command escalates.

Every decision is computed from the current geometry only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .adapters.base import PaneGeometry
from .adapters.niri.actions import NiriActionDirection
from .direction import Direction

# Editor window commands are prefixed by leaving insert/visual mode first
WINDOW_COMMAND_PREFIX = "<Esc><C-w>"

# Pane moves are expressed as rotations of the window list
ROTATE_BACKWARD = "R"
ROTATE_FORWARD = "r"


class Route(Enum):
    EDITOR = "editor"
    WINDOW_MANAGER = "window_manager"


@dataclass(frozen=True)
class Decision:
    """Outcome of a navigation request.

    Attributes:
        route: who executes the command
        keys: editor input, set when route is EDITOR
        action: niri action body, set when route is WINDOW_MANAGER
    """

    route: Route
    keys: str | None = None
    action: dict[str, Any] | None = None

    @classmethod
    def editor(cls, keys: str) -> "Decision":
        return cls(Route.EDITOR, keys=keys)

    @classmethod
    def window_manager(cls, action: dict[str, Any]) -> "Decision":
        return cls(Route.WINDOW_MANAGER, action=action)


@dataclass(frozen=True)
class Borders:
    """Which edges of the editor area a pane touches."""

    top: bool
    bottom: bool
    left: bool
    right: bool

    @classmethod
    def of(cls, pane: PaneGeometry, width: int, height: int) -> "Borders":
        """Borders of ``pane`` inside an editor area of ``width`` x ``height``."""
        return cls(
            top=pane.row == 0,
            bottom=pane.bottom == height,
            left=pane.col == 0,
            right=pane.right == width,
        )

    def touches(self, direction: Direction) -> bool:
        return {
            Direction.UP: self.top,
            Direction.DOWN: self.bottom,
            Direction.LEFT: self.left,
            Direction.RIGHT: self.right,
        }[direction]


def editor_direction(direction: Direction, borders: Borders) -> str | None:
    """Editor key name for ``direction``.

    Args:
        direction: requested direction
        borders: edges touched by the focused pane

    Returns:
        ``Up``, ``Down``, ``Left`` or ``Right``; None when the pane is at that edge
    """
    if borders.touches(direction):
        return None
    return direction.key_name


def window_input(key: str) -> str:
    return f"{WINDOW_COMMAND_PREFIX}{key}"


def rotation_for(direction: Direction) -> str:
    """Up and left rotate backward, down and right rotate forward."""
    if direction in (Direction.UP, Direction.LEFT):
        return ROTATE_BACKWARD
    return ROTATE_FORWARD


def resolve_switch(direction: Direction, borders: Borders) -> Decision:
    """Focus the neighbouring pane, or the neighbouring niri window.

    Args:
        direction: requested direction
        borders: edges touched by the focused pane

    Returns:
        ``<Esc><C-w><Dir>`` for the editor, or a niri focus action at the edge
    """
    key = editor_direction(direction, borders)
    if key is None:
        return Decision.window_manager(NiriActionDirection.new_focus().mk_action(direction))
    return Decision.editor(window_input(f"<{key}>"))


def resolve_move(direction: Direction, borders: Borders) -> Decision:
    """Move the pane within the editor, or move the editor frame in niri.

    Args:
        direction: requested direction
        borders: edges touched by the focused pane

    Returns:
        A window rotation for the editor, or a niri move action at the edge
    """
    if editor_direction(direction, borders) is None:
        return Decision.window_manager(NiriActionDirection.new_move().mk_action(direction))
    return Decision.editor(window_input(rotation_for(direction)))
