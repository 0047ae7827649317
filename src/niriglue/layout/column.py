"""Column model

A Column is a half-open horizontal interval ``[start, end)`` of the editor
screen together with the panes that were attributed to it. Panes carry a
membership counter: once a pane has been folded into a column narrower
than itself its own width no longer tells anything about the column, and
the content-width heuristic skips it.
"""

from typing import Any

from niriglue import config
from niriglue.errors import NiriGlueError

from ..adapters.base import EditorClient, PaneGeometry
from ..telemetry import format_pane_log, get_logger

logger = get_logger(__name__)


class Pane:
    """One editor split as seen by the layout reconstruction.

    Attributes:
        geometry: screen rectangle reported by the editor
        num_columns: number of reconstructed columns the pane belongs to
    """

    def __init__(self, geometry: PaneGeometry):
        self.geometry = geometry
        self.num_columns = 1
        self._config: dict[str, Any] | None = None

    def __repr__(self) -> str:
        g = self.geometry
        return f"Pane({g.handle!r}, col={g.col}, width={g.width}, columns={self.num_columns})"

    @property
    def handle(self) -> Any:
        return self.geometry.handle

    def add_to_column(self) -> None:
        self.num_columns += 1

    def get_config(self, editor: EditorClient) -> dict[str, Any]:
        """Window configuration, fetched once and cached.

        An unreadable configuration is cached as empty so the pane is
        treated as a regular split.
        """
        if self._config is None:
            try:
                self._config = editor.get_pane_config(self.handle)
            except NiriGlueError as e:
                logger.debug(format_pane_log("Pane", self.handle, f"config unavailable: {e}"))
                self._config = {}
        return self._config

    def is_floating(self, editor: EditorClient) -> bool:
        relative = self.get_config(editor).get("relative")
        return isinstance(relative, str) and relative != ""

    def textwidth(self, editor: EditorClient) -> int:
        """``textwidth`` of the pane's buffer, MIN_TEXTWIDTH when unknown."""
        try:
            value = editor.get_buffer_option(self.handle, "textwidth")
        except NiriGlueError as e:
            logger.debug(format_pane_log("Pane", self.handle, f"textwidth unavailable: {e}"))
            return config.MIN_TEXTWIDTH
        if isinstance(value, bool) or not isinstance(value, int):
            return config.MIN_TEXTWIDTH
        return value


class Column:
    """Reconstructed vertical column of panes."""

    def __init__(self, start: int, end: int, panes: list[Pane]):
        self.start = start
        self.end = end
        self.panes = panes

    @classmethod
    def from_pane(cls, pane: Pane) -> "Column":
        g = pane.geometry
        return cls(g.col, g.col + g.width, [pane])

    def __repr__(self) -> str:
        return f"Column([{self.start}, {self.end}), panes={len(self.panes)})"

    @property
    def width(self) -> int:
        return self.end - self.start

    @property
    def primary_pane(self) -> Pane:
        return self.panes[0]

    def increase_panes_columns(self) -> None:
        for pane in self.panes:
            pane.add_to_column()

    def contains(self, other: "Column") -> bool:
        return self.start <= other.start and other.end <= self.end

    def add_other(self, other: "Column") -> None:
        """Absorb ``other``; its panes move into this column.

        The column never grows, so it can not run into its neighbours. The
        panes of the wider side span more than the resulting column and get
        their membership counters bumped.

        - same interval: nothing to adjust
        - self contains other: shrink to other's interval, own panes bumped
        - other contains self: keep interval, other's panes bumped
        - anything else can not be attributed, intervals stay as they are

        Args:
            other: column to absorb, left without panes afterwards
        """
        if self.start == other.start and self.end == other.end:
            pass
        elif self.contains(other):
            self.start = other.start
            self.end = other.end
            self.increase_panes_columns()
        elif other.contains(self):
            other.increase_panes_columns()

        self.panes.extend(other.panes)
        other.panes = []

    def textwidth(self, editor: EditorClient) -> int:
        """Content width wanted by the column.

        Panes attached to more than one column are not accounted.
        """
        widths = [
            pane.textwidth(editor)
            for pane in self.panes
            if pane.num_columns == 1
        ]
        return max([config.MIN_TEXTWIDTH, *widths])
