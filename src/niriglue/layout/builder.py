"""Column layout builder

Rebuilds the column structure of the editor's current tab from pane
rectangles only. The editor does not expose its split tree, so columns are
inferred: panes are placed one by one into an ordered list of intervals,
merging or splitting neighbours as they overlap.

Works for layouts split vertically first. Layouts split horizontally first
may come out with fewer columns than they really have.
"""

from dataclasses import dataclass, field

from ..adapters.base import EditorClient, PaneGeometry
from ..telemetry import get_logger, metrics
from .column import Column, Pane

logger = get_logger(__name__)


@dataclass
class ColumnLayout:
    """Reconstructed layout of one editor tab.

    Attributes:
        columns: columns ordered left to right by ``start``
        width, height: bounding size over all panes, floating included
    """

    columns: list[Column] = field(default_factory=list)
    width: int = 0
    height: int = 0

    @property
    def num_columns(self) -> int:
        return len(self.columns)

    def current_symbol_width(self) -> int:
        return max((column.end for column in self.columns), default=0)


class ColumnLayoutBuilder:
    """Builds a ColumnLayout from an unordered list of pane rectangles."""

    def __init__(self, editor: EditorClient):
        """Initialize ColumnLayoutBuilder.

        Args:
            editor: used to tell floating panes apart (lazy, per pane)
        """
        self._editor = editor

    def build(self, geometries: list[PaneGeometry]) -> ColumnLayout:
        layout = ColumnLayout()

        for geometry in geometries:
            layout.width = max(layout.width, geometry.right)
            layout.height = max(layout.height, geometry.bottom)

            new_column = Column.from_pane(Pane(geometry))
            if new_column.primary_pane.is_floating(self._editor):
                continue

            place_to = self._find_place(layout.columns, new_column)
            if place_to is not None:
                layout.columns.insert(place_to, new_column)

        metrics.gauge("layout.columns", layout.num_columns)
        logger.debug(f"[Layout] {layout.num_columns} columns: {layout.columns}")
        return layout

    def _find_place(self, columns: list[Column], new_column: Column) -> int | None:
        """Index to insert ``new_column`` at, None when it must not be inserted.

        May shrink ``new_column`` or the column it collides with, or merge
        ``new_column`` into an existing column.
        """
        for i, cur_column in enumerate(columns):
            # Current ends before new starts - go next
            if cur_column.end <= new_column.start:
                continue

            # New ends before current starts - place before
            if new_column.end <= cur_column.start:
                return i

            # Columns intersect.

            # Same starts - current absorbs new, keeping the narrower interval
            if cur_column.start == new_column.start:
                cur_column.add_other(new_column)
                return None

            # Same ends - shrink the one starting first, the other goes after it
            if cur_column.end == new_column.end:
                if cur_column.start < new_column.start:
                    cur_column.end = new_column.start
                    cur_column.increase_panes_columns()
                    return i + 1
                new_column.end = cur_column.start
                new_column.increase_panes_columns()
                return i

            # New starts inside current and sticks out to the right
            if cur_column.start < new_column.start and new_column.end > cur_column.end:
                cur_column.end = new_column.start
                cur_column.increase_panes_columns()
                return i + 1

            # New starts left of current and ends inside it
            if new_column.start < cur_column.start and cur_column.end > new_column.end:
                new_column.end = cur_column.start
                new_column.increase_panes_columns()
                return i

            # No obvious columns - ignore new one
            metrics.inc("layout.column_dropped")
            logger.debug(f"[Layout] Dropping ambiguous {new_column} overlapping {cur_column}")
            return None

        return len(columns)
