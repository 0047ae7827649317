"""Editor session - one editor frame under niri

Binds together:
- the editor RPC client
- the column layout of its current tab (rebuilt on demand, never cached
  across commands)
- the niri window showing the editor

and runs the commands that need all three: sync, shift, switch, move,
close.
"""

from niriglue import config

from ..adapters.base import EditorClient, WindowManagerClient
from ..adapters.niri import actions
from ..adapters.niri.models import Window
from ..adapters.niri.outputs import get_output_mode_of_window
from ..adapters.nvim.discovery import find_nvim_session
from ..direction import Direction
from ..errors import NotFoundError
from ..layout.builder import ColumnLayout, ColumnLayoutBuilder
from ..navigation import Borders, Decision, Route, resolve_move, resolve_switch
from ..sizing import (
    compute_view_offset,
    current_pixel_width,
    desired_pixel_width,
    desired_symbol_width,
    pane_pixel_interval,
)
from ..telemetry import get_logger

logger = get_logger(__name__)


class EditorSession:
    """Editor frame with its reconstructed layout.

    Usage:
        session = EditorSession.for_window(niri_window)
        session.sync_width(niri)
    """

    def __init__(
        self,
        editor: EditorClient,
        niri_window: Window,
        column_width_koeff: float = config.COLUMN_WIDTH_KOEFF,
    ):
        self.editor = editor
        self.niri_window = niri_window
        self.column_width_koeff = column_width_koeff
        self.layout = self.calculate_columns()

    @classmethod
    def for_window(cls, niri_window: Window) -> "EditorSession":
        """Attach to the nvim running inside ``niri_window``.

        Raises:
            NotFoundError: the window has no pid or no nvim below it
        """
        if niri_window.pid is None:
            raise NotFoundError("Focused niri window does not have pid")
        return cls(find_nvim_session(niri_window.pid), niri_window)

    def calculate_columns(self) -> ColumnLayout:
        return ColumnLayoutBuilder(self.editor).build(self.editor.list_panes())

    def refresh(self) -> ColumnLayout:
        """Rebuild the layout after the editor changed its splits."""
        self.layout = self.calculate_columns()
        return self.layout

    @property
    def num_columns(self) -> int:
        return self.layout.num_columns

    def get_desired_symbol_width(self) -> int:
        return desired_symbol_width(self.layout, self.editor, self.column_width_koeff)

    def get_desired_pixel_width(self) -> int:
        return desired_pixel_width(self.layout, self.editor, self.column_width_koeff)

    def get_current_symbol_width(self) -> int:
        return self.layout.current_symbol_width()

    def get_current_pixel_width(self) -> int:
        return current_pixel_width(self.layout)

    def report(self) -> list[str]:
        """Print the numbers sync and shift work with.

        Returns:
            The printed lines
        """
        lines = [
            f"Num columns: {self.num_columns}",
            f"Desired width: sym {self.get_desired_symbol_width()}"
            f" / pix {self.get_desired_pixel_width()}",
            f"Current width: sym {self.get_current_symbol_width()}"
            f" / pix {self.get_current_pixel_width()}",
        ]
        for line in lines:
            print(line)
        return lines

    def sync_width(self, niri: WindowManagerClient) -> None:
        """Resize the niri window to fit all columns, then keep focus visible.

        A failed resize aborts before the shift; a failed shift leaves the
        new width in place.
        """
        width = self.get_desired_pixel_width()
        logger.debug(f"[Session] Setting window {self.niri_window.id} width to {width}px")
        niri.send_action(actions.set_window_width(self.niri_window.id, width))
        self.shift(niri)

    def shift(self, niri: WindowManagerClient) -> None:
        """Scroll the niri view so the focused pane is fully visible."""
        mode = get_output_mode_of_window(self.niri_window, niri)
        start, end = pane_pixel_interval(self.editor.current_pane())
        offset = compute_view_offset(self.niri_window.view_offset, mode.width, start, end)
        if offset is None:
            logger.debug("[Session] Focused pane already visible")
            return
        logger.debug(f"[Session] View offset {self.niri_window.view_offset} -> {offset}")
        niri.send_action(actions.view_offset(self.niri_window.id, offset))

    def borders(self) -> Borders:
        return Borders.of(self.editor.current_pane(), self.layout.width, self.layout.height)

    def execute(self, decision: Decision, niri: WindowManagerClient) -> None:
        if decision.route is Route.EDITOR:
            self.editor.send_input(decision.keys)
        else:
            niri.send_action(decision.action)

    def switch(self, niri: WindowManagerClient, direction: Direction) -> Decision:
        decision = resolve_switch(direction, self.borders())
        logger.debug(f"[Session] switch {direction}: {decision.route.value}")
        self.execute(decision, niri)
        return decision

    def move_window(self, niri: WindowManagerClient, direction: Direction) -> Decision:
        decision = resolve_move(direction, self.borders())
        logger.debug(f"[Session] move {direction}: {decision.route.value}")
        self.execute(decision, niri)
        return decision

    def close_window(self, niri: WindowManagerClient, force: bool = False) -> None:
        """Close the focused pane and refit the frame to what is left."""
        self.editor.close_pane(force)
        self.refresh()
        self.sync_width(niri)

    def get_cwd(self) -> str:
        return self.editor.get_cwd()

    def get_pid(self) -> int:
        return self.editor.get_pid()
