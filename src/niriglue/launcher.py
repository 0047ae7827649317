"""Launcher - resolves what a command acts on and runs it

The base window is the focused niri window (or ``--window``). When it is an
editor frame, an EditorSession is attached and its environment and working
directory become the launching data for new editor instances. A kitty
window contributes the cwd and environment of its focused shell the same
way. Any failure to gather that data degrades to a fresh launch.
"""

import os
import subprocess
from collections.abc import Iterable
from dataclasses import dataclass, field

from . import config
from .adapters.base import TerminalClient, WindowManagerClient
from .adapters.kitty.client import KittyClient
from .adapters.niri import actions
from .adapters.niri.actions import NiriActionDirection
from .adapters.niri.models import Window
from .direction import Direction
from .editor.session import EditorSession
from .errors import NiriGlueError, NotFoundError, UnsupportedError
from .telemetry import get_logger

logger = get_logger(__name__)


def parse_environ(raw: bytes) -> dict[str, str]:
    """Parse a ``/proc/<pid>/environ`` blob.

    Entries that are not UTF-8 or have no ``=`` are skipped.
    """
    env: dict[str, str] = {}
    for entry in raw.split(b"\0"):
        try:
            line = entry.decode("utf-8")
        except UnicodeDecodeError:
            continue
        name, sep, value = line.partition("=")
        if sep and name:
            env[name] = value
    return env


def read_process_environ(pid: int) -> dict[str, str]:
    with open(f"/proc/{pid}/environ", "rb") as f:
        return parse_environ(f.read())


@dataclass
class LaunchingData:
    """What a new window should inherit from the base window."""

    env: dict[str, str] = field(default_factory=dict)
    cwd: str | None = None
    session: EditorSession | None = None
    terminal: TerminalClient | None = None

    def add_envs(self, items: Iterable[tuple[str, str]]) -> "LaunchingData":
        self.env.update(items)
        return self


class Launcher:
    """Runs one CLI command against niri and, if present, the editor."""

    def __init__(
        self,
        niri: WindowManagerClient,
        window_id: int | None = None,
        fresh: bool = False,
    ):
        """Initialize Launcher.

        Args:
            niri: niri IPC client
            window_id: niri window to act on; focused window when None
            fresh: ignore the base window and launch with defaults
        """
        self._niri = niri
        self._window_id = window_id
        self._fresh = fresh

    def get_base_window(self) -> Window:
        if self._window_id is not None:
            for window in self._niri.windows():
                if window.id == self._window_id:
                    return window
            raise NotFoundError(f"No niri window with id {self._window_id}")
        window = self._niri.focused_window()
        if window is None:
            raise NotFoundError("No focused niri window")
        return window

    def get_launching_data(self) -> LaunchingData:
        if self._fresh:
            return LaunchingData()
        try:
            return self.get_launching_data_no_default()
        except (NiriGlueError, OSError) as e:
            logger.info(f"[Launcher] Using defaults: {e}")
            return LaunchingData()

    def get_launching_data_no_default(self) -> LaunchingData:
        window = self.get_base_window()
        if window.app_id is None:
            raise NotFoundError("Focused niri window does not have class")
        if window.app_id == config.KITTY_APP_ID:
            return self.get_launching_data_from_kitty(window)
        if window.app_id == config.EDITOR_APP_ID:
            return self.get_launching_data_from_editor(window)
        raise UnsupportedError(f"Can not get launching data from {window.app_id}")

    def get_launching_data_from_editor(self, window: Window) -> LaunchingData:
        session = EditorSession.for_window(window)
        env = read_process_environ(session.get_pid())
        try:
            cwd = session.get_cwd()
        except NiriGlueError as e:
            logger.debug(f"[Launcher] No cwd from editor: {e}")
            cwd = None
        return LaunchingData(cwd=cwd, session=session).add_envs(env.items())

    def get_launching_data_from_kitty(self, window: Window) -> LaunchingData:
        """cwd and environment of the focused shell of a kitty window.

        Raises:
            NotFoundError: the window has no pid or kitty has no focused shell
            TransportError: kitty remote control is unreachable
        """
        if window.pid is None:
            raise NotFoundError("Focused niri window does not have pid")
        terminal = KittyClient.for_pid(window.pid)
        focused = terminal.focused_window()
        if focused is None:
            raise NotFoundError("No focused kitty window")
        return LaunchingData(cwd=focused.cwd, terminal=terminal).add_envs(focused.env.items())

    def find_kitty_for(self, data: LaunchingData) -> Window | None:
        """An unfocused kitty on the active workspace already open in ``data.cwd``.

        Launching from a kitty window always opens a new one.
        """
        if data.terminal is not None or data.cwd is None:
            return None

        workspace = next((ws for ws in self._niri.workspaces() if ws.is_active), None)
        if workspace is None:
            return None

        for window in self._niri.windows():
            if window.workspace_id != workspace.id:
                continue
            if self.is_kitty_matches(window, data.cwd):
                return window
        return None

    def is_kitty_matches(self, window: Window, cwd: str) -> bool:
        if window.app_id != config.KITTY_APP_ID or window.is_focused or window.pid is None:
            return False
        try:
            return cwd in KittyClient.for_pid(window.pid).cwds()
        except NiriGlueError as e:
            logger.debug(f"[Launcher] Skipping kitty window {window.id}: {e}")
            return False

    # === Commands ===

    def test(self) -> None:
        logger.info(f"[Launcher] niri {self._niri.version()}")

    def print_env(self, data: LaunchingData) -> None:
        for name, value in data.env.items():
            print(f'{name}="{value}"')

    def run_editor(self, data: LaunchingData) -> subprocess.Popen:
        """Start a new editor frame with the base window's environment."""
        env = dict(os.environ)
        env.update(data.env)
        logger.info(f"[Launcher] Starting {config.EDITOR_COMMAND} in {data.cwd or os.getcwd()}")
        return subprocess.Popen(
            config.EDITOR_COMMAND,
            env=env,
            cwd=data.cwd,
            start_new_session=True,
        )

    def run_kitty(self, data: LaunchingData) -> subprocess.Popen | None:
        """Focus a kitty already open in the same cwd, or start a new one.

        Returns:
            The started process, None when an existing window was focused
        """
        window = self.find_kitty_for(data)
        if window is not None:
            logger.info(f"[Launcher] Focusing kitty window {window.id}")
            self._niri.send_action(actions.focus_window(window.id))
            return None

        cmd = [config.KITTY_COMMAND]
        for name, value in data.env.items():
            cmd.extend(["-o", f"env={name}={value}"])
        if data.cwd is not None:
            cmd.extend(["-d", data.cwd])
        logger.info(f"[Launcher] Starting kitty in {data.cwd or os.getcwd()}")
        return subprocess.Popen(cmd, start_new_session=True)

    def sync_editor(self, data: LaunchingData) -> None:
        if data.session is None:
            logger.debug("[Launcher] sync: base window is not an editor")
            return
        data.session.report()
        data.session.sync_width(self._niri)

    def shift_editor(self, data: LaunchingData) -> None:
        if data.session is None:
            logger.debug("[Launcher] shift: base window is not an editor")
            return
        data.session.report()
        data.session.shift(self._niri)

    def switch(self, data: LaunchingData, direction: Direction) -> None:
        if data.session is not None:
            data.session.switch(self._niri, direction)
        else:
            self._niri.send_action(NiriActionDirection.new_focus().mk_action(direction))

    def move_window(self, data: LaunchingData, direction: Direction) -> None:
        if data.session is not None:
            data.session.move_window(self._niri, direction)
        else:
            self._niri.send_action(NiriActionDirection.new_move().mk_action(direction))

    def close(self, data: LaunchingData) -> None:
        if data.session is not None:
            data.session.close_window(self._niri)
        else:
            self._niri.send_action(actions.close_window())
