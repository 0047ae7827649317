"""kitty client for subprocess-based remote control.

Every kitty instance listens on its own socket,
``$XDG_RUNTIME_DIR/kitty-<pid>`` (``listen_on unix:...kitty-{kitty_pid}``
in kitty.conf). Requests go through ``kitty @ --to unix:<path> <cmd>``.
"""

import json
import os
import subprocess

from niriglue import config
from niriglue.errors import ProtocolError, TransportError

from ...telemetry import get_logger, metrics
from ..base import TerminalClient
from .models import KittyOsWindow, KittyWindow, find_focused_window

logger = get_logger(__name__)


def socket_path_for(pid: int, runtime_dir: str | None = None) -> str:
    """Remote-control socket of the kitty process ``pid``.

    Args:
        pid: kitty process id (the niri window pid)
        runtime_dir: defaults to $XDG_RUNTIME_DIR, then /run/user/<uid>
    """
    if runtime_dir is None:
        runtime_dir = os.environ.get("XDG_RUNTIME_DIR") or f"/run/user/{os.geteuid()}"
    return config.KITTY_SOCKET_TEMPLATE.format(runtime_dir=runtime_dir, pid=pid)


class KittyClient(TerminalClient):
    """Client for one kitty instance via ``kitty @`` commands."""

    def __init__(self, socket_path: str, timeout: float = config.SOCKET_TIMEOUT):
        """Initialize KittyClient.

        Args:
            socket_path: kitty remote-control socket path
            timeout: seconds to wait for each command
        """
        self._socket_path = socket_path
        self._timeout = timeout

    @classmethod
    def for_pid(cls, pid: int) -> "KittyClient":
        return cls(socket_path_for(pid))

    @property
    def socket_path(self) -> str:
        return self._socket_path

    def run(self, *args: str) -> str:
        """Execute a kitty remote-control command.

        Args:
            *args: command arguments (e.g. "ls")

        Returns:
            Command stdout

        Raises:
            TransportError: kitty could not be run or the command failed
        """
        cmd = [config.KITTY_COMMAND, "@", "--to", f"unix:{self._socket_path}", *args]
        metrics.inc("kitty.requests", {"request": args[0] if args else "?"})
        logger.debug(f"[KittyClient] Run: {' '.join(args)} via {self._socket_path}")
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True, timeout=self._timeout)
        except (OSError, subprocess.TimeoutExpired) as e:
            raise TransportError(f"kitty command failed: {' '.join(cmd)}: {e}") from e

        if proc.returncode != 0:
            raise TransportError(f"kitty command failed: {' '.join(cmd)}: {proc.stderr.strip()}")
        return proc.stdout

    def list_os_windows(self) -> list[KittyOsWindow]:
        output = self.run("ls")
        try:
            data = json.loads(output)
        except json.JSONDecodeError as e:
            raise ProtocolError(f"Invalid reply from kitty ls: {output[:120]!r}") from e
        if not isinstance(data, list):
            raise ProtocolError("Unexpected response type for kitty ls")
        return [KittyOsWindow.from_dict(item) for item in data]

    def focused_window(self) -> KittyWindow | None:
        return find_focused_window(self.list_os_windows())

    def cwds(self) -> list[str]:
        return [
            window.cwd
            for os_window in self.list_os_windows()
            for tab in os_window.tabs
            for window in tab.windows
            if window.cwd is not None
        ]
