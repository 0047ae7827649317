"""Neovim RPC client built on pynvim."""

from contextlib import contextmanager
from typing import Any

import pynvim
from pynvim.api import NvimError

from niriglue.errors import ProtocolError, TransportError

from ...telemetry import get_logger, metrics
from ..base import EditorClient, PaneGeometry

logger = get_logger(__name__)


@contextmanager
def _rpc(what: str):
    """Translate pynvim and socket failures into TransportError."""
    try:
        yield
    except NvimError as e:
        raise TransportError(f"nvim {what} failed: {e}") from e
    except OSError as e:
        raise TransportError(f"nvim {what}: connection error: {e}") from e


class NvimClient(EditorClient):
    """EditorClient over a pynvim ``Nvim`` connection.

    Pane handles are pynvim ``Window`` objects.
    """

    def __init__(self, nvim: pynvim.Nvim):
        self._nvim = nvim

    @classmethod
    def attach(cls, socket_path: str) -> "NvimClient":
        """Connect to the nvim listening on ``socket_path``."""
        with _rpc("attach"):
            nvim = pynvim.attach("socket", path=socket_path)
        logger.debug(f"[NvimClient] Attached to {socket_path}")
        return cls(nvim)

    @property
    def nvim(self) -> pynvim.Nvim:
        return self._nvim

    def _geometry(self, window: Any) -> PaneGeometry:
        row, col = self._nvim.api.win_get_position(window)
        return PaneGeometry(
            handle=window,
            row=row,
            col=col,
            width=self._nvim.api.win_get_width(window),
            height=self._nvim.api.win_get_height(window),
        )

    def list_panes(self) -> list[PaneGeometry]:
        with _rpc("list panes"):
            windows = self._nvim.api.tabpage_list_wins(self._nvim.current.tabpage)
            return [self._geometry(window) for window in windows]

    def current_pane(self) -> PaneGeometry:
        with _rpc("current pane"):
            return self._geometry(self._nvim.current.window)

    def get_pane_config(self, handle: Any) -> dict[str, Any]:
        with _rpc("win_get_config"):
            config = self._nvim.api.win_get_config(handle)
        return {str(key): value for key, value in (config or {}).items()}

    def get_buffer_option(self, handle: Any, name: str) -> Any:
        with _rpc(f"get option {name}"):
            buffer = self._nvim.api.win_get_buf(handle)
            return self._nvim.api.get_option_value(name, {"buf": buffer.handle})

    def send_input(self, keys: str) -> None:
        metrics.inc("editor.inputs")
        with _rpc("input"):
            self._nvim.input(keys)

    def close_pane(self, force: bool = False) -> None:
        with _rpc("win_close"):
            self._nvim.api.win_close(0, force)

    def get_cwd(self) -> str:
        with _rpc("pwd"):
            return self._nvim.command_output("pwd").strip()

    def get_pid(self) -> int:
        with _rpc("getpid"):
            pid = self._nvim.call("getpid")
        if not isinstance(pid, int):
            raise ProtocolError(f"Can not get valid pid from vim: {pid!r}")
        return pid
