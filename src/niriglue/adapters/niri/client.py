"""niri IPC client

niri speaks newline-delimited JSON over a Unix socket ($NIRI_SOCKET):
- request: ``"Workspaces"`` or ``{"Action": {...}}``
- reply: ``{"Ok": <response>}`` or ``{"Err": "<message>"}``

Two failure layers are kept apart: a broken socket or undecodable line is a
TransportError, an ``Err`` reply is a NiriReplyError.
"""

import json
import os
import socket
from typing import Any

from niriglue import config
from niriglue.errors import NiriReplyError, ProtocolError, TransportError

from ...telemetry import get_logger, metrics
from ..base import WindowManagerClient
from .models import Output, Window, Workspace

logger = get_logger(__name__)


def default_socket_path() -> str:
    """Socket path announced by niri in the environment."""
    path = os.environ.get(config.NIRI_SOCKET_ENV)
    if not path:
        raise TransportError(f"${config.NIRI_SOCKET_ENV} is not set, is niri running?")
    return path


def _request_name(request: Any) -> str:
    if isinstance(request, dict):
        return next(iter(request), "?")
    return str(request)


class NiriClient(WindowManagerClient):
    """Blocking niri IPC client.

    One connection is opened lazily and reused for every request of the
    current command.
    """

    def __init__(self, socket_path: str | None = None, timeout: float = config.SOCKET_TIMEOUT):
        """Initialize NiriClient.

        Args:
            socket_path: niri socket path. If None, uses $NIRI_SOCKET.
            timeout: seconds to wait for each reply.
        """
        self._socket_path = socket_path
        self._timeout = timeout
        self._sock: socket.socket | None = None
        self._reader = None

    def __enter__(self) -> "NiriClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def connect(self) -> None:
        if self._sock is not None:
            return
        path = self._socket_path or default_socket_path()
        try:
            sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
            sock.settimeout(self._timeout)
            sock.connect(path)
        except OSError as e:
            raise TransportError(f"Can not connect to niri at {path}: {e}") from e
        self._sock = sock
        self._reader = sock.makefile("r", encoding="utf-8")
        logger.debug(f"[NiriClient] Connected to {path}")

    def close(self) -> None:
        if self._reader is not None:
            self._reader.close()
            self._reader = None
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def _roundtrip(self, request: Any) -> Any:
        """Send one request line and read one reply line."""
        self.connect()
        payload = json.dumps(request) + "\n"
        try:
            self._sock.sendall(payload.encode("utf-8"))
            line = self._reader.readline()
        except OSError as e:
            self.close()
            raise TransportError(f"niri IPC failed: {e}") from e
        if not line:
            self.close()
            raise TransportError("niri closed the connection")
        try:
            return json.loads(line)
        except json.JSONDecodeError as e:
            raise TransportError(f"Invalid reply from niri: {line[:120]!r}") from e

    def request(self, request: Any) -> Any:
        """Send a request and unwrap the ``Ok`` payload.

        Raises:
            TransportError: socket or decoding failure
            NiriReplyError: niri replied with ``Err``
            ProtocolError: reply is neither ``Ok`` nor ``Err``
        """
        name = _request_name(request)
        metrics.inc("niri.requests", {"request": name})
        reply = self._roundtrip(request)
        if not isinstance(reply, dict):
            raise ProtocolError(f"Malformed reply to {name}: {reply!r}")
        if "Err" in reply:
            metrics.inc("niri.errors", {"request": name})
            raise NiriReplyError(str(reply["Err"]), request=request)
        if "Ok" not in reply:
            raise ProtocolError(f"Malformed reply to {name}: {reply!r}")
        return reply["Ok"]

    def _expect(self, request: str) -> Any:
        """Send a query whose response variant has the request's name."""
        response = self.request(request)
        if not isinstance(response, dict) or request not in response:
            raise ProtocolError(f"Unexpected response type for {request}")
        return response[request]

    def send_action(self, action: dict[str, Any]) -> None:
        logger.debug(f"[NiriClient] Action: {action}")
        self.request({"Action": action})

    def version(self) -> str:
        return str(self._expect("Version"))

    def focused_window(self) -> Window | None:
        data = self._expect("FocusedWindow")
        return Window.from_dict(data) if data else None

    def windows(self) -> list[Window]:
        return [Window.from_dict(item) for item in self._expect("Windows")]

    def workspaces(self) -> list[Workspace]:
        return [Workspace.from_dict(item) for item in self._expect("Workspaces")]

    def outputs(self) -> dict[str, Output]:
        return {
            name: Output.from_dict({"name": name, **data})
            for name, data in self._expect("Outputs").items()
        }
