"""Error kinds raised by niriglue.

- NotFoundError: missing data (no focused window, no workspace/output/mode)
- UnsupportedError: window kind without a layout rule
- TransportError: RPC/IPC connection or call failure
- ProtocolError: well-formed reply with the wrong shape or meaning
"""


class NiriGlueError(Exception):
    """Base class for all niriglue errors."""


class NotFoundError(NiriGlueError):
    """A required object does not exist."""


class UnsupportedError(NiriGlueError):
    """The focused window is of a kind niriglue cannot handle."""


class TransportError(NiriGlueError):
    """Talking to the editor or to niri failed."""


class ProtocolError(NiriGlueError):
    """A reply was received but cannot be used."""


class NiriReplyError(ProtocolError):
    """niri answered the request with an ``Err`` reply."""

    def __init__(self, message: str, request: object = None):
        super().__init__(message)
        self.request = request
