"""Resolve the display mode a niri window is shown on."""

from niriglue.errors import NotFoundError, ProtocolError

from ..base import WindowManagerClient
from .models import Mode, Window


def get_output_mode_of_window(window: Window, client: WindowManagerClient) -> Mode:
    """Window -> workspace -> output -> current mode.

    Raises:
        NotFoundError: any link of the chain is missing
        ProtocolError: the output references a mode it does not list
    """
    if window.workspace_id is None:
        raise NotFoundError("Unknown workspace of window")

    workspace = next((ws for ws in client.workspaces() if ws.id == window.workspace_id), None)
    if workspace is None:
        raise NotFoundError("Can not find workspace of window")
    if workspace.output is None:
        raise NotFoundError("Window attached to hidden workspace")

    output = client.outputs().get(workspace.output)
    if output is None:
        raise NotFoundError("Can not find output of window")
    if output.current_mode is None:
        raise NotFoundError("Window belongs to disabled output")

    index = output.current_mode
    if not 0 <= index < len(output.modes):
        raise ProtocolError(
            f"Output references to invalid mode: {index} of {len(output.modes)}"
        )
    return output.modes[index]
