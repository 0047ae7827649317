"""Pytest configuration and shared fakes."""

from typing import Any

import pytest

from niriglue.adapters.base import EditorClient, PaneGeometry, WindowManagerClient
from niriglue.adapters.niri.models import Mode, Output, Window, Workspace
from niriglue.errors import TransportError
from niriglue.telemetry import metrics


def geom(handle: Any, col: int, width: int, row: int = 0, height: int = 40) -> PaneGeometry:
    return PaneGeometry(handle=handle, row=row, col=col, width=width, height=height)


class FakeEditor(EditorClient):
    """In-memory editor with scripted panes and options."""

    def __init__(
        self,
        panes: list[PaneGeometry] | None = None,
        textwidths: dict[Any, Any] | None = None,
        configs: dict[Any, dict] | None = None,
        current: Any = None,
    ):
        self.panes = panes or []
        self.textwidths = textwidths or {}
        self.configs = configs or {}
        self.current = current
        self.inputs: list[str] = []
        self.closed: list[bool] = []
        self.config_calls = 0
        self.cwd = "/home/user/project"
        self.pid = 4242

    def list_panes(self) -> list[PaneGeometry]:
        return list(self.panes)

    def current_pane(self) -> PaneGeometry:
        handle = self.current if self.current is not None else self.panes[0].handle
        return next(pane for pane in self.panes if pane.handle == handle)

    def get_pane_config(self, handle: Any) -> dict[str, Any]:
        self.config_calls += 1
        config = self.configs.get(handle, {})
        if isinstance(config, Exception):
            raise config
        return config

    def get_buffer_option(self, handle: Any, name: str) -> Any:
        value = self.textwidths.get(handle)
        if isinstance(value, Exception):
            raise value
        if value is None:
            raise TransportError("no such option")
        return value

    def send_input(self, keys: str) -> None:
        self.inputs.append(keys)

    def close_pane(self, force: bool = False) -> None:
        self.closed.append(force)
        handle = self.current if self.current is not None else self.panes[0].handle
        self.panes = [pane for pane in self.panes if pane.handle != handle]
        self.current = self.panes[0].handle if self.panes else None

    def get_cwd(self) -> str:
        return self.cwd

    def get_pid(self) -> int:
        return self.pid


class FakeNiri(WindowManagerClient):
    """Records actions; answers queries from scripted models."""

    def __init__(
        self,
        windows: list[Window] | None = None,
        workspaces: list[Workspace] | None = None,
        outputs: dict[str, Output] | None = None,
        fail_actions: set[str] | None = None,
    ):
        self._windows = windows or []
        self._workspaces = workspaces or []
        self._outputs = outputs or {}
        self.fail_actions = fail_actions or set()
        self.actions: list[dict[str, Any]] = []

    def request(self, request: Any) -> Any:
        raise NotImplementedError

    def send_action(self, action: dict[str, Any]) -> None:
        name = next(iter(action))
        if name in self.fail_actions:
            raise TransportError(f"{name} failed")
        self.actions.append(action)

    def focused_window(self) -> Window | None:
        return next((w for w in self._windows if w.is_focused), None)

    def windows(self) -> list[Window]:
        return list(self._windows)

    def workspaces(self) -> list[Workspace]:
        return list(self._workspaces)

    def outputs(self) -> dict[str, Output]:
        return dict(self._outputs)

    def version(self) -> str:
        return "25.05"


@pytest.fixture
def niri_window() -> Window:
    return Window(id=7, app_id="neovide", pid=1000, workspace_id=1, is_focused=True)


@pytest.fixture
def fake_niri(niri_window) -> FakeNiri:
    """niri with one 1920px output showing workspace 1."""
    return FakeNiri(
        windows=[niri_window],
        workspaces=[Workspace(id=1, output="DP-1", is_active=True)],
        outputs={"DP-1": Output(name="DP-1", modes=[Mode(1920, 1080)], current_mode=0)},
    )


@pytest.fixture(autouse=True)
def reset_metrics():
    metrics.reset()
    yield
    metrics.reset()
