"""Tests for the Launcher."""

from unittest.mock import MagicMock, patch

import pytest
from conftest import FakeNiri

from niriglue.adapters.kitty.models import KittyWindow
from niriglue.adapters.niri.models import Window, Workspace
from niriglue.direction import Direction
from niriglue.errors import NotFoundError, TransportError, UnsupportedError
from niriglue.launcher import Launcher, LaunchingData, parse_environ


class TestParseEnviron:
    """Tests for parse_environ."""

    def test_parse(self):
        raw = b"HOME=/home/user\0PATH=/usr/bin:/bin\0EMPTY=\0EQ=a=b\0"
        assert parse_environ(raw) == {
            "HOME": "/home/user",
            "PATH": "/usr/bin:/bin",
            "EMPTY": "",
            "EQ": "a=b",
        }

    def test_skips_bad_entries(self):
        raw = b"GOOD=1\0\xff\xfe=x\0NOEQUALS\0=nameless\0"
        assert parse_environ(raw) == {"GOOD": "1"}


class TestLaunchingData:
    """Base window resolution and fallbacks."""

    def test_fresh_ignores_base_window(self, fake_niri):
        with patch("niriglue.launcher.EditorSession.for_window") as for_window:
            data = Launcher(fake_niri, fresh=True).get_launching_data()

        assert data == LaunchingData()
        for_window.assert_not_called()

    def test_no_focused_window(self):
        launcher = Launcher(FakeNiri())
        with pytest.raises(NotFoundError):
            launcher.get_launching_data_no_default()
        assert launcher.get_launching_data() == LaunchingData()

    def test_unknown_window_id(self, fake_niri):
        with pytest.raises(NotFoundError, match="42"):
            Launcher(fake_niri, window_id=42).get_base_window()

    def test_window_id_lookup(self, fake_niri, niri_window):
        assert Launcher(fake_niri, window_id=7).get_base_window() is niri_window

    def test_unsupported_app(self):
        niri = FakeNiri(windows=[Window(id=1, app_id="firefox", is_focused=True)])
        with pytest.raises(UnsupportedError, match="firefox"):
            Launcher(niri).get_launching_data_no_default()
        assert Launcher(niri).get_launching_data().session is None

    def test_window_without_app_id(self):
        niri = FakeNiri(windows=[Window(id=1, is_focused=True)])
        with pytest.raises(NotFoundError, match="class"):
            Launcher(niri).get_launching_data_no_default()

    def test_from_editor(self, fake_niri, niri_window):
        session = MagicMock()
        session.get_pid.return_value = 3001
        session.get_cwd.return_value = "/home/user/src"
        with patch("niriglue.launcher.EditorSession.for_window", return_value=session) as for_window, \
                patch("niriglue.launcher.read_process_environ", return_value={"VIRTUAL_ENV": "/venv"}) as read_env:
            data = Launcher(fake_niri).get_launching_data()

        for_window.assert_called_once_with(niri_window)
        read_env.assert_called_once_with(3001)
        assert data.session is session
        assert data.cwd == "/home/user/src"
        assert data.env == {"VIRTUAL_ENV": "/venv"}

    def test_editor_without_cwd(self, fake_niri):
        session = MagicMock()
        session.get_pid.return_value = 3001
        session.get_cwd.side_effect = TransportError("pwd failed")
        with patch("niriglue.launcher.EditorSession.for_window", return_value=session), \
                patch("niriglue.launcher.read_process_environ", return_value={}):
            data = Launcher(fake_niri).get_launching_data()

        assert data.session is session
        assert data.cwd is None

    def test_unreadable_environ_falls_back(self, fake_niri):
        with patch("niriglue.launcher.EditorSession.for_window", return_value=MagicMock()), \
                patch("niriglue.launcher.read_process_environ", side_effect=PermissionError("denied")):
            assert Launcher(fake_niri).get_launching_data() == LaunchingData()


class TestCommands:
    """Commands with and without an editor session."""

    def test_switch_without_session(self, fake_niri):
        Launcher(fake_niri).switch(LaunchingData(), Direction.UP)
        assert fake_niri.actions == [{"FocusWindowOrWorkspaceUp": {}}]

    def test_move_without_session(self, fake_niri):
        Launcher(fake_niri).move_window(LaunchingData(), Direction.LEFT)
        assert fake_niri.actions == [{"MoveColumnLeftOrToMonitorLeft": {}}]

    def test_close_without_session(self, fake_niri):
        Launcher(fake_niri).close(LaunchingData())
        assert fake_niri.actions == [{"CloseWindow": {"id": None}}]

    def test_sync_without_session_is_noop(self, fake_niri):
        launcher = Launcher(fake_niri)
        launcher.sync_editor(LaunchingData())
        launcher.shift_editor(LaunchingData())
        assert fake_niri.actions == []

    def test_commands_delegate_to_session(self, fake_niri):
        session = MagicMock()
        data = LaunchingData(session=session)
        launcher = Launcher(fake_niri)

        launcher.switch(data, Direction.RIGHT)
        launcher.move_window(data, Direction.DOWN)
        launcher.sync_editor(data)
        launcher.close(data)

        session.switch.assert_called_once_with(fake_niri, Direction.RIGHT)
        session.move_window.assert_called_once_with(fake_niri, Direction.DOWN)
        session.sync_width.assert_called_once_with(fake_niri)
        session.close_window.assert_called_once_with(fake_niri)
        assert fake_niri.actions == []

    def test_print_env(self, fake_niri, capsys):
        Launcher(fake_niri).print_env(LaunchingData(env={"A": "1", "B": "two words"}))
        assert capsys.readouterr().out == 'A="1"\nB="two words"\n'

    def test_run_editor(self, fake_niri, monkeypatch):
        monkeypatch.setenv("KEEP", "yes")
        data = LaunchingData(env={"VIRTUAL_ENV": "/venv"}, cwd="/home/user/src")
        with patch("niriglue.launcher.subprocess.Popen") as popen:
            Launcher(fake_niri).run_editor(data)

        args, kwargs = popen.call_args
        assert args == (["neovide"],)
        assert kwargs["cwd"] == "/home/user/src"
        assert kwargs["env"]["VIRTUAL_ENV"] == "/venv"
        assert kwargs["env"]["KEEP"] == "yes"
        assert kwargs["start_new_session"] is True

    def test_test_command_queries_version(self, fake_niri, caplog):
        with caplog.at_level("INFO", logger="niriglue.launcher"):
            Launcher(fake_niri).test()
        assert "25.05" in caplog.text


class TestKitty:
    """Launching data from kitty and the kitty command."""

    @pytest.fixture
    def kitty_niri(self):
        return FakeNiri(
            windows=[
                Window(id=1, app_id="kitty", pid=2000, workspace_id=1, is_focused=True),
                Window(id=9, app_id="kitty", pid=2001, workspace_id=1),
                Window(id=10, app_id="kitty", pid=2002, workspace_id=2),
            ],
            workspaces=[Workspace(id=1, is_active=True), Workspace(id=2)],
        )

    def test_launching_data_from_kitty(self, kitty_niri):
        """Focused shell gives cwd and environment"""
        terminal = MagicMock()
        terminal.focused_window.return_value = KittyWindow(
            id=4, is_focused=True, cwd="/home/user/src", env={"VIRTUAL_ENV": "/venv"},
        )
        with patch("niriglue.launcher.KittyClient.for_pid", return_value=terminal) as for_pid:
            data = Launcher(kitty_niri).get_launching_data()

        for_pid.assert_called_once_with(2000)
        assert data.terminal is terminal
        assert data.session is None
        assert data.cwd == "/home/user/src"
        assert data.env == {"VIRTUAL_ENV": "/venv"}

    def test_no_focused_kitty_window(self, kitty_niri):
        terminal = MagicMock()
        terminal.focused_window.return_value = None
        with patch("niriglue.launcher.KittyClient.for_pid", return_value=terminal):
            with pytest.raises(NotFoundError, match="No focused kitty window"):
                Launcher(kitty_niri).get_launching_data_no_default()
            assert Launcher(kitty_niri).get_launching_data() == LaunchingData()

    def test_unreachable_kitty_falls_back(self, kitty_niri):
        terminal = MagicMock()
        terminal.focused_window.side_effect = TransportError("Failed to connect")
        with patch("niriglue.launcher.KittyClient.for_pid", return_value=terminal):
            assert Launcher(kitty_niri).get_launching_data() == LaunchingData()

    def test_focuses_existing_kitty(self, kitty_niri):
        """Unfocused kitty on the active workspace with the same cwd"""
        def for_pid(pid):
            terminal = MagicMock()
            terminal.cwds.return_value = {2001: ["/home/user/src"], 2002: ["/home/user/src"]}.get(pid, [])
            return terminal

        data = LaunchingData(cwd="/home/user/src")
        with patch("niriglue.launcher.KittyClient.for_pid", side_effect=for_pid), \
                patch("niriglue.launcher.subprocess.Popen") as popen:
            assert Launcher(kitty_niri).run_kitty(data) is None

        assert kitty_niri.actions == [{"FocusWindow": {"id": 9}}]
        popen.assert_not_called()

    def test_starts_kitty_when_no_match(self, kitty_niri):
        terminal = MagicMock()
        terminal.cwds.side_effect = TransportError("Failed to connect")
        data = LaunchingData(env={"VIRTUAL_ENV": "/venv"}, cwd="/home/user/src")
        with patch("niriglue.launcher.KittyClient.for_pid", return_value=terminal), \
                patch("niriglue.launcher.subprocess.Popen") as popen:
            Launcher(kitty_niri).run_kitty(data)

        assert kitty_niri.actions == []
        assert popen.call_args[0][0] == ["kitty", "-o", "env=VIRTUAL_ENV=/venv", "-d", "/home/user/src"]
        assert popen.call_args[1]["start_new_session"] is True

    def test_from_kitty_always_starts_new(self, kitty_niri):
        data = LaunchingData(cwd="/home/user/src", terminal=MagicMock())
        with patch("niriglue.launcher.KittyClient.for_pid") as for_pid, \
                patch("niriglue.launcher.subprocess.Popen") as popen:
            Launcher(kitty_niri).run_kitty(data)

        for_pid.assert_not_called()
        assert popen.call_args[0][0] == ["kitty", "-d", "/home/user/src"]

    def test_fresh_kitty(self, kitty_niri):
        with patch("niriglue.launcher.subprocess.Popen") as popen:
            Launcher(kitty_niri).run_kitty(LaunchingData())

        assert popen.call_args[0][0] == ["kitty"]
