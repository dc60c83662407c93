"""Tests for the curses capture backend (curses calls mocked)."""

from __future__ import annotations

import curses
from unittest.mock import MagicMock, patch

import pytest

from snakectl.terminal.base import TerminalCaptureError
from snakectl.terminal.curses_backend import CursesTerminal

CURSES = "snakectl.terminal.curses_backend.curses"


@pytest.fixture
def mock_curses() -> MagicMock:
    with patch(CURSES) as mock:
        mock.ERR = curses.ERR
        mock.error = curses.error
        yield mock


class TestCursesTerminal:
    def test_init_returns_input_window(self, mock_curses: MagicMock) -> None:
        term = CursesTerminal()
        handle = term.init()
        assert handle is mock_curses.newwin.return_value
        mock_curses.newwin.assert_called_once_with(1, 1, 0, 0)
        handle.noutrefresh.assert_called_once()
        assert term.stdscr is mock_curses.initscr.return_value
        mock_curses.noecho.assert_called_once()
        mock_curses.cbreak.assert_called_once()
        assert term.is_active

    def test_keys_not_read_from_stdscr(self, mock_curses: MagicMock) -> None:
        term = CursesTerminal()
        handle = term.init()
        handle.getch.return_value = 113
        term.set_nonblocking(handle)
        term.enable_special_keys(handle)
        assert term.read_key(handle) == 113
        stdscr = mock_curses.initscr.return_value
        stdscr.getch.assert_not_called()
        stdscr.nodelay.assert_not_called()
        stdscr.keypad.assert_not_called()

    def test_init_failure_raises(self, mock_curses: MagicMock) -> None:
        mock_curses.initscr.side_effect = curses.error("setupterm: could not find terminal")
        term = CursesTerminal()
        with pytest.raises(TerminalCaptureError) as exc_info:
            term.init()
        assert exc_info.value.backend == "curses"
        assert not term.is_active
        mock_curses.endwin.assert_not_called()

    @pytest.mark.parametrize("failing_call", ["noecho", "cbreak", "newwin"])
    def test_setup_failure_releases_terminal(
        self, mock_curses: MagicMock, failing_call: str
    ) -> None:
        error = curses.error(f"{failing_call}() returned ERR")
        getattr(mock_curses, failing_call).side_effect = error
        term = CursesTerminal()
        with pytest.raises(TerminalCaptureError) as exc_info:
            term.init()
        assert exc_info.value.backend == "curses"
        mock_curses.endwin.assert_called_once()
        assert not term.is_active
        assert term.stdscr is None

    def test_mode_switches(self, mock_curses: MagicMock) -> None:
        term = CursesTerminal()
        handle = term.init()
        term.set_nonblocking(handle)
        term.enable_special_keys(handle)
        handle.nodelay.assert_called_once_with(True)
        handle.keypad.assert_called_once_with(True)

    def test_read_key(self, mock_curses: MagicMock) -> None:
        term = CursesTerminal()
        handle = MagicMock()
        handle.getch.side_effect = [107, curses.ERR]
        assert term.read_key(handle) == 107
        assert term.read_key(handle) is None

    def test_teardown_restores_terminal_once(self, mock_curses: MagicMock) -> None:
        term = CursesTerminal()
        handle = term.init()
        term.teardown(handle)
        term.teardown(handle)
        mock_curses.nocbreak.assert_called_once()
        mock_curses.echo.assert_called_once()
        mock_curses.endwin.assert_called_once()
        handle.keypad.assert_called_once_with(False)
        assert not term.is_active
        assert term.stdscr is None

    def test_teardown_without_init_is_noop(self, mock_curses: MagicMock) -> None:
        CursesTerminal().teardown(MagicMock())
        mock_curses.endwin.assert_not_called()
