"""curses-based terminal capture backend.

Puts the terminal in cbreak/noecho mode and polls ``getch()`` on a
dedicated input window.
"""

from __future__ import annotations

import curses
import logging

from snakectl.terminal.base import TerminalCapture, TerminalCaptureError

logger = logging.getLogger(__name__)


class CursesTerminal(TerminalCapture):
    """Key capture through the standard library ``curses`` module.

    The handle is a 1x1 input window created in ``init()``, not ``stdscr``.
    ``getch()`` refreshes the window it reads from when that window has
    been touched. Reading from a window nothing draws on keeps the capture
    thread from refreshing ``stdscr`` while a renderer draws to it from the
    loop thread. Renderers get ``stdscr`` from the ``stdscr`` property.
    """

    def __init__(self) -> None:
        self._active = False
        self._stdscr: curses.window | None = None

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def stdscr(self) -> curses.window | None:
        """The full-screen window for renderers, once initialized."""
        return self._stdscr

    def init(self) -> curses.window:
        try:
            stdscr = curses.initscr()
        except curses.error as e:
            raise TerminalCaptureError(
                f"Failed to initialize curses: {e}", backend="curses"
            ) from e
        try:
            curses.noecho()
            curses.cbreak()
            input_win = curses.newwin(1, 1, 0, 0)
            # Clear the new window's touched state so getch() never refreshes
            input_win.noutrefresh()
        except curses.error as e:
            curses.endwin()
            raise TerminalCaptureError(
                f"Failed to configure curses: {e}", backend="curses"
            ) from e
        self._stdscr = stdscr
        self._active = True
        logger.info("curses terminal initialized")
        return input_win

    def set_nonblocking(self, handle: curses.window) -> None:
        handle.nodelay(True)

    def enable_special_keys(self, handle: curses.window) -> None:
        handle.keypad(True)

    def read_key(self, handle: curses.window) -> int | None:
        ch = handle.getch()
        if ch == curses.ERR:
            return None
        return ch

    def teardown(self, handle: curses.window) -> None:
        """Restore the terminal. Safe to call more than once."""
        if not self._active:
            return
        try:
            handle.keypad(False)
            curses.nocbreak()
            curses.echo()
        finally:
            curses.endwin()
            self._active = False
            self._stdscr = None
        logger.info("curses terminal restored")
