"""Terminal key capture module for snakectl.

Reads raw key codes from the terminal via pluggable backends.

Public API:
    TerminalCapture -- Abstract base class
    TerminalCaptureError -- Raised when the terminal cannot be used
    CursesTerminal -- curses backend
"""

from snakectl.terminal.base import TerminalCapture, TerminalCaptureError

__all__ = ["TerminalCapture", "TerminalCaptureError", "CursesTerminal"]


def __getattr__(name: str) -> type:
    """Lazy import so curses is only loaded when the backend is used."""
    if name == "CursesTerminal":
        from snakectl.terminal.curses_backend import CursesTerminal
        return CursesTerminal
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
