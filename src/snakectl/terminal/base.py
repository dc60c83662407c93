"""Abstract base class for raw terminal key capture.

All capture backends must conform to this interface so the key capture
thread can read keys without knowing whether they come from curses, a
test double, or some other source.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

logger = logging.getLogger(__name__)


class TerminalCapture(ABC):
    """Abstract interface for reading raw key codes from a terminal.

    The handle returned by ``init()`` is opaque to callers and is passed
    back into every other method.

    Example usage::

        term = CursesTerminal()
        handle = term.init()
        term.set_nonblocking(handle)
        term.enable_special_keys(handle)
        try:
            code = term.read_key(handle)
        finally:
            term.teardown(handle)
    """

    @abstractmethod
    def init(self) -> Any:
        """Take over the terminal and return a handle to it.

        Raises:
            TerminalCaptureError: If the terminal cannot be initialized.
        """
        ...

    @abstractmethod
    def set_nonblocking(self, handle: Any) -> None:
        """Make ``read_key`` return immediately when no key is waiting."""
        ...

    @abstractmethod
    def enable_special_keys(self, handle: Any) -> None:
        """Report function and arrow keys as single key codes."""
        ...

    @abstractmethod
    def read_key(self, handle: Any) -> int | None:
        """Poll for one key.

        Returns:
            The raw key code, or None if no key is waiting.
        """
        ...

    @abstractmethod
    def teardown(self, handle: Any) -> None:
        """Restore the terminal to its original mode."""
        ...


class TerminalCaptureError(Exception):
    """Raised when the terminal cannot be taken over or restored."""

    def __init__(self, message: str, backend: str = "") -> None:
        super().__init__(message)
        self.backend = backend
