"""Key transport between the capture thread and the control loop.

``KeyChannel`` is an unbounded FIFO of raw key codes. ``KeyCapture`` runs
in its own thread, polls the terminal, and pushes every code it reads
into the channel. It never touches the control state.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Any

from snakectl.terminal.base import TerminalCapture

logger = logging.getLogger(__name__)


class KeyChannel:
    """Unbounded, thread-safe FIFO of raw key codes.

    Keys come out in the order they were pushed, without loss or
    duplication. Once closed, pushes are dropped but keys already
    buffered can still be drained.
    """

    def __init__(self) -> None:
        self._queue: queue.Queue[int] = queue.Queue()
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def push(self, code: int) -> None:
        if self.closed:
            logger.debug("Dropping key %d pushed to closed channel", code)
            return
        self._queue.put_nowait(code)

    def poll(self) -> int | None:
        """Return the oldest buffered key without blocking, or None."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def drain(self) -> list[int]:
        """Remove and return every currently buffered key, oldest first."""
        codes: list[int] = []
        while True:
            code = self.poll()
            if code is None:
                return codes
            codes.append(code)

    def is_exhausted(self) -> bool:
        """True once the channel is closed and nothing is left to read."""
        return self.closed and self._queue.empty()

    def close(self) -> None:
        self._closed.set()


class KeyCapture:
    """Background thread feeding terminal keys into a ``KeyChannel``.

    If reading the terminal fails the thread logs the error, keeps it on
    ``error`` and closes the channel, which the loop treats as a quit.
    """

    def __init__(
        self,
        terminal: TerminalCapture,
        handle: Any,
        channel: KeyChannel,
        poll_interval: float = 0.005,
    ) -> None:
        self._terminal = terminal
        self._handle = handle
        self._channel = channel
        self._poll_interval = poll_interval
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self.error: Exception | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the capture thread."""
        if self._thread is not None:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._capture_loop, daemon=True, name="key-capture"
        )
        self._thread.start()
        logger.debug("Key capture started")

    def stop(self, timeout: float = 1.0) -> None:
        """Signal the capture thread to stop and wait for it."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=timeout)
            self._thread = None
        logger.debug("Key capture stopped")

    def _capture_loop(self) -> None:
        try:
            while not self._stop_event.is_set():
                code = self._terminal.read_key(self._handle)
                if code is None:
                    self._stop_event.wait(self._poll_interval)
                    continue
                self._channel.push(code)
        except Exception as e:
            logger.error("Key capture failed: %s", e)
            self.error = e
            self._channel.close()
