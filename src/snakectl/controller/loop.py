"""The control loop that drives the game.

Ties together terminal key capture, input routing, game ticks and
rendering. The loop thread is the only consumer of the key channel and
the only writer of the control state.
"""

from __future__ import annotations

import logging
import threading
import time

from snakectl.config.settings import Settings
from snakectl.controller.channel import KeyCapture, KeyChannel
from snakectl.controller.keys import KeyMap
from snakectl.controller.router import InputRouter
from snakectl.domain.models import (
    ControlState,
    ControlStatus,
    LoopResult,
    StopReason,
    TickOutcome,
)
from snakectl.game.base import GameModel
from snakectl.render.base import Renderer
from snakectl.terminal.base import TerminalCapture

logger = logging.getLogger(__name__)


class ControlLoop:
    """Tick loop with run/pause/stop states.

    Each iteration: poll one key -> tick -> render -> sleep (unless a
    direction change asked to skip it) -> drain buffered keys -> wait
    out any pause.
    """

    def __init__(
        self,
        terminal: TerminalCapture,
        model: GameModel,
        renderer: Renderer,
        key_map: KeyMap | None = None,
        min_speed: int = 1,
        max_speed: int = 10,
        initial_speed: int = 5,
        pause_interval: float = 0.1,
        capture_poll_interval: float = 0.005,
    ) -> None:
        self._terminal = terminal
        self._model = model
        self._renderer = renderer
        self._pause_interval = pause_interval
        self._capture_poll_interval = capture_poll_interval
        self._state = ControlState(
            speed=initial_speed, min_speed=min_speed, max_speed=max_speed
        )
        self._channel = KeyChannel()
        self._router = InputRouter(self._state, model, key_map)
        self._capture: KeyCapture | None = None
        self._ticks = 0
        self._last_outcome: TickOutcome | None = None
        self._thread: threading.Thread | None = None
        self._result: LoopResult | None = None
        self._error: Exception | None = None
        self._has_run = False

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        terminal: TerminalCapture,
        model: GameModel,
        renderer: Renderer,
    ) -> ControlLoop:
        """Build a loop from the ``controller`` and ``keys`` sections."""
        ctl = settings.controller
        return cls(
            terminal=terminal,
            model=model,
            renderer=renderer,
            key_map=KeyMap.from_config(settings.keys),
            min_speed=ctl.min_speed,
            max_speed=ctl.max_speed,
            initial_speed=ctl.initial_speed,
            pause_interval=ctl.pause_interval,
            capture_poll_interval=ctl.capture_poll_interval,
        )

    @property
    def state(self) -> ControlState:
        return self._state

    @property
    def capture(self) -> KeyCapture | None:
        return self._capture

    @property
    def result(self) -> LoopResult | None:
        return self._result

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def send_key(self, code: int) -> None:
        """Queue a key code as if it had been typed."""
        self._channel.push(code)

    def start(self) -> None:
        """Run the loop on a background thread."""
        if self._thread is not None or self._has_run:
            raise RuntimeError("Control loop already started")
        self._thread = threading.Thread(
            target=self._run_in_thread, daemon=True, name="control-loop"
        )
        self._thread.start()

    def join(self, timeout: float | None = None) -> LoopResult | None:
        """Wait for a loop started with ``start()``.

        Re-raises whatever aborted the loop. Returns None if the loop is
        still running when the timeout expires.
        """
        if self._thread is not None:
            self._thread.join(timeout=timeout)
        if self._error is not None:
            raise self._error
        return self._result

    def run(self) -> LoopResult:
        """Take over the terminal and run until quit or game over.

        Terminal and renderer errors propagate after the terminal has
        been restored. A loop instance runs once; build a new one for
        the next game.
        """
        if self._has_run:
            raise RuntimeError("Control loop already ran")
        self._has_run = True
        handle = self._terminal.init()
        try:
            self._terminal.set_nonblocking(handle)
            self._terminal.enable_special_keys(handle)
            self._capture = KeyCapture(
                self._terminal, handle, self._channel,
                poll_interval=self._capture_poll_interval,
            )
            self._capture.start()
            self._router.set_status(ControlStatus.RUNNING)
            logger.info("Control loop starting at speed %d", self._state.speed)
            reason = self._loop()
        finally:
            self._router.set_status(ControlStatus.STOPPED)
            if self._capture is not None:
                self._capture.stop()
            self._terminal.teardown(handle)

        self._result = LoopResult(
            status=self._state.status,
            speed=self._state.speed,
            ticks=self._ticks,
            last_outcome=self._last_outcome,
            reason=reason,
        )
        logger.info(
            "Control loop finished (%s) after %d ticks", reason.value, self._ticks
        )
        return self._result

    def _run_in_thread(self) -> None:
        try:
            self.run()
        except Exception as e:
            logger.error("Control loop aborted: %s", e)
            self._error = e

    def _loop(self) -> StopReason:
        while True:
            # 1. One key, if any is waiting
            code = self._channel.poll()
            if code is not None:
                self._router.handle_key(code)
            elif (
                self._state.status is not ControlStatus.STOPPED
                and self._channel.is_exhausted()
            ):
                logger.warning("Key input closed, stopping")
                self._router.set_status(ControlStatus.STOPPED)
                return StopReason.INPUT_CLOSED

            if self._state.status is ControlStatus.STOPPED:
                return StopReason.QUIT
            if self._state.status is ControlStatus.PAUSED:
                self._wait_while_paused()
                continue

            # 2. Tick and render
            self._last_outcome = self._model.advance_tick()
            self._ticks += 1
            self._renderer.render_main_scene()

            if self._last_outcome is not TickOutcome.NORMAL:
                logger.info("Game over: %s", self._last_outcome.value)
                self._router.set_status(ControlStatus.STOPPED)
                return StopReason.GAME_OVER

            # 3. Sleep unless a direction change asked for an immediate tick
            if self._state.skip_delay:
                self._state.skip_delay = False
            else:
                time.sleep(self._state.tick_delay)

            # 4. Keys that arrived while ticking or sleeping
            self._drain()

            if self._state.status is ControlStatus.PAUSED:
                self._wait_while_paused()

    def _drain(self) -> None:
        for code in self._channel.drain():
            self._router.handle_key(code)

    def _wait_while_paused(self) -> None:
        while self._state.status is ControlStatus.PAUSED:
            self._renderer.render_pause_overlay()
            time.sleep(self._pause_interval)
            self._drain()
            if self._channel.is_exhausted():
                return
