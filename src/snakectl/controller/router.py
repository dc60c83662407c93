"""Translation of raw key codes into control state mutations.

The router is the only writer of ``status``, ``speed`` and ``skip_delay``
in response to input. It must run on the control loop thread so no lock
is needed around the read-modify-write updates below.
"""

from __future__ import annotations

import logging
from datetime import datetime

from snakectl.controller.keys import Command, KeyMap
from snakectl.domain.models import ControlState, ControlStatus, Direction
from snakectl.game.base import GameModel

logger = logging.getLogger(__name__)


class InputRouter:
    """Applies key events to the shared control state and the game model."""

    def __init__(
        self,
        state: ControlState,
        model: GameModel,
        key_map: KeyMap | None = None,
    ) -> None:
        self._state = state
        self._model = model
        self._key_map = key_map or KeyMap.default()

    @property
    def state(self) -> ControlState:
        return self._state

    def handle_key(self, code: int) -> None:
        """Apply one raw key code.

        Unrecognized codes are ignored. After QUIT every code is ignored.
        """
        if self._state.status is ControlStatus.STOPPED:
            return

        command = self._key_map.resolve(code)
        if command is None:
            logger.debug("Ignoring unbound key code %d", code)
            return

        if command is Command.QUIT:
            self.set_status(ControlStatus.STOPPED)
        elif command is Command.PAUSE:
            self._toggle_pause()
        elif command is Command.SPEED_UP:
            self._state.speed = min(self._state.speed + 1, self._state.max_speed)
            logger.debug("Speed now %d", self._state.speed)
        elif command is Command.SPEED_DOWN:
            self._state.speed = max(self._state.speed - 1, self._state.min_speed)
            logger.debug("Speed now %d", self._state.speed)
        else:
            direction = command.direction
            if direction is not None:
                self._steer(direction)

    def set_status(self, status: ControlStatus) -> None:
        """Record a status transition and stamp ``last_change``."""
        if status is self._state.status:
            return
        logger.info("Status %s -> %s", self._state.status.value, status.value)
        self._state.status = status
        self._state.last_change = datetime.now()

    def _toggle_pause(self) -> None:
        # Check-then-act without a lock; only the loop thread calls this.
        if self._state.status is ControlStatus.RUNNING:
            self.set_status(ControlStatus.PAUSED)
        else:
            self.set_status(ControlStatus.RUNNING)

    def _steer(self, requested: Direction) -> None:
        current = self._model.direction
        if requested is current.opposite:
            logger.debug("Rejected reversal %s -> %s", current.value, requested.value)
            return
        self._model.pending_direction = requested
        if requested is not current:
            self._state.skip_delay = True
