"""Shared test fixtures for the snakectl test suite.

Provides fake collaborators for the control loop: a scripted terminal,
a minimal game model that records steering, and a mock renderer.
"""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from snakectl.domain.models import ControlState, ControlStatus, Direction, TickOutcome
from snakectl.game.base import GameModel
from snakectl.render.base import Renderer
from snakectl.terminal.base import TerminalCapture


# ---------------------------------------------------------------------------
# Fake collaborators
# ---------------------------------------------------------------------------


class FakeTerminal(TerminalCapture):
    """Terminal that yields scripted key codes, then nothing."""

    def __init__(self, keys: list[int] | None = None, read_error: Exception | None = None) -> None:
        self._keys = list(keys or [])
        self._read_error = read_error
        self.handle = object()
        self.calls: list[str] = []

    def init(self) -> Any:
        self.calls.append("init")
        return self.handle

    def set_nonblocking(self, handle: Any) -> None:
        self.calls.append("set_nonblocking")

    def enable_special_keys(self, handle: Any) -> None:
        self.calls.append("enable_special_keys")

    def read_key(self, handle: Any) -> int | None:
        if self._read_error is not None:
            raise self._read_error
        if self._keys:
            return self._keys.pop(0)
        return None

    def teardown(self, handle: Any) -> None:
        self.calls.append("teardown")


class FakeGameModel(GameModel):
    """Game model that applies the pending direction on each tick.

    ``outcomes`` is consumed one per tick; NORMAL once exhausted.
    """

    def __init__(
        self,
        direction: Direction = Direction.RIGHT,
        outcomes: list[TickOutcome] | None = None,
    ) -> None:
        self._direction = direction
        self._pending = direction
        self._outcomes = list(outcomes or [])
        self.ticks = 0
        self.steered: list[Direction] = []
        self.travelled: list[Direction] = [direction]

    @property
    def direction(self) -> Direction:
        return self._direction

    @property
    def pending_direction(self) -> Direction:
        return self._pending

    @pending_direction.setter
    def pending_direction(self, value: Direction) -> None:
        self._pending = value
        self.steered.append(value)

    def advance_tick(self) -> TickOutcome:
        self.ticks += 1
        self._direction = self._pending
        self.travelled.append(self._direction)
        if self._outcomes:
            return self._outcomes.pop(0)
        return TickOutcome.NORMAL


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def make_terminal() -> type[FakeTerminal]:
    """Factory for scripted terminals: make_terminal(keys=..., read_error=...)."""
    return FakeTerminal


@pytest.fixture
def make_model() -> type[FakeGameModel]:
    """Factory for game models: make_model(direction=..., outcomes=...)."""
    return FakeGameModel


@pytest.fixture
def fake_terminal() -> FakeTerminal:
    return FakeTerminal()


@pytest.fixture
def fake_model() -> FakeGameModel:
    return FakeGameModel()


@pytest.fixture
def mock_renderer() -> MagicMock:
    """A mock Renderer; both render calls succeed and are recorded."""
    return MagicMock(spec=Renderer)


@pytest.fixture
def running_state() -> ControlState:
    """Control state of a running game at speed 5 within [1, 10]."""
    return ControlState(
        status=ControlStatus.RUNNING, speed=5, min_speed=1, max_speed=10
    )
