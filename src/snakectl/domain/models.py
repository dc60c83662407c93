"""Core domain models for snakectl.

These models represent the state shared between the input capture
thread and the control loop, plus the enumerations exchanged with the
external game model.
"""

from __future__ import annotations

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class ControlStatus(str, enum.Enum):
    """Run state of the control loop."""

    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"


class Direction(str, enum.Enum):
    """Travel direction of the snake."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class TickOutcome(str, enum.Enum):
    """Result reported by the game model after one tick."""

    NORMAL = "normal"
    COLLIDED = "collided"
    FAILED = "failed"


class StopReason(str, enum.Enum):
    """Why the control loop exited."""

    QUIT = "quit"
    GAME_OVER = "game_over"
    INPUT_CLOSED = "input_closed"


# ---------------------------------------------------------------------------
# Shared control state
# ---------------------------------------------------------------------------


class ControlState(BaseModel):
    """Shared mutable record of the controller.

    Read from any thread; written only on the control loop thread. Field
    assignment is validated, so a speed outside ``[min_speed, max_speed]``
    raises instead of slipping through.
    """

    model_config = ConfigDict(validate_assignment=True)

    status: ControlStatus = Field(default=ControlStatus.STOPPED)
    speed: int = Field(gt=0, description="Tick rate in ticks per second")
    skip_delay: bool = Field(
        default=False, description="Elide the next inter-tick sleep (one-shot)"
    )
    last_change: datetime = Field(
        default_factory=datetime.now,
        description="When status last changed; diagnostic only",
    )
    min_speed: int = Field(default=1, gt=0)
    max_speed: int = Field(default=10, gt=0)

    @model_validator(mode="after")
    def _speed_within_bounds(self) -> ControlState:
        if not self.min_speed <= self.speed <= self.max_speed:
            raise ValueError(
                f"speed {self.speed} outside [{self.min_speed}, {self.max_speed}]"
            )
        return self

    @property
    def tick_delay(self) -> float:
        """Inter-tick delay in seconds for the current speed."""
        return 1.0 / self.speed


class LoopResult(BaseModel):
    """Summary of a finished control loop run."""

    model_config = ConfigDict(frozen=True)

    status: ControlStatus
    speed: int
    ticks: int = Field(ge=0, description="Number of advance_tick() calls made")
    last_outcome: TickOutcome | None = Field(default=None)
    reason: StopReason
