"""Abstract base class for the game model driven by the control loop."""

from __future__ import annotations

from abc import ABC, abstractmethod

from snakectl.domain.models import Direction, TickOutcome


class GameModel(ABC):
    """Interface the controller uses to steer and advance the snake.

    ``direction`` is the direction the snake travelled on its last tick.
    ``pending_direction`` is what the next tick will apply; the controller
    writes it, the model reads it inside ``advance_tick()``.
    """

    @property
    @abstractmethod
    def direction(self) -> Direction:
        """Current travel direction."""
        ...

    @property
    @abstractmethod
    def pending_direction(self) -> Direction:
        ...

    @pending_direction.setter
    @abstractmethod
    def pending_direction(self, value: Direction) -> None:
        ...

    @abstractmethod
    def advance_tick(self) -> TickOutcome:
        """Apply the pending direction, move one step, and check collisions.

        Returns:
            TickOutcome.NORMAL while the game can continue; any other
            outcome ends the control loop.
        """
        ...
