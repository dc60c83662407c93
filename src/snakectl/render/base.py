"""Abstract base class for scene rendering.

Drawing glyphs is not this package's concern. The control loop only
needs to tell a renderer when to draw, and both calls are expected to
be synchronous. Any exception they raise aborts the loop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Renderer(ABC):
    @abstractmethod
    def render_main_scene(self) -> None:
        """Draw the board after a tick."""
        ...

    @abstractmethod
    def render_pause_overlay(self) -> None:
        """Draw the pause indicator while the loop is paused."""
        ...
