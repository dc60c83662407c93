"""External game model interface for snakectl.

Snake body mechanics (movement, growth, collisions) live outside this
package; the controller drives them through this narrow interface.

Public API:
    GameModel -- Abstract base class
"""

from snakectl.game.base import GameModel

__all__ = ["GameModel"]
