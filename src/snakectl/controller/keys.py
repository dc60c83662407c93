"""Control key codes and the code -> command lookup table."""

from __future__ import annotations

import enum

from snakectl.config.settings import KeysConfig
from snakectl.domain.models import Direction

# ---------------------------------------------------------------------------
# Default key codes (ASCII)
# ---------------------------------------------------------------------------

KEY_QUIT: int = 113  # 'q'
KEY_PAUSE: int = 112  # 'p'
KEY_LEFT: int = 104  # 'h'
KEY_UP: int = 107  # 'k'
KEY_RIGHT: int = 108  # 'l'
KEY_DOWN: int = 106  # 'j'
KEY_SPEED_UP: int = 43  # '+'
KEY_SPEED_DOWN: int = 45  # '-'


class Command(str, enum.Enum):
    """What a key asks the controller to do."""

    QUIT = "quit"
    PAUSE = "pause"
    LEFT = "left"
    UP = "up"
    RIGHT = "right"
    DOWN = "down"
    SPEED_UP = "speed_up"
    SPEED_DOWN = "speed_down"

    @property
    def direction(self) -> Direction | None:
        """The travel direction this command requests, if any."""
        return _COMMAND_DIRECTIONS.get(self)


_COMMAND_DIRECTIONS = {
    Command.LEFT: Direction.LEFT,
    Command.UP: Direction.UP,
    Command.RIGHT: Direction.RIGHT,
    Command.DOWN: Direction.DOWN,
}


class KeyMap:
    """Maps raw key codes to commands.

    Unknown codes resolve to None. A code bound to two commands is a
    configuration error.
    """

    def __init__(self, bindings: dict[Command, list[int]]) -> None:
        self._lookup: dict[int, Command] = {}
        for command, codes in bindings.items():
            for code in codes:
                existing = self._lookup.get(code)
                if existing is not None and existing is not command:
                    raise ValueError(
                        f"Key code {code} bound to both {existing.value} and {command.value}"
                    )
                self._lookup[code] = command

    @classmethod
    def default(cls) -> KeyMap:
        return cls({
            Command.QUIT: [KEY_QUIT],
            Command.PAUSE: [KEY_PAUSE],
            Command.LEFT: [KEY_LEFT],
            Command.UP: [KEY_UP],
            Command.RIGHT: [KEY_RIGHT],
            Command.DOWN: [KEY_DOWN],
            Command.SPEED_UP: [KEY_SPEED_UP],
            Command.SPEED_DOWN: [KEY_SPEED_DOWN],
        })

    @classmethod
    def from_config(cls, config: KeysConfig) -> KeyMap:
        return cls({command: getattr(config, command.value) for command in Command})

    def resolve(self, code: int) -> Command | None:
        return self._lookup.get(code)

    def codes_for(self, command: Command) -> list[int]:
        return sorted(code for code, cmd in self._lookup.items() if cmd is command)
