"""Controller module for snakectl.

Contains the control loop that ticks the game, the router that turns
key codes into state changes, and the channel that carries keys from
the capture thread to the loop.

Public API:
    ControlLoop -- Tick loop / state machine
    InputRouter -- Key code handler
    KeyChannel -- Unbounded key FIFO
    KeyCapture -- Terminal capture thread
    KeyMap -- Key code -> command table
"""

from snakectl.controller.channel import KeyCapture, KeyChannel
from snakectl.controller.keys import Command, KeyMap
from snakectl.controller.loop import ControlLoop
from snakectl.controller.router import InputRouter

__all__ = [
    "Command",
    "ControlLoop",
    "InputRouter",
    "KeyCapture",
    "KeyChannel",
    "KeyMap",
]
