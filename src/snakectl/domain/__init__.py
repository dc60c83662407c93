"""Domain models for snakectl.

Core data structures and enumerations shared between the controller,
the terminal capture backends, and the external game model. All models
use Pydantic v2 for validation.
"""

from snakectl.domain.models import (
    ControlState,
    ControlStatus,
    Direction,
    LoopResult,
    StopReason,
    TickOutcome,
)

__all__ = [
    "ControlState",
    "ControlStatus",
    "Direction",
    "LoopResult",
    "StopReason",
    "TickOutcome",
]
