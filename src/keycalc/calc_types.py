"""
=============================================================================
MODULE NAME: calc_types.py
=============================================================================

INPUT FILES:
- None (typed containers only).

OUTPUT FILES:
- None written directly; snapshots feed the CLI and HTTP serializers.

NOTES:
- ``Mode`` is the explicit entry/evaluated flag held next to the token list.
- ``DisplayState`` is an immutable snapshot handed to hosts after each key.
=============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Mode(str, Enum):
    """Whether the engine is mid-entry or showing a completed evaluation."""

    ENTERING = "entering"
    EVALUATED = "evaluated"


ERROR_PREFIX = "Error"


@dataclass(frozen=True, slots=True)
class DisplayState:
    """What a host shows after a key press."""

    accumulator: str
    result: str
    tokens: Tuple[str, ...] = ()
    mode: Mode = Mode.ENTERING

    @property
    def is_error(self) -> bool:
        return self.result.startswith(ERROR_PREFIX)

    def to_dict(self) -> Dict:
        return {
            "accumulator": self.accumulator,
            "result": self.result,
            "tokens": list(self.tokens),
            "mode": self.mode.value,
            "is_error": self.is_error,
        }


__all__ = ["Mode", "DisplayState", "ERROR_PREFIX"]
