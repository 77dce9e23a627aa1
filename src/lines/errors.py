"""Error kinds and the result type returned by every controller command."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class LinesError(Exception):
    """Base class for rule engine errors."""


class OutOfRangeError(LinesError, IndexError):
    @classmethod
    def for_cell(cls, x: int, y: int, width: int, height: int) -> "OutOfRangeError":
        return cls(f"Cell ({x}, {y}) is outside the {width}x{height} board")


class InvalidSelectionError(LinesError, ValueError):
    pass


class PreconditionNotMetError(LinesError, RuntimeError):
    pass


class GameError(Enum):
    OUT_OF_RANGE = "out_of_range"
    INVALID_SELECTION = "invalid_selection"
    PRECONDITION_NOT_MET = "precondition_not_met"
    BOARD_FULL = "board_full"


_ERROR_TYPES = {
    GameError.OUT_OF_RANGE: OutOfRangeError,
    GameError.INVALID_SELECTION: InvalidSelectionError,
    GameError.PRECONDITION_NOT_MET: PreconditionNotMetError,
    GameError.BOARD_FULL: PreconditionNotMetError,
}


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Outcome of a controller command.

    A failed result guarantees nothing was mutated. ``value`` carries the
    command's product on success (the selected ball, the cells to clear, ...).
    """

    ok: bool
    value: Any = None
    error: Optional[GameError] = None
    message: str = ""

    @classmethod
    def success(cls, value: Any = None) -> "CommandResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: GameError, message: str = "") -> "CommandResult":
        return cls(ok=False, error=error, message=message)

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Any:
        """Return ``value`` or raise the exception matching ``error``."""
        if self.ok:
            return self.value
        if self.error is None:
            raise PreconditionNotMetError("failed result carries no error kind")
        raise _ERROR_TYPES[self.error](self.message or self.error.value)
