"""Domain errors raised by the selection engine."""

from __future__ import annotations
from enum import Enum


class ErrorCode(str, Enum):
    SPECIES_UNKNOWN = "SPECIES_UNKNOWN"   # Species/grade missing from a span table
    SPAN_EXCEEDED = "SPAN_EXCEEDED"       # No candidate satisfies the span


class EngineError(Exception):
    """
    A request the engine refuses to answer.

    Never caught inside the engine: an unsatisfiable request fails fast
    instead of producing a partial or unsafe recommendation.
    """

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": self.message}

    def __repr__(self) -> str:
        return f"EngineError({self.code.value}, {self.message!r})"


def species_unknown(species: str, table: str) -> EngineError:
    return EngineError(
        ErrorCode.SPECIES_UNKNOWN,
        f"Unknown species/grade: {species!r} is not in the {table} span table",
    )
