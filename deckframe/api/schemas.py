"""API request/response schemas."""

from __future__ import annotations
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned when the engine refuses a request."""
    code: str
    message: str


class SpeciesInfo(BaseModel):
    name: str
    cost_multiplier: float


class DeckingInfo(BaseModel):
    name: str
    max_perpendicular_spacing_in: int


class RuleInfo(BaseModel):
    id: str
    name: str
