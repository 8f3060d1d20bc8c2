"""Plan-view primitives used throughout the engine."""

from __future__ import annotations
import math
from pydantic import BaseModel, Field


class PlanPoint(BaseModel):
    """Point on the deck plan, in feet. X runs along the house, Y away from it."""
    x: float
    y: float

    def distance_to(self, other: PlanPoint) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


class Footprint(BaseModel):
    """Rectangular deck plan. Joists span the width, beams run the length."""
    width_ft: float = Field(gt=0)
    length_ft: float = Field(gt=0)

    @property
    def area_sqft(self) -> float:
        return self.width_ft * self.length_ft

    def corners(self) -> list[PlanPoint]:
        return [
            PlanPoint(x=0.0, y=0.0),
            PlanPoint(x=self.length_ft, y=0.0),
            PlanPoint(x=self.length_ft, y=self.width_ft),
            PlanPoint(x=0.0, y=self.width_ft),
        ]
