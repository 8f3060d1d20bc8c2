"""Framing output models."""

from __future__ import annotations
from typing import Literal
from pydantic import BaseModel

from .deck import BeamPosition, BeamStyle, FootingType
from .geometry import PlanPoint
from .parameters import DeckPayload


# Single versioned key under which an external store keeps a serialized result.
STORAGE_KEY = "deckframe.structure.v1"


class JoistConfig(BaseModel):
    """Selected joist size and layout."""
    size: str
    spacing_in: int
    count: int
    span_ft: float
    cantilever_ft: float
    allowable_span_ft: float
    cost: float


class BeamConfig(BaseModel):
    """Selected built-up beam and its post layout."""
    size: str                   # Table label, e.g. "(2)2x10"
    ply_count: int
    dimension: str              # Lumber size of one ply, e.g. "2x10"
    post_spacing_ft: float
    post_count: int
    span_ft: float
    tributary_ft: float
    table_tributary_ft: int     # Bucket the span table was read at
    allowable_span_ft: float
    cost: float
    position: BeamPosition | None = None
    style: BeamStyle = BeamStyle.DROP

    @property
    def bay_count(self) -> int:
        return self.post_count - 1


class LedgerConfig(BaseModel):
    """Inner support when the deck is bolted to the house."""
    position: BeamPosition = BeamPosition.INNER
    style: Literal["ledger"] = "ledger"
    span_ft: float
    tributary_ft: float
    dimension: str              # Ledger board matches the joist depth


class BeamSet(BaseModel):
    outer: BeamConfig
    inner: BeamConfig | LedgerConfig

    def beams(self) -> list[BeamConfig]:
        """Post-supported beams only (ledgers excluded)."""
        return [b for b in (self.outer, self.inner) if isinstance(b, BeamConfig)]


class PostConfig(BaseModel):
    """A single post under a beam line."""
    beam_position: BeamPosition
    x_ft: float
    y_ft: float
    height_ft: float
    size: str = "6x6"
    footing_type: FootingType

    @property
    def location(self) -> PlanPoint:
        return PlanPoint(x=self.x_ft, y=self.y_ft)


class MaterialItem(BaseModel):
    item: str
    qty: int
    unit_cost: float
    total_cost: float
    board_ft: float = 0.0       # Nominal board feet for the whole line; 0 for hardware


class StructureMetrics(BaseModel):
    total_board_ft: int = 0
    total_cost: float = 0.0


class ComplianceReport(BaseModel):
    """Outcome of the compliance rules. Passes only with zero warnings."""
    passes: bool
    warnings: list[str] = []
    joist_table: str = "IRC-2021 R507.6"
    beam_table: str = "IRC-2021 R507.5"
    assumptions: list[str] = ["IRC default loads (40 psf live, 10 psf dead)"]

    @classmethod
    def from_warnings(cls, warnings: list[str]) -> ComplianceReport:
        return cls(passes=not warnings, warnings=list(warnings))


class StructuralResult(BaseModel):
    """The complete computed deck structure."""
    input: DeckPayload
    joists: JoistConfig
    beams: BeamSet
    posts: list[PostConfig]
    material_takeoff: list[MaterialItem]
    metrics: StructureMetrics
    compliance: ComplianceReport
