"""Structure computation inputs and compliance thresholds."""

from __future__ import annotations
from pydantic import BaseModel, Field, field_validator

from .deck import Attachment, BeamStyle, DeckingType, FootingType
from .geometry import Footprint


ALLOWED_JOIST_SPACINGS_IN = (12, 16, 24)


class StructuralContext(BaseModel):
    """Everything about the deck except its plan dimensions."""
    attachment: Attachment
    footing_type: FootingType
    species_grade: str                          # e.g. "SPF #2"; checked against the span tables
    decking_type: DeckingType
    forced_joist_spacing_in: int | None = None  # None = let the selector choose
    beam_style_outer: BeamStyle | None = None   # None = resolve from attachment/footing
    beam_style_inner: BeamStyle | None = None

    @field_validator("forced_joist_spacing_in")
    @classmethod
    def _check_spacing(cls, value: int | None) -> int | None:
        if value is not None and value not in ALLOWED_JOIST_SPACINGS_IN:
            raise ValueError("forced_joist_spacing_in must be 12, 16, or 24")
        return value

    @field_validator("beam_style_outer", "beam_style_inner")
    @classmethod
    def _check_style(cls, value: BeamStyle | None) -> BeamStyle | None:
        if value == BeamStyle.LEDGER:
            raise ValueError('explicit beam style must be "drop" or "inline"')
        return value


class DeckPayload(StructuralContext):
    """Flat payload accepted by compute_structure and POST /api/structure."""
    width_ft: float = Field(gt=0)
    length_ft: float = Field(gt=0)
    height_ft: float = Field(ge=0)

    @property
    def footprint(self) -> Footprint:
        return Footprint(width_ft=self.width_ft, length_ft=self.length_ft)

    @property
    def context(self) -> StructuralContext:
        return StructuralContext.model_validate(
            self.model_dump(include=set(StructuralContext.model_fields))
        )


class ComplianceLimits(BaseModel):
    """Tunable warning thresholds for the compliance rules."""
    span_margin_ratio: float = 0.05           # Allowable must beat required by 5%
    max_joist_spacing_in: int = 24            # Code ceiling regardless of decking
    multi_ply_tributary_ft: float = 10.0      # At or above this, beams need 2+ plies
    cantilever_span_ratio: float = 0.25       # Cantilever <= 1/4 of back-span
    max_cantilever_ft: float = 2.0
    surface_footing_max_height_ft: float = 2.5  # Ledger decks on surface footings
    disabled_rules: list[str] = []            # Rule IDs to skip, e.g. "beam.margin"
