"""Compliance context: everything the rules need to judge a selection."""

from __future__ import annotations
from pydantic import BaseModel

from deckframe.reference import ReferenceData

from .framing import BeamConfig, BeamSet, JoistConfig
from .parameters import ComplianceLimits, DeckPayload


class ComplianceContext(BaseModel):
    """
    Holds the inputs and selections for a single compliance pass.

    The engine fills it once selection is done; rules only read from it.
    """
    payload: DeckPayload
    joists: JoistConfig
    beams: BeamSet
    reference: ReferenceData
    limits: ComplianceLimits = ComplianceLimits()

    def supported_beams(self) -> list[BeamConfig]:
        return self.beams.beams()

    def min_ply_count(self, tributary_ft: float) -> int:
        return 2 if tributary_ft >= self.limits.multi_ply_tributary_ft else 1
