"""Main structure engine: orchestrates selection, layout and compliance."""

from __future__ import annotations
from collections.abc import Mapping
from typing import Any

from deckframe.models import (
    Attachment, BeamPosition, BeamSet, ComplianceLimits, DeckPayload,
    LedgerConfig, StructuralResult,
)
from deckframe.reference import ReferenceData, default_reference
from deckframe.core.beams import BeamSelector, resolve_beam_style
from deckframe.core.compliance import ComplianceChecker
from deckframe.core.joists import JoistSelector
from deckframe.core.posts import layout_posts
from deckframe.core.registry import RuleRegistry
from deckframe.core.takeoff import MaterialTakeoff
from deckframe.core.tributary import tributary_width


class StructureEngine:
    """
    Stateless structure engine.

    Takes a deck payload, selects joists and beams, lays out posts,
    prices the takeoff, runs compliance, and returns a StructuralResult.
    Nothing computed for one call is kept for the next.
    """

    def __init__(
        self,
        reference: ReferenceData | None = None,
        limits: ComplianceLimits | None = None,
        registry: RuleRegistry | None = None,
    ) -> None:
        self.reference = reference or default_reference()
        self.joist_selector = JoistSelector(self.reference)
        self.beam_selector = BeamSelector(self.reference)
        self.checker = ComplianceChecker(registry, limits)

    def compute(self, payload: DeckPayload | Mapping[str, Any]) -> StructuralResult:
        if not isinstance(payload, DeckPayload):
            payload = DeckPayload.model_validate(payload)

        species = payload.species_grade
        footprint = payload.footprint

        # Joist phase: joists span the deck width
        joists = self.joist_selector.select(
            footprint.width_ft,
            species,
            payload.forced_joist_spacing_in,
            payload.decking_type,
        )

        # Beam phase: beams run the deck length
        outer_style = resolve_beam_style(
            BeamPosition.OUTER, payload.beam_style_outer, payload.attachment, payload.footing_type,
        )
        outer = self.beam_selector.select(
            footprint.length_ft, tributary_width(BeamPosition.OUTER, footprint.width_ft), species,
        ).model_copy(update={"position": BeamPosition.OUTER, "style": outer_style})

        inner_tributary = tributary_width(BeamPosition.INNER, footprint.width_ft)
        if payload.attachment == Attachment.LEDGER:
            inner = LedgerConfig(
                span_ft=footprint.length_ft,
                tributary_ft=inner_tributary,
                dimension=joists.size,
            )
        else:
            inner_style = resolve_beam_style(
                BeamPosition.INNER, payload.beam_style_inner, payload.attachment, payload.footing_type,
            )
            inner = self.beam_selector.select(
                footprint.length_ft, inner_tributary, species,
            ).model_copy(update={"position": BeamPosition.INNER, "style": inner_style})

        beams = BeamSet(outer=outer, inner=inner)

        # Layout and pricing phase
        posts = layout_posts(
            beams, joists, payload.height_ft, payload.footing_type, self.reference.post_size,
        )
        takeoff = MaterialTakeoff(self.reference, species)
        items = takeoff.build(joists, beams, posts, payload.footing_type)

        compliance = self.checker.check(payload, joists, beams, self.reference)

        return StructuralResult(
            input=payload,
            joists=joists,
            beams=beams,
            posts=posts,
            material_takeoff=items,
            metrics=takeoff.metrics(items),
            compliance=compliance,
        )


def compute_structure(
    payload: DeckPayload | Mapping[str, Any],
    reference: ReferenceData | None = None,
    limits: ComplianceLimits | None = None,
) -> StructuralResult:
    """Compute a framing recommendation for one deck payload."""
    return StructureEngine(reference, limits).compute(payload)
