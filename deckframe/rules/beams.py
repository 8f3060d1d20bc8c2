"""Beam compliance rules: ply count, post spacing and margin."""

from __future__ import annotations

from deckframe.models import BeamConfig
from deckframe.models.context import ComplianceContext
from deckframe.rules.base import ComplianceRule


def _table_allowable(context: ComplianceContext, beam: BeamConfig) -> float | None:
    table = context.reference.beam_spans.get(context.payload.species_grade, {})
    bucket = context.reference.tributary_bucket(beam.tributary_ft)
    return table.get(beam.size, {}).get(bucket)


def _name(beam: BeamConfig) -> str:
    position = beam.position.value if beam.position else "unplaced"
    return f"{position.capitalize()} beam {beam.size}"


class BeamPlyRule(ComplianceRule):
    """Wide tributaries need a multi-ply beam."""

    priority = 60

    def get_id(self) -> str:
        return "beam.ply"

    def get_name(self) -> str:
        return "Beam Minimum Ply Count"

    def check(self, context: ComplianceContext) -> list[str]:
        warnings: list[str] = []
        for beam in context.supported_beams():
            required = context.min_ply_count(beam.tributary_ft)
            if beam.ply_count < required:
                warnings.append(
                    f"{_name(beam)} has {beam.ply_count} ply; {beam.tributary_ft:.1f}' "
                    f"tributary requires at least {required}"
                )
        return warnings


class BeamPostSpacingRule(ComplianceRule):
    """Post spacing within the beam's table allowable span."""

    priority = 70

    def get_id(self) -> str:
        return "beam.post_spacing"

    def get_name(self) -> str:
        return "Beam Post Spacing"

    def check(self, context: ComplianceContext) -> list[str]:
        warnings: list[str] = []
        for beam in context.supported_beams():
            allowable = _table_allowable(context, beam)
            if allowable is None:
                warnings.append(
                    f"{_name(beam)} has no table entry at {beam.tributary_ft:.1f}' tributary"
                )
            elif beam.post_spacing_ft > allowable:
                warnings.append(
                    f"{_name(beam)} post spacing {beam.post_spacing_ft:.1f}' exceeds "
                    f"allowable {allowable:.1f}' for {beam.tributary_ft:.1f}' tributary"
                )
        return warnings


class BeamMarginRule(ComplianceRule):
    """Flags beams whose bays nearly reach the allowable span."""

    priority = 80
    dependencies = ["beam.post_spacing"]

    def get_id(self) -> str:
        return "beam.margin"

    def get_name(self) -> str:
        return "Beam Span Margin"

    def check(self, context: ComplianceContext) -> list[str]:
        warnings: list[str] = []
        ratio = context.limits.span_margin_ratio
        for beam in context.supported_beams():
            allowable = _table_allowable(context, beam)
            if allowable is None:
                continue
            if beam.post_spacing_ft <= allowable < beam.post_spacing_ft * (1 + ratio):
                warnings.append(
                    f"{_name(beam)} post spacing {beam.post_spacing_ft:.1f}' is within "
                    f"{ratio:.0%} of allowable {allowable:.1f}'"
                )
        return warnings
