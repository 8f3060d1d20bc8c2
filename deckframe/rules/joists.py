"""Joist compliance rules: spacing, span, margin and cantilever."""

from __future__ import annotations

from deckframe.models.context import ComplianceContext
from deckframe.rules.base import ComplianceRule


def _table_allowable(context: ComplianceContext) -> float | None:
    table = context.reference.joist_spans.get(context.payload.species_grade, {})
    return table.get(context.joists.size, {}).get(context.joists.spacing_in)


class JoistSpacingRule(ComplianceRule):
    """Joist spacing within the decking span rating and the code ceiling."""

    priority = 20

    def get_id(self) -> str:
        return "joist.spacing"

    def get_name(self) -> str:
        return "Joist Spacing Limit"

    def check(self, context: ComplianceContext) -> list[str]:
        warnings: list[str] = []
        spacing = context.joists.spacing_in
        decking = context.payload.decking_type.value

        max_decking = context.reference.decking.get(decking)
        if max_decking is not None and spacing > max_decking.max_perpendicular_spacing_in:
            warnings.append(
                f'{decking} requires max {max_decking.max_perpendicular_spacing_in}" joist spacing'
            )

        max_code = context.limits.max_joist_spacing_in
        if spacing > max_code:
            warnings.append(f'Joist spacing {spacing}" exceeds code maximum {max_code}"')
        return warnings


class CantileverRule(ComplianceRule):
    """Cantilever no longer than a fraction of the back-span, with a hard cap."""

    priority = 30

    def get_id(self) -> str:
        return "joist.cantilever"

    def get_name(self) -> str:
        return "Joist Cantilever Limit"

    def applies(self, context: ComplianceContext) -> bool:
        return context.joists.cantilever_ft > 0

    def check(self, context: ComplianceContext) -> list[str]:
        limits = context.limits
        cap = min(context.joists.span_ft * limits.cantilever_span_ratio, limits.max_cantilever_ft)
        if context.joists.cantilever_ft > cap:
            return [
                f"Cantilever {context.joists.cantilever_ft:.2f}' exceeds "
                f"{limits.cantilever_span_ratio:g} of back-span or {limits.max_cantilever_ft:g}'"
            ]
        return []


class JoistSpanRule(ComplianceRule):
    """Joist span re-validated against the table at the chosen spacing."""

    priority = 40

    def get_id(self) -> str:
        return "joist.span"

    def get_name(self) -> str:
        return "Joist Allowable Span"

    def applies(self, context: ComplianceContext) -> bool:
        return _table_allowable(context) is not None

    def check(self, context: ComplianceContext) -> list[str]:
        j = context.joists
        allowable = _table_allowable(context)
        if j.span_ft > allowable:
            return [
                f"Joist {j.size} @ {j.spacing_in}\" spacing span {j.span_ft:.1f}' "
                f"exceeds allowable {allowable:.1f}'"
            ]
        return []


class JoistMarginRule(ComplianceRule):
    """Flags joists that meet their allowable span with little to spare."""

    priority = 50
    dependencies = ["joist.span"]

    def get_id(self) -> str:
        return "joist.margin"

    def get_name(self) -> str:
        return "Joist Span Margin"

    def applies(self, context: ComplianceContext) -> bool:
        return _table_allowable(context) is not None

    def check(self, context: ComplianceContext) -> list[str]:
        j = context.joists
        allowable = _table_allowable(context)
        ratio = context.limits.span_margin_ratio
        if j.span_ft <= allowable < j.span_ft * (1 + ratio):
            return [
                f"Joist {j.size} @ {j.spacing_in}\" span {j.span_ft:.1f}' is within "
                f"{ratio:.0%} of allowable {allowable:.1f}'"
            ]
        return []
