"""Site rules that depend on footing and attachment rather than member sizes."""

from __future__ import annotations

from deckframe.models import Attachment, FootingType
from deckframe.models.context import ComplianceContext
from deckframe.rules.base import ComplianceRule


class SurfaceFootingRule(ComplianceRule):
    """Surface footings may only carry low ledger-attached decks."""

    priority = 10

    def get_id(self) -> str:
        return "site.surface_footing"

    def get_name(self) -> str:
        return "Surface Footing Height"

    def applies(self, context: ComplianceContext) -> bool:
        p = context.payload
        return p.footing_type == FootingType.SURFACE and p.attachment == Attachment.LEDGER

    def check(self, context: ComplianceContext) -> list[str]:
        limit = context.limits.surface_footing_max_height_ft
        if context.payload.height_ft >= limit:
            return [f"Surface footings require height < {limit:g} ft for ledger attachment"]
        return []
