"""Compliance checker: runs the registered rules over a selected frame."""

from __future__ import annotations
import logging

from deckframe.models import (
    BeamSet, ComplianceLimits, ComplianceReport, DeckPayload, JoistConfig,
)
from deckframe.models.context import ComplianceContext
from deckframe.reference import ReferenceData
from deckframe.core.registry import RuleRegistry, create_default_registry

logger = logging.getLogger(__name__)


class ComplianceChecker:
    """Collects warnings from every applicable rule, in rule order."""

    def __init__(
        self,
        registry: RuleRegistry | None = None,
        limits: ComplianceLimits | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.limits = limits or ComplianceLimits()

    def check(
        self,
        payload: DeckPayload,
        joists: JoistConfig,
        beams: BeamSet,
        reference: ReferenceData,
    ) -> ComplianceReport:
        context = ComplianceContext(
            payload=payload,
            joists=joists,
            beams=beams,
            reference=reference,
            limits=self.limits,
        )
        return self.check_context(context)

    def check_context(self, context: ComplianceContext) -> ComplianceReport:
        warnings: list[str] = []
        for rule in self.registry.get_applicable_rules(context):
            found = rule.check(context)
            if found:
                logger.debug("Rule %s: %s", rule.get_id(), found)
            warnings.extend(found)

        return ComplianceReport.from_warnings(warnings)
