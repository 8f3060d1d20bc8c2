"""High-level structure service — facade for the API layer."""

from __future__ import annotations
import logging
from collections.abc import Mapping
from typing import Any

from deckframe.config import settings
from deckframe.models import ComplianceLimits, DeckPayload, StructuralResult
from deckframe.reference import ReferenceData, default_reference
from deckframe.core.engine import StructureEngine
from deckframe.core.errors import EngineError
from deckframe.core.registry import RuleRegistry, create_default_registry

logger = logging.getLogger(__name__)


class StructureService:
    """Validates input, delegates to the engine, logs the outcome."""

    def __init__(
        self,
        reference: ReferenceData | None = None,
        limits: ComplianceLimits | None = None,
        registry: RuleRegistry | None = None,
    ) -> None:
        self.reference = reference or default_reference()
        self.registry = registry or create_default_registry()
        self.engine = StructureEngine(
            self.reference,
            limits or settings.compliance_limits(),
            self.registry,
        )

    def compute(self, payload: DeckPayload | Mapping[str, Any]) -> StructuralResult:
        if not isinstance(payload, DeckPayload):
            payload = DeckPayload.model_validate(payload)

        try:
            result = self.engine.compute(payload)
        except EngineError as exc:
            logger.warning("Structure rejected (%s): %s", exc.code.value, exc.message)
            raise

        logger.info(
            "Structure %.1fx%.1f ft %s: joists %s @ %d in, outer beam %s, %d warnings",
            payload.width_ft, payload.length_ft, payload.species_grade,
            result.joists.size, result.joists.spacing_in, result.beams.outer.size,
            len(result.compliance.warnings),
        )
        return result

    def list_species(self) -> list[dict[str, Any]]:
        return [
            {"name": name, "cost_multiplier": self.reference.species_multiplier(name)}
            for name in self.reference.species_names()
        ]

    def list_decking(self) -> list[dict[str, Any]]:
        return [
            {"name": d.name, "max_perpendicular_spacing_in": d.max_perpendicular_spacing_in}
            for d in self.reference.decking.values()
        ]

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.registry.list_rules()
        ]
