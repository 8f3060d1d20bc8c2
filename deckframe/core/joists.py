"""Joist selection: size and spacing at minimum lumber cost."""

from __future__ import annotations
import logging
import math
from collections.abc import Mapping

from deckframe.core.errors import EngineError, ErrorCode
from deckframe.models import DeckingType, JoistConfig
from deckframe.reference import ReferenceData

logger = logging.getLogger(__name__)


def max_cantilever(span_ft: float) -> float:
    """Joists may cantilever 1/4 of their back-span, never more than 2 ft."""
    return min(span_ft / 4, 2)


class JoistSelector:
    """
    Chooses joist size and spacing for a given span.

    The search is order-sensitive: spacings are tried in
    ascending order, and within a spacing the first adequate size wins.
    The cheapest of those per-spacing winners is returned.
    """

    def __init__(self, reference: ReferenceData) -> None:
        self.reference = reference

    def select(
        self,
        width_ft: float,
        species: str,
        forced_spacing_in: int | None = None,
        decking: DeckingType | str = DeckingType.COMPOSITE_1IN,
    ) -> JoistConfig:
        table = self.reference.joist_table(species)
        max_spacing = self.reference.max_joist_spacing(DeckingType(decking).value)

        best: JoistConfig | None = None
        for spacing in self.candidate_spacings(max_spacing, forced_spacing_in):
            config = self._first_adequate(table, width_ft, spacing)
            if config is None:
                logger.debug("No joist size spans %.2f ft at %d in", width_ft, spacing)
                continue
            logger.debug("Joist candidate %s @ %d in: $%.2f", config.size, spacing, config.cost)
            if best is None or config.cost < best.cost:
                best = config

        if best is None:
            raise EngineError(
                ErrorCode.SPAN_EXCEEDED,
                f"No joist configuration can span {width_ft} ft "
                f"({species}, max spacing {max_spacing} in)",
            )
        return best

    def candidate_spacings(self, max_spacing: int, forced_spacing_in: int | None) -> list[int]:
        if forced_spacing_in:
            return [forced_spacing_in]
        return [s for s in self.reference.joist_spacings if s <= max_spacing]

    def _first_adequate(
        self,
        table: Mapping[str, Mapping[int, float]],
        width_ft: float,
        spacing: int,
    ) -> JoistConfig | None:
        for size in self.reference.joist_sizes:
            allowable = table.get(size, {}).get(spacing)
            if allowable is None or allowable < width_ft:
                continue
            count = math.ceil(width_ft * 12 / spacing) + 1
            return JoistConfig(
                size=size,
                spacing_in=spacing,
                count=count,
                span_ft=width_ft,
                cantilever_ft=max_cantilever(width_ft),
                allowable_span_ft=allowable,
                cost=count * self.reference.cost_per_foot(size) * width_ft,
            )
        return None
