"""Material takeoff: the shopping list for a selected frame."""

from __future__ import annotations
import logging

from deckframe.models import (
    BeamSet, BeamStyle, FootingType, JoistConfig, LedgerConfig, MaterialItem, PostConfig,
    StructureMetrics,
)
from deckframe.reference import ReferenceData

logger = logging.getLogger(__name__)


def hanger_code(joist_size: str) -> str:
    """LUS hanger model for a joist size, e.g. "2x10" -> "LUS210"."""
    return "LUS" + joist_size.replace("x", "")


class MaterialTakeoff:
    """Builds line items and totals from a selected frame."""

    MIN_POST_LENGTH_FT = 8

    def __init__(self, reference: ReferenceData, species: str) -> None:
        self.reference = reference
        self.multiplier = reference.species_multiplier(species)

    def build(
        self,
        joists: JoistConfig,
        beams: BeamSet,
        posts: list[PostConfig],
        footing_type: FootingType | str,
    ) -> list[MaterialItem]:
        items: list[MaterialItem] = []

        # Joists
        joist_len = self.piece_length(joists.span_ft + joists.cantilever_ft, joists.size)
        items.append(self._lumber(f"{joists.size}-{joist_len:g}' joist", joists.size, joist_len, joists.count))

        # Hangers wherever joists hang from a ledger or an inline beam
        hung = sum(
            1 for b in (beams.outer, beams.inner)
            if isinstance(b, LedgerConfig) or b.style == BeamStyle.INLINE
        )
        code = hanger_code(joists.size)
        if hung and code in self.reference.hardware:
            items.append(self._hardware(f"{code} hanger", code, joists.count * hung))
        elif hung:
            logger.warning("No hanger listed for joist size %s", joists.size)

        # Beams, one piece per ply per bay
        for beam in beams.beams():
            length = self.piece_length(beam.post_spacing_ft, beam.dimension)
            qty = beam.ply_count * beam.bay_count
            items.append(self._lumber(
                f"{beam.dimension}-{length:g}' {beam.position.value} beam", beam.dimension, length, qty,
            ))

        if posts:
            size = self.reference.post_size
            length = self.piece_length(max(posts[0].height_ft, self.MIN_POST_LENGTH_FT), size)
            items.append(self._lumber(f"{size}-{length:g}' post", size, length, len(posts)))
            items.append(self._hardware(f"{self.reference.post_base} post base", self.reference.post_base, len(posts)))
            items.append(self._hardware(f"{self.reference.post_cap} post cap", self.reference.post_cap, len(posts)))
            footing = FootingType(footing_type).value
            footing_cost = self.reference.footing_costs[footing]
            items.append(_item(f"{footing} footing", len(posts), footing_cost))

        return items

    @staticmethod
    def metrics(items: list[MaterialItem]) -> StructureMetrics:
        return StructureMetrics(
            total_board_ft=round(sum(i.board_ft for i in items)),
            total_cost=round(sum(i.total_cost for i in items), 2),
        )

    def piece_length(self, required_ft: float, size: str) -> float:
        """
        Shortest stock length covering required_ft.

        Longer than every stock length: the piece is priced at the exact
        required length rather than cut short.
        """
        length = self.reference.stock_length(required_ft, size)
        if length < required_ft:
            logger.info("%s needs %.2f ft, longer than any stock length", size, required_ft)
            return required_ft
        return length

    def _lumber(self, label: str, size: str, length_ft: float, qty: int) -> MaterialItem:
        unit = self.reference.cost_per_foot(size) * length_ft * self.multiplier
        return _item(label, qty, unit, self.reference.board_feet(size, length_ft) * qty)

    def _hardware(self, label: str, code: str, qty: int) -> MaterialItem:
        return _item(label, qty, self.reference.hardware_cost(code))


def _item(label: str, qty: int, unit_cost: float, board_ft: float = 0.0) -> MaterialItem:
    return MaterialItem(
        item=label,
        qty=qty,
        unit_cost=round(unit_cost, 2),
        total_cost=round(unit_cost * qty, 2),
        board_ft=round(board_ft, 2),
    )
