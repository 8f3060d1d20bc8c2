"""Beam selection and beam style resolution."""

from __future__ import annotations
import logging
import math
import re

from deckframe.core.errors import EngineError, ErrorCode
from deckframe.models import (
    Attachment, BeamConfig, BeamPosition, BeamStyle, FootingType,
)
from deckframe.reference import ReferenceData

logger = logging.getLogger(__name__)


MULTI_PLY_TRIBUTARY_FT = 10.0

_LABEL = re.compile(r"\((\d+)\)(\d+x\d+)")


def parse_beam_label(label: str) -> tuple[int, str]:
    """Split "(3)2x10" into (3, "2x10")."""
    match = _LABEL.fullmatch(label)
    if match is None:
        raise ValueError(f"Malformed beam label: {label!r}")
    return int(match.group(1)), match.group(2)


def min_ply_count(tributary_ft: float) -> int:
    return 2 if tributary_ft >= MULTI_PLY_TRIBUTARY_FT else 1


def post_layout(span_ft: float, allowable_ft: float) -> tuple[float, int]:
    """
    Split a beam run into the fewest equal bays no longer than allowable_ft.

    Returns (post spacing, post count).
    """
    bays = max(1, math.ceil(span_ft / allowable_ft))
    spacing = min(allowable_ft, span_ft / bays)
    return spacing, bays + 1


class BeamSelector:
    """
    Chooses a built-up beam and post layout at minimum cost.

    Configurations are scanned in the reference priority order; a later
    configuration replaces the current best only when strictly cheaper.
    """

    def __init__(self, reference: ReferenceData) -> None:
        self.reference = reference

    def select(self, span_ft: float, tributary_ft: float, species: str) -> BeamConfig:
        best: BeamConfig | None = None
        for candidate in self.candidates(span_ft, tributary_ft, species):
            if best is None or candidate.cost < best.cost:
                best = candidate

        if best is None:
            raise EngineError(
                ErrorCode.SPAN_EXCEEDED,
                f"No beam configuration can span {span_ft} ft with "
                f"{tributary_ft} ft tributary ({species})",
            )
        logger.debug(
            "Beam for %.2f ft span / %.2f ft tributary: %s, %d posts @ %.2f ft",
            span_ft, tributary_ft, best.size, best.post_count, best.post_spacing_ft,
        )
        return best

    def candidates(self, span_ft: float, tributary_ft: float, species: str) -> list[BeamConfig]:
        """Every configuration that survives ply and table filtering, in priority order."""
        table = self.reference.beam_table(species)
        bucket = self.reference.tributary_bucket(tributary_ft)
        min_ply = min_ply_count(tributary_ft)
        post_cost = self.reference.hardware_cost(self.reference.post_base)

        found: list[BeamConfig] = []
        # Each post bay, not the full run, is held to the allowable span.
        for label in self.reference.beam_configurations:
            allowable = table.get(label, {}).get(bucket)
            if not allowable:
                continue
            ply_count, dimension = parse_beam_label(label)
            if ply_count < min_ply:
                continue

            post_spacing, post_count = post_layout(span_ft, allowable)

            cost = (
                ply_count * span_ft * self.reference.cost_per_foot(dimension)
                + post_count * post_cost
            )
            found.append(BeamConfig(
                size=label,
                ply_count=ply_count,
                dimension=dimension,
                post_spacing_ft=post_spacing,
                post_count=post_count,
                span_ft=span_ft,
                tributary_ft=tributary_ft,
                table_tributary_ft=bucket,
                allowable_span_ft=allowable,
                cost=cost,
            ))
        return found


def resolve_beam_style(
    position: BeamPosition | str,
    explicit_style: BeamStyle | str | None,
    attachment: Attachment | str,
    footing_type: FootingType | str,
) -> BeamStyle:
    """Pick a beam style when the caller did not force one."""
    if explicit_style:
        return BeamStyle(explicit_style)

    if BeamPosition(position) == BeamPosition.INNER:
        if Attachment(attachment) == Attachment.LEDGER:
            return BeamStyle.LEDGER
        if FootingType(footing_type) == FootingType.HELICAL:
            return BeamStyle.INLINE
        return BeamStyle.DROP

    return BeamStyle.DROP
