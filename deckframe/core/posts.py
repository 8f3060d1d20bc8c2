"""Post layout under each beam line."""

from __future__ import annotations

from deckframe.models import (
    BeamConfig, BeamPosition, BeamSet, FootingType, JoistConfig, PostConfig,
)


def beam_line_offset(beam: BeamConfig, joists: JoistConfig) -> float:
    """Distance of a beam line from the house side of the deck (ft)."""
    if beam.position == BeamPosition.OUTER:
        return joists.span_ft - joists.cantilever_ft
    return 0.0


def layout_posts(
    beams: BeamSet,
    joists: JoistConfig,
    height_ft: float,
    footing_type: FootingType,
    post_size: str = "6x6",
) -> list[PostConfig]:
    """Place posts at equal bays along every post-supported beam."""
    posts: list[PostConfig] = []
    for beam in beams.beams():
        y = beam_line_offset(beam, joists)
        for i in range(beam.post_count):
            # Snap the last post to the beam end to avoid float drift.
            x = beam.span_ft if i == beam.post_count - 1 else i * beam.post_spacing_ft
            posts.append(PostConfig(
                beam_position=beam.position,
                x_ft=round(x, 4),
                y_ft=round(y, 4),
                height_ft=height_ft,
                size=post_size,
                footing_type=footing_type,
            ))
    return posts
