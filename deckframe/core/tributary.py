"""Tributary width: how much deck floor a beam line carries."""

from __future__ import annotations

from deckframe.models import BeamPosition


ASSUMED_CANTILEVER_FT = 2.0


def tributary_width(position: BeamPosition | str, deck_width_ft: float) -> float:
    """
    Load width carried by the beam at the given position.

    Each beam takes half the joist span; the outer beam also picks up the
    joist cantilever beyond it, assumed at its 2 ft maximum.
    """
    if BeamPosition(position) == BeamPosition.OUTER:
        return deck_width_ft / 2 + ASSUMED_CANTILEVER_FT
    return deck_width_ft / 2
