"""Deck construction vocabulary: attachment, footings, beam styles, decking."""

from __future__ import annotations
from enum import Enum


class Attachment(str, Enum):
    LEDGER = "ledger"   # Inner edge bolted to the house
    FREE = "free"       # Free-standing, two beam lines


class FootingType(str, Enum):
    HELICAL = "helical"
    CONCRETE = "concrete"
    SURFACE = "surface"


class BeamPosition(str, Enum):
    OUTER = "outer"
    INNER = "inner"


class BeamStyle(str, Enum):
    DROP = "drop"       # Joists bear on top of the beam
    INLINE = "inline"   # Joists hang flush from the beam face
    LEDGER = "ledger"


class DeckingType(str, Enum):
    COMPOSITE_1IN = "composite_1in"
    WOOD_5_4 = "wood_5/4"
    WOOD_2X = "wood_2x"
