"""Lumber, hardware and footing unit costs."""

from __future__ import annotations


# size -> (cost per linear foot, face width in, thickness in)
LUMBER = {
    "2x6": (2.50, 5.5, 1.5),
    "2x8": (3.25, 7.25, 1.5),
    "2x10": (4.50, 9.25, 1.5),
    "2x12": (5.75, 11.25, 1.5),
    "6x6": (12.00, 5.5, 5.5),
}

HARDWARE = {
    "LUS26": (3.50, "2x6 joist hanger"),
    "LUS28": (3.75, "2x8 joist hanger"),
    "LUS210": (4.00, "2x10 joist hanger"),
    "LUS212": (4.50, "2x12 joist hanger"),
    "PB66": (35.00, "6x6 post base"),
    "PCZ66": (28.00, "6x6 post cap"),
}

FOOTING_COSTS = {
    "helical": 500.00,
    "concrete": 150.00,
    "surface": 75.00,
}

STANDARD_LENGTHS = {
    "2x6": [8, 10, 12, 14, 16, 20],
    "2x8": [8, 10, 12, 14, 16, 20],
    "2x10": [8, 10, 12, 14, 16, 20],
    "2x12": [8, 10, 12, 14, 16, 20],
    "6x6": [8, 10, 12],
}

SPECIES_MULTIPLIERS = {
    "SPF #2": 1.0,
    "DF #1": 1.35,
    "HF #2": 1.15,
    "SP #2": 1.25,
}
