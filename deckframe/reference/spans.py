"""Allowable span tables for deck joists and beams.

Values follow the IRC 2021 deck tables (R507.6 joists, R507.5 beams) for
40 psf live + 10 psf dead load, written in the tables' own feet-inches form.
"""

from __future__ import annotations


def ft_in(value: str) -> float:
    """Convert a table entry like "11-8" (11 ft 8 in) to decimal feet."""
    feet, _, inches = value.partition("-")
    return int(feet) + int(inches or 0) / 12


# Beam tables are indexed by tributary width, rounded up into these buckets.
TRIBUTARY_BUCKETS = (6, 7, 8, 9, 10, 11, 12, 14, 16, 18, 20)

JOIST_SPACINGS_IN = (12, 16, 24)
JOIST_SIZES = ("2x6", "2x8", "2x10", "2x12")

# Priority order in which built-up beams are evaluated.
BEAM_CONFIGURATIONS = (
    "(2)2x8", "(3)2x8", "(2)2x10", "(3)2x10",
    "(2)2x12", "(3)2x12", "(1)2x10", "(1)2x12", "(1)2x8",
)


def _joist_row(*spans: str) -> dict[int, float]:
    return {s: ft_in(v) for s, v in zip(JOIST_SPACINGS_IN, spans)}


def _beam_row(*spans: str) -> dict[int, float]:
    # Rows shorter than the bucket list have no entry at the wider buckets.
    return {b: ft_in(v) for b, v in zip(TRIBUTARY_BUCKETS, spans)}


# --- Joists: size -> spacing (in) -> allowable span (ft) ---

_JOISTS_DF_HF_SPF = {
    "2x6": _joist_row("9-6", "8-4", "6-10"),
    "2x8": _joist_row("12-6", "11-1", "9-1"),
    "2x10": _joist_row("15-8", "13-7", "11-1"),
    "2x12": _joist_row("18-0", "15-9", "12-10"),
}

_JOISTS_SOUTHERN_PINE = {
    "2x6": _joist_row("9-11", "9-0", "7-7"),
    "2x8": _joist_row("13-1", "11-10", "9-8"),
    "2x10": _joist_row("16-2", "14-0", "11-5"),
    "2x12": _joist_row("18-0", "16-6", "13-6"),
}

# --- Beams: label -> tributary bucket (ft) -> allowable span (ft) ---
#                                 6      7      8      9      10     11     12     14     16     18     20
_BEAMS_DF_HF_SPF = {
    "(2)2x8": _beam_row("9-0", "8-4", "7-10", "7-4", "7-0", "6-8", "6-4", "5-11", "5-6", "5-2", "4-11"),
    "(3)2x8": _beam_row("11-2", "10-4", "9-8", "9-1", "8-8", "8-3", "7-11", "7-4", "6-10", "6-6", "6-2"),
    "(2)2x10": _beam_row("11-6", "10-8", "10-0", "9-5", "8-11", "8-6", "8-2", "7-6", "7-0", "6-8", "6-4"),
    "(3)2x10": _beam_row("14-4", "13-3", "12-5", "11-9", "11-1", "10-7", "10-2", "9-5", "8-9", "8-3", "7-10"),
    "(2)2x12": _beam_row("13-6", "12-6", "11-8", "11-0", "10-5", "9-11", "9-6", "8-10", "8-3", "7-9", "7-4"),
    "(3)2x12": _beam_row("16-10", "15-7", "14-7", "13-9", "13-0", "12-5", "11-11", "11-0", "10-4", "9-8", "9-2"),
    "(1)2x8": _beam_row("6-6", "6-0", "5-8", "5-4", "5-0", "4-9", "4-6"),
    "(1)2x10": _beam_row("8-0", "7-5", "6-11", "6-6", "6-2", "5-10", "5-7"),
    "(1)2x12": _beam_row("9-4", "8-7", "8-0", "7-7", "7-2", "6-10", "6-6"),
}

_BEAMS_SOUTHERN_PINE = {
    "(2)2x8": _beam_row("9-5", "8-9", "8-2", "7-8", "7-4", "7-0", "6-8", "6-2", "5-9", "5-5", "5-2"),
    "(3)2x8": _beam_row("11-8", "10-10", "10-1", "9-6", "9-1", "8-8", "8-3", "7-8", "7-2", "6-9", "6-5"),
    "(2)2x10": _beam_row("12-1", "11-2", "10-6", "9-11", "9-4", "8-11", "8-7", "7-11", "7-4", "7-0", "6-8"),
    "(3)2x10": _beam_row("15-0", "13-11", "13-0", "12-4", "11-8", "11-1", "10-8", "9-10", "9-2", "8-8", "8-3"),
    "(2)2x12": _beam_row("14-2", "13-1", "12-3", "11-7", "10-11", "10-5", "10-0", "9-3", "8-8", "8-2", "7-9"),
    "(3)2x12": _beam_row("17-8", "16-4", "15-4", "14-5", "13-8", "13-0", "12-6", "11-7", "10-10", "10-2", "9-8"),
    "(1)2x8": _beam_row("6-10", "6-4", "5-11", "5-7", "5-3", "5-0", "4-9"),
    "(1)2x10": _beam_row("8-5", "7-9", "7-3", "6-10", "6-6", "6-2", "5-11"),
    "(1)2x12": _beam_row("9-10", "9-1", "8-5", "8-0", "7-6", "7-2", "6-10"),
}

# Douglas fir-larch, hem-fir and spruce-pine-fir share one IRC column.
JOIST_SPANS = {
    "SPF #2": _JOISTS_DF_HF_SPF,
    "DF #1": _JOISTS_DF_HF_SPF,
    "HF #2": _JOISTS_DF_HF_SPF,
    "SP #2": _JOISTS_SOUTHERN_PINE,
}

BEAM_SPANS = {
    "SPF #2": _BEAMS_DF_HF_SPF,
    "DF #1": _BEAMS_DF_HF_SPF,
    "HF #2": _BEAMS_DF_HF_SPF,
    "SP #2": _BEAMS_SOUTHERN_PINE,
}

# Maximum joist spacing (in) when decking runs perpendicular to the joists.
DECKING_SPACING = {
    "composite_1in": 16,
    "wood_5/4": 16,
    "wood_2x": 24,
}
