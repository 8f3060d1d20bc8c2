from .store import (
    ReferenceData, LumberSize, HardwareItem, SpeciesGrade, DeckingSpec,
    build_reference, default_reference,
)
from .spans import ft_in, TRIBUTARY_BUCKETS, BEAM_CONFIGURATIONS

__all__ = [
    "ReferenceData", "LumberSize", "HardwareItem", "SpeciesGrade", "DeckingSpec",
    "build_reference", "default_reference",
    "ft_in", "TRIBUTARY_BUCKETS", "BEAM_CONFIGURATIONS",
]
