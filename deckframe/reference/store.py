"""Reference data store: immutable tables injected into every selector.

The defaults are built once from the module-level tables. Tests and callers
that need different tables build their own ``ReferenceData`` (or
``replace(...)`` the default) and pass it in; engine code never
reaches for module globals directly.
"""

from __future__ import annotations
from collections.abc import Mapping
from functools import lru_cache
from types import MappingProxyType
from typing import Any
from pydantic import BaseModel, ConfigDict, field_validator

from deckframe.core.errors import species_unknown

from . import materials, spans


class LumberSize(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    cost_per_foot: float
    width_in: float
    depth_in: float

    @property
    def nominal(self) -> tuple[int, int]:
        """Nominal dimensions, e.g. (2, 10) for "2x10"."""
        thickness, _, width = self.name.partition("x")
        return int(thickness), int(width)


class HardwareItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    cost: float
    description: str = ""


class SpeciesGrade(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    cost_multiplier: float = 1.0


class DeckingSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    max_perpendicular_spacing_in: int


def _freeze(value: Any) -> Any:
    """Read-only view of a nested table: mappings become proxies, lists tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


class ReferenceData(BaseModel):
    """
    All span tables and unit costs the engine reads.

    Read-only all the way down: the nested tables are frozen on validation,
    so a shared instance cannot be altered through its lookups.
    """
    model_config = ConfigDict(frozen=True)

    joist_spans: Mapping[str, Mapping[str, Mapping[int, float]]]
    beam_spans: Mapping[str, Mapping[str, Mapping[int, float]]]
    decking: Mapping[str, DeckingSpec]
    lumber: Mapping[str, LumberSize]
    hardware: Mapping[str, HardwareItem]
    species: Mapping[str, SpeciesGrade]
    footing_costs: Mapping[str, float]
    standard_lengths: Mapping[str, tuple[int, ...]]

    tributary_buckets: tuple[int, ...] = spans.TRIBUTARY_BUCKETS
    joist_spacings: tuple[int, ...] = spans.JOIST_SPACINGS_IN
    joist_sizes: tuple[str, ...] = spans.JOIST_SIZES
    beam_configurations: tuple[str, ...] = spans.BEAM_CONFIGURATIONS
    post_size: str = "6x6"
    post_base: str = "PB66"
    post_cap: str = "PCZ66"

    @field_validator(
        "joist_spans", "beam_spans", "decking", "lumber", "hardware", "species",
        "footing_costs", "standard_lengths",
    )
    @classmethod
    def _freeze_tables(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return _freeze(value)

    def replace(self, **tables: Any) -> ReferenceData:
        """Copy with some tables swapped out; the new tables are frozen too."""
        return ReferenceData.model_validate({**dict(self), **tables})

    # --- Lookups ---

    def joist_table(self, species: str) -> Mapping[str, Mapping[int, float]]:
        table = self.joist_spans.get(species)
        if table is None:
            raise species_unknown(species, "joist")
        return table

    def beam_table(self, species: str) -> Mapping[str, Mapping[int, float]]:
        table = self.beam_spans.get(species)
        if table is None:
            raise species_unknown(species, "beam")
        return table

    def max_joist_spacing(self, decking: str) -> int:
        return self.decking[decking].max_perpendicular_spacing_in

    def cost_per_foot(self, size: str) -> float:
        return self.lumber[size].cost_per_foot

    def hardware_cost(self, code: str) -> float:
        return self.hardware[code].cost

    def species_multiplier(self, species: str) -> float:
        grade = self.species.get(species)
        return grade.cost_multiplier if grade is not None else 1.0

    def tributary_bucket(self, tributary_ft: float) -> int:
        """Round up to the next table bucket, capping at the widest one."""
        for bucket in self.tributary_buckets:
            if bucket >= tributary_ft:
                return bucket
        return self.tributary_buckets[-1]

    def stock_length(self, required_ft: float, size: str) -> int:
        """Shortest stock length covering required_ft (longest if none does)."""
        lengths = self.standard_lengths[size]
        for length in lengths:
            if length >= required_ft:
                return length
        return lengths[-1]

    def board_feet(self, size: str, length_ft: float) -> float:
        thickness, width = self.lumber[size].nominal
        return thickness * width * length_ft / 12

    def species_names(self) -> list[str]:
        return sorted(set(self.joist_spans) & set(self.beam_spans))


def build_reference() -> ReferenceData:
    """Assemble ReferenceData from the bundled IRC tables and price list."""
    return ReferenceData(
        joist_spans=spans.JOIST_SPANS,
        beam_spans=spans.BEAM_SPANS,
        decking={
            name: DeckingSpec(name=name, max_perpendicular_spacing_in=spacing)
            for name, spacing in spans.DECKING_SPACING.items()
        },
        lumber={
            name: LumberSize(name=name, cost_per_foot=cost, width_in=w, depth_in=d)
            for name, (cost, w, d) in materials.LUMBER.items()
        },
        hardware={
            code: HardwareItem(code=code, cost=cost, description=desc)
            for code, (cost, desc) in materials.HARDWARE.items()
        },
        species={
            name: SpeciesGrade(name=name, cost_multiplier=mult)
            for name, mult in materials.SPECIES_MULTIPLIERS.items()
        },
        footing_costs=materials.FOOTING_COSTS,
        standard_lengths=materials.STANDARD_LENGTHS,
    )


@lru_cache(maxsize=1)
def default_reference() -> ReferenceData:
    return build_reference()
