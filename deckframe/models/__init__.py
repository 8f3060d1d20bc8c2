from .geometry import PlanPoint, Footprint
from .deck import Attachment, FootingType, BeamPosition, BeamStyle, DeckingType
from .parameters import StructuralContext, DeckPayload, ComplianceLimits
from .framing import (
    JoistConfig, BeamConfig, LedgerConfig, BeamSet, PostConfig,
    MaterialItem, StructureMetrics, ComplianceReport, StructuralResult,
    STORAGE_KEY,
)
from .context import ComplianceContext

__all__ = [
    "PlanPoint", "Footprint",
    "Attachment", "FootingType", "BeamPosition", "BeamStyle", "DeckingType",
    "StructuralContext", "DeckPayload", "ComplianceLimits",
    "JoistConfig", "BeamConfig", "LedgerConfig", "BeamSet", "PostConfig",
    "MaterialItem", "StructureMetrics", "ComplianceReport", "StructuralResult",
    "STORAGE_KEY",
    "ComplianceContext",
]
