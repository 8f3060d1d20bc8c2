"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from deckframe.models import DeckPayload, StructuralResult
from deckframe.services.structure_service import StructureService
from deckframe.api.schemas import DeckingInfo, ErrorResponse, RuleInfo, SpeciesInfo

router = APIRouter()

# Shared service instance
_service = StructureService()


@router.post(
    "/structure",
    response_model=StructuralResult,
    responses={422: {"model": ErrorResponse}},
)
async def compute_structure(payload: DeckPayload) -> StructuralResult:
    """Recommend joists, beams and posts for a rectangular deck."""
    return _service.compute(payload)


@router.get("/species", response_model=list[SpeciesInfo])
async def list_species() -> list[SpeciesInfo]:
    """List species/grades present in both span tables."""
    return [SpeciesInfo(**s) for s in _service.list_species()]


@router.get("/decking", response_model=list[DeckingInfo])
async def list_decking() -> list[DeckingInfo]:
    return [DeckingInfo(**d) for d in _service.list_decking()]


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all registered compliance rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
