"""Health check endpoint."""

from fastapi import APIRouter, Depends

from src.api.items import get_registry
from src.core.item.registry import ItemRegistry

router = APIRouter()


@router.get("/health")
def health_check(registry: ItemRegistry = Depends(get_registry)) -> dict[str, str | int]:
    """Return application status and catalog size."""
    return {"status": "ok", "items": registry.count()}
