"""Item catalog endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.schemas import ErrorResponse, ItemInfo, ItemListResponse
from src.core.item.models import ItemDefinition
from src.core.item.registry import ItemRegistry

router = APIRouter(prefix="/items", tags=["items"])


def get_registry(request: Request) -> ItemRegistry:
    """ItemRegistry 인스턴스 반환 (의존성 주입)"""
    registry: ItemRegistry = request.app.state.registry
    return registry


def _build_item_info(definition: ItemDefinition) -> ItemInfo:
    """ItemDefinition을 ItemInfo로 변환"""
    return ItemInfo(
        key=definition.key,
        name=definition.name,
        description=definition.description,
        usable=definition.has_on_use,
    )


@router.get("", response_model=ItemListResponse)
def list_items(registry: ItemRegistry = Depends(get_registry)) -> ItemListResponse:
    """등록 순서대로 전체 아이템 정의"""
    return ItemListResponse(
        items=[_build_item_info(d) for d in registry.get_all()],
    )


@router.get(
    "/{key}",
    response_model=ItemInfo,
    responses={404: {"model": ErrorResponse}},
)
def get_item(key: str, registry: ItemRegistry = Depends(get_registry)) -> ItemInfo:
    """아이템 정의 단건 조회"""
    definition = registry.lookup(key)
    if definition is None:
        raise HTTPException(status_code=404, detail=f"Item not found: {key}")
    return _build_item_info(definition)
