"""Actor inventory endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.items import get_registry
from src.api.schemas import (
    ActionResponse,
    ErrorResponse,
    GiveRequest,
    InventoryResponse,
    RemoveRequest,
    ReplaceRequest,
    StackInfo,
    UseRequest,
)
from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes
from src.core.item.inventory import InventoryLedger
from src.core.item.registry import ItemRegistry
from src.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/actors", tags=["inventory"])

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


def get_ledger(request: Request) -> InventoryLedger:
    """InventoryLedger 인스턴스 반환 (의존성 주입)"""
    ledger: InventoryLedger = request.app.state.ledger
    return ledger


def get_event_bus(request: Request) -> EventBus:
    """EventBus 인스턴스 반환 (의존성 주입)"""
    bus: EventBus = request.app.state.event_bus
    return bus


def _build_inventory_response(
    actor_id: str, ledger: InventoryLedger, registry: ItemRegistry
) -> InventoryResponse:
    """원장의 스택 시퀀스를 InventoryResponse로 변환"""
    stacks = ledger.get_inventory(actor_id) or []
    return InventoryResponse(
        actor_id=actor_id,
        stacks=[
            StackInfo(
                index=idx,
                key=s.key,
                amount=s.amount,
                data=s.data,
                name=registry.display_name(s.key, s.data),
                description=registry.display_description(s.key, s.data),
            )
            for idx, s in enumerate(stacks)
        ],
        total_amount=ledger.total_amount(actor_id),
    )


def _require_actor(actor_id: str, ledger: InventoryLedger) -> None:
    if not ledger.has_actor(actor_id):
        raise HTTPException(status_code=404, detail=f"Actor not found: {actor_id}")


@router.post("/{actor_id}/join", response_model=InventoryResponse)
def join_actor(
    actor_id: str,
    ledger: InventoryLedger = Depends(get_ledger),
    registry: ItemRegistry = Depends(get_registry),
    bus: EventBus = Depends(get_event_bus),
) -> InventoryResponse:
    """
    액터 입장

    actor_joined 이벤트를 발행하고, 원장이 빈 인벤토리를 만든다.
    """
    bus.emit(
        GameEvent(
            event_type=EventTypes.ACTOR_JOINED,
            data={"actor_id": actor_id},
            source="api",
        )
    )
    logger.info("Actor joined: %s", actor_id)
    return _build_inventory_response(actor_id, ledger, registry)


@router.get(
    "/{actor_id}/inventory",
    response_model=InventoryResponse,
    responses={404: {"model": ErrorResponse}},
)
def get_inventory(
    actor_id: str,
    ledger: InventoryLedger = Depends(get_ledger),
    registry: ItemRegistry = Depends(get_registry),
) -> InventoryResponse:
    """현재 인벤토리 조회"""
    _require_actor(actor_id, ledger)
    return _build_inventory_response(actor_id, ledger, registry)


@router.post(
    "/{actor_id}/inventory/give",
    response_model=ActionResponse,
    responses=_ERROR_RESPONSES,
)
def give_item(
    actor_id: str,
    request: GiveRequest,
    ledger: InventoryLedger = Depends(get_ledger),
    registry: ItemRegistry = Depends(get_registry),
) -> ActionResponse:
    """아이템 지급. 미등록 key나 양수가 아닌 수량은 400."""
    _require_actor(actor_id, ledger)
    if not ledger.give(actor_id, request.key, request.amount, request.data):
        raise HTTPException(
            status_code=400,
            detail=f"Cannot give {request.amount} x {request.key}",
        )
    return ActionResponse(
        success=True,
        action="give",
        message=f"{registry.display_name(request.key, request.data)} x{request.amount}",
        inventory=_build_inventory_response(actor_id, ledger, registry),
    )


@router.post(
    "/{actor_id}/inventory/use",
    response_model=ActionResponse,
    responses=_ERROR_RESPONSES,
)
def use_item(
    actor_id: str,
    request: UseRequest,
    ledger: InventoryLedger = Depends(get_ledger),
    registry: ItemRegistry = Depends(get_registry),
) -> ActionResponse:
    """스택 사용. 소비 여부는 아이템의 on_use 훅이 결정한다."""
    _require_actor(actor_id, ledger)
    inventory = ledger.get_inventory(actor_id) or []
    if not 0 <= request.index < len(inventory):
        raise HTTPException(status_code=400, detail=f"No item at index {request.index}")

    stack = inventory[request.index]
    name = registry.display_name(stack.key, stack.data)
    if not ledger.use_at(actor_id, request.index):
        raise HTTPException(status_code=400, detail=f"Cannot use {name}")
    return ActionResponse(
        success=True,
        action="use",
        message=f"Used {name}",
        inventory=_build_inventory_response(actor_id, ledger, registry),
    )


@router.post(
    "/{actor_id}/inventory/remove",
    response_model=ActionResponse,
    responses=_ERROR_RESPONSES,
)
def remove_item(
    actor_id: str,
    request: RemoveRequest,
    ledger: InventoryLedger = Depends(get_ledger),
    registry: ItemRegistry = Depends(get_registry),
) -> ActionResponse:
    """스택에서 수량 제거. 0 이하가 되면 스택 삭제."""
    _require_actor(actor_id, ledger)
    if not ledger.remove_at(actor_id, request.index, request.amount):
        raise HTTPException(
            status_code=400,
            detail=f"Cannot remove {request.amount} at index {request.index}",
        )
    return ActionResponse(
        success=True,
        action="remove",
        message=f"Removed {request.amount} at index {request.index}",
        inventory=_build_inventory_response(actor_id, ledger, registry),
    )


@router.put(
    "/{actor_id}/inventory",
    response_model=ActionResponse,
    responses={400: {"model": ErrorResponse}},
)
def replace_inventory(
    actor_id: str,
    request: ReplaceRequest,
    ledger: InventoryLedger = Depends(get_ledger),
    registry: ItemRegistry = Depends(get_registry),
) -> ActionResponse:
    """인벤토리 일괄 교체 (외부 저장소에서 로드한 값 등)"""
    stacks = [s.model_dump() for s in request.stacks]
    if not ledger.replace_inventory(actor_id, stacks):
        raise HTTPException(status_code=400, detail="Invalid inventory payload")
    logger.info("Inventory replaced: %s (%d stacks)", actor_id, len(stacks))
    return ActionResponse(
        success=True,
        action="replace",
        message=f"{len(stacks)} stacks loaded",
        inventory=_build_inventory_response(actor_id, ledger, registry),
    )
