"""액터별 인벤토리 원장

규칙:
- 모든 연산은 동기식, 실패는 False/-1/0 반환 (예외/로그 없음)
- 실패 시 부분 변경 없음
- 같은 스택 = key 동일 AND data 구조 동일 (data_equals)
- remove_at으로 스택이 사라지면 뒤 인덱스가 당겨진다. 인덱스를 들고 있는
  호출자는 다시 조회해야 한다
- use_at은 수량을 줄이지 않는다. 소비는 on_use 훅(또는 호출자)의 몫
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, Optional, Sequence

from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes
from src.core.logging import get_logger

from .models import InventoryStack, is_positive_int
from .registry import ItemRegistry

logger = get_logger(__name__)

SOURCE = "inventory_ledger"


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class InventoryLedger:
    """액터 ID → 스택 시퀀스 원장

    사용 패턴:
        ledger = InventoryLedger(registry, bus)
        ledger.join("p1")
        ledger.give("p1", "item_medkit", 2)
        ledger.use_at("p1", 0)
    """

    def __init__(
        self, registry: ItemRegistry, event_bus: Optional[EventBus] = None
    ) -> None:
        self._registry = registry
        self._bus = event_bus
        self._inventories: dict[str, list[InventoryStack]] = {}
        self._register_event_handlers()

    def _register_event_handlers(self) -> None:
        """EventBus 구독"""
        if self._bus is not None:
            self._bus.subscribe(EventTypes.ACTOR_JOINED, self._on_actor_joined)

    def _on_actor_joined(self, event: GameEvent) -> None:
        self.join(event.data["actor_id"])

    def _emit(self, event_type: str, data: dict[str, Any]) -> None:
        if self._bus is not None:
            self._bus.emit(GameEvent(event_type=event_type, data=data, source=SOURCE))

    # === 액터 생명주기 ===

    def join(self, actor_id: str) -> None:
        """액터 입장 시 빈 인벤토리로 초기화. 재입장도 빈 상태로 시작."""
        self._inventories[actor_id] = []
        logger.debug("Inventory initialized for actor %s", actor_id)

    def discard(self, actor_id: str) -> bool:
        """액터와 함께 인벤토리 폐기. 이벤트 없음."""
        return self._inventories.pop(actor_id, None) is not None

    def has_actor(self, actor_id: str) -> bool:
        return actor_id in self._inventories

    def get_inventory(self, actor_id: str) -> Optional[list[InventoryStack]]:
        """원장이 가진 시퀀스 그대로 반환. 없으면 None."""
        return self._inventories.get(actor_id)

    def actor_ids(self) -> list[str]:
        return list(self._inventories)

    # === 조회 ===

    def has_item(self, actor_id: str, key: str) -> bool:
        return self.index_of(actor_id, key) != -1

    def has_item_with_data(self, actor_id: str, key: str, data: Any) -> bool:
        return self.index_of_with_data(actor_id, key, data) != -1

    def index_of(self, actor_id: str, key: str) -> int:
        """key만 비교한 첫 스택 인덱스. 없으면 -1."""
        for idx, stack in enumerate(self._inventories.get(actor_id, ())):
            if stack.key == key:
                return idx
        return -1

    def index_of_with_data(self, actor_id: str, key: str, data: Any) -> int:
        """key + data 구조 비교한 첫 스택 인덱스. 없으면 -1."""
        for idx, stack in enumerate(self._inventories.get(actor_id, ())):
            if stack.matches(key, data):
                return idx
        return -1

    def amount_of(self, actor_id: str, key: str) -> int:
        """data 무관, 같은 key 스택 수량 합계."""
        return sum(
            s.amount for s in self._inventories.get(actor_id, ()) if s.key == key
        )

    def amount_of_with_data(self, actor_id: str, key: str, data: Any) -> int:
        return sum(
            s.amount
            for s in self._inventories.get(actor_id, ())
            if s.matches(key, data)
        )

    def total_amount(self, actor_id: str) -> int:
        return sum(s.amount for s in self._inventories.get(actor_id, ()))

    # === 변경 ===

    def give(self, actor_id: str, key: str, amount: int, data: Any = None) -> bool:
        """아이템 지급. 같은 key+data 스택이 있으면 합치고 없으면 뒤에 추가.

        미등록 key, 양의 정수가 아닌 amount, 미입장 액터 → False.
        item_added 발행.
        """
        inventory = self._inventories.get(actor_id)
        if inventory is None:
            return False
        if not self._registry.exists(key) or not is_positive_int(amount):
            return False

        idx = self.index_of_with_data(actor_id, key, data)
        if idx != -1:
            inventory[idx].amount += amount
        else:
            inventory.append(
                InventoryStack(key=key, amount=amount, data=copy.deepcopy(data))
            )

        self._emit(
            EventTypes.ITEM_ADDED,
            {"actor_id": actor_id, "key": key, "amount": amount, "data": data},
        )
        return True

    def use_at(self, actor_id: str, index: int) -> bool:
        """index 스택 사용. item_used 발행 후 on_use 훅 호출.

        훅은 동기 실행되며, 훅 안에서 remove_at을 부르는 것이 소비 패턴이다.
        훅의 효과는 이 메서드가 반환되기 전에 반영된다.
        """
        inventory = self._inventories.get(actor_id)
        if inventory is None or not _is_index(index) or index >= len(inventory):
            return False

        stack = inventory[index]
        key, data = stack.key, stack.data

        self._emit(
            EventTypes.ITEM_USED,
            {"actor_id": actor_id, "index": index, "key": key, "data": data},
        )

        definition = self._registry.lookup(key)
        if definition is not None and definition.has_on_use:
            definition.on_use(actor_id, index, key, data)
        return True

    def remove_at(self, actor_id: str, index: int, amount: int = 1) -> bool:
        """index 스택에서 amount만큼 제거. 보유량보다 많아도 그대로 뺀다.

        item_removed 발행. 남은 수량이 1 미만이면 스택 삭제 후
        item_removed_completely 추가 발행.
        """
        inventory = self._inventories.get(actor_id)
        if inventory is None or not _is_index(index) or index >= len(inventory):
            return False
        if not is_positive_int(amount):
            return False

        stack = inventory[index]
        stack.amount -= amount
        depleted = stack.amount < 1
        # 구독자가 0 이하 스택을 보지 않도록 발행 전에 삭제
        if depleted:
            del inventory[index]

        self._emit(
            EventTypes.ITEM_REMOVED,
            {
                "actor_id": actor_id,
                "index": index,
                "key": stack.key,
                "amount": amount,
                "data": stack.data,
            },
        )
        if depleted:
            self._emit(
                EventTypes.ITEM_REMOVED_COMPLETELY,
                {"actor_id": actor_id, "key": stack.key, "data": stack.data},
            )
        return True

    def replace_inventory(
        self, actor_id: str, new_sequence: Sequence[InventoryStack | Mapping[str, Any]]
    ) -> bool:
        """인벤토리 통째 교체 (저장소에서 일괄 로드 등).

        list/tuple만 허용. 원소는 InventoryStack 또는 {key, amount, data} 매핑.
        원소는 복사해 저장하므로 호출자가 넘긴 객체와 공유하지 않는다.
        하나라도 잘못되면 False, 기존 인벤토리 유지.
        inventory_replaced 발행 (old, new).
        """
        if not isinstance(new_sequence, (list, tuple)):
            return False

        stacks: list[InventoryStack] = []
        for item in new_sequence:
            if isinstance(item, InventoryStack):
                if not isinstance(item.key, str) or not item.key:
                    return False
                if not is_positive_int(item.amount):
                    return False
                stacks.append(
                    InventoryStack(item.key, item.amount, copy.deepcopy(item.data))
                )
            elif isinstance(item, Mapping):
                try:
                    loaded = InventoryStack.from_dict(item)
                    loaded.data = copy.deepcopy(loaded.data)
                    stacks.append(loaded)
                except (KeyError, ValueError):
                    return False
            else:
                return False

        old = self._inventories.get(actor_id)
        self._inventories[actor_id] = stacks

        self._emit(
            EventTypes.INVENTORY_REPLACED,
            {"actor_id": actor_id, "old": old, "new": stacks},
        )
        return True
