"""아이템 정의 저장소: 명시적 생성/주입, 시작 시 등록 + JSON 시드 로드"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes

from .models import ItemDefinition, OnUseHook, TextHook

logger = logging.getLogger(__name__)

INVALID_ITEM_NAME = "Invalid Item"


class ItemRegistry:
    """
    아이템 정의 카탈로그.
    프로세스 전역 상태가 아니라 인스턴스로 만들어 원장에 주입한다.
    등록은 시작 단계에서만, 등록된 정의는 수정/삭제 불가.
    """

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self._bus = event_bus
        self._items: dict[str, ItemDefinition] = {}

    def register(
        self,
        key: str,
        name: str,
        description: str,
        on_use: Optional[OnUseHook] = None,
        name_func: Optional[TextHook] = None,
        desc_func: Optional[TextHook] = None,
    ) -> Optional[ItemDefinition]:
        """아이템 정의 등록. 잘못된 입력/중복 key면 에러 로그 후 None.

        거부 시 저장소 상태는 그대로. 성공 시 item_defined 발행.
        """
        if not isinstance(key, str) or len(key) < 1:
            logger.error("register: key was not a string/was an empty string.")
            return None
        if not isinstance(name, str) or len(name) < 1:
            logger.error(
                "register: name was not a string/was an empty string. (%s)", key
            )
            return None
        if not isinstance(description, str):
            logger.error("register: description was not a string. (%s)", key)
            return None
        if key in self._items:
            logger.error("register: item (%s) already exists.", key)
            return None

        definition = ItemDefinition(
            key=key,
            name=name,
            description=description,
            on_use=on_use,
            name_func=name_func,
            desc_func=desc_func,
        )
        self._items[key] = definition
        logger.debug("Registered item %s (%s)", key, name)

        if self._bus is not None:
            self._bus.emit(
                GameEvent(
                    event_type=EventTypes.ITEM_DEFINED,
                    data={"key": key, "name": name, "description": description},
                    source="item_registry",
                )
            )
        return definition

    def load_from_json(self, path: str | Path) -> int:
        """seed_items.json 로드. 반환: 등록된 수량.

        JSON 배열의 각 객체 {key, name, description}를 훅 없이 등록.
        형식이 틀린 항목은 경고 후 건너뛴다. 중복 key는 register가 거부.
        """
        path = Path(path)
        with path.open("r", encoding="utf-8") as f:
            raw_list: list[dict[str, Any]] = json.load(f)

        count = 0
        for raw in raw_list:
            try:
                definition = self.register(
                    raw["key"],
                    raw["name"],
                    raw.get("description", ""),
                )
            except (KeyError, TypeError) as e:
                logger.warning("Failed to load item definition: %r (%s)", raw, e)
                continue
            if definition is not None:
                count += 1

        logger.info("Loaded %d item definitions from %s", count, path)
        return count

    def exists(self, key: str) -> bool:
        return key in self._items

    def lookup(self, key: str) -> Optional[ItemDefinition]:
        """O(1) 조회. 없으면 None."""
        return self._items.get(key)

    def list_keys(self) -> list[str]:
        """등록 순서대로 전체 key."""
        return list(self._items)

    def get_all(self) -> list[ItemDefinition]:
        return list(self._items.values())

    def count(self) -> int:
        return len(self._items)

    def display_name(self, key: str, data: Any = None) -> str:
        """name_func가 있으면 data로 계산, 없으면 기본 name.
        미등록 key는 "Invalid Item".
        """
        definition = self._items.get(key)
        if definition is None:
            return INVALID_ITEM_NAME
        if definition.has_name_func:
            return definition.name_func(data)
        return definition.name

    def display_description(self, key: str, data: Any = None) -> str:
        """name과 같은 규칙. 미등록 key는 빈 문자열."""
        definition = self._items.get(key)
        if definition is None:
            return ""
        if definition.has_desc_func:
            return definition.desc_func(data)
        return definition.description
