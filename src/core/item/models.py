"""아이템 도메인 모델 (전송/저장 무관)"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

# on_use(actor_id, index, key, data)
OnUseHook = Callable[[str, int, str, Any], None]
# name_func(data) / desc_func(data)
TextHook = Callable[[Any], str]


@dataclass(frozen=True)
class ItemDefinition:
    """아이템 정의: 불변. 등록 후 수정/삭제 없음."""

    key: str  # "item_medkit"
    name: str  # "Medkit"
    description: str  # "Heals 10 HP"

    # 선택 훅 (None = 없음)
    on_use: Optional[OnUseHook] = None
    name_func: Optional[TextHook] = None
    desc_func: Optional[TextHook] = None

    @property
    def has_on_use(self) -> bool:
        return self.on_use is not None

    @property
    def has_name_func(self) -> bool:
        return self.name_func is not None

    @property
    def has_desc_func(self) -> bool:
        return self.desc_func is not None


def is_positive_int(value: Any) -> bool:
    """bool은 int 하위 타입이지만 수량으로 인정하지 않는다."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def data_equals(a: Any, b: Any) -> bool:
    """스택 data 구조 비교 (identity 아님).

    - dict: 키 집합 동일 + 값 재귀 비교
    - list/tuple: 길이 동일 + 원소 재귀 비교 (JSON 왕복 후에도 같은 스택)
    - 숫자: int/float는 값으로 비교 (100 == 100.0), bool은 숫자와 다름
    - __eq__가 없는 같은 타입 객체: 속성(vars) 재귀 비교
    - 그 외: 타입이 같고 == 성립
    - None == None
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b

    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        if isinstance(a, float) and isinstance(b, float):
            if math.isnan(a) and math.isnan(b):
                return True
        return a == b

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(data_equals(a[k], b[k]) for k in a)

    if isinstance(a, (list, tuple)) and isinstance(b, (list, tuple)):
        if len(a) != len(b):
            return False
        return all(data_equals(x, y) for x, y in zip(a, b))

    if type(a) is not type(b):
        return False

    if type(a).__eq__ is object.__eq__ and hasattr(a, "__dict__"):
        return a is b or data_equals(vars(a), vars(b))

    return a == b


@dataclass
class InventoryStack:
    """액터 인벤토리의 한 칸. key는 ItemDefinition 참조 (소유 아님)."""

    key: str
    amount: int  # 시퀀스 안에 있는 동안 항상 >= 1
    data: Any = None  # 같은 key를 별도 스택으로 나누는 속성 (내구도 등)

    def matches(self, key: str, data: Any = None) -> bool:
        return self.key == key and data_equals(self.data, data)

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "amount": self.amount, "data": self.data}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> InventoryStack:
        """외부 저장소 형식 → InventoryStack.

        key가 비었거나 amount가 양의 정수가 아니면 ValueError.
        key/amount 누락 시 KeyError.
        """
        key = raw["key"]
        amount = raw["amount"]
        if not isinstance(key, str) or not key:
            raise ValueError(f"Invalid stack key: {key!r}")
        if not is_positive_int(amount):
            raise ValueError(f"Invalid stack amount: {amount!r} ({key})")
        return cls(key=key, amount=amount, data=raw.get("data"))
