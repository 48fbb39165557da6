"""아이템 레지스트리 + 인벤토리 원장 Core: 순수 Python, 전송/저장 무관"""

from .models import ItemDefinition, InventoryStack, data_equals
from .registry import INVALID_ITEM_NAME, ItemRegistry
from .inventory import InventoryLedger

__all__ = [
    "ItemDefinition",
    "InventoryStack",
    "data_equals",
    "INVALID_ITEM_NAME",
    "ItemRegistry",
    "InventoryLedger",
]
