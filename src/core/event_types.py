"""이벤트 유형 상수

payload 키 순서도 계약의 일부다.
"""


class EventTypes:
    """이벤트 유형 문자열 상수"""

    # registry
    ITEM_DEFINED = "item_defined"  # key, name, description

    # inventory ledger
    ITEM_ADDED = "item_added"  # actor_id, key, amount, data
    ITEM_USED = "item_used"  # actor_id, index, key, data
    ITEM_REMOVED = "item_removed"  # actor_id, index, key, amount, data
    ITEM_REMOVED_COMPLETELY = "item_removed_completely"  # actor_id, key, data
    INVENTORY_REPLACED = "inventory_replaced"  # actor_id, old, new

    # host (구독 전용)
    ACTOR_JOINED = "actor_joined"  # actor_id
