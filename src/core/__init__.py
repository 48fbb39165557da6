"""Item Ledger Core"""
__version__ = "0.1.0"

from src.core.event_bus import EventBus, GameEvent
from src.core.event_types import EventTypes

__all__ = [
    "EventBus",
    "GameEvent",
    "EventTypes",
]
