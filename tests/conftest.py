"""Shared test fixtures."""

from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api.health import router as health_router
from src.api.inventory import router as inventory_router
from src.api.items import router as items_router
from src.core.event_bus import EventBus, GameEvent
from src.core.item.inventory import InventoryLedger
from src.core.item.registry import ItemRegistry

SEED_ITEMS_PATH = Path("src/data/seed_items.json")


class EventRecorder:
    """버스에 흘러간 이벤트를 순서대로 기록"""

    def __init__(self, bus: EventBus, *event_types: str) -> None:
        self.events: list[GameEvent] = []
        for event_type in event_types:
            bus.subscribe(event_type, self.events.append)

    @property
    def types(self) -> list[str]:
        return [e.event_type for e in self.events]

    def of(self, event_type: str) -> list[GameEvent]:
        return [e for e in self.events if e.event_type == event_type]


@pytest.fixture()
def bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def registry(bus: EventBus) -> ItemRegistry:
    """medkit/ammo가 등록된 레지스트리"""
    reg = ItemRegistry(bus)
    reg.register("item_medkit", "Medkit", "Heals 10 HP")
    reg.register("item_ammo", "Ammo", "9mm rounds")
    return reg


@pytest.fixture()
def ledger(registry: ItemRegistry, bus: EventBus) -> InventoryLedger:
    """p1이 입장한 원장"""
    led = InventoryLedger(registry, bus)
    led.join("p1")
    return led


@pytest.fixture()
def app(bus: EventBus) -> FastAPI:
    """시드 카탈로그 + 원장이 붙은 테스트용 앱"""
    registry = ItemRegistry(bus)
    registry.load_from_json(SEED_ITEMS_PATH)

    test_app = FastAPI()
    test_app.include_router(health_router)
    test_app.include_router(items_router)
    test_app.include_router(inventory_router)
    test_app.state.event_bus = bus
    test_app.state.registry = registry
    test_app.state.ledger = InventoryLedger(registry, bus)
    return test_app


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    """FastAPI TestClient wired to an in-memory ledger."""
    return TestClient(app)


@pytest.fixture()
def record(bus: EventBus):
    """record(*event_types) → 이후 발행되는 이벤트를 기록하는 EventRecorder"""

    def _record(*event_types: str) -> EventRecorder:
        return EventRecorder(bus, *event_types)

    return _record
