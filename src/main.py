"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from src.api.health import router as health_router
from src.api.inventory import router as inventory_router
from src.api.items import router as items_router
from src.config import settings
from src.core.event_bus import EventBus
from src.core.item.inventory import InventoryLedger
from src.core.item.registry import ItemRegistry
from src.core.logging import get_logger, setup_logging

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    event_bus = EventBus()
    app.state.event_bus = event_bus

    # 등록 단계: 시작 시에만 카탈로그를 채운다
    logger.info("Initializing ItemRegistry...")
    registry = ItemRegistry(event_bus)
    count = registry.load_from_json(settings.ITEM_SEED_PATH)
    app.state.registry = registry
    logger.info(f"ItemRegistry initialized ({count} items).")

    app.state.ledger = InventoryLedger(registry, event_bus)
    logger.info("InventoryLedger initialized.")

    yield

    logger.info("Shutting down...")
    event_bus.clear()


app = FastAPI(title="Item Ledger", debug=settings.DEBUG, lifespan=lifespan)

app.include_router(health_router)
app.include_router(items_router)
app.include_router(inventory_router)
