"""Settings 테스트"""

from src.config import Settings


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("ITEM_SEED_PATH", raising=False)
    settings = Settings(_env_file=None)
    assert settings.LOG_LEVEL == "INFO"
    assert settings.ITEM_SEED_PATH == "src/data/seed_items.json"


def test_env_override(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ITEM_SEED_PATH", "/tmp/items.json")
    settings = Settings(_env_file=None)
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.ITEM_SEED_PATH == "/tmp/items.json"
