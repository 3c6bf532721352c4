"""Test configuration and fixtures for DrinkList."""
import pytest

from drinklist.config.settings import clear_settings_cache
from drinklist.domain.types import Draft, DrinkCategory
from drinklist.services.drink_store import DrinkListStore


@pytest.fixture
def clean_settings(monkeypatch):
    """Drop cached settings before and after a test that sets env vars."""
    for key in ("DRINKLIST_WARNING_THRESHOLDS", "DRINKLIST_TOTAL_PRECISION", "DRINKLIST_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    clear_settings_cache()
    yield monkeypatch
    clear_settings_cache()


@pytest.fixture
def store() -> DrinkListStore:
    """Create an empty store with the default thresholds."""
    return DrinkListStore(thresholds=(10, 20), precision=2)


@pytest.fixture
def lager() -> Draft:
    """Draft for half a litre of beer."""
    return Draft(
        name="Lager",
        category=DrinkCategory.BEER,
        percentage="5",
        volume_ml="500"
    )


@pytest.fixture
def shot() -> Draft:
    """Draft for a vodka shot."""
    return Draft(
        name="Shot",
        category=DrinkCategory.VODKA,
        percentage="40",
        volume_ml="50"
    )


@pytest.fixture
def make_draft():
    """Build drafts with sensible defaults."""
    def _make(name="Drink", category="", percentage="10", volume_ml="100", **kwargs):
        return Draft(
            name=name,
            category=category,
            percentage=percentage,
            volume_ml=volume_ml,
            **kwargs
        )
    return _make


@pytest.fixture
def fill_store(store, make_draft):
    """Add the given number of drinks to the store."""
    def _fill(count: int):
        for i in range(count):
            result = store.add(make_draft(name=f"Drink {i}"))
            assert result.success
        return store
    return _fill
