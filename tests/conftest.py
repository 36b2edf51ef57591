# tests/conftest.py
import pytest

from medtok.config import ENV_CONFIG_PATH, ENV_UNITS_LIST_PATH
from medtok.tokenization.units import reset_units_cache


@pytest.fixture(autouse=True)
def _isolated_units(monkeypatch):
    # Every test starts from the bundled unit list unless it sets an override itself.
    monkeypatch.delenv(ENV_UNITS_LIST_PATH, raising=False)
    monkeypatch.delenv(ENV_CONFIG_PATH, raising=False)
    reset_units_cache()
    yield
    reset_units_cache()
