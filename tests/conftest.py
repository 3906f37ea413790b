from collections.abc import Iterator

import pytest

from fitcalc.core.config import get_settings


@pytest.fixture(autouse=True)
def _env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("LOG_JSON", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
