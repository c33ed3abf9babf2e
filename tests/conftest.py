from pathlib import Path
from typing import Generator

import pytest

from daterange.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> Generator[None, None, None]:
    """
    Test fixture for isolating settings from the environment.
    Settings cache is cleared before and after use.
    """
    monkeypatch.delenv("DATERANGE_LOG_LEVEL", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
