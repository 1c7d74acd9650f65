"""Shared test fixtures for Calorie Board."""

from __future__ import annotations

from pathlib import Path

import pytest

APP_PATH = Path(__file__).resolve().parent.parent / "streamlit_app.py"


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # A developer's .env must not leak back in through load_dotenv()
    monkeypatch.setattr("calorie_board.config.settings.load_dotenv", lambda *a, **kw: False)
    for var in ("CALORIE_BOARD_TITLE", "CALORIE_BOARD_CATALOG_FILE", "CALORIE_BOARD_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def app_path() -> str:
    return str(APP_PATH)
