"""Runtime configuration for the Streamlit app.

• CALORIE_BOARD_TITLE         – browser tab / page title.
• CALORIE_BOARD_CATALOG_FILE  – optional JSON catalog replacing the built-in lists.
• CALORIE_BOARD_LOG_LEVEL     – root logging level used by the entry script.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv  # type: ignore

# Load variables from .env if present
load_dotenv()


def _optional_path(value: str | None) -> Optional[Path]:
    if not value:
        return None
    return Path(value).expanduser()


@dataclass(frozen=True)
class AppSettings:
    """Immutable container for runtime parameters."""

    # --- Page ---------------------------------------------------------------
    page_title: str = os.getenv("CALORIE_BOARD_TITLE", "Calorie Board")

    # --- Data ---------------------------------------------------------------
    catalog_file: Optional[Path] = _optional_path(os.getenv("CALORIE_BOARD_CATALOG_FILE"))

    # --- Logging ------------------------------------------------------------
    log_level: str = os.getenv("CALORIE_BOARD_LOG_LEVEL", "INFO").upper()


# Singleton used by most callers
SETTINGS = AppSettings()


def update_from_kwargs(**overrides) -> AppSettings:
    """Return a new AppSettings with supplied overrides."""

    return AppSettings(
        page_title=overrides.get("page_title", SETTINGS.page_title),
        catalog_file=overrides.get("catalog_file", SETTINGS.catalog_file),
        log_level=overrides.get("log_level", SETTINGS.log_level).upper(),
    )


def load_settings() -> AppSettings:
    """Re-read the environment and return fresh settings.

    The entry script calls this on every rerun, so variables exported after
    import time are honoured.
    """
    load_dotenv(override=False)
    return update_from_kwargs(
        page_title=os.getenv("CALORIE_BOARD_TITLE", "Calorie Board"),
        catalog_file=_optional_path(os.getenv("CALORIE_BOARD_CATALOG_FILE")),
        log_level=os.getenv("CALORIE_BOARD_LOG_LEVEL", "INFO"),
    )
