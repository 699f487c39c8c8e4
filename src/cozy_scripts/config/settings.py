"""
Settings loading helpers.
"""

from __future__ import annotations

import os
from pathlib import Path
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field
from dotenv import load_dotenv


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Environment-driven settings.

    Attributes:
        log_level: Overrides the ``--log-level`` CLI option.
        webpack_bin: Bundler executable (or command) used by the build forwarder.
    """
    log_level: Optional[str] = Field(default=None, alias="COZY_LOG_LEVEL")
    webpack_bin: str = Field(default="webpack", alias="COZY_WEBPACK_BIN")

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from environment/.env exactly once.

    Returns:
        A Settings object populated from environment variables.
    """
    values = {
        field.alias: os.getenv(field.alias)
        for field in Settings.model_fields.values()
        if os.getenv(field.alias) is not None
    }
    return Settings(**values)
