"""
Pydantic models and loaders for build configuration and prompt answer files.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, ValidationError, field_validator


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


class BuildConfig(BaseModel):
    """
    Bundler configuration handed to the build forwarder.

    Attributes:
        config_file: Bundler configuration file, relative to ``context``.
        mode: Bundler mode ("production", "development" or "none").
        entry: Optional entry module overriding the configuration file.
        output_path: Optional output directory overriding the configuration file.
        context: Working directory the bundler runs in (defaults to the current one).
        bail: Stop at the first compilation error.
        extra_args: Additional raw arguments forwarded to the bundler.
    """
    config_file: Path = Path("webpack.config.js")
    mode: Literal["production", "development", "none"] = "production"
    entry: Optional[str] = None
    output_path: Optional[Path] = None
    context: Optional[Path] = None
    bail: bool = False
    extra_args: List[str] = Field(default_factory=list)

    model_config = {
        "extra": "forbid",
    }

    @property
    def working_directory(self) -> Path:
        return Path(self.context or Path.cwd()).expanduser().resolve()

    def with_bail(self) -> "BuildConfig":
        """Return a copy of this configuration with fail-fast enabled."""
        return self.model_copy(update={"bail": True})


AnswerValue = Union[str, List[str]]


class AnswerOverrides(BaseModel):
    """
    Pre-supplied prompt answers used to run the initializer unattended.

    Keys are placeholder tokens; each value is either one answer or a list of
    successive answers offered when an earlier one is rejected.
    """
    answers: Dict[str, AnswerValue] = Field(default_factory=dict)

    @field_validator("answers", mode="before")
    @classmethod
    def _normalize_tokens(cls, value: Any) -> Any:
        if not isinstance(value, dict):
            return value
        return {_as_token(str(key)): item for key, item in value.items()}


def _as_token(key: str) -> str:
    key = key.strip()
    if key.startswith("<") and key.endswith(">"):
        return key
    return f"<{key.upper()}>"


def _read_table(path: Path | str) -> tuple[Path, Dict[str, Any]]:
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        if config_path.suffix.lower() == ".json":
            raw_data = json.loads(config_path.read_text(encoding="utf-8"))
        else:
            with config_path.open("rb") as handle:
                raw_data = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in configuration file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc

    if not isinstance(raw_data, dict):
        raise ConfigError("Configuration root must be a table/object.")
    return config_path, raw_data


def load_build_config(path: Path | str) -> BuildConfig:
    """
    Load and validate a TOML (or JSON) build configuration file.

    Relative ``context`` values are resolved against the file's directory.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path, raw_data = _read_table(path)
    raw_data = dict(raw_data.get("build", raw_data))
    raw_data.setdefault("context", str(config_path.parent))
    context = Path(raw_data["context"]).expanduser()
    if not context.is_absolute():
        raw_data["context"] = str(config_path.parent / context)

    try:
        return BuildConfig.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc


def load_answer_overrides(path: Path | str) -> AnswerOverrides:
    """
    Load a TOML or JSON table of token -> answer(s).

    Keys may be written with or without the surrounding angle brackets,
    so ``USERNAME_GH = "octocat"`` and ``"<USERNAME_GH>" = "octocat"`` are equivalent.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    _, raw_data = _read_table(path)
    try:
        return AnswerOverrides.model_validate({"answers": raw_data})
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
