import json
import textwrap
from pathlib import Path

import pytest

from cozy_scripts.config import BuildConfig, ConfigError, load_answer_overrides, load_build_config


def _write(tmp_path: Path, name: str, body: str) -> Path:
    path = tmp_path / name
    path.write_text(textwrap.dedent(body).strip() + "\n", encoding="utf-8")
    return path


def test_loads_build_config_relative_to_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "cozy.build.toml",
        """
        config_file = "config/webpack.js"
        mode = "development"
        context = "app"
        """,
    )

    config = load_build_config(path)

    assert config.config_file == Path("config/webpack.js")
    assert config.mode == "development"
    assert config.working_directory == (tmp_path / "app").resolve()
    assert config.bail is False


def test_build_table_is_accepted(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "cozy.build.toml",
        """
        [build]
        entry = "./src/index.js"
        """,
    )

    config = load_build_config(path)

    assert config.entry == "./src/index.js"
    assert config.working_directory == tmp_path.resolve()


def test_rejects_unknown_keys(tmp_path: Path) -> None:
    path = _write(tmp_path, "cozy.build.toml", 'watch = true\n')

    with pytest.raises(ConfigError) as exc:
        load_build_config(path)

    assert "extra" in str(exc.value).lower()


def test_rejects_invalid_toml(tmp_path: Path) -> None:
    path = _write(tmp_path, "cozy.build.toml", "mode = \n")

    with pytest.raises(ConfigError):
        load_build_config(path)


def test_missing_file_is_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        load_build_config(tmp_path / "nope.toml")


def test_with_bail_does_not_mutate_original() -> None:
    config = BuildConfig()

    assert config.with_bail().bail is True
    assert config.bail is False


def test_answer_overrides_normalize_tokens(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        "answers.toml",
        """
        USERNAME_GH = "octocat"
        app_short_description = ["too long?", "Plants"]
        "<SLUG_NPM>" = "plants"
        """,
    )

    overrides = load_answer_overrides(path)

    assert overrides.answers == {
        "<USERNAME_GH>": "octocat",
        "<APP_SHORT_DESCRIPTION>": ["too long?", "Plants"],
        "<SLUG_NPM>": "plants",
    }


def test_answer_overrides_from_json(tmp_path: Path) -> None:
    path = tmp_path / "answers.json"
    path.write_text(json.dumps({"<USERNAME_GH>": "octocat"}), encoding="utf-8")

    assert load_answer_overrides(path).answers == {"<USERNAME_GH>": "octocat"}


def test_answer_overrides_reject_non_text(tmp_path: Path) -> None:
    path = _write(tmp_path, "answers.toml", "USERNAME_GH = 42\n")

    with pytest.raises(ConfigError):
        load_answer_overrides(path)
