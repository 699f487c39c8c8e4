from io import StringIO
from pathlib import Path
from typing import Dict

import pytest
from rich.console import Console
from typer.testing import CliRunner

from cozy_scripts.scaffold import ScaffoldAssets
from cozy_scripts.util import COZY_THEME


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def console() -> Console:
    """
    Console writing to an in-memory buffer, wide enough that paths never wrap.
    """
    return Console(file=StringIO(), theme=COZY_THEME, width=300, color_system=None, highlight=False)


@pytest.fixture
def fake_assets(tmp_path: Path) -> ScaffoldAssets:
    """
    Small template directory whose skeleton also carries dependency artifacts.
    """
    root = tmp_path / "templates"
    app = root / "app"
    (app / "src").mkdir(parents=True)
    (app / "gitignore").write_text("node_modules/\n", encoding="utf-8")
    (app / "src" / "app.js").write_text("console.log('hello')\n", encoding="utf-8")
    (app / "package.json").write_text("{}\n", encoding="utf-8")
    (app / "yarn.lock").write_text("# lock\n", encoding="utf-8")
    (root / "manifest.webapp").write_text('{"name": "<APP_NAME>", "slug": "<SLUG_NPM>"}\n', encoding="utf-8")
    (root / "README.md").write_text("# <APP_NAME>\n\n<APP_SHORT_DESCRIPTION>\n", encoding="utf-8")
    (root / "index.html").write_text("<title><APP_NAME></title>\n<UNKNOWN_TOKEN>\n", encoding="utf-8")
    (root / "view2.html").write_text('<a href="<USER_WEBSITE>"><USERNAME_GH></a>\n', encoding="utf-8")
    return ScaffoldAssets(root=root)


@pytest.fixture
def valid_answers() -> Dict[str, str]:
    return {
        "<SLUG_GH>": "my-app",
        "<SLUG_NPM>": "my-app",
        "<APP_SHORT_DESCRIPTION>": "Keep track of my plants",
        "<APP_CATEGORY>": "",
        "<USERNAME_GH>": "octocat",
        "<USER_WEBSITE>": "https://octocat.example.org",
    }
