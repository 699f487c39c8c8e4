"""
Locate the bundled template files and the application skeleton.
"""

from __future__ import annotations

import importlib.resources
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

TEMPLATE_FILENAMES = ("manifest.webapp", "README.md", "index.html", "view2.html")
APP_DIRNAME = "app"

# npm renames a packaged .gitignore to .npmignore, so the skeleton ships it without the dot.
RENAMED_ENTRIES = {"gitignore": ".gitignore"}


def _bundled_root() -> Path:
    return Path(str(importlib.resources.files("cozy_scripts") / "templates" / "vanilla"))


@dataclass(frozen=True)
class ScaffoldAssets:
    """
    Template directory holding the four token templates and the ``app`` skeleton.

    Attributes:
        root: Directory containing the template files and the ``app`` folder.
    """
    root: Path

    @classmethod
    def bundled(cls) -> "ScaffoldAssets":
        return cls(root=_bundled_root())

    @classmethod
    def resolve(cls, root: Optional[Path | str] = None) -> "ScaffoldAssets":
        if root is None:
            return cls.bundled()
        return cls(root=Path(root).expanduser().resolve())

    @property
    def app_path(self) -> Path:
        return self.root / APP_DIRNAME

    def read_template(self, filename: str) -> str:
        return (self.root / filename).read_text(encoding="utf-8")

    def read_templates(self) -> Dict[str, str]:
        """Return the template texts keyed by their output filename."""
        return {filename: self.read_template(filename) for filename in TEMPLATE_FILENAMES}

    def app_entries(self) -> List[str]:
        """Top-level skeleton entries, as physically named."""
        if not self.app_path.is_dir():
            return []
        return sorted(entry.name for entry in self.app_path.iterdir())

    def expected_generated_entries(self) -> List[str]:
        """Every top-level name the initializer may create in a target directory."""
        names = list(TEMPLATE_FILENAMES)
        for entry in self.app_entries():
            for name in (entry, destination_name(entry)):
                if name not in names:
                    names.append(name)
        return names


def destination_name(entry_name: str) -> str:
    """Return the name a skeleton entry takes once copied into the target."""
    return RENAMED_ENTRIES.get(entry_name, entry_name)
