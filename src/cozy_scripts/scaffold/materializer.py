"""
Write a new vanilla application into a target directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Mapping

from rich.console import Console
from rich.markup import escape

from ..util import copy_entry, ensure_directory, remove_path, write_text_file
from .assets import ScaffoldAssets, destination_name
from .prompts import APP_NAME_TOKEN
from .substitution import TokenSubstitutor

logger = logging.getLogger(__name__)

# A vanilla application has no node dependencies once generated.
DEPENDENCY_ARTIFACTS = ("package.json", "node_modules", "yarn.lock")


@dataclass
class ScaffoldReport:
    """
    Stores what changed when the application was materialized.

    Attributes:
        root: The target directory.
        copied: Skeleton entries copied (destination names).
        rendered: Template files written from the answers.
        removed: Dependency artifacts deleted from the target.
    """
    root: Path
    copied: List[str] = field(default_factory=list)
    rendered: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Root", str(self.root))
        yield ("Entries copied", str(len(self.copied)))
        yield ("Files rendered", str(len(self.rendered)))
        yield ("Artifacts removed", ", ".join(self.removed) or "none")


def materialize(
    app_path: Path | str,
    answers: Mapping[str, str],
    *,
    assets: ScaffoldAssets,
    console: Console,
) -> ScaffoldReport:
    """
    Render the templates and copy the application skeleton into app_path.

    Args:
        app_path: Target directory (created if missing).
        answers: Token -> value map, including the application name.
        assets: Where the templates and the skeleton live.
        console: Console for progress lines.

    Returns:
        A ScaffoldReport detailing the actions taken.
    """
    root = ensure_directory(app_path)
    report = ScaffoldReport(root=root)

    templates = assets.read_templates()
    console.print()
    console.print("Building files...")
    substitutor = TokenSubstitutor(answers)
    rendered = {filename: substitutor.render(text) for filename, text in templates.items()}

    console.print()
    console.print(f"Copying in [cyan]{escape(str(root))}[/]")
    for entry in assets.app_entries():
        target_name = destination_name(entry)
        copy_entry(assets.app_path / entry, root / target_name)
        report.copied.append(target_name)
        console.print(f"[cyan]{escape(target_name)}[/] copied.")

    for filename, content in rendered.items():
        write_text_file(root / filename, content)
        report.rendered.append(filename)
        console.print(f"[cyan]{escape(filename)}[/] copied.")

    for artifact in DEPENDENCY_ARTIFACTS:
        if remove_path(root / artifact):
            report.removed.append(artifact)
            logger.debug("Removed %s from %s", artifact, root)

    app_name = answers.get(APP_NAME_TOKEN, root.name)
    console.print()
    console.print(
        f"[green]Great! Your application [cyan]{escape(app_name)}[/cyan] is ready! \\o/. Enjoy it![/green]"
    )
    return report
