"""
Remove what a failed initialization left in the target directory.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

from rich.console import Console
from rich.markup import escape

from ..util import remove_path
from .assets import ScaffoldAssets

logger = logging.getLogger(__name__)


@dataclass
class CleanupReport:
    """
    Attributes:
        root: The cleaned target directory.
        deleted: Generated entries that were removed.
        unexpected: Entries left in place because the initializer did not create them.
    """
    root: Path
    deleted: List[str] = field(default_factory=list)
    unexpected: List[str] = field(default_factory=list)

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Root", str(self.root))
        yield ("Deleted", str(len(self.deleted)))
        yield ("Unexpected", ", ".join(self.unexpected) or "none")


def graceful_cleanup(app_path: Path | str, *, assets: ScaffoldAssets, console: Console) -> CleanupReport:
    """
    Delete every generated top-level entry found in app_path.

    The expected entries are the four rendered files plus the skeleton's
    top-level names. Anything else is only reported, never deleted.
    """
    root = Path(app_path).expanduser().resolve()
    report = CleanupReport(root=root)
    console.print()
    console.print("[orange]Cleaning generated app template elements[/]")
    if not root.is_dir():
        logger.debug("Nothing to clean, %s does not exist", root)
        return report

    expected = set(assets.expected_generated_entries())
    present = sorted(entry.name for entry in root.iterdir())
    if present:
        console.print(f"Deleting generated files/folders from [cyan]{escape(str(root))}[/]")
    for name in present:
        if name in expected:
            remove_path(root / name)
            report.deleted.append(name)
            console.print(f"\t- [cyan]{escape(name)}[/] deleted.")
    if present:
        console.print()

    report.unexpected = sorted(entry.name for entry in root.iterdir())
    if report.unexpected:
        console.print("Some unexpected elements are remaining:")
        for name in report.unexpected:
            console.print(f"\t- [cyan]{escape(name)}[/]")
        logger.warning("Left %d unexpected entries in %s", len(report.unexpected), root)
    return report
