"""
Initialize a vanilla cozy application: ask the questions, then materialize it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence, Union

from rich.console import Console
from rich.markup import escape

from ..util import console as default_console
from .assets import ScaffoldAssets
from .cleanup import graceful_cleanup
from .collector import AnswerSource, CollectionError, InteractiveAnswerSource, MappingAnswerSource, collect_answers
from .materializer import ScaffoldReport, materialize
from .prompts import APP_NAME_TOKEN, default_fields

logger = logging.getLogger(__name__)

Overrides = Mapping[str, Union[str, Sequence[str]]]


def _as_source(answer_source: Union[AnswerSource, Overrides, None], console: Console) -> AnswerSource:
    if answer_source is None:
        return InteractiveAnswerSource(console)
    if isinstance(answer_source, Mapping):
        return MappingAnswerSource(answer_source)
    return answer_source


def initialize_app(
    app_path: Path | str,
    app_name: str,
    verbose: bool,
    on_fatal: Callable[[BaseException], None],
    answer_source: Union[AnswerSource, Overrides, None] = None,
    on_success: Optional[Callable[[], None]] = None,
    *,
    assets: Optional[ScaffoldAssets] = None,
    console: Optional[Console] = None,
) -> Optional[ScaffoldReport]:
    """
    Collect the answers and write the application into app_path.

    Args:
        app_path: Target directory for the new application.
        app_name: Application name, substituted for ``<APP_NAME>``.
        verbose: Print the received answers.
        on_fatal: Called with the error when collection or materialization fails.
        answer_source: Where answers come from; a mapping of token -> answer(s)
            runs unattended, None asks interactively.
        on_success: Called once after the application is ready.
        assets: Template location (bundled templates by default).
        console: Console for progress lines.

    Returns:
        The ScaffoldReport, or None when on_fatal was called instead.
    """
    console = console or default_console
    assets = assets or ScaffoldAssets.bundled()
    source = _as_source(answer_source, console)

    try:
        received = collect_answers(default_fields(app_name), source, console=console, verbose=verbose)
    except CollectionError as exc:
        console.print(f"[red]{escape(str(exc))}[/]")
        logger.error("Answer collection failed: %s", exc)
        on_fatal(exc)
        return None

    answers = dict(received)
    answers[APP_NAME_TOKEN] = app_name

    try:
        report = materialize(app_path, answers, assets=assets, console=console)
        if callable(on_success):
            on_success()
    except Exception as exc:
        logger.error("Failed to materialize %s: %s", app_name, exc)
        try:
            graceful_cleanup(app_path, assets=assets, console=console)
        except Exception:
            logger.exception("Cleanup of %s failed", app_path)
        on_fatal(exc)
        return None

    return report
