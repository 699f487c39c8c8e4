"""
Forward one bundler run to the console.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from ..util import make_console
from .compiler import Compiler, CompilerError
from .stats import BuildStats

logger = logging.getLogger(__name__)


def run_build(
    compiler: Compiler,
    on_success: Optional[Callable[[], None]] = None,
    *,
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
) -> Optional[BuildStats]:
    """
    Run the compiler exactly once and print a compact summary.

    On a compiler error the error is logged and printed, and on_success is
    not called. There is no retry.

    Returns:
        The build stats, or None if the compiler failed.
    """
    console = console or make_console()
    error_console = error_console or make_console(stderr=True)
    try:
        stats = compiler.run()
    except CompilerError as exc:
        logger.error("Build failed: %s", exc)
        error_console.print(f"[red]{escape(str(exc))}[/]")
        return None

    console.print(stats.to_renderable(chunks=False, modules=False))
    if callable(on_success):
        on_success()
    return stats
