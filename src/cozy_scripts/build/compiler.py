"""
Compiler handles wrapping a single batch run of the bundler.
"""

from __future__ import annotations

import json
import logging
import shlex
import subprocess
from contextlib import contextmanager
from typing import Iterator, List, Optional, Protocol

from ..config import BuildConfig, get_settings
from .stats import BuildStats

logger = logging.getLogger(__name__)


class CompilerError(RuntimeError):
    """Raised when the bundler cannot produce a successful compilation."""


class Compiler(Protocol):
    """Runs one compilation and reports its statistics."""

    def run(self) -> BuildStats:
        """Compile once, raising CompilerError on failure."""
        ...

    def close(self) -> None:
        ...


def _parse_stats(stdout: str) -> BuildStats:
    text = stdout.strip()
    if not text:
        raise CompilerError("Bundler produced no stats output")
    try:
        payload = json.loads(text)
    except json.JSONDecodeError:
        # Some loaders print to stdout before the stats document.
        start = text.find("{")
        if start < 0:
            raise CompilerError("Bundler stats output is not JSON") from None
        try:
            payload = json.loads(text[start:])
        except json.JSONDecodeError as exc:
            raise CompilerError(f"Bundler stats output is not JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise CompilerError("Bundler stats output must be a JSON object")
    return BuildStats.from_json(payload)


class WebpackCompiler:
    """
    Run the webpack CLI once in batch mode (no watch, no cache).

    Args:
        config: Build configuration.
        executable: Bundler command, defaults to the ``COZY_WEBPACK_BIN`` setting.
    """

    def __init__(self, config: BuildConfig, *, executable: Optional[str] = None) -> None:
        self.config = config
        self.executable = executable or get_settings().webpack_bin
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def command(self) -> List[str]:
        config = self.config
        cmd = shlex.split(self.executable)
        cmd += ["--config", str(config.config_file), "--mode", config.mode, "--json"]
        if config.bail:
            cmd.append("--bail")
        if config.entry:
            cmd += ["--entry", config.entry]
        if config.output_path:
            cmd += ["--output-path", str(config.output_path)]
        cmd += list(config.extra_args)
        return cmd

    def run(self) -> BuildStats:
        if self._closed:
            raise CompilerError("Compiler has been closed")

        cmd = self.command()
        cwd = self.config.working_directory
        logger.info("Running %s in %s", shlex.join(cmd), cwd)
        try:
            completed = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, check=False)
        except OSError as exc:
            raise CompilerError(f"Unable to start bundler {cmd[0]!r}: {exc}") from exc

        if completed.stderr:
            logger.debug("Bundler stderr:\n%s", completed.stderr.rstrip())

        if completed.returncode != 0:
            try:
                stats = _parse_stats(completed.stdout)
            except CompilerError:
                detail = (completed.stderr or completed.stdout).strip() or f"exit code {completed.returncode}"
                raise CompilerError(f"Bundler failed: {detail}") from None
            if stats.has_errors():
                raise CompilerError(stats.errors[0])
            raise CompilerError(f"Bundler exited with code {completed.returncode}")

        stats = _parse_stats(completed.stdout)
        if self.config.bail and stats.has_errors():
            raise CompilerError(stats.errors[0])
        return stats

    def close(self) -> None:
        self._closed = True


@contextmanager
def open_compiler(config: BuildConfig, *, executable: Optional[str] = None) -> Iterator[WebpackCompiler]:
    """
    Create a fail-fast compiler for config and dispose of it afterwards.
    """
    compiler = WebpackCompiler(config.with_bail(), executable=executable)
    try:
        yield compiler
    finally:
        compiler.close()
