import logging
from io import StringIO
from typing import List

import pytest
from rich.console import Console

from cozy_scripts.build import BuildStats, CompilerError, run_build


class FakeCompiler:
    def __init__(self, stats: BuildStats = None, error: Exception = None) -> None:
        self.stats = stats or BuildStats()
        self.error = error
        self.runs = 0

    def run(self) -> BuildStats:
        self.runs += 1
        if self.error:
            raise self.error
        return self.stats

    def close(self) -> None:
        pass


def _stats() -> BuildStats:
    return BuildStats.from_json(
        {
            "hash": "4f2b9c",
            "version": "5.90.0",
            "time": 812,
            "assets": [{"name": "app.js", "size": 2048, "chunkNames": ["app"]}],
            "chunks": [{"id": 0, "names": ["hidden-chunk"], "size": 10}],
            "modules": [{"name": "./src/hidden-module.js", "size": 10}],
        }
    )


def _capture() -> Console:
    return Console(file=StringIO(), width=200, color_system=None)


def test_success_calls_callback_exactly_once() -> None:
    calls: List[str] = []
    compiler = FakeCompiler(_stats())

    stats = run_build(compiler, lambda: calls.append("done"), console=_capture(), error_console=_capture())

    assert stats is compiler.stats
    assert compiler.runs == 1
    assert calls == ["done"]


def test_success_prints_compact_summary() -> None:
    console = _capture()

    run_build(FakeCompiler(_stats()), console=console, error_console=_capture())

    output = console.file.getvalue()
    assert "4f2b9c" in output
    assert "app.js" in output
    assert "2.00 KiB" in output
    assert "hidden-chunk" not in output
    assert "hidden-module" not in output


def test_compiler_error_skips_callback(caplog: pytest.LogCaptureFixture) -> None:
    calls: List[str] = []
    error_console = _capture()
    compiler = FakeCompiler(error=CompilerError("Module not found: ./missing"))

    caplog.set_level(logging.ERROR)
    stats = run_build(compiler, lambda: calls.append("done"), console=_capture(), error_console=error_console)

    assert stats is None
    assert calls == []
    assert compiler.runs == 1
    assert "Module not found" in caplog.text
    assert "Module not found: ./missing" in error_console.file.getvalue()


def test_each_invocation_runs_once() -> None:
    calls: List[str] = []
    compiler = FakeCompiler(_stats())

    run_build(compiler, lambda: calls.append("first"), console=_capture(), error_console=_capture())
    run_build(compiler, lambda: calls.append("second"), console=_capture(), error_console=_capture())

    assert compiler.runs == 2
    assert calls == ["first", "second"]


def test_non_callable_callback_is_ignored() -> None:
    assert run_build(FakeCompiler(_stats()), "not callable", console=_capture(), error_console=_capture()) is not None
