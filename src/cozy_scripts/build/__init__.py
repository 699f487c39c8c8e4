"""
Build forwarder: run the bundler once and report the result.
"""

from .compiler import Compiler, CompilerError, WebpackCompiler, open_compiler
from .runner import run_build
from .stats import BuildStats

__all__ = ["Compiler", "CompilerError", "WebpackCompiler", "open_compiler", "run_build", "BuildStats"]
