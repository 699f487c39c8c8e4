"""
Compilation statistics reported by the bundler, and their console summary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from rich.console import Group, RenderableType
from rich.markup import escape
from rich.table import Table
from rich.text import Text


def _message(entry: Any) -> str:
    if isinstance(entry, dict):
        return str(entry.get("message") or entry.get("details") or entry)
    return str(entry)


def format_size(size: Optional[float]) -> str:
    if size is None:
        return "-"
    value = float(size)
    for unit in ("bytes", "KiB", "MiB"):
        if value < 1024 or unit == "MiB":
            return f"{int(value)} {unit}" if unit == "bytes" else f"{value:.2f} {unit}"
        value /= 1024
    return f"{value:.2f} MiB"


@dataclass
class BuildStats:
    """
    Parsed ``--json`` output of one bundler run.

    Attributes:
        hash: Compilation hash.
        version: Bundler version.
        time: Compilation time in milliseconds.
        output_path: Directory the assets were emitted to.
        assets: Emitted assets (name, size, chunk names).
        chunks: Chunk detail, hidden from the compact summary.
        modules: Module detail, hidden from the compact summary.
        warnings: Warning messages.
        errors: Error messages.
    """
    hash: Optional[str] = None
    version: Optional[str] = None
    time: Optional[int] = None
    output_path: Optional[str] = None
    assets: List[Dict[str, Any]] = field(default_factory=list)
    chunks: List[Dict[str, Any]] = field(default_factory=list)
    modules: List[Dict[str, Any]] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, payload: Dict[str, Any]) -> "BuildStats":
        # Multi-compiler output nests one stats object per configuration.
        children = payload.get("children") or []
        if not payload.get("assets") and children:
            merged = cls.from_json(children[0])
            for child in children[1:]:
                other = cls.from_json(child)
                merged.assets.extend(other.assets)
                merged.chunks.extend(other.chunks)
                merged.modules.extend(other.modules)
                merged.warnings.extend(other.warnings)
                merged.errors.extend(other.errors)
            merged.hash = payload.get("hash", merged.hash)
            merged.version = payload.get("version", merged.version)
            merged.time = payload.get("time", merged.time)
            return merged

        return cls(
            hash=payload.get("hash"),
            version=payload.get("version"),
            time=payload.get("time"),
            output_path=payload.get("outputPath"),
            assets=list(payload.get("assets") or []),
            chunks=list(payload.get("chunks") or []),
            modules=list(payload.get("modules") or []),
            warnings=[_message(item) for item in payload.get("warnings") or []],
            errors=[_message(item) for item in payload.get("errors") or []],
        )

    def has_errors(self) -> bool:
        return bool(self.errors)

    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def to_renderable(self, *, chunks: bool = False, modules: bool = False) -> RenderableType:
        """
        Build the console summary.

        Args:
            chunks: Include the per-chunk table.
            modules: Include the per-module list.
        """
        parts: List[RenderableType] = []
        header = Text()
        if self.hash:
            header.append("Hash: ").append(self.hash, style="bold")
            header.append("\n")
        if self.version:
            header.append("Version: ").append(f"webpack {self.version}", style="bold")
            header.append("\n")
        if self.time is not None:
            header.append("Time: ").append(f"{self.time}ms", style="bold")
        parts.append(header)

        if self.assets:
            table = Table(box=None, show_edge=False, pad_edge=False)
            table.add_column("Asset", justify="right", style="green")
            table.add_column("Size", justify="right")
            table.add_column("Chunk Names")
            for asset in self.assets:
                table.add_row(
                    escape(str(asset.get("name", "?"))),
                    format_size(asset.get("size")),
                    escape(", ".join(str(name) for name in asset.get("chunkNames") or [])),
                )
            parts.append(table)

        if chunks and self.chunks:
            chunk_table = Table(title="Chunks", box=None, show_edge=False)
            chunk_table.add_column("Id", justify="right")
            chunk_table.add_column("Names")
            chunk_table.add_column("Size", justify="right")
            for chunk in self.chunks:
                chunk_table.add_row(
                    escape(str(chunk.get("id", "?"))),
                    escape(", ".join(str(name) for name in chunk.get("names") or [])),
                    format_size(chunk.get("size")),
                )
            parts.append(chunk_table)

        if modules and self.modules:
            for module in self.modules:
                name = module.get("name") or module.get("identifier") or "?"
                parts.append(Text(f"  {name} {format_size(module.get('size'))}", style="dim"))

        for warning in self.warnings:
            parts.append(Text(f"WARNING: {warning}", style="yellow"))
        for error in self.errors:
            parts.append(Text(f"ERROR: {error}", style="red"))
        return Group(*parts)
