"""
Core package for the cozy application scaffolding and build scripts.
"""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("cozy-scripts")
except _metadata.PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__"]
