"""
Shared utility helpers for filesystem, console output and package names.
"""

from .console import COZY_THEME, console, make_console
from .filesystem import copy_entry, ensure_directory, lock_path_for, remove_path, write_text_file
from .naming import PackageNameCheck, check_package_name, is_valid_package_name

__all__ = [
    "COZY_THEME",
    "console",
    "make_console",
    "copy_entry",
    "ensure_directory",
    "lock_path_for",
    "remove_path",
    "write_text_file",
    "PackageNameCheck",
    "check_package_name",
    "is_valid_package_name",
]
