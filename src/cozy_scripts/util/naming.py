"""
Package name checks following the npm registry rules for new packages.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List

MAX_PACKAGE_NAME_LENGTH = 214

_URL_SAFE = re.compile(r"^[A-Za-z0-9\-_.!~*'()]+$")
_SCOPED = re.compile(r"^@([^/]+)/(.+)$")
_SPECIAL_CHARS = re.compile(r"[~'!()*]")

BLACKLISTED_NAMES = frozenset({"node_modules", "favicon.ico"})

NODE_BUILTIN_MODULES = frozenset(
    {
        "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
        "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
        "events", "fs", "http", "http2", "https", "inspector", "module", "net",
        "os", "path", "perf_hooks", "process", "punycode", "querystring",
        "readline", "repl", "stream", "string_decoder", "sys", "timers", "tls",
        "trace_events", "tty", "url", "util", "v8", "vm", "wasi",
        "worker_threads", "zlib",
    }
)


@dataclass
class PackageNameCheck:
    """
    Outcome of checking a candidate package name.

    Attributes:
        name: The candidate that was checked.
        errors: Problems that make the name unusable for any package.
        warnings: Problems that only block the name for new packages.
    """
    name: str
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def valid_for_new_packages(self) -> bool:
        return not self.errors and not self.warnings

    @property
    def valid_for_old_packages(self) -> bool:
        return not self.errors


def check_package_name(name: str) -> PackageNameCheck:
    """
    Check a package name against the registry naming rules.

    Args:
        name: Candidate package name, optionally scoped (``@scope/name``).

    Returns:
        A PackageNameCheck listing every rule the name breaks.
    """
    check = PackageNameCheck(name=name)
    if not name:
        check.errors.append("name length must be greater than zero")
        return check

    if name.startswith("."):
        check.errors.append("name cannot start with a period")
    if name.startswith("_"):
        check.errors.append("name cannot start with an underscore")
    if name.strip() != name:
        check.errors.append("name cannot contain leading or trailing spaces")
    if name.lower() in BLACKLISTED_NAMES:
        check.errors.append(f"{name} is a blacklisted name")

    if name.lower() in NODE_BUILTIN_MODULES:
        check.warnings.append(f"{name} is a core module name")
    if len(name) > MAX_PACKAGE_NAME_LENGTH:
        check.warnings.append(f"name can no longer contain more than {MAX_PACKAGE_NAME_LENGTH} characters")
    if name.lower() != name:
        check.warnings.append("name can no longer contain capital letters")

    last_segment = name.rsplit("/", 1)[-1]
    if _SPECIAL_CHARS.search(last_segment):
        check.warnings.append("name can no longer contain special characters (\"~'!()*\")")

    if not _URL_SAFE.match(name):
        scoped = _SCOPED.match(name)
        if scoped and all(_URL_SAFE.match(part) for part in scoped.groups()):
            return check
        check.errors.append("name can only contain URL-friendly characters")

    return check


def is_valid_package_name(name: str) -> bool:
    """Return True if name may be used for a new package."""
    return check_package_name(name).valid_for_new_packages
