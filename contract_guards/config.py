"""
Guard settings (``contract_guards.config``).

Responsibility
--------------
Holds the few knobs the structure matcher consults: the recursion ceiling,
the wildcard token, and the level at which violations are logged. Settings
are an immutable ``GuardSettings`` value; ``DEFAULT_SETTINGS`` is used when a
guard is called without ``settings=``.

Loading
-------
``load_settings`` parses a YAML fragment with PyYAML. The fragment is either
a flat mapping or nests the keys under a top-level ``contract_guards:``
section so it can live inside a larger application config file::

    contract_guards:
      max_structure_depth: 64
      wildcard_token: "*"
      violation_log_level: WARNING

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Unknown keys or invalid values  -> ``ValueError``.

No environment variables are read.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

_SECTION = "contract_guards"


def max_depth_limit() -> int:
    """Largest accepted ``max_structure_depth`` under the current recursion limit."""
    # Each nesting level costs two frames, plus headroom for the caller's stack.
    return sys.getrecursionlimit() // 3


@dataclass(frozen=True)
class GuardSettings:
    """Immutable settings for the structure matcher."""

    max_structure_depth: int = 256
    wildcard_token: str = "*"
    violation_log_level: str = "DEBUG"

    def __post_init__(self) -> None:
        if isinstance(self.max_structure_depth, bool) or not isinstance(
            self.max_structure_depth, int
        ):
            raise ValueError("max_structure_depth must be an integer")
        if self.max_structure_depth < 1:
            raise ValueError("max_structure_depth must be >= 1")
        if self.max_structure_depth > max_depth_limit():
            raise ValueError(
                f"max_structure_depth must be <= {max_depth_limit()} "
                f"(a third of the interpreter recursion limit)"
            )
        if not isinstance(self.wildcard_token, str) or not self.wildcard_token:
            raise ValueError("wildcard_token must be a non-empty string")
        level_name = str(self.violation_log_level).upper()
        if level_name not in logging.getLevelNamesMapping():
            raise ValueError(
                f"violation_log_level must be a logging level name, "
                f"got {self.violation_log_level!r}"
            )
        object.__setattr__(self, "violation_log_level", level_name)

    @property
    def violation_level(self) -> int:
        """Numeric logging level for violation records."""
        return logging.getLevelNamesMapping()[self.violation_log_level]


DEFAULT_SETTINGS = GuardSettings()


def settings_from_dict(data: Mapping[str, Any]) -> GuardSettings:
    """Build ``GuardSettings`` from a parsed mapping, rejecting unknown keys."""
    if not isinstance(data, Mapping):
        raise ValueError(
            f"settings must be a mapping, got {type(data).__name__}"
        )
    if _SECTION in data:
        data = data[_SECTION] or {}
        if not isinstance(data, Mapping):
            raise ValueError(f"'{_SECTION}' section must be a mapping")

    known = {f.name for f in fields(GuardSettings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown settings keys: {unknown}")
    return GuardSettings(**dict(data))


def load_settings(path: str | Path) -> GuardSettings:
    """Load ``GuardSettings`` from a YAML file. An empty file yields defaults."""
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return DEFAULT_SETTINGS
    return settings_from_dict(data)
