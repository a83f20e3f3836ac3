"""Evaluator settings built from the process environment.

Each variable has a default, so an empty environment gives the strict
behaviour: bounded nesting and no trailing input.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_MAX_DEPTH = 100

MAX_DEPTH_VAR = "RDCALC_MAX_DEPTH"
ALLOW_TRAILING_VAR = "RDCALC_ALLOW_TRAILING"

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("", "0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    """Knobs for a single evaluate() call."""

    max_depth: int = DEFAULT_MAX_DEPTH
    allow_trailing: bool = False


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean flag, got {raw!r}")


def _parse_depth(name: str, raw: str) -> int:
    try:
        depth = int(raw.strip())
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if depth < 1:
        raise ValueError(f"{name} must be at least 1, got {depth}")
    return depth


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from environment variables.

    Args:
        env: Mapping to read from. Defaults to os.environ.

    Raises:
        ValueError: If a variable is set to something unparseable.
    """
    env = os.environ if env is None else env

    max_depth = DEFAULT_MAX_DEPTH
    raw_depth = env.get(MAX_DEPTH_VAR)
    if raw_depth is not None:
        max_depth = _parse_depth(MAX_DEPTH_VAR, raw_depth)

    allow_trailing = _parse_bool(ALLOW_TRAILING_VAR, env.get(ALLOW_TRAILING_VAR, "0"))

    return Settings(max_depth=max_depth, allow_trailing=allow_trailing)
