# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Library-wide defaults.

The settings aggregate the few tunables that several modules share. Values can
be overridden through environment variables, read once at import time; the
resulting :class:`Settings` is frozen. Every operation that consults it also
accepts the value as an explicit argument.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Type, TypeVar

from vsskit.enums import (
    DEFAULT_ALGORITHM,
    DEFAULT_BLOCK_MODE,
    DEFAULT_SYSTEM,
    Algorithm,
    BlockMode,
    System,
)

E = TypeVar("E", bound=Enum)


def _load_enum(name: str, enum_type: Type[E], default: E) -> E:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return enum_type(value.strip().lower())
    except ValueError:
        return default


def _load_path(name: str) -> Optional[Path]:
    value = os.environ.get(name)
    if not value:
        return None
    return Path(value).expanduser()


@dataclass(frozen=True)
class Settings:
    """Default protocol parameters."""

    algorithm: Algorithm = DEFAULT_ALGORITHM
    block_mode: BlockMode = DEFAULT_BLOCK_MODE
    system: System = DEFAULT_SYSTEM
    audit_dir: Optional[Path] = None


def load_settings() -> Settings:
    """Load settings considering environment overrides."""

    return Settings(
        algorithm=_load_enum("VSSKIT_ALGORITHM", Algorithm, DEFAULT_ALGORITHM),
        block_mode=_load_enum("VSSKIT_BLOCK_MODE", BlockMode, DEFAULT_BLOCK_MODE),
        system=_load_enum("VSSKIT_SYSTEM", System, DEFAULT_SYSTEM),
        audit_dir=_load_path("VSSKIT_AUDIT_DIR"),
    )


settings = load_settings()


__all__ = ["Settings", "settings", "load_settings"]
