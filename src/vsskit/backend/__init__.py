# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Group realizations."""
from __future__ import annotations

from typing import Optional, Union

from vsskit.backend.abstract import Group, Point
from vsskit.backend.ed25519 import Ed25519Group, EdPoint
from vsskit.backend.modular import ModPoint, ModularGroup
from vsskit.config import settings
from vsskit.enums import System
from vsskit.errors import UnsupportedGroup


def init_group(system: Optional[Union[System, str]] = None) -> Group:
    """Return the group realizing ``system`` (the configured default if omitted)."""
    label = system if system is not None else settings.system
    try:
        label = System(label)
    except ValueError:
        raise UnsupportedGroup(f"Unsupported group: {system}") from None
    if label == System.ED25519:
        return Ed25519Group()
    return ModularGroup(label)


__all__ = [
    "Group",
    "Point",
    "Ed25519Group",
    "EdPoint",
    "ModularGroup",
    "ModPoint",
    "init_group",
]
