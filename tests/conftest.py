"""Test configuration helpers."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()

from vsskit.backend import init_group  # noqa: E402
from vsskit.enums import System  # noqa: E402


@pytest.fixture(scope="session", params=[System.ED25519, System.MODP_2048], ids=lambda s: s.value)
def group(request):
    return init_group(request.param)


@pytest.fixture(scope="session")
def ed25519():
    return init_group(System.ED25519)
