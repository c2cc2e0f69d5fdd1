import dataclasses
import importlib
from pathlib import Path

import pytest

from vsskit.enums import DEFAULT_ALGORITHM, DEFAULT_BLOCK_MODE, DEFAULT_SYSTEM, Algorithm, BlockMode, System


def test_settings_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("VSSKIT_ALGORITHM", "SHA3_512")
    monkeypatch.setenv("VSSKIT_BLOCK_MODE", "aes-256-gcm")
    monkeypatch.setenv("VSSKIT_SYSTEM", "modp2048")
    monkeypatch.setenv("VSSKIT_AUDIT_DIR", str(tmp_path))

    config_module = importlib.import_module("vsskit.config")
    reloaded = importlib.reload(config_module)

    try:
        settings = reloaded.settings
        assert settings.algorithm == Algorithm.SHA3_512
        assert settings.block_mode == BlockMode.AES_256_GCM
        assert settings.system == System.MODP_2048
        assert settings.audit_dir == Path(tmp_path)
    finally:
        for name in ("VSSKIT_ALGORITHM", "VSSKIT_BLOCK_MODE", "VSSKIT_SYSTEM", "VSSKIT_AUDIT_DIR"):
            monkeypatch.delenv(name, raising=False)
        importlib.reload(config_module)


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("VSSKIT_ALGORITHM", "md5")
    monkeypatch.setenv("VSSKIT_SYSTEM", "secp256k1")
    from vsskit.config import load_settings

    settings = load_settings()
    assert settings.algorithm == DEFAULT_ALGORITHM
    assert settings.system == DEFAULT_SYSTEM
    assert settings.block_mode == DEFAULT_BLOCK_MODE
    assert settings.audit_dir is None


def test_settings_are_frozen():
    from vsskit.config import settings

    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.algorithm = Algorithm.SHA512
