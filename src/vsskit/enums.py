# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Named choices shared across the protocol layer."""
from __future__ import annotations

from enum import Enum


class System(str, Enum):
    """Supported group realizations."""

    ED25519 = "ed25519"
    MODP_2048 = "modp2048"
    MODP_3072 = "modp3072"


class Algorithm(str, Enum):
    """Hash functions usable for challenges and MACs (``hashlib`` names)."""

    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA3_224 = "sha3_224"
    SHA3_256 = "sha3_256"
    SHA3_384 = "sha3_384"
    SHA3_512 = "sha3_512"
    BLAKE2B = "blake2b"


class BlockMode(str, Enum):
    AES_256_CBC = "aes-256-cbc"
    AES_256_CFB = "aes-256-cfb"
    AES_256_OFB = "aes-256-ofb"
    AES_256_CTR = "aes-256-ctr"
    AES_256_GCM = "aes-256-gcm"


class ElgamalScheme(str, Enum):
    PLAIN = "plain"
    KEM = "kem"
    IES = "ies"
    DHIES = "dhies"
    # alias: hybrid encryption is the KEM construction
    HYBRID = "kem"


DEFAULT_SYSTEM = System.ED25519
DEFAULT_ALGORITHM = Algorithm.SHA256
DEFAULT_BLOCK_MODE = BlockMode.AES_256_CBC


__all__ = [
    "System",
    "Algorithm",
    "BlockMode",
    "ElgamalScheme",
    "DEFAULT_SYSTEM",
    "DEFAULT_ALGORITHM",
    "DEFAULT_BLOCK_MODE",
]
