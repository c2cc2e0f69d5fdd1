# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Verifiable secret sharing and threshold decryption."""
from __future__ import annotations

from vsskit.backend import Ed25519Group, Group, ModularGroup, Point, init_group
from vsskit.combiner import (
    Decryption,
    Recovery,
    combine_partial_decryptors,
    combine_public_shares,
    combine_secret_shares,
    compute_lambda,
    recover_decryptor,
    recover_public,
    threshold_decrypt,
)
from vsskit.config import Settings, load_settings, settings
from vsskit.dealer import (
    FeldmanDistribution,
    PedersenDistribution,
    PublicShare,
    SecretPacket,
    SecretShare,
    ShamirSharing,
    distribute_secret,
    extract_public_share,
)
from vsskit.elgamal import Ciphertext, elgamal
from vsskit.enums import Algorithm, BlockMode, ElgamalScheme, System
from vsskit.errors import ErrorKind, VssError
from vsskit.nizk import NizkProof, nizk
from vsskit.shareholder import (
    PartialDecryptor,
    SchnorrPacket,
    compute_partial_decryptor,
    create_schnorr_packet,
    parse_feldman_packet,
    parse_pedersen_packet,
    parse_schnorr_packet,
    verify_feldman_commitments,
    verify_partial_decryptor,
    verify_pedersen_commitments,
)

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "BlockMode",
    "Ciphertext",
    "Decryption",
    "Ed25519Group",
    "ElgamalScheme",
    "ErrorKind",
    "FeldmanDistribution",
    "Group",
    "ModularGroup",
    "NizkProof",
    "PartialDecryptor",
    "PedersenDistribution",
    "Point",
    "PublicShare",
    "Recovery",
    "SchnorrPacket",
    "SecretPacket",
    "SecretShare",
    "Settings",
    "ShamirSharing",
    "System",
    "VssError",
    "combine_partial_decryptors",
    "combine_public_shares",
    "combine_secret_shares",
    "compute_lambda",
    "compute_partial_decryptor",
    "create_schnorr_packet",
    "distribute_secret",
    "elgamal",
    "extract_public_share",
    "init_group",
    "load_settings",
    "nizk",
    "parse_feldman_packet",
    "parse_pedersen_packet",
    "parse_schnorr_packet",
    "recover_decryptor",
    "recover_public",
    "settings",
    "threshold_decrypt",
    "verify_feldman_commitments",
    "verify_partial_decryptor",
    "verify_pedersen_commitments",
]
