# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""AES-256 in the block modes offered to the hybrid encryption schemes."""
from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Optional, Union

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from vsskit.config import settings
from vsskit.enums import BlockMode
from vsskit.errors import AesError

KEY_SIZE = 32
GCM_IV_SIZE = 12
GCM_TAG_SIZE = 16
IV_SIZE = 16

_MODES = {
    BlockMode.AES_256_CBC: modes.CBC,
    BlockMode.AES_256_CFB: modes.CFB,
    BlockMode.AES_256_OFB: modes.OFB,
    BlockMode.AES_256_CTR: modes.CTR,
}


@dataclass(frozen=True)
class AesOutput:
    ciphered: bytes
    iv: bytes
    tag: bytes = b""


class AesCipher:
    """AES-256 encryption with a fresh random IV per message."""

    def __init__(self, mode: Optional[Union[BlockMode, str]] = None) -> None:
        self.mode = BlockMode(mode) if mode else settings.block_mode

    @property
    def iv_size(self) -> int:
        return GCM_IV_SIZE if self.mode == BlockMode.AES_256_GCM else IV_SIZE

    def _check(self, key: bytes, iv: bytes) -> None:
        if len(key) != KEY_SIZE:
            raise AesError(f"Invalid key length: {len(key)}")
        if len(iv) != self.iv_size:
            raise AesError(f"Invalid IV length: {len(iv)} != {self.iv_size}")

    def encrypt(self, key: bytes, message: bytes, iv: Optional[bytes] = None) -> AesOutput:
        iv = secrets.token_bytes(self.iv_size) if iv is None else bytes(iv)
        self._check(key, iv)
        if self.mode == BlockMode.AES_256_GCM:
            encryptor = Cipher(algorithms.AES(key), modes.GCM(iv)).encryptor()
            ciphered = encryptor.update(message) + encryptor.finalize()
            return AesOutput(ciphered, iv, encryptor.tag)
        if self.mode == BlockMode.AES_256_CBC:
            padder = padding.PKCS7(algorithms.AES.block_size).padder()
            message = padder.update(message) + padder.finalize()
        encryptor = Cipher(algorithms.AES(key), _MODES[self.mode](iv)).encryptor()
        return AesOutput(encryptor.update(message) + encryptor.finalize(), iv)

    def decrypt(self, key: bytes, ciphered: bytes, iv: bytes, tag: Optional[bytes] = None) -> bytes:
        self._check(key, iv)
        if self.mode == BlockMode.AES_256_GCM:
            if not tag:
                raise AesError("Missing authentication tag")
            decryptor = Cipher(algorithms.AES(key), modes.GCM(iv, tag)).decryptor()
            try:
                return decryptor.update(ciphered) + decryptor.finalize()
            except InvalidTag as exc:
                raise AesError("AES decryption failure: authentication tag mismatch") from exc
        decryptor = Cipher(algorithms.AES(key), _MODES[self.mode](iv)).decryptor()
        try:
            plaintext = decryptor.update(ciphered) + decryptor.finalize()
            if self.mode == BlockMode.AES_256_CBC:
                unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
                plaintext = unpadder.update(plaintext) + unpadder.finalize()
        except ValueError as exc:
            raise AesError(f"AES decryption failure: {exc}") from exc
        return plaintext


def aes(mode: Optional[Union[BlockMode, str]] = None) -> AesCipher:
    return AesCipher(mode)


__all__ = ["AesCipher", "AesOutput", "aes", "KEY_SIZE"]
