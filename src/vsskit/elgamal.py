# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""ElGamal encryption over a group.

A ciphertext is a pair ``(alpha, beta)`` where ``beta = g^r`` and ``alpha``
depends on the scheme:

``PLAIN``
    ``alpha = y^r * m`` for a message ``m`` that is itself a group element
    encoding. Not CCA-secure.
``KEM``
    AES-256 under ``SHA-256(y^r)``.
``IES``
    AES-256 and HMAC under the two halves of ``SHA-512(y^r)``.
``DHIES``
    As ``IES`` with keys derived from ``beta || y^r``; the MAC also covers
    ``beta`` and the IV.

``y^r`` is the *decryptor*; whoever holds it (or enough partial decryptors
to recover it) can complete decryption without the secret key.
"""
from __future__ import annotations

import hashlib
import hmac
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from vsskit.aes import AesCipher
from vsskit.backend import Group, Point
from vsskit.config import settings
from vsskit.enums import Algorithm, BlockMode, ElgamalScheme
from vsskit.errors import DecryptionError, InvalidPointEncoding, PointNotInSubgroup, VssError


@dataclass(frozen=True)
class AesAlpha:
    ciphered: bytes
    iv: bytes
    tag: bytes = b""


@dataclass(frozen=True)
class IesAlpha:
    ciphered: bytes
    iv: bytes
    mac: bytes
    tag: bytes = b""


Alpha = Union[bytes, AesAlpha, IesAlpha]


@dataclass(frozen=True)
class Ciphertext:
    alpha: Alpha
    beta: bytes


class PlainCipher:
    def __init__(self, group: Group) -> None:
        self.group = group

    def encapsulate(self, decryptor: Point, beta: Point, message: bytes) -> bytes:
        point = self.group.unpack(message)
        return self.group.operate(decryptor, point).to_bytes()

    def decapsulate(self, alpha: bytes, beta: Point, decryptor: Point) -> bytes:
        if not isinstance(alpha, (bytes, bytearray)):
            raise DecryptionError("Ciphertext does not match the scheme")
        point = self.group.unpack(alpha)
        return self.group.operate(point, self.group.invert(decryptor)).to_bytes()


class KemCipher:
    def __init__(self, group: Group, mode: BlockMode) -> None:
        self.group = group
        self.aes = AesCipher(mode)

    @staticmethod
    def _key(decryptor: Point) -> bytes:
        return hashlib.sha256(decryptor.to_bytes()).digest()

    def encapsulate(self, decryptor: Point, beta: Point, message: bytes) -> AesAlpha:
        out = self.aes.encrypt(self._key(decryptor), message)
        return AesAlpha(out.ciphered, out.iv, out.tag)

    def decapsulate(self, alpha: AesAlpha, beta: Point, decryptor: Point) -> bytes:
        if not isinstance(alpha, AesAlpha):
            raise DecryptionError("Ciphertext does not match the scheme")
        return self.aes.decrypt(self._key(decryptor), alpha.ciphered, alpha.iv, alpha.tag)


class IesCipher:
    def __init__(self, group: Group, mode: BlockMode, algorithm: Algorithm) -> None:
        self.group = group
        self.aes = AesCipher(mode)
        self.algorithm = algorithm

    def _keys(self, beta: Point, decryptor: Point) -> Tuple[bytes, bytes]:
        key = hashlib.sha512(decryptor.to_bytes()).digest()
        return key[:32], key[32:]

    def _mac_input(self, beta: Point, iv: bytes, ciphered: bytes) -> bytes:
        return ciphered

    def _mac(self, key: bytes, data: bytes) -> bytes:
        return hmac.new(key, data, self.algorithm.value).digest()

    def encapsulate(self, decryptor: Point, beta: Point, message: bytes) -> IesAlpha:
        key_aes, key_mac = self._keys(beta, decryptor)
        out = self.aes.encrypt(key_aes, message)
        mac = self._mac(key_mac, self._mac_input(beta, out.iv, out.ciphered))
        return IesAlpha(out.ciphered, out.iv, mac, out.tag)

    def decapsulate(self, alpha: IesAlpha, beta: Point, decryptor: Point) -> bytes:
        if not isinstance(alpha, IesAlpha):
            raise DecryptionError("Ciphertext does not match the scheme")
        key_aes, key_mac = self._keys(beta, decryptor)
        expected = self._mac(key_mac, self._mac_input(beta, alpha.iv, alpha.ciphered))
        if not hmac.compare_digest(expected, alpha.mac):
            raise DecryptionError("Invalid MAC")
        return self.aes.decrypt(key_aes, alpha.ciphered, alpha.iv, alpha.tag)


class DhiesCipher(IesCipher):
    def _keys(self, beta: Point, decryptor: Point) -> Tuple[bytes, bytes]:
        key = hashlib.sha512(beta.to_bytes() + decryptor.to_bytes()).digest()
        return key[:32], key[32:]

    def _mac_input(self, beta: Point, iv: bytes, ciphered: bytes) -> bytes:
        return beta.to_bytes() + iv + ciphered


class ElgamalDriver:
    """Byte-level ElGamal front end for one scheme."""

    def __init__(
        self,
        group: Group,
        scheme: Union[ElgamalScheme, str],
        algorithm: Optional[Union[Algorithm, str]] = None,
        mode: Optional[Union[BlockMode, str]] = None,
    ) -> None:
        self.group = group
        self.scheme = ElgamalScheme(scheme)
        self.algorithm = Algorithm(algorithm) if algorithm else settings.algorithm
        self.mode = BlockMode(mode) if mode else settings.block_mode
        if self.scheme == ElgamalScheme.PLAIN:
            self.cipher = PlainCipher(group)
        elif self.scheme == ElgamalScheme.KEM:
            self.cipher = KemCipher(group, self.mode)
        elif self.scheme == ElgamalScheme.IES:
            self.cipher = IesCipher(group, self.mode, self.algorithm)
        else:
            self.cipher = DhiesCipher(group, self.mode, self.algorithm)

    def encrypt(self, message: bytes, public: bytes) -> Tuple[Ciphertext, bytes, bytes]:
        """Return ``(ciphertext, randomness, decryptor)``."""
        group = self.group
        y = group.unpack_valid(public)
        r = group.random_scalar()
        beta = group.exp(group.generator, r)
        decryptor = group.exp(y, r)
        alpha = self.cipher.encapsulate(decryptor, beta, message)
        return Ciphertext(alpha, beta.to_bytes()), group.pack_scalar(r), decryptor.to_bytes()

    def _beta(self, ciphertext: Ciphertext) -> Point:
        try:
            return self.group.unpack_valid(ciphertext.beta)
        except (InvalidPointEncoding, PointNotInSubgroup) as exc:
            raise DecryptionError(f"Could not decrypt: {exc}") from exc

    def _open(self, alpha: Alpha, beta: Point, decryptor: Point) -> bytes:
        try:
            return self.cipher.decapsulate(alpha, beta, decryptor)  # type: ignore[arg-type]
        except VssError as exc:
            raise DecryptionError(f"Could not decrypt: {exc}") from exc

    def decapsulate(self, alpha: Alpha, beta: bytes, decryptor: bytes) -> bytes:
        return self._open(alpha, self._beta(Ciphertext(alpha, beta)), self.group.unpack_valid(decryptor))

    def decrypt(self, ciphertext: Ciphertext, secret: bytes) -> bytes:
        beta = self._beta(ciphertext)
        decryptor = self.group.exp(beta, self.group.unpack_scalar(secret))
        return self._open(ciphertext.alpha, beta, decryptor)

    def decrypt_with_decryptor(self, ciphertext: Ciphertext, decryptor: bytes) -> bytes:
        return self.decapsulate(ciphertext.alpha, ciphertext.beta, decryptor)

    def decrypt_with_randomness(self, ciphertext: Ciphertext, public: bytes, randomness: bytes) -> bytes:
        beta = self._beta(ciphertext)
        decryptor = self.group.exp(self.group.unpack_valid(public), self.group.unpack_scalar(randomness))
        return self._open(ciphertext.alpha, beta, decryptor)


def elgamal(
    group: Group,
    scheme: Union[ElgamalScheme, str],
    algorithm: Optional[Union[Algorithm, str]] = None,
    mode: Optional[Union[BlockMode, str]] = None,
) -> ElgamalDriver:
    return ElgamalDriver(group, scheme, algorithm, mode)


__all__ = [
    "AesAlpha",
    "IesAlpha",
    "Ciphertext",
    "PlainCipher",
    "KemCipher",
    "IesCipher",
    "DhiesCipher",
    "ElgamalDriver",
    "elgamal",
]
