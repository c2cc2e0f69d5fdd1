# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Error kinds raised by the protocol layer.

Every exception carries an :class:`ErrorKind` so that callers can dispatch on
``exc.kind`` rather than on the exception class. Errors raised against a
single contribution (a share, a packet or a partial decryptor) also carry the
offending ``index`` and are flagged ``recoverable``: a combiner may downgrade
them to a blame entry and continue. All other kinds always escalate.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    PARAMETER = "parameter"
    INVALID_ENCODING = "invalid_encoding"
    NOT_IN_SUBGROUP = "not_in_subgroup"
    INVALID_SHARE = "invalid_share"
    INVALID_PROOF = "invalid_proof"
    INSUFFICIENT_SHARES = "insufficient_shares"
    MISSING_DATA = "missing_data"
    INVALID_INPUT = "invalid_input"
    DECRYPTION = "decryption"
    UNSUPPORTED = "unsupported"


_RECOVERABLE = {ErrorKind.INVALID_SHARE, ErrorKind.INVALID_PROOF}


class VssError(RuntimeError):
    """Base class of all library errors."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str, *, index: Optional[int] = None) -> None:
        super().__init__(message)
        self.index = index

    @property
    def recoverable(self) -> bool:
        return self.kind in _RECOVERABLE


class ShamirError(VssError):
    """Sharing parameters out of range."""

    kind = ErrorKind.PARAMETER


class InterpolationError(VssError):
    kind = ErrorKind.PARAMETER


class PolynomialError(VssError):
    kind = ErrorKind.PARAMETER


class InvalidScalar(VssError):
    kind = ErrorKind.INVALID_ENCODING


class InvalidSecret(VssError):
    kind = ErrorKind.INVALID_ENCODING


class InvalidPointEncoding(VssError):
    kind = ErrorKind.INVALID_ENCODING


class PointNotInSubgroup(VssError):
    kind = ErrorKind.NOT_IN_SUBGROUP


class InvalidSecretShare(VssError):
    kind = ErrorKind.INVALID_SHARE


class InvalidPublicShare(VssError):
    kind = ErrorKind.INVALID_PROOF


class InvalidPartialDecryptor(VssError):
    kind = ErrorKind.INVALID_PROOF


class InsufficientShares(VssError):
    kind = ErrorKind.INSUFFICIENT_SHARES

    def __init__(self, message: str = "Insufficient number of shares", **kwargs) -> None:
        super().__init__(message, **kwargs)


class MissingNonce(VssError):
    kind = ErrorKind.MISSING_DATA


class MissingPublicShare(VssError):
    kind = ErrorKind.MISSING_DATA


class MissingBinding(VssError):
    kind = ErrorKind.MISSING_DATA


class InvalidDimensions(VssError):
    kind = ErrorKind.INVALID_INPUT

    def __init__(self, message: str = "Invalid dimensions", **kwargs) -> None:
        super().__init__(message, **kwargs)


class InvalidInput(VssError):
    kind = ErrorKind.INVALID_INPUT


class AesError(VssError):
    kind = ErrorKind.DECRYPTION


class DecryptionError(VssError):
    kind = ErrorKind.DECRYPTION


class UnsupportedGroup(VssError):
    kind = ErrorKind.UNSUPPORTED


__all__ = [
    "ErrorKind",
    "VssError",
    "ShamirError",
    "InterpolationError",
    "PolynomialError",
    "InvalidScalar",
    "InvalidSecret",
    "InvalidPointEncoding",
    "PointNotInSubgroup",
    "InvalidSecretShare",
    "InvalidPublicShare",
    "InvalidPartialDecryptor",
    "InsufficientShares",
    "MissingNonce",
    "MissingPublicShare",
    "MissingBinding",
    "InvalidDimensions",
    "InvalidInput",
    "AesError",
    "DecryptionError",
    "UnsupportedGroup",
]
