import pytest

from vsskit.errors import (
    ErrorKind,
    InsufficientShares,
    InvalidDimensions,
    InvalidPartialDecryptor,
    InvalidSecretShare,
    MissingNonce,
    ShamirError,
    VssError,
)


@pytest.mark.parametrize(
    "error, kind, recoverable",
    [
        (ShamirError("bad"), ErrorKind.PARAMETER, False),
        (InvalidSecretShare("bad", index=2), ErrorKind.INVALID_SHARE, True),
        (InvalidPartialDecryptor("bad", index=3), ErrorKind.INVALID_PROOF, True),
        (MissingNonce("bad", index=1), ErrorKind.MISSING_DATA, False),
        (InsufficientShares(), ErrorKind.INSUFFICIENT_SHARES, False),
    ],
)
def test_error_kinds(error, kind, recoverable):
    assert isinstance(error, VssError)
    assert error.kind == kind
    assert error.recoverable is recoverable


def test_default_messages_and_index():
    assert str(InsufficientShares()) == "Insufficient number of shares"
    assert str(InvalidDimensions()) == "Invalid dimensions"
    assert InvalidSecretShare("Invalid share at index 4", index=4).index == 4
    assert ShamirError("x").index is None
