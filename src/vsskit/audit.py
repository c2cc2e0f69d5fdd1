# SPDX-FileCopyrightText: 2025 vsskit contributors
# SPDX-License-Identifier: MIT
"""Append-only audit trail of protocol outcomes.

Each entry is a JSON file holding the event payload, an Ed25519 signature
over it and a SHA3-512 chain hash linking it to the previous entry. The
signing key is held in memory only; verification needs the same trail
instance (or its public key).
"""
from __future__ import annotations

import hashlib
import json
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict, Optional, Union

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from vsskit.config import settings
from vsskit.errors import InvalidInput

GENESIS = "GENESIS"


def _canonical(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")


class AuditTrail:
    """Signed, hash-chained event log rooted at ``directory``."""

    def __init__(
        self,
        directory: Optional[Union[os.PathLike, str]] = None,
        signing_key: Optional[Ed25519PrivateKey] = None,
    ) -> None:
        directory = directory if directory is not None else settings.audit_dir
        if directory is None:
            raise InvalidInput("No audit directory configured")
        self.directory = Path(directory).expanduser()
        self.directory.mkdir(parents=True, exist_ok=True)
        self._key = signing_key or Ed25519PrivateKey.generate()
        self._prev_hash = GENESIS

    @property
    def public_key(self) -> Ed25519PublicKey:
        return self._key.public_key()

    @property
    def head(self) -> str:
        """Chain hash of the latest entry."""
        return self._prev_hash

    def record(self, event: str, *, details: Optional[Dict[str, Any]] = None) -> Path:
        payload = {
            "event": event,
            "details": details or {},
            "timestamp": int(time.time()),
            "prev_hash": self._prev_hash,
        }
        message = _canonical(payload)
        signature = self._key.sign(message)
        chain_hash = hashlib.sha3_512(message + signature).hexdigest()
        entry = {
            "payload": payload,
            "signature": signature.hex(),
            "chain_hash": chain_hash,
        }
        path = self.directory / f"audit_{payload['timestamp']}_{uuid.uuid4().hex}.json"
        path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
        self._prev_hash = chain_hash
        return path

    def verify_entry(self, path: Union[os.PathLike, str]) -> bool:
        data = json.loads(Path(path).read_text())
        message = _canonical(data["payload"])
        signature = bytes.fromhex(data.get("signature") or "")
        try:
            self.public_key.verify(signature, message)
        except InvalidSignature:
            return False
        return hashlib.sha3_512(message + signature).hexdigest() == data.get("chain_hash")


__all__ = ["AuditTrail", "GENESIS"]
