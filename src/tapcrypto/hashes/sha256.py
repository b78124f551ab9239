"""
SHA-256 and the salted message hash: SHA256(utf8(message) || utf8(salt)).

Plain concatenation with no length prefix or delimiter, so "ab" + "c" and
"a" + "bc" hash the same. Callers needing domain separation must add it to the
message themselves.
"""

from __future__ import annotations

import hashlib


def sha256(data: bytes | str) -> bytes:
    """
    Single SHA-256.

    Args:
        data: Bytes, or a str which is UTF-8 encoded first.

    Returns:
        32-byte digest.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    return hashlib.sha256(data).digest()


def message_hash(message: str, salt: str) -> bytes:
    """32-byte digest of message followed by salt."""
    return sha256(message + salt)


__all__: tuple[str, ...] = ("message_hash", "sha256")
