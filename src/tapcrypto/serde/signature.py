"""
Recoverable signature (64-byte r || s plus recovery id) <-> portable {v, r, s}.

r and s travel as decimal strings, not hex, so the JSON form has no byte-order
ambiguity.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypedDict

from ..errors import EncodingError, InvalidSignatureFormat, InvalidSignatureLength
from .bigint import SCALAR_SIZE, bytes_to_uint, uint_to_bytes

SIGNATURE_SIZE = 2 * SCALAR_SIZE
RECOVERY_IDS = (0, 1, 2, 3)
_RECOVERY_ID_TEXT = tuple(str(i) for i in RECOVERY_IDS)


class Signature(TypedDict):
    v: str
    r: str
    s: str


def split_signature(
    sig64: bytes, recovery_id: int, output_format: str = "decimal"
) -> Signature:
    """
    Split a compact signature into {v, r, s}.

    Args:
        sig64: 64-byte r || s.
        recovery_id: Recovery id returned by the signer.
        output_format: "decimal" (wire form) or "hex".

    Returns:
        Signature dict in v, r, s order.
    """
    if not isinstance(sig64, (bytes, bytearray)):
        raise InvalidSignatureFormat("Invalid signature type")
    if len(sig64) != SIGNATURE_SIZE:
        raise InvalidSignatureLength(len(sig64))
    if recovery_id not in RECOVERY_IDS:
        raise InvalidSignatureFormat(f"Invalid recovery id: {recovery_id!r}")
    r = bytes(sig64[:SCALAR_SIZE])
    s = bytes(sig64[SCALAR_SIZE:])
    if output_format == "hex":
        return Signature(v=str(recovery_id), r=r.hex(), s=s.hex())
    if output_format == "decimal":
        return Signature(v=str(recovery_id), r=bytes_to_uint(r), s=bytes_to_uint(s))
    raise InvalidSignatureFormat(f"Unknown output format: {output_format!r}")


def join_signature(sig: Mapping[str, object]) -> tuple[bytes, int]:
    """
    Inverse of split_signature for the decimal form.

    Args:
        sig: Mapping with string "v", "r" and "s" entries.

    Returns:
        (sig64, recovery_id).
    """
    if not isinstance(sig, Mapping):
        raise InvalidSignatureFormat("Invalid signature type")
    r, s, v = sig.get("r"), sig.get("s"), sig.get("v")
    if not isinstance(r, str) or not isinstance(s, str) or not isinstance(v, str):
        raise InvalidSignatureFormat("Invalid signature format")
    if v not in _RECOVERY_ID_TEXT:
        raise InvalidSignatureFormat(f"Invalid recovery id: {v!r}")
    try:
        raw = uint_to_bytes(r) + uint_to_bytes(s)
    except EncodingError as exc:
        raise InvalidSignatureFormat(str(exc)) from exc
    return raw, int(v)


__all__: tuple[str, ...] = (
    "RECOVERY_IDS",
    "SIGNATURE_SIZE",
    "Signature",
    "join_signature",
    "split_signature",
)
