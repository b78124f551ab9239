"""
Fixed-width big-endian buffers <-> unsigned integer decimal strings.
"""

from __future__ import annotations

from ..errors import EncodingError

SCALAR_SIZE = 32


def bytes_to_uint(buf: bytes) -> str:
    """
    Big-endian unsigned integer of buf, as a decimal string.

    Args:
        buf: Any number of bytes (empty is 0).

    Returns:
        Decimal string without sign or leading zeros.
    """
    return str(int.from_bytes(bytes(buf), "big"))


def uint_to_bytes(value: str, length: int = SCALAR_SIZE) -> bytes:
    """
    Parse a decimal unsigned integer and left-pad it to exactly length bytes.

    Args:
        value: Decimal digits only.
        length: Output width in bytes.

    Returns:
        length-byte big-endian encoding.

    Raises:
        EncodingError: value is not a decimal uint or does not fit in length bytes.
    """
    if not isinstance(value, str) or not value.isascii() or not value.isdigit():
        raise EncodingError(f"Not an unsigned decimal integer: {value!r}")
    n = int(value)
    try:
        return n.to_bytes(length, "big")
    except OverflowError as exc:
        raise EncodingError(f"Integer does not fit in {length} bytes") from exc


__all__: tuple[str, ...] = ("SCALAR_SIZE", "bytes_to_uint", "uint_to_bytes")
