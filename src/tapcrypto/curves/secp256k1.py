"""
secp256k1 recoverable ECDSA over libsecp256k1 (coincurve).

Inputs are raw bytes: 32-byte hash, 32-byte private key, 33/65-byte public key,
64-byte compact signature r || s. Malformed inputs raise ValueError with a
short "Expected ..." message; a signature that is well formed but wrong is a
False from verify, not an error.
"""

from __future__ import annotations

from coincurve import PrivateKey, PublicKey

N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
HALF_N = N // 2

HASH_SIZE = 32
PRIVATE_KEY_SIZE = 32
SIGNATURE_SIZE = 64


def _check_hash(msg_hash: bytes) -> bytes:
    if not isinstance(msg_hash, (bytes, bytearray)) or len(msg_hash) != HASH_SIZE:
        raise ValueError("Expected Hash")
    return bytes(msg_hash)


def _scalars(sig64: bytes) -> tuple[int, int]:
    """(r, s) of a compact signature; both must lie in [1, n-1]."""
    if not isinstance(sig64, (bytes, bytearray)) or len(sig64) != SIGNATURE_SIZE:
        raise ValueError("Expected Signature")
    r = int.from_bytes(sig64[:32], "big")
    s = int.from_bytes(sig64[32:], "big")
    if not (0 < r < N and 0 < s < N):
        raise ValueError("Expected Signature")
    return r, s


def _der_int(n: int) -> bytes:
    b = n.to_bytes((n.bit_length() + 7) // 8 or 1, "big")
    if b[0] & 0x80:
        b = b"\x00" + b
    return bytes([0x02, len(b)]) + b


def _der(r: int, s: int) -> bytes:
    """DER-encode (r, s); coincurve's verify takes DER."""
    payload = _der_int(r) + _der_int(s)
    return bytes([0x30, len(payload)]) + payload


def sign_recoverable(msg_hash: bytes, privkey: bytes) -> tuple[bytes, int]:
    """
    Deterministic (RFC 6979) low-S ECDSA signature with recovery id.

    Args:
        msg_hash: 32-byte digest to sign (signed as is, no further hashing).
        privkey: 32-byte scalar in [1, n-1].

    Returns:
        (64-byte r || s, recovery id).
    """
    msg_hash = _check_hash(msg_hash)
    if not isinstance(privkey, (bytes, bytearray)) or len(privkey) != PRIVATE_KEY_SIZE:
        raise ValueError("Expected Private")
    if not 0 < int.from_bytes(privkey, "big") < N:
        raise ValueError("Expected Private")
    sig65 = PrivateKey(bytes(privkey)).sign_recoverable(msg_hash, hasher=None)
    return sig65[:SIGNATURE_SIZE], sig65[SIGNATURE_SIZE]


def verify(msg_hash: bytes, pubkey: bytes, sig64: bytes) -> bool:
    """
    Check a compact signature against a public key. High-S signatures are
    normalized first, so either form of a valid signature is accepted.

    Args:
        msg_hash: 32-byte digest that was signed.
        pubkey: 33-byte compressed or 65-byte uncompressed public key.
        sig64: 64-byte r || s.

    Returns:
        True iff the signature is valid.
    """
    msg_hash = _check_hash(msg_hash)
    r, s = _scalars(sig64)
    if s > HALF_N:
        s = N - s
    return PublicKey(bytes(pubkey)).verify(_der(r, s), msg_hash, hasher=None)


def recover(
    msg_hash: bytes, sig64: bytes, recovery_id: int, compressed: bool = True
) -> bytes | None:
    """
    Recover the signer's public key.

    Args:
        msg_hash: 32-byte digest that was signed.
        sig64: 64-byte r || s.
        recovery_id: 0..3.
        compressed: 33-byte output if True, else 65-byte.

    Returns:
        Serialized public key, or None when no point can be recovered.
    """
    msg_hash = _check_hash(msg_hash)
    _scalars(sig64)
    if recovery_id not in (0, 1, 2, 3):
        raise ValueError("Bad Recovery Id")
    try:
        pub = PublicKey.from_signature_and_message(
            bytes(sig64) + bytes([recovery_id]), msg_hash, hasher=None
        )
    except ValueError:
        return None
    return pub.format(compressed=compressed)


__all__: tuple[str, ...] = (
    "N",
    "recover",
    "sign_recoverable",
    "verify",
)
