"""Elliptic-curve backend: secp256k1 recoverable ECDSA."""

from . import secp256k1
from .secp256k1 import recover, sign_recoverable, verify

__all__: tuple[str, ...] = (
    "recover",
    "secp256k1",
    "sign_recoverable",
    "verify",
)
