"""
Exception hierarchy. Everything derives from ValueError so callers that only
catch ValueError keep working.
"""

from __future__ import annotations


class TapCryptoError(ValueError):
    """Base class for all tapcrypto errors."""


class InvalidInput(TapCryptoError):
    """Argument of the wrong type or shape."""


class EncodingError(TapCryptoError):
    """Integer does not fit the fixed-width buffer, or is not a decimal uint."""


class SignatureError(TapCryptoError):
    """Malformed signature structure, caught before the curve library sees it."""


class InvalidSignatureLength(SignatureError):
    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Invalid signature length: expected 64 bytes, got {length}")


class InvalidSignatureFormat(SignatureError):
    """Missing or non-string v/r/s, or an unusable recovery id."""


class SigningFailed(TapCryptoError):
    """The curve signer rejected the key or hash."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Failed to sign the message: {type(cause).__name__}: {cause}")


class RecoveryFailed(TapCryptoError):
    """The signature could not be decoded, verified or recovered."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(
            f"Failed to recover the public key: {type(cause).__name__}: {cause}"
        )


class SelfVerificationFailed(TapCryptoError):
    """An assembled message did not pass its own verification."""

    def __init__(self, op: str, valid: bool, pub: str, pub_recovered: str):
        self.op = op
        self.valid = valid
        self.pub = pub
        self.pub_recovered = pub_recovered
        super().__init__(
            f"Self-verification failed for {op!r}: valid={valid}, "
            f"pub={pub}, pubRecovered={pub_recovered}"
        )


__all__: tuple[str, ...] = (
    "EncodingError",
    "InvalidInput",
    "InvalidSignatureFormat",
    "InvalidSignatureLength",
    "RecoveryFailed",
    "SelfVerificationFailed",
    "SignatureError",
    "SigningFailed",
    "TapCryptoError",
)
