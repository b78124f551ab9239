"""
TAP protocol signing: salted SHA-256 message hashes, recoverable secp256k1
signatures in {v, r, s} decimal form, and self-verified protocol messages.
Curve arithmetic is libsecp256k1 via coincurve.
"""

from .__about__ import __version__
from .errors import (
    EncodingError,
    InvalidInput,
    InvalidSignatureFormat,
    InvalidSignatureLength,
    RecoveryFailed,
    SelfVerificationFailed,
    SignatureError,
    SigningFailed,
    TapCryptoError,
)
from .hashes import message_hash, sha256
from .serde import (
    Signature,
    bytes_to_uint,
    canonical_json,
    join_signature,
    split_signature,
    uint_to_bytes,
)
from .signing import (
    KeyPair,
    Placement,
    VerificationResult,
    VerifyResult,
    sign,
    sign_and_verify,
    sign_auth,
    sign_dmt_mint,
    sign_mint,
    sign_token_auth,
    sign_token_redeem,
    sign_verification,
    verify,
)

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Errors
    "EncodingError",
    "InvalidInput",
    "InvalidSignatureFormat",
    "InvalidSignatureLength",
    "RecoveryFailed",
    "SelfVerificationFailed",
    "SignatureError",
    "SigningFailed",
    "TapCryptoError",
    # Hashes
    "message_hash",
    "sha256",
    # Serde
    "Signature",
    "bytes_to_uint",
    "canonical_json",
    "join_signature",
    "split_signature",
    "uint_to_bytes",
    # Signing: engine
    "KeyPair",
    "Placement",
    "VerificationResult",
    "VerifyResult",
    "sign",
    "sign_and_verify",
    "verify",
    # Signing: TAP builders
    "sign_auth",
    "sign_dmt_mint",
    "sign_mint",
    "sign_token_auth",
    "sign_token_redeem",
    "sign_verification",
)
