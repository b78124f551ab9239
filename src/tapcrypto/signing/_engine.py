"""
Sign, verify, and the sign-then-self-verify step used by every TAP builder.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .. import curves
from ..errors import (
    InvalidInput,
    RecoveryFailed,
    SelfVerificationFailed,
    SigningFailed,
)
from ..hashes import message_hash
from ..serde import Signature, canonical_json, join_signature, split_signature
from ._drafts import ProtocolDraft

logger = logging.getLogger(__name__)

PRIVATE_KEY_SIZE = 32
PUBLIC_KEY_SIZE = 33
_NO_KEY = bytes(PUBLIC_KEY_SIZE)


def _to_bytes(key: bytes | str, name: str) -> bytes:
    if isinstance(key, (bytes, bytearray)):
        return bytes(key)
    if isinstance(key, str):
        try:
            return bytes.fromhex(key)
        except ValueError as exc:
            raise InvalidInput(f"{name} is not valid hex") from exc
    raise InvalidInput(f"{name} must be bytes or a hex string")


@dataclass(frozen=True)
class KeyPair:
    """32-byte private key and its 33-byte compressed public key."""

    private_key: bytes
    public_key: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.private_key, bytes) or not isinstance(
            self.public_key, bytes
        ):
            raise InvalidInput("Keys must be bytes")
        if (
            len(self.private_key) != PRIVATE_KEY_SIZE
            or len(self.public_key) != PUBLIC_KEY_SIZE
        ):
            raise InvalidInput("Invalid key length")

    @classmethod
    def from_keys(cls, privkey: bytes | str, pubkey: bytes | str) -> KeyPair:
        """Build from raw bytes or hex strings."""
        return cls(_to_bytes(privkey, "privkey"), _to_bytes(pubkey, "pubkey"))


@dataclass(frozen=True)
class VerifyResult:
    is_valid: bool
    recovered: bytes | None

    @property
    def degenerate(self) -> bool:
        """True when no public key could be recovered from the signature."""
        return self.recovered is None

    @property
    def pub_recovered(self) -> str:
        """Recovered key as hex; 33 zero bytes when recovery was degenerate."""
        return (self.recovered if self.recovered is not None else _NO_KEY).hex()


@dataclass(frozen=True)
class VerificationTest:
    valid: bool
    pub: str
    pub_recovered: str


@dataclass(frozen=True)
class VerificationResult:
    test: VerificationTest
    result: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "test": {
                "valid": self.test.valid,
                "pub": self.test.pub,
                "pubRecovered": self.test.pub_recovered,
            },
            "result": self.result,
        }


def sign(message: str, privkey: bytes, salt: str) -> tuple[Signature, bytes]:
    """
    Sign SHA256(message || salt).

    Args:
        message: Text to sign.
        privkey: 32-byte secp256k1 private key.
        salt: Per-message nonce appended to message before hashing.

    Returns:
        (signature in {v, r, s} decimal form, 32-byte message hash).

    Raises:
        InvalidInput: message or salt not str, privkey not bytes.
        SigningFailed: the curve signer rejected the key or hash.
    """
    if (
        not isinstance(message, str)
        or not isinstance(privkey, (bytes, bytearray))
        or not isinstance(salt, str)
    ):
        raise InvalidInput("Invalid input types")
    try:
        msg_hash = message_hash(message, salt)
    except UnicodeEncodeError as exc:
        raise InvalidInput("Message and salt must be encodable as UTF-8") from exc
    try:
        sig64, recovery_id = curves.sign_recoverable(msg_hash, bytes(privkey))
    except (TypeError, ValueError) as exc:
        raise SigningFailed(exc) from exc
    return split_signature(sig64, recovery_id), msg_hash


def verify(
    msg_hash: bytes, pubkey: bytes, signature: Signature | Mapping[str, Any]
) -> VerifyResult:
    """
    Verify a {v, r, s} signature and recover the signer's key.

    A wrong but well-formed signature yields is_valid=False. Anything the curve
    library cannot even interpret (zero scalars, bad v, unparseable key) raises.

    Args:
        msg_hash: 32-byte hash that was signed.
        pubkey: 33-byte compressed public key.
        signature: Decimal {v, r, s}.

    Returns:
        VerifyResult with validity and recovered key (None if degenerate).

    Raises:
        RecoveryFailed: signature or key cannot be decoded or processed.
    """
    if not isinstance(msg_hash, (bytes, bytearray)) or not isinstance(
        pubkey, (bytes, bytearray)
    ):
        raise InvalidInput("Invalid input types")
    try:
        sig64, recovery_id = join_signature(signature)
        is_valid = curves.verify(bytes(msg_hash), bytes(pubkey), sig64)
        recovered = curves.recover(
            bytes(msg_hash), sig64, recovery_id, compressed=True
        )
    except ValueError as exc:
        raise RecoveryFailed(exc) from exc
    if recovered is None:
        logger.debug("Recovery produced no key for hash %s", bytes(msg_hash).hex())
    return VerifyResult(is_valid=bool(is_valid), recovered=recovered)


def sign_and_verify(
    draft: ProtocolDraft,
    keypair: KeyPair,
    base_message: str,
    message_key: str | None = None,
) -> VerificationResult:
    """
    Sign base_message into draft, then re-derive and verify what was shipped.

    The signature and hex hash go into the same slot the salt is read from
    (draft.prv for nested variants, the draft itself for flat ones). The
    self-check re-serializes draft[message_key] when message_key is given,
    so base_message must already equal that serialization.

    Args:
        draft: Unsigned protocol draft; mutated in place.
        keypair: Signing key pair.
        base_message: Exact text to sign.
        message_key: Wire field whose JSON is the signed text, or None.

    Returns:
        VerificationResult whose result is the canonical JSON of the signed draft.

    Raises:
        SelfVerificationFailed: the emitted message does not verify as shipped.
    """
    slot = draft.signature_slot()
    salt = slot.salt
    signature, msg_hash = sign(base_message, keypair.private_key, salt)
    slot.sig = signature
    slot.hash = msg_hash.hex()
    logger.debug(
        "Signed %s (%s placement), hash %s",
        draft.op,
        draft.placement.value,
        slot.hash,
    )

    if message_key is not None:
        test_message = canonical_json(draft.field(message_key))
    else:
        test_message = base_message
    outcome = verify(message_hash(test_message, salt), keypair.public_key, slot.sig)
    pub = keypair.public_key.hex()
    if not outcome.is_valid or outcome.pub_recovered != pub:
        raise SelfVerificationFailed(
            draft.op, outcome.is_valid, pub, outcome.pub_recovered
        )

    return VerificationResult(
        test=VerificationTest(
            valid=outcome.is_valid, pub=pub, pub_recovered=outcome.pub_recovered
        ),
        result=canonical_json(draft.to_dict()),
    )


__all__: tuple[str, ...] = (
    "KeyPair",
    "VerificationResult",
    "VerificationTest",
    "VerifyResult",
    "sign",
    "sign_and_verify",
    "verify",
)
