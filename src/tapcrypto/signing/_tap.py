"""
TAP message builders: privilege auth, token mint, DMT mint, privilege
verification, token auth and token redeem.

Each builder assembles its draft, derives the text to sign, and returns the
self-verified VerificationResult from sign_and_verify unchanged.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Mapping
from typing import Any, Union

from ..serde import canonical_json, template_value
from ._drafts import (
    DmtMintDraft,
    PrivateSection,
    PrivilegeAuthDraft,
    PrivilegeVerificationDraft,
    TokenAuthDraft,
    TokenMintDraft,
)
from ._engine import KeyPair, VerificationResult, sign_and_verify

logger = logging.getLogger(__name__)

Key = Union[bytes, str]
Salt = Union[str, int, float, None]

_rng = random.SystemRandom()


def _salt(salt: Salt) -> str:
    """Stringified caller salt, or a fresh random one."""
    if salt is None:
        return str(_rng.random())
    return template_value(salt)


def _dashed(*parts: object) -> str:
    return "".join(f"{template_value(part)}-" for part in parts)


def sign_auth(
    privkey: Key,
    pubkey: Key,
    message_key: str,
    message: str | Mapping[str, Any],
    salt: Salt = None,
) -> VerificationResult:
    """
    Privilege authorization: the JSON of message, stored under message_key.

    Args:
        privkey: 32-byte private key (bytes or hex).
        pubkey: 33-byte compressed public key (bytes or hex).
        message_key: Wire field holding the message (e.g. "auth").
        message: Arbitrary JSON payload.
        salt: Optional salt; random when omitted.

    Returns:
        VerificationResult.
    """
    keypair = KeyPair.from_keys(privkey, pubkey)
    draft = PrivilegeAuthDraft(
        salt=_salt(salt), message_key=message_key, payload=message
    )
    logger.debug("Assembling privilege-auth under %r", message_key)
    return sign_and_verify(draft, keypair, canonical_json(message), message_key)


def sign_mint(
    privkey: Key,
    pubkey: Key,
    ticker: str,
    amount: int | float,
    address: str,
    salt: Salt = None,
) -> VerificationResult:
    """
    Token mint; signs "p-op-tick-amt-address-".

    Args:
        privkey: 32-byte private key (bytes or hex).
        pubkey: 33-byte compressed public key (bytes or hex).
        ticker: Token ticker, lower-cased on the wire.
        amount: Amount to mint.
        address: Receiving address.
        salt: Optional salt; random when omitted.

    Returns:
        VerificationResult.
    """
    keypair = KeyPair.from_keys(privkey, pubkey)
    draft = TokenMintDraft(
        tick=ticker,
        amt=amount,
        prv=PrivateSection(address=address, salt=_salt(salt)),
    )
    base_message = _dashed(draft.p, draft.op, draft.tick, draft.amt, draft.prv.address)
    logger.debug("Assembling token-mint for %s", draft.tick)
    return sign_and_verify(draft, keypair, base_message)


def sign_dmt_mint(
    privkey: Key,
    pubkey: Key,
    ticker: str,
    block: int,
    dependency: str,
    address: str,
    salt: Salt = None,
) -> VerificationResult:
    """DMT mint; signs "p-op-tick-blk-dep-address-"."""
    keypair = KeyPair.from_keys(privkey, pubkey)
    draft = DmtMintDraft(
        tick=ticker,
        blk=block,
        dep=dependency,
        prv=PrivateSection(address=address, salt=_salt(salt)),
    )
    base_message = _dashed(
        draft.p, draft.op, draft.tick, draft.blk, draft.dep, draft.prv.address
    )
    logger.debug("Assembling dmt-mint for %s at block %s", draft.tick, draft.blk)
    return sign_and_verify(draft, keypair, base_message)


def sign_verification(
    privkey: Key,
    pubkey: Key,
    privilege_authority_id: str,
    sha256_hash: str,
    collection: str,
    sequence: int,
    address: str,
    salt: Salt = None,
) -> VerificationResult:
    """
    Privilege-authority verification; signs "prv-col-verify-seq-address-".

    Args:
        privkey: 32-byte private key (bytes or hex).
        pubkey: 33-byte compressed public key (bytes or hex).
        privilege_authority_id: Inscription id of the privilege authority.
        sha256_hash: Hash being verified.
        collection: Collection name.
        sequence: Sequence number within the collection.
        address: Receiving address.
        salt: Optional salt; random when omitted.

    Returns:
        VerificationResult.
    """
    keypair = KeyPair.from_keys(privkey, pubkey)
    draft = PrivilegeVerificationDraft(
        address=address,
        salt=_salt(salt),
        prv=privilege_authority_id,
        verify=sha256_hash,
        col=collection,
        seq=sequence,
    )
    base_message = _dashed(draft.prv, draft.col, draft.verify, draft.seq, draft.address)
    return sign_and_verify(draft, keypair, base_message)


def sign_token_auth(
    privkey: Key,
    pubkey: Key,
    auth_tokens: Iterable[str] = (),
    salt: Salt = None,
) -> VerificationResult:
    """Token auth; signs the JSON list of authorized tickers under "auth"."""
    return _token_auth(privkey, pubkey, "auth", list(auth_tokens), salt)


def sign_token_redeem(
    privkey: Key,
    pubkey: Key,
    redeem_items: Iterable[Mapping[str, Any]] = (),
    auth: str = "",
    data: str = "",
    salt: Salt = None,
) -> VerificationResult:
    """
    Token redeem; signs {"items", "auth", "data"} under "redeem".

    Args:
        privkey: 32-byte private key (bytes or hex).
        pubkey: 33-byte compressed public key (bytes or hex).
        redeem_items: Items to redeem, e.g. {"tick", "amt", "address", "dta"}.
        auth: Inscription id of the token-auth being redeemed against.
        data: Free-form data string.
        salt: Optional salt; random when omitted.

    Returns:
        VerificationResult.
    """
    message = {
        "items": [dict(item) for item in redeem_items],
        "auth": auth,
        "data": data,
    }
    return _token_auth(privkey, pubkey, "redeem", message, salt)


def _token_auth(
    privkey: Key,
    pubkey: Key,
    message_key: str,
    message: list[str] | dict[str, Any],
    salt: Salt,
) -> VerificationResult:
    keypair = KeyPair.from_keys(privkey, pubkey)
    draft = TokenAuthDraft(salt=_salt(salt), message_key=message_key, payload=message)
    logger.debug("Assembling token-auth (%s)", message_key)
    return sign_and_verify(draft, keypair, canonical_json(message), message_key)


__all__: tuple[str, ...] = (
    "sign_auth",
    "sign_dmt_mint",
    "sign_mint",
    "sign_token_auth",
    "sign_token_redeem",
    "sign_verification",
)
