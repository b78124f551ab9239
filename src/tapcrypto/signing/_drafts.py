"""
TAP protocol drafts: one class per message variant.

Each variant fixes its signature placement at class level. FLAT variants carry
sig/hash/salt on the message itself, NESTED variants carry them in the "prv"
section next to the signer address. to_dict() yields the wire field order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union

from ..errors import InvalidInput
from ..serde import Signature

PROTOCOL = "tap"


class Placement(Enum):
    FLAT = "flat"
    NESTED = "nested"


@dataclass
class PrivateSection:
    """Nested signature slot ("prv") of mint messages."""

    address: str
    salt: str
    sig: Signature | None = None
    hash: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "sig": self.sig,
            "hash": self.hash,
            "address": self.address,
            "salt": self.salt,
        }


class _Draft:
    op: ClassVar[str]
    placement: ClassVar[Placement]

    def to_dict(self) -> dict[str, Any]:
        raise NotImplementedError

    def signature_slot(self) -> Any:
        """Object holding salt, sig and hash for this variant."""
        if self.placement is Placement.NESTED:
            return self.prv
        return self

    def field(self, key: str) -> Any:
        """Value of a top-level wire field."""
        fields = self.to_dict()
        if key not in fields:
            raise InvalidInput(f"{self.op} message has no field {key!r}")
        return fields[key]


@dataclass
class _PayloadDraft(_Draft):
    """Flat draft with one caller-supplied JSON payload under message_key."""

    salt: str
    message_key: str | None = None
    payload: Any = None
    sig: Signature | None = None
    hash: str | None = None
    p: str = PROTOCOL

    _RESERVED: ClassVar[frozenset[str]] = frozenset({"p", "op", "sig", "hash", "salt"})

    def __post_init__(self) -> None:
        if self.message_key is not None and (
            not isinstance(self.message_key, str) or not self.message_key
        ):
            raise InvalidInput("Message key must be a non-empty string or None")
        if self.message_key in self._RESERVED:
            raise InvalidInput(f"Message key {self.message_key!r} is a reserved field")

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "p": self.p,
            "op": self.op,
            "sig": self.sig,
            "hash": self.hash,
            "salt": self.salt,
        }
        if self.message_key is not None:
            out[self.message_key] = self.payload
        return out


@dataclass
class PrivilegeAuthDraft(_PayloadDraft):
    op: ClassVar[str] = "privilege-auth"
    placement: ClassVar[Placement] = Placement.FLAT


@dataclass
class TokenAuthDraft(_PayloadDraft):
    op: ClassVar[str] = "token-auth"
    placement: ClassVar[Placement] = Placement.FLAT


@dataclass
class TokenMintDraft(_Draft):
    op: ClassVar[str] = "token-mint"
    placement: ClassVar[Placement] = Placement.NESTED

    tick: str
    amt: int | float
    prv: PrivateSection
    p: str = PROTOCOL

    def __post_init__(self) -> None:
        self.tick = self.tick.lower()

    def to_dict(self) -> dict[str, Any]:
        return {
            "p": self.p,
            "op": self.op,
            "tick": self.tick,
            "amt": self.amt,
            "prv": self.prv.to_dict(),
        }


@dataclass
class DmtMintDraft(_Draft):
    op: ClassVar[str] = "dmt-mint"
    placement: ClassVar[Placement] = Placement.NESTED

    tick: str
    blk: int
    dep: str
    prv: PrivateSection
    p: str = PROTOCOL

    def __post_init__(self) -> None:
        self.tick = self.tick.lower()

    def to_dict(self) -> dict[str, Any]:
        return {
            "p": self.p,
            "op": self.op,
            "tick": self.tick,
            "blk": self.blk,
            "dep": self.dep,
            "prv": self.prv.to_dict(),
        }


@dataclass
class PrivilegeVerificationDraft(_Draft):
    """Privilege-authority verification of an inscription; prv is the authority id."""

    op: ClassVar[str] = "privilege-auth"
    placement: ClassVar[Placement] = Placement.FLAT

    address: str
    salt: str
    prv: str
    verify: str
    col: str
    seq: int
    sig: Signature | None = None
    hash: str | None = None
    p: str = PROTOCOL

    def to_dict(self) -> dict[str, Any]:
        return {
            "p": self.p,
            "op": self.op,
            "sig": self.sig,
            "hash": self.hash,
            "address": self.address,
            "salt": self.salt,
            "prv": self.prv,
            "verify": self.verify,
            "col": self.col,
            "seq": self.seq,
        }


ProtocolDraft = Union[
    PrivilegeAuthDraft,
    TokenAuthDraft,
    TokenMintDraft,
    DmtMintDraft,
    PrivilegeVerificationDraft,
]

__all__: tuple[str, ...] = (
    "PROTOCOL",
    "DmtMintDraft",
    "Placement",
    "PrivateSection",
    "PrivilegeAuthDraft",
    "PrivilegeVerificationDraft",
    "ProtocolDraft",
    "TokenAuthDraft",
    "TokenMintDraft",
)
