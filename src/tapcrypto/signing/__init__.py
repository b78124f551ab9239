"""Signing: sign/verify engine and TAP message builders."""

from ._drafts import (
    PROTOCOL,
    DmtMintDraft,
    Placement,
    PrivateSection,
    PrivilegeAuthDraft,
    PrivilegeVerificationDraft,
    ProtocolDraft,
    TokenAuthDraft,
    TokenMintDraft,
)
from ._engine import (
    KeyPair,
    VerificationResult,
    VerificationTest,
    VerifyResult,
    sign,
    sign_and_verify,
    verify,
)
from ._tap import (
    sign_auth,
    sign_dmt_mint,
    sign_mint,
    sign_token_auth,
    sign_token_redeem,
    sign_verification,
)

__all__: tuple[str, ...] = (
    "PROTOCOL",
    "DmtMintDraft",
    "KeyPair",
    "Placement",
    "PrivateSection",
    "PrivilegeAuthDraft",
    "PrivilegeVerificationDraft",
    "ProtocolDraft",
    "TokenAuthDraft",
    "TokenMintDraft",
    "VerificationResult",
    "VerificationTest",
    "VerifyResult",
    "sign",
    "sign_and_verify",
    "sign_auth",
    "sign_dmt_mint",
    "sign_mint",
    "sign_token_auth",
    "sign_token_redeem",
    "sign_verification",
    "verify",
)
