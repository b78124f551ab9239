"""Sign / verify engine and sign_and_verify self-check."""

import json

import pytest

import tapcrypto.curves
from tapcrypto import (
    InvalidInput,
    KeyPair,
    Placement,
    RecoveryFailed,
    SelfVerificationFailed,
    SigningFailed,
    canonical_json,
    message_hash,
    sign,
    sign_and_verify,
    verify,
)
from tapcrypto.signing import (
    PrivateSection,
    PrivilegeAuthDraft,
    TokenMintDraft,
)

PK = "6c94b29a47f0f4b7380f2f3975a612d4f5db4b56bbe8471d258ba3e125dbdce5"
PUB = "03087906bf9472c7db48daee1478b7e70f4b3ce01436a241e3418b72ecdc87884b"


@pytest.fixture
def keypair() -> KeyPair:
    return KeyPair.from_keys(PK, PUB)


def test_keypair_from_hex_and_bytes() -> None:
    a = KeyPair.from_keys(PK, PUB)
    b = KeyPair.from_keys(bytes.fromhex(PK), bytes.fromhex(PUB))
    assert a == b
    assert len(a.private_key) == 32 and len(a.public_key) == 33


@pytest.mark.parametrize(
    "priv,pub",
    [(PK[:-2], PUB), (PK, PUB[:-2]), (PK + "00", PUB), ("zz" * 32, PUB), (1, PUB)],
)
def test_keypair_rejects_bad_keys(priv, pub) -> None:
    with pytest.raises(InvalidInput):
        KeyPair.from_keys(priv, pub)


def test_keypair_is_frozen(keypair: KeyPair) -> None:
    with pytest.raises(AttributeError):
        keypair.private_key = bytes(32)


def test_sign_returns_signature_and_hash(keypair: KeyPair) -> None:
    signature, msg_hash = sign("test_message", keypair.private_key, "test_salt")
    assert msg_hash == message_hash("test_message", "test_salt")
    assert set(signature) == {"v", "r", "s"}
    assert signature["v"] in ("0", "1")
    assert signature["r"].isdigit() and signature["s"].isdigit()


def test_sign_is_deterministic(keypair: KeyPair) -> None:
    assert sign("m", keypair.private_key, "s") == sign("m", keypair.private_key, "s")
    assert sign("m", keypair.private_key, "s") != sign("m", keypair.private_key, "t")


def test_sign_then_verify(keypair: KeyPair) -> None:
    signature, msg_hash = sign("test_message", keypair.private_key, "test_salt")
    result = verify(msg_hash, keypair.public_key, signature)
    assert result.is_valid is True
    assert result.pub_recovered == PUB
    assert result.degenerate is False


@pytest.mark.parametrize("message,salt", [("", ""), ("é ü 中", "1"), ("x" * 5000, "0.1")])
def test_sign_then_verify_various_text(keypair: KeyPair, message: str, salt: str) -> None:
    signature, msg_hash = sign(message, keypair.private_key, salt)
    result = verify(msg_hash, keypair.public_key, signature)
    assert result.is_valid is True
    assert result.pub_recovered == PUB


def test_sign_rejects_invalid_private_key() -> None:
    with pytest.raises(SigningFailed, match="Failed to sign the message: .*Expected Private"):
        sign("test_message", b"test_privKey", "test_salt")
    with pytest.raises(SigningFailed):
        sign("test_message", bytes(32), "test_salt")


@pytest.mark.parametrize(
    "message,privkey,salt",
    [(b"m", bytes.fromhex(PK), "s"), ("m", PK, "s"), ("m", bytes.fromhex(PK), 1)],
)
def test_sign_rejects_bad_types(message, privkey, salt) -> None:
    with pytest.raises(InvalidInput):
        sign(message, privkey, salt)


def test_verify_wrong_hash_is_invalid_not_error(keypair: KeyPair) -> None:
    signature, _ = sign("test_message", keypair.private_key, "test_salt")
    result = verify(message_hash("other", "test_salt"), keypair.public_key, signature)
    assert result.is_valid is False
    assert result.pub_recovered != PUB


def test_verify_rejects_zero_signature(keypair: KeyPair) -> None:
    msg_hash = message_hash("test_message", "test_salt")
    with pytest.raises(RecoveryFailed, match="Failed to recover the public key"):
        verify(msg_hash, keypair.public_key, {"v": "0", "r": "0", "s": "0"})


@pytest.mark.parametrize(
    "signature",
    [{"v": "0", "r": "1"}, {"v": "0", "r": "1", "s": 1}, {"v": "9", "r": "1", "s": "1"}],
)
def test_verify_wraps_format_errors(keypair: KeyPair, signature) -> None:
    with pytest.raises(RecoveryFailed):
        verify(message_hash("m", "s"), keypair.public_key, signature)


def test_verify_rejects_unparseable_pubkey(keypair: KeyPair) -> None:
    signature, msg_hash = sign("m", keypair.private_key, "s")
    with pytest.raises(RecoveryFailed):
        verify(msg_hash, bytes(33), signature)


def test_verify_degenerate_recovery(keypair: KeyPair, monkeypatch) -> None:
    signature, msg_hash = sign("m", keypair.private_key, "s")
    monkeypatch.setattr(tapcrypto.curves, "recover", lambda *args, **kwargs: None)
    result = verify(msg_hash, keypair.public_key, signature)
    assert result.degenerate is True
    assert result.recovered is None
    assert result.pub_recovered == "00" * 33
    assert result.is_valid is True


def test_sign_and_verify_flat_without_message_key(keypair: KeyPair) -> None:
    draft = PrivilegeAuthDraft(salt="test_salt")
    verification = sign_and_verify(draft, keypair, "test_baseMessage", None)
    assert verification.test.valid is True
    assert verification.test.pub == PUB
    assert verification.test.pub_recovered == PUB
    assert verification.result == canonical_json(draft.to_dict())
    parsed = json.loads(verification.result)
    assert list(parsed) == ["p", "op", "sig", "hash", "salt"]
    assert parsed["hash"] == message_hash("test_baseMessage", "test_salt").hex()
    assert parsed["sig"] == draft.sig


def test_sign_and_verify_with_message_key(keypair: KeyPair) -> None:
    message = {"message": "test_baseMessage"}
    draft = PrivilegeAuthDraft(salt="test_salt", message_key="auth", payload=message)
    base_message = canonical_json(draft.field("auth"))
    verification = sign_and_verify(draft, keypair, base_message, "auth")
    assert verification.test.valid is True
    assert verification.test.pub == verification.test.pub_recovered == PUB
    assert verification.result == canonical_json(draft.to_dict())
    assert json.loads(verification.result)["auth"] == message


def test_sign_and_verify_nested_placement(keypair: KeyPair) -> None:
    draft = TokenMintDraft(
        tick="tap", amt=1, prv=PrivateSection(address="bc1qaddr", salt="s")
    )
    assert draft.placement is Placement.NESTED
    assert draft.signature_slot() is draft.prv
    verification = sign_and_verify(draft, keypair, "tap-token-mint-tap-1-bc1qaddr-")
    parsed = json.loads(verification.result)
    assert "sig" not in parsed and "hash" not in parsed
    assert parsed["prv"]["sig"] == draft.prv.sig
    assert parsed["prv"]["hash"] == message_hash("tap-token-mint-tap-1-bc1qaddr-", "s").hex()


def test_sign_and_verify_rejects_mismatched_base_message(keypair: KeyPair) -> None:
    draft = PrivilegeAuthDraft(salt="s", message_key="auth", payload={"a": 1})
    with pytest.raises(SelfVerificationFailed) as excinfo:
        sign_and_verify(draft, keypair, '{"a": 1}', "auth")
    assert excinfo.value.valid is False
    assert excinfo.value.pub == PUB


def test_sign_and_verify_unknown_message_key(keypair: KeyPair) -> None:
    draft = PrivilegeAuthDraft(salt="s")
    with pytest.raises(InvalidInput):
        sign_and_verify(draft, keypair, "m", "auth")


def test_verification_result_to_dict(keypair: KeyPair) -> None:
    verification = sign_and_verify(PrivilegeAuthDraft(salt="s"), keypair, "m")
    out = verification.to_dict()
    assert out["test"] == {"valid": True, "pub": PUB, "pubRecovered": PUB}
    assert out["result"] == verification.result


@pytest.mark.parametrize("message,salt", [("bad \ud800 text", "s"), ("m", "\udfff")])
def test_sign_rejects_unencodable_text(
    keypair: KeyPair, message: str, salt: str
) -> None:
    with pytest.raises(InvalidInput):
        sign(message, keypair.private_key, salt)


def test_sign_and_verify_rejects_mismatched_keypair() -> None:
    # Public key of private key 1 (the generator point), not of PK.
    other_pub = "0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    keypair = KeyPair.from_keys(PK, other_pub)
    with pytest.raises(SelfVerificationFailed) as excinfo:
        sign_and_verify(PrivilegeAuthDraft(salt="s"), keypair, "m")
    assert excinfo.value.valid is False
    assert excinfo.value.pub == other_pub
    assert excinfo.value.pub_recovered == PUB
    assert excinfo.value.pub_recovered != excinfo.value.pub


@pytest.mark.parametrize("message_key", ["", 0, b"auth"])
def test_payload_draft_rejects_bad_message_key(message_key) -> None:
    with pytest.raises(InvalidInput):
        PrivilegeAuthDraft(salt="s", message_key=message_key, payload={"a": 1})
