"""Serialization: big-integer codec, signature codec, canonical JSON."""

from .bigint import bytes_to_uint, uint_to_bytes
from .canonical import canonical_json, template_value
from .signature import Signature, join_signature, split_signature

__all__: tuple[str, ...] = (
    "Signature",
    "bytes_to_uint",
    "canonical_json",
    "join_signature",
    "split_signature",
    "template_value",
    "uint_to_bytes",
)
