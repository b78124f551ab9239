"""Hash functions: SHA-256, salted message hash."""

from .sha256 import message_hash, sha256

__all__: tuple[str, ...] = ("message_hash", "sha256")
