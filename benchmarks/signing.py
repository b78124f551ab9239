"""
Benchmark signing: sign, verify and full TAP message assembly.
Reports time per call and peak memory (tracemalloc) per run.

Run from repo root:

  PYTHONPATH=src python benchmarks/signing.py

Or after pip install -e .:

  python benchmarks/signing.py
"""

from __future__ import annotations

import os
import sys
import time
import tracemalloc

_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from tapcrypto import sign, sign_auth, sign_mint, sign_token_redeem, verify

N_TIME = 500
N_MEM = 200
PRIV = bytes.fromhex("6c94b29a47f0f4b7380f2f3975a612d4f5db4b56bbe8471d258ba3e125dbdce5")
PUB = bytes.fromhex(
    "03087906bf9472c7db48daee1478b7e70f4b3ce01436a241e3418b72ecdc87884b"
)
ADDRESS = "bc1p5d7rjq7g6rdk2yhzks9smlaqtedr4dekq08ge8ztwac72sfr9rusxg3297"
MESSAGE = "bench message for TAP"
SALT = "0.123456789"
REDEEM_ITEMS = [
    {"tick": "tap", "amt": "1000", "address": ADDRESS, "dta": None} for _ in range(16)
]


def _time_per_call(fn, *args, n: int = N_TIME, **kwargs) -> float:
    for _ in range(20):
        fn(*args, **kwargs)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args, **kwargs)
    return (time.perf_counter() - start) / n


def _peak_kb(fn, *args, n: int = N_MEM, **kwargs) -> float:
    tracemalloc.start()
    if hasattr(tracemalloc, "reset_peak"):
        tracemalloc.reset_peak()
    for _ in range(n):
        fn(*args, **kwargs)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return peak / 1024.0


def main() -> None:
    print("Benchmark: TAP signing (libsecp256k1 via coincurve)")
    print()

    # Sanity
    signature, msg_hash = sign(MESSAGE, PRIV, SALT)
    assert verify(msg_hash, PUB, signature).is_valid
    assert sign_mint(PRIV, PUB, "tap", 1000, ADDRESS, SALT).test.valid
    print("  Sanity check: sign/verify and assembly OK.")
    print()

    print(f"  n = {N_TIME} (time), {N_MEM} (memory)")
    print()

    print("  --- Engine ---")
    t = _time_per_call(sign, MESSAGE, PRIV, SALT) * 1000
    print(f"  sign                 {t:.4f} ms")
    t = _time_per_call(verify, msg_hash, PUB, signature) * 1000
    print(f"  verify               {t:.4f} ms")
    print()

    print("  --- Assembly (sign + self-verify + JSON) ---")
    t = _time_per_call(sign_mint, PRIV, PUB, "tap", 1000, ADDRESS, SALT) * 1000
    print(f"  sign_mint            {t:.4f} ms")
    t = _time_per_call(sign_auth, PRIV, PUB, "auth", {"message": MESSAGE}, SALT) * 1000
    print(f"  sign_auth            {t:.4f} ms")
    t = (
        _time_per_call(sign_token_redeem, PRIV, PUB, REDEEM_ITEMS, "", "", SALT)
        * 1000
    )
    print(f"  sign_token_redeem    {t:.4f} ms  ({len(REDEEM_ITEMS)} items)")
    print()

    print("  --- Peak memory (KiB) ---")
    m = _peak_kb(sign, MESSAGE, PRIV, SALT)
    print(f"  sign                 {m:.2f}")
    m = _peak_kb(sign_token_redeem, PRIV, PUB, REDEEM_ITEMS, "", "", SALT)
    print(f"  sign_token_redeem    {m:.2f}")


if __name__ == "__main__":
    main()
