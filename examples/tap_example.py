#!/usr/bin/env python3
"""Example: sign a TAP token mint and privilege auth, then re-verify from the wire."""

import json

from tapcrypto import sign_auth, sign_mint, verify

privkey = "6c94b29a47f0f4b7380f2f3975a612d4f5db4b56bbe8471d258ba3e125dbdce5"
pubkey = "03087906bf9472c7db48daee1478b7e70f4b3ce01436a241e3418b72ecdc87884b"
address = "bc1p5d7rjq7g6rdk2yhzks9smlaqtedr4dekq08ge8ztwac72sfr9rusxg3297"

mint = sign_mint(privkey, pubkey, "TAP", 1000, address)
print("Mint valid:", mint.test.valid)
print("Mint inscription:", mint.result)

auth = sign_auth(privkey, pubkey, "auth", {"message": "hello"})
print("Auth valid:", auth.test.valid, "recovered:", auth.test.pub_recovered[:16] + "...")

# A receiver only has the JSON; it checks the embedded hash and signature.
shipped = json.loads(mint.result)["prv"]
result = verify(bytes.fromhex(shipped["hash"]), bytes.fromhex(pubkey), shipped["sig"])
print("Receiver verify:", result.is_valid, result.pub_recovered == pubkey)
