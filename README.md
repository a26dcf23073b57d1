# cuckoocycle

Building blocks for the Cuckoo Cycle memory-hard proof-of-work. The graph
has 2^23 edges (`EDGEBITS = 23`) and a proof is a cycle of 42 edges
(`PROOFSIZE = 42`). The package has no dependencies outside the standard
library.

- `cuckoocycle.siphash`: the SipHash-2-4 variant used to place graph edges.
  `SipHashKeys` holds four unsigned 64-bit words (`k0` to `k3`) and can be
  built from a buffer of at least 32 bytes with `SipHashKeys.from_bytes`.
  `siphash24(keys, nonce)` hashes a nonce, truncated to 32 bits, to a
  64-bit value.
- `cuckoocycle.cuckoo`: edge endpoints (`sipnode`), key derivation from a
  block header (`keys_from_header`), double SHA-256 (`double_sha256`) and
  proof checking (`verify`, `check_proof`).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

```python
from cuckoocycle.cuckoo import ProofError, VerifyCode, check_proof, keys_from_header, verify

header = bytes(80)
keys = keys_from_header(header)

nonces = list(range(1, 43))  # 42 strictly ascending edge indices

code = verify(nonces, keys)
if code is VerifyCode.OK:
    print("valid cycle")
else:
    print("rejected:", code.name)

# Or raise when the proof is not valid:
try:
    check_proof(nonces, keys)
except ProofError as err:
    print("invalid proof:", err.code.name)
```

`verify` returns one member of `VerifyCode`, checking in this order:

| Code | Meaning |
| --- | --- |
| `OK` | the nonces form a single 42-cycle |
| `TOO_BIG` | a nonce is greater than `NNODES` (2^24) |
| `TOO_SMALL` | the nonces are not strictly ascending |
| `NON_MATCHING` | the endpoints do not pair up |
| `BRANCH` | an endpoint is shared by more than two edges |
| `DEAD_END` | an endpoint has no matching edge |
| `SHORT_CYCLE` | the edges form a cycle shorter than the proof |

`VerifyCode.HEADER_LENGTH` exists as a member but `verify` never returns it.
`verify` raises `ValueError` when it is not given exactly 42 nonces or when a
nonce is negative. `check_proof` returns nothing for a valid proof and raises
`ProofError` (a `ValueError` subclass carrying the `code`) otherwise.

`sipnode(keys, nonce, uorv)` gives the endpoint of an edge on side `uorv`
(0 or 1, anything else raises `ValueError`), with the side as its lowest bit.

`keys_from_header` needs at least 80 bytes and uses only the first 80; a
shorter header raises `ValueError`. The keys are the SHA-256 of those bytes,
read as four little-endian 64-bit words:

```python
from cuckoocycle.siphash import SipHashKeys, siphash24

keys = SipHashKeys.from_bytes(bytes(range(32)))
print(hex(siphash24(keys, 7)))
```

`SipHashKeys.from_bytes` raises `ValueError` for fewer than 32 bytes, and the
constructor raises `ValueError` for a word outside the unsigned 64-bit range.

## What this package does not do

It checks proofs but does not find them: there is no solver or miner that
searches a header's graph for a 42-cycle, no nonce scanning, and no
comparison of hashes against a difficulty target. It has no command-line
program.