"""Cuckoo Cycle proof-of-work: graph edge generation and proof verification."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from enum import IntEnum

from cuckoocycle.siphash import SipHashKeys, siphash24

EDGEBITS = 23
PROOFSIZE = 42
HEADERLEN = 80

NEDGES = 1 << EDGEBITS
NNODES = 2 * NEDGES
EDGEMASK = NEDGES - 1

_MASK32 = (1 << 32) - 1


class VerifyCode(IntEnum):
    """Outcome of checking a proof."""

    OK = 0
    HEADER_LENGTH = 1
    TOO_BIG = 2
    TOO_SMALL = 3
    NON_MATCHING = 4
    BRANCH = 5
    DEAD_END = 6
    SHORT_CYCLE = 7


class ProofError(ValueError):
    """Raised when a proof does not form a valid cycle."""

    def __init__(self, code: VerifyCode) -> None:
        super().__init__(f"invalid proof: {code.name}")
        self.code = code


def sipnode(keys: SipHashKeys, nonce: int, uorv: int) -> int:
    """Return the endpoint of edge *nonce* on side *uorv* (0 or 1), partition bit included."""
    if uorv not in (0, 1):
        raise ValueError("uorv must be 0 or 1")
    hashed = siphash24(keys, (2 * nonce + uorv) & _MASK32) & EDGEMASK
    return (hashed << 1) | uorv


def double_sha256(data: bytes) -> bytes:
    """SHA-256 applied twice."""
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def keys_from_header(header: bytes) -> SipHashKeys:
    """Derive siphash keys from the SHA-256 of the first 80 header bytes."""
    header = bytes(header)
    if len(header) < HEADERLEN:
        raise ValueError(f"header needs {HEADERLEN} bytes, got {len(header)}")
    return SipHashKeys.from_bytes(hashlib.sha256(header[:HEADERLEN]).digest())


def _trace_cycle(uvs: Sequence[int], proofsize: int = PROOFSIZE) -> VerifyCode:
    """Follow the cycle through edge endpoints laid out as u0, v0, u1, v1, ..."""
    size = len(uvs)
    length = 0
    i = 0
    while True:
        j = i
        for k in ((i + step) % size for step in range(2, size, 2)):
            if uvs[k] == uvs[i]:
                if j != i:
                    return VerifyCode.BRANCH
                j = k
        if j == i:
            return VerifyCode.DEAD_END
        i = j ^ 1
        length += 1
        if i == 0:
            break
    return VerifyCode.OK if length == proofsize else VerifyCode.SHORT_CYCLE


def verify(nonces: Sequence[int], keys: SipHashKeys) -> VerifyCode:
    """Check that ascending *nonces* form a PROOFSIZE-cycle in the graph of *keys*."""
    if len(nonces) != PROOFSIZE:
        raise ValueError(f"a proof holds {PROOFSIZE} nonces, got {len(nonces)}")
    uvs: list[int] = []
    xor0 = xor1 = 0
    previous = None
    for nonce in nonces:
        if nonce < 0:
            raise ValueError("nonces must be non-negative")
        if nonce > NNODES:
            return VerifyCode.TOO_BIG
        if previous is not None and nonce <= previous:
            return VerifyCode.TOO_SMALL
        previous = nonce
        u = sipnode(keys, nonce, 0)
        v = sipnode(keys, nonce, 1)
        xor0 ^= u
        xor1 ^= v
        uvs.extend((u, v))
    if xor0 | xor1:
        return VerifyCode.NON_MATCHING
    return _trace_cycle(uvs)


def check_proof(nonces: Sequence[int], keys: SipHashKeys) -> None:
    """Raise ProofError unless *nonces* is a valid proof for *keys*."""
    code = verify(nonces, keys)
    if code is not VerifyCode.OK:
        raise ProofError(code)