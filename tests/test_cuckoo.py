import pytest
from hypothesis import given, strategies as st

from cuckoocycle.cuckoo import (
    NNODES,
    PROOFSIZE,
    ProofError,
    VerifyCode,
    _trace_cycle,
    check_proof,
    double_sha256,
    keys_from_header,
    sipnode,
    verify,
)
from cuckoocycle.siphash import SipHashKeys

KEYS = SipHashKeys.from_bytes(bytes(range(32)))


def _interleave(us, vs):
    return [x for pair in zip(us, vs) for x in pair]


def test_double_sha256_of_empty_input():
    assert double_sha256(b"").hex() == (
        "5df6e0e2761359d30a8275058e299fcc0381534545f55cf43e41983f5d4c9456"
    )


def test_double_sha256_length():
    assert len(double_sha256(b"header bytes")) == 32


@given(st.integers(min_value=0, max_value=2**23 - 1), st.sampled_from([0, 1]))
def test_sipnode_parity_and_range(nonce, uorv):
    node = sipnode(KEYS, nonce, uorv)
    assert node & 1 == uorv
    assert 0 <= node < NNODES


def test_sipnode_rejects_bad_side():
    with pytest.raises(ValueError):
        sipnode(KEYS, 1, 2)


def test_keys_from_header_uses_only_first_80_bytes():
    header = bytes(range(80))
    assert keys_from_header(header + b"tail") == keys_from_header(header)
    assert keys_from_header(header) != keys_from_header(bytes(80))


def test_keys_from_header_rejects_short_header():
    with pytest.raises(ValueError):
        keys_from_header(bytes(79))


def test_verify_too_big():
    nonces = list(range(PROOFSIZE - 1)) + [NNODES + 1]
    assert verify(nonces, KEYS) is VerifyCode.TOO_BIG


def test_verify_not_ascending():
    nonces = list(range(PROOFSIZE))
    nonces[5] = nonces[4]
    assert verify(nonces, KEYS) is VerifyCode.TOO_SMALL


def test_verify_random_nonces_do_not_match():
    assert verify(list(range(PROOFSIZE)), KEYS) is VerifyCode.NON_MATCHING


def test_verify_wrong_length():
    with pytest.raises(ValueError):
        verify(list(range(PROOFSIZE - 1)), KEYS)


def test_check_proof_raises_with_code():
    with pytest.raises(ProofError) as info:
        check_proof(list(range(PROOFSIZE)), KEYS)
    assert info.value.code is VerifyCode.NON_MATCHING


def test_trace_full_cycle_is_ok():
    us = [e // 2 for e in range(PROOFSIZE)]
    vs = [1000 + ((e + 1) % PROOFSIZE) // 2 for e in range(PROOFSIZE)]
    assert _trace_cycle(_interleave(us, vs)) is VerifyCode.OK


def test_trace_short_cycle():
    uvs = _interleave([0, 0, 1, 1], [10, 10, 11, 11])
    assert _trace_cycle(uvs, proofsize=4) is VerifyCode.SHORT_CYCLE


def test_trace_dead_end():
    uvs = _interleave([0, 1, 2, 3], [10, 10, 11, 11])
    assert _trace_cycle(uvs, proofsize=4) is VerifyCode.DEAD_END


def test_trace_branch():
    uvs = _interleave([0, 0, 0, 1], [10, 10, 11, 11])
    assert _trace_cycle(uvs, proofsize=4) is VerifyCode.BRANCH