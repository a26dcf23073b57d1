"""SipHash-2-4 specialised to a precomputed 256-bit key state and 32-bit nonces."""

from __future__ import annotations

from dataclasses import dataclass

_MASK64 = (1 << 64) - 1
_MASK32 = (1 << 32) - 1
_KEY_BYTES = 32


def _rotl(x: int, b: int) -> int:
    return ((x << b) | (x >> (64 - b))) & _MASK64


@dataclass(frozen=True)
class SipHashKeys:
    """The four 64-bit words of SipHash state derived from a key."""

    k0: int
    k1: int
    k2: int
    k3: int

    def __post_init__(self) -> None:
        for name in ("k0", "k1", "k2", "k3"):
            value = getattr(self, name)
            if not 0 <= value <= _MASK64:
                raise ValueError(f"{name} must be an unsigned 64-bit integer")

    @classmethod
    def from_bytes(cls, keybuf: bytes) -> SipHashKeys:
        """Build keys from the first 32 bytes of *keybuf*, read as little-endian words."""
        buf = bytes(keybuf)
        if len(buf) < _KEY_BYTES:
            raise ValueError(f"key buffer needs {_KEY_BYTES} bytes, got {len(buf)}")
        words = (
            int.from_bytes(buf[offset:offset + 8], "little")
            for offset in range(0, _KEY_BYTES, 8)
        )
        return cls(*words)


def siphash24(keys: SipHashKeys, nonce: int) -> int:
    """Hash a nonce (truncated to 32 bits) under *keys*, returning a 64-bit value."""
    nonce &= _MASK32
    v0, v1, v2, v3 = keys.k0, keys.k1, keys.k2, keys.k3 ^ nonce

    def rounds(count: int) -> None:
        nonlocal v0, v1, v2, v3
        for _ in range(count):
            v0 = (v0 + v1) & _MASK64
            v2 = (v2 + v3) & _MASK64
            v1 = _rotl(v1, 13)
            v3 = _rotl(v3, 16)
            v1 ^= v0
            v3 ^= v2
            v0 = _rotl(v0, 32)
            v2 = (v2 + v1) & _MASK64
            v0 = (v0 + v3) & _MASK64
            v1 = _rotl(v1, 17)
            v3 = _rotl(v3, 21)
            v1 ^= v2
            v3 ^= v0
            v2 = _rotl(v2, 32)

    rounds(2)
    v0 ^= nonce
    v2 ^= 0xFF
    rounds(4)
    return v0 ^ v1 ^ v2 ^ v3