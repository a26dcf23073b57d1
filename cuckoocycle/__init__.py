"""Cuckoo Cycle proof-of-work: SipHash edge generation and proof verification."""

__version__ = "0.1.0"
__all__ = ["cuckoo", "siphash"]