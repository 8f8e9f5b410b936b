"""Stark field-element helpers, Cairo-style Keccak hashing and Cairo Zero program loading."""

__version__ = "0.1.0"
__all__ = ["felt", "keccak", "program"]