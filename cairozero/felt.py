"""Field elements of the STARK prime field and small integer helpers."""

from __future__ import annotations

from typing import MutableSequence, TypeVar

T = TypeVar("T")

PRIME = 2**251 + 17 * 2**192 + 1

FELT_ZERO = 0
FELT_ONE = 1
FELT_127 = 1 << 127
FELT_MAX_128 = 1 << 128
FELT_UPPER_BOUND = 1 << 250
# PRIME // range_check_builtin.bound
PRIME_HIGH = PRIME // FELT_MAX_128

UINT256_ZERO = 0
UINT256_ONE = 1
UINT256_MAX_128 = (1 << 128) - 1

# Parameters of the elliptic curve used by Cairo.
ALPHA = 1
BETA = 0x6F21413EFBE40DE150E596D72F7A8C5609AD26C15C915C1F4CDFCB99CEE9E89

_UINT64_MOD = 1 << 64

_PREFIXES = {"0x": 16, "0b": 2, "0o": 8}


def reverse(items: MutableSequence[T]) -> None:
    """Reverse a mutable sequence in place."""
    items[:] = items[::-1]


def to_felt(value: int) -> int:
    """Reduce an integer into the canonical range of the field."""
    return value % PRIME


def parse_felt(text: str) -> int:
    """Parse a decimal or prefixed (0x, 0b, 0o) literal into a field element."""
    body = text.strip()
    negative = False
    if body.startswith(("+", "-")):
        negative = body[0] == "-"
        body = body[1:]
    base = 10
    prefix = body[:2].lower()
    if prefix in _PREFIXES:
        base = _PREFIXES[prefix]
        body = body[2:]
    if not body or not body[0].isalnum():
        raise ValueError(f"invalid felt literal: {text!r}")
    try:
        value = int(body, base)
    except ValueError:
        raise ValueError(f"invalid felt literal: {text!r}") from None
    return to_felt(-value if negative else value)


def safe_offset(x: int, y: int) -> tuple[int, bool]:
    """Add a signed offset to an unsigned 64-bit value.

    Returns the wrapped 64-bit result and whether it overflowed or underflowed.
    """
    total = x + y
    return total % _UINT64_MOD, not 0 <= total < _UINT64_MOD


def next_power_of_two(n: int) -> int:
    """Return n if it is a power of two, otherwise the next power of two above it."""
    if n & (n - 1) == 0:
        return n
    return 1 << n.bit_length()


def felt_lt(a: int, b: int) -> bool:
    """Return whether a < b as canonical field elements."""
    return to_felt(a) < to_felt(b)


def felt_le(a: int, b: int) -> bool:
    """Return whether a <= b as canonical field elements."""
    return to_felt(a) <= to_felt(b)


def felt_is_positive(felt: int) -> bool:
    """Return whether the element is below the range-check bound (2**128)."""
    return felt_lt(felt, FELT_MAX_128)


def felt_mod(a: int, b: int) -> int:
    """Integer remainder of the canonical representatives of a and b."""
    return to_felt(to_felt(a) % to_felt(b))


def felt_div_rem(a: int, b: int) -> tuple[int, int]:
    """Integer quotient and remainder of the canonical representatives of a and b."""
    div, rem = divmod(to_felt(a), to_felt(b))
    return to_felt(div), to_felt(rem)