
from __future__ import annotations

# Layout is [sign:1 | exponent:4 | fraction:6] from most-significant to least-significant bits.
SIGN_SHIFT = 10
EXPONENT_SHIFT = 6
SIGN_MASK = 1 << SIGN_SHIFT
EXPONENT_MASK = 0xF << EXPONENT_SHIFT
FRACTION_MASK = 0x3F
FRACTION_FIELD_BITS = 6
EXPONENT_ALL_ONES = 0xF

BIAS = 7
DENORM_EXPONENT = 1 - BIAS

POS_ZERO = 0x000
POS_INFINITY = 0x3C0
NEG_INFINITY = 0x7C0
NAN = 0x7FF


def exponent_field(value: int) -> int:
	return (value & EXPONENT_MASK) >> EXPONENT_SHIFT


def fraction_field(value: int) -> int:
	return value & FRACTION_MASK


def is_nan(value: int) -> bool:
	return exponent_field(value) == EXPONENT_ALL_ONES and fraction_field(value) > 0


def is_infinity(value: int) -> bool:
	return value == POS_INFINITY or value == NEG_INFINITY


def is_denormalized(value: int) -> bool:
	return exponent_field(value) == 0


def is_negative(value: int) -> bool:
	return bool(value & SIGN_MASK)


def is_zero(value: int) -> bool:
	"""True for both +0 and -0."""
	return (value & (EXPONENT_MASK | FRACTION_MASK)) == 0
