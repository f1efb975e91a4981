
from __future__ import annotations

import logging
from typing import Tuple

from .bits import (
	BIAS,
	DENORM_EXPONENT,
	EXPONENT_ALL_ONES,
	EXPONENT_SHIFT,
	FRACTION_FIELD_BITS,
	POS_INFINITY,
	exponent_field,
	fraction_field,
	is_denormalized,
)

logger = logging.getLogger(__name__)

FRACTION_BITS = 32
FRACTION_WORD_MASK = (1 << FRACTION_BITS) - 1
_FRACTION_DROP = FRACTION_BITS - FRACTION_FIELD_BITS


def shift_split(whole: int, fraction: int, amount: int) -> Tuple[int, int]:
	"""Shift the fixed-point pair ``whole.fraction`` by ``amount`` bits.

	Positive amounts shift right (the exponent grows and bits fall off the bottom
	of the fraction word), negative amounts shift left (fraction bits carry into
	the whole part). The fraction word is ``FRACTION_BITS`` wide; the whole part
	is unbounded.
	"""
	combined = (whole << FRACTION_BITS) | fraction
	if amount >= 0:
		combined >>= amount
	else:
		combined <<= -amount
	return combined >> FRACTION_BITS, combined & FRACTION_WORD_MASK


def _fraction_width(fraction: int) -> int:
	# Number of left shifts needed before the fraction word is empty.
	if fraction == 0:
		return 0
	return FRACTION_BITS - ((fraction & -fraction).bit_length() - 1)


def unpack(value: int) -> Tuple[int, int, int]:
	"""Split a finite encoded value into (unbiased exponent, whole, fraction word)."""
	if is_denormalized(value):
		exponent, whole = DENORM_EXPONENT, 0
	else:
		exponent, whole = exponent_field(value) - BIAS, 1
	return exponent, whole, fraction_field(value) << _FRACTION_DROP


def align(val1: int, val2: int) -> Tuple[int, int, int]:
	"""Rewrite two finite encoded values as integer mantissas sharing one exponent.

	Returns ``(mantissa1, mantissa2, exponent)`` such that each value equals its
	mantissa times ``2 ** exponent`` (sign not included).
	"""
	exp1, whole1, frac1 = unpack(val1)
	exp2, whole2, frac2 = unpack(val2)

	# Equalize exponents by moving the smaller-exponent operand right.
	exponent = max(exp1, exp2)
	whole1, frac1 = shift_split(whole1, frac1, exponent - exp1)
	whole2, frac2 = shift_split(whole2, frac2, exponent - exp2)

	# Then shift both left in lock-step until neither has fraction bits left.
	amount = max(_fraction_width(frac1), _fraction_width(frac2))
	whole1, _ = shift_split(whole1, frac1, -amount)
	whole2, _ = shift_split(whole2, frac2, -amount)
	return whole1, whole2, exponent - amount


def pack(whole: int, fraction: int, exponent: int, sign: int) -> int:
	"""Encode the nonzero value ``whole.fraction * 2 ** exponent`` with the given sign bits.

	Normalizes so the whole part is the implicit leading 1; falls back to the
	denormal exponent when the result is too small, and to infinity when it is
	too large. Bits shifted out of the fraction word are truncated.
	"""
	if whole:
		shift = whole.bit_length() - 1
	else:
		shift = fraction.bit_length() - FRACTION_BITS - 1

	biased = exponent + shift + BIAS
	if biased >= EXPONENT_ALL_ONES:
		logger.debug("overflow: exponent %d after normalization, returning infinity", biased - BIAS)
		return POS_INFINITY | sign

	if biased <= 0:
		logger.debug("denormalizing from exponent %d", exponent + shift)
		biased = 0
		whole, fraction = shift_split(whole, fraction, DENORM_EXPONENT - exponent)
	else:
		whole, fraction = shift_split(whole, fraction, shift)

	return sign | (biased << EXPONENT_SHIFT) | (fraction >> _FRACTION_DROP)


def reassemble(mantissa: int, exponent: int, sign: int) -> int:
	"""Inverse of :func:`align`: encode ``mantissa * 2 ** exponent`` with the given sign bits."""
	if mantissa == 0:
		return sign
	return pack(mantissa, 0, exponent, sign)
