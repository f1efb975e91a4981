
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .bits import NAN, POS_INFINITY, SIGN_MASK, is_infinity, is_nan, is_negative
from .bridge import FRACTION_BITS, pack, shift_split, unpack

logger = logging.getLogger(__name__)

OVERFLOW_WHOLE = 256


class NumberMissingError(ValueError):
	"""Raised when a decode has no destination :class:`Number`."""


@dataclass
class Number:
	"""Variable-precision number split into whole and fraction parts.

	- whole: unsigned integer part
	- fraction: unsigned ``FRACTION_BITS``-bit fixed-point fraction; the MSB weighs 2^-1
	- is_negative, is_infinity, is_nan: flags

	The struct belongs to the caller; the converters only read or write its fields.
	"""

	whole: int = 0
	fraction: int = 0
	is_negative: bool = False
	is_infinity: bool = False
	is_nan: bool = False

	def __post_init__(self):
		if self.whole < 0:
			raise ValueError("whole must be >= 0")
		if not 0 <= self.fraction < (1 << FRACTION_BITS):
			raise ValueError(f"fraction must fit in {FRACTION_BITS} bits")

	@classmethod
	def from_float(cls, value: float) -> Number:
		"""Build a Number from a float, truncating the fraction to ``FRACTION_BITS``."""
		if math.isnan(value):
			return cls(is_nan=True)
		negative = math.copysign(1.0, value) < 0
		if math.isinf(value):
			return cls(is_negative=negative, is_infinity=True)
		magnitude = abs(value)
		whole = math.floor(magnitude)
		fraction = math.floor(math.ldexp(magnitude - whole, FRACTION_BITS))
		return cls(whole=int(whole), fraction=int(fraction), is_negative=negative)

	def __float__(self) -> float:
		if self.is_nan:
			return math.nan
		magnitude = math.inf if self.is_infinity else self.whole + math.ldexp(self.fraction, -FRACTION_BITS)
		return -magnitude if self.is_negative else magnitude


def to_minifp(number: Number | None) -> int:
	"""Encode a Number. A missing number encodes as NaN."""
	if number is None or number.is_nan:
		return NAN

	sign = SIGN_MASK if number.is_negative else 0
	if number.is_infinity or number.whole >= OVERFLOW_WHOLE:
		return POS_INFINITY | sign
	if not number.whole and not number.fraction:
		return sign

	return pack(number.whole, number.fraction, 0, sign)


def to_number(number: Number | None, value: int) -> Number:
	"""Decode ``value`` into the caller's Number and return it.

	Only the sign flag and then one of the infinity flag, the nan flag, or the
	whole and fraction parts are written.
	"""
	if number is None:
		logger.debug("no destination number for value 0x%03x", value)
		raise NumberMissingError("cannot decode without a destination Number")

	number.is_negative = is_negative(value)
	if is_infinity(value):
		number.is_infinity = True
		return number
	if is_nan(value):
		number.is_nan = True
		return number

	exponent, whole, fraction = unpack(value)
	number.whole, number.fraction = shift_split(whole, fraction, -exponent)
	return number
