
from __future__ import annotations

from typing import Callable

import numpy as np

from .bits import (
	NAN,
	NEG_INFINITY,
	POS_INFINITY,
	POS_ZERO,
	SIGN_MASK,
	is_infinity,
	is_nan,
	is_negative,
	is_zero,
)
from .bridge import align, reassemble
from .format import MiniFPFormat


def negate(value: int) -> int:
	"""Flip the sign bit. NaN and infinity patterns flip too."""
	return value ^ SIGN_MASK


def multiply(a: int, b: int) -> int:
	sign = SIGN_MASK if is_negative(a) != is_negative(b) else 0

	# Special cases, in order of precedence.
	if is_nan(a) or is_nan(b):
		return NAN
	if (is_infinity(a) and is_zero(b)) or (is_infinity(b) and is_zero(a)):
		return NAN
	if is_infinity(a) or is_infinity(b):
		return POS_INFINITY | sign
	if is_zero(a) or is_zero(b):
		return POS_ZERO | sign

	# Both mantissas sit at the same exponent, so the product sits at twice it.
	m1, m2, exponent = align(a, b)
	return reassemble(m1 * m2, 2 * exponent, sign)


def add(a: int, b: int) -> int:
	sign = SIGN_MASK if is_negative(a) and is_negative(b) else 0

	# Special cases, in order of precedence.
	if {a, b} == {POS_INFINITY, NEG_INFINITY}:
		return NAN
	if is_nan(a) or is_nan(b):
		return NAN
	if is_infinity(a) and is_infinity(b):
		return POS_INFINITY | sign
	# Bit-pattern comparison: only an exact sign-flipped copy short-circuits.
	if a == negate(b):
		return POS_ZERO
	if a == POS_INFINITY or b == POS_INFINITY:
		return POS_INFINITY
	if a == NEG_INFINITY or b == NEG_INFINITY:
		return NEG_INFINITY
	if is_zero(a) and is_zero(b):
		return POS_ZERO | sign
	if is_zero(a):
		return b
	if is_zero(b):
		return a

	m1, m2, exponent = align(a, b)
	total = (-m1 if is_negative(a) else m1) + (-m2 if is_negative(b) else m2)
	sign = SIGN_MASK if total < 0 else 0
	return reassemble(abs(total), exponent, sign)


def subtract(a: int, b: int) -> int:
	return add(a, negate(b))


def _binary_op(fmt: MiniFPFormat, a_packed: np.ndarray, b_packed: np.ndarray, op: Callable[[int, int], int]) -> np.ndarray:
	a = np.asarray(a_packed, dtype=fmt.dtype)
	b = np.asarray(b_packed, dtype=fmt.dtype)
	res = np.frompyfunc(lambda x, y: op(int(x), int(y)), 2, 1)(a, b)
	return np.asarray(res, dtype=fmt.dtype)


def add_packed(fmt: MiniFPFormat, a_packed: np.ndarray, b_packed: np.ndarray) -> np.ndarray:
	return _binary_op(fmt, a_packed, b_packed, add)


def subtract_packed(fmt: MiniFPFormat, a_packed: np.ndarray, b_packed: np.ndarray) -> np.ndarray:
	return _binary_op(fmt, a_packed, b_packed, subtract)


def multiply_packed(fmt: MiniFPFormat, a_packed: np.ndarray, b_packed: np.ndarray) -> np.ndarray:
	return _binary_op(fmt, a_packed, b_packed, multiply)


def negate_packed(fmt: MiniFPFormat, packed: np.ndarray) -> np.ndarray:
	p = np.asarray(packed, dtype=fmt.dtype)
	return (p ^ fmt.dtype.type(SIGN_MASK)).astype(fmt.dtype)
