
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import numpy as np

from .bits import (
	BIAS,
	DENORM_EXPONENT,
	EXPONENT_ALL_ONES,
	EXPONENT_SHIFT,
	FRACTION_FIELD_BITS,
	FRACTION_MASK,
	SIGN_SHIFT,
)
from .number import Number, to_minifp

TOTAL_BITS = SIGN_SHIFT + 1


def _check_storage_dtype(storage_dtype) -> np.dtype:
	dtype = np.dtype(storage_dtype)
	if dtype.kind not in "ui":
		raise ValueError(f"storage dtype must be an integer dtype, got {dtype}")
	usable_bits = dtype.itemsize * 8 - (1 if dtype.kind == "i" else 0)
	if usable_bits < TOTAL_BITS:
		raise ValueError(f"storage dtype {dtype} cannot hold {TOTAL_BITS} bits")
	return dtype


@dataclass(frozen=True)
class MiniFPFormat:
	"""The 11-bit miniFP format over numpy arrays of packed values.

	Layout is [sign | exponent | fraction] from most-significant to least-significant bits,
	1-4-6 bits wide with exponent bias 7. Packed values live in ``storage_dtype``, any
	integer dtype wide enough to hold 11 bits.
	"""

	storage_dtype: np.dtype = np.uint16

	def __post_init__(self):
		object.__setattr__(self, "storage_dtype", _check_storage_dtype(self.storage_dtype))

	@property
	def dtype(self) -> np.dtype:
		return self.storage_dtype

	def view_fields(self, packed: np.ndarray) -> np.ndarray:
		"""Return a structured view exposing sign/exponent/fraction as integer fields."""
		packed = np.asarray(packed, dtype=self.storage_dtype)
		dtype = np.dtype([
			("sign", self.storage_dtype),
			("exponent", self.storage_dtype),
			("fraction", self.storage_dtype),
		])
		out = np.empty(packed.shape, dtype=dtype)
		out["sign"] = (packed >> SIGN_SHIFT) & 0x1
		out["exponent"] = (packed >> EXPONENT_SHIFT) & EXPONENT_ALL_ONES
		out["fraction"] = packed & FRACTION_MASK
		return out

	def encode(self, values: np.ndarray | float) -> np.ndarray:
		"""Encode floats to packed values, truncating bits that do not fit."""
		floats = np.asarray(values, dtype=np.float64)
		packed = np.frompyfunc(lambda x: to_minifp(Number.from_float(float(x))), 1, 1)(floats)
		return np.asarray(packed, dtype=self.storage_dtype)

	def decode(self, packed: np.ndarray | int) -> np.ndarray:
		"""Vectorized decode from packed values to their exact float64 values."""
		fields = self.view_fields(packed)
		sign = fields["sign"].astype(np.int32)
		exp_field = fields["exponent"].astype(np.int32)
		frac = fields["fraction"].astype(np.float64) / (1 << FRACTION_FIELD_BITS)

		inf_mask = (exp_field == EXPONENT_ALL_ONES) & (frac == 0)
		nan_mask = (exp_field == EXPONENT_ALL_ONES) & (frac != 0)
		sub_mask = exp_field == 0

		values = np.ldexp(1.0 + frac, exp_field - BIAS)
		values = np.where(sub_mask, np.ldexp(frac, DENORM_EXPONENT), values)
		values = np.where(inf_mask, np.inf, values)
		values = np.where(nan_mask, np.nan, values)
		return np.copysign(values, 1.0 - 2.0 * sign)

	def storage_info(self) -> Dict[str, int | np.dtype]:
		return {
			"total_bits": TOTAL_BITS,
			"dtype": self.storage_dtype,
			"sign_bits": 1,
			"exponent_bits": SIGN_SHIFT - EXPONENT_SHIFT,
			"fraction_bits": FRACTION_FIELD_BITS,
			"exponent_bias": BIAS,
		}


MINIFP = MiniFPFormat()
