import math

import numpy as np
import pytest

from minifp.bits import NAN, is_nan
from minifp.format import MINIFP, MiniFPFormat
from minifp.ops import add_packed, multiply_packed, negate_packed, subtract_packed


def test_storage_info():
	info = MINIFP.storage_info()
	assert info["total_bits"] == 11
	assert info["dtype"] == np.uint16
	assert info["exponent_bits"] == 4
	assert info["fraction_bits"] == 6
	assert info["exponent_bias"] == 7


@pytest.mark.parametrize("dtype", [np.uint16, np.int16, np.uint32, np.int64])
def test_wide_storage_dtypes(dtype):
	fmt = MiniFPFormat(dtype)
	assert fmt.dtype == np.dtype(dtype)
	assert fmt.encode([1.0]).dtype == np.dtype(dtype)


@pytest.mark.parametrize("dtype", [np.uint8, np.int8, np.float32, np.bool_])
def test_rejects_narrow_or_non_integer_dtype(dtype):
	with pytest.raises(ValueError):
		MiniFPFormat(dtype)


def test_view_fields():
	fields = MINIFP.view_fields([0x7C0, 0x1E0, 0x001])
	assert fields["sign"].tolist() == [1, 0, 0]
	assert fields["exponent"].tolist() == [15, 7, 0]
	assert fields["fraction"].tolist() == [0, 0x20, 1]


def test_decode():
	values = MINIFP.decode([0x1C0, 0x7C0, 0x7FF, 0x001, 0x400, 0x3BF, 0x180])
	np.testing.assert_array_equal(values[[0, 1, 3, 5, 6]], [1.0, -np.inf, 2.0 ** -12, 254.0, 0.5])
	assert np.isnan(values[2])
	assert values[4] == 0.0 and np.signbit(values[4])


def test_encode():
	packed = MINIFP.encode([1.0, -1.5, 1000.0, math.nan, 0.1, -0.0, 2.0 ** -13])
	assert packed.tolist() == [0x1C0, 0x5E0, 0x3C0, NAN, 0x0E6, 0x400, 0x000]


def test_encode_decode_round_trip():
	packed = np.array([v for v in range(1 << 11) if not is_nan(v)], dtype=MINIFP.dtype)
	np.testing.assert_array_equal(MINIFP.encode(MINIFP.decode(packed)), packed)


def test_packed_ops():
	a = MINIFP.encode([1.0, 0.5, np.inf, 3.0])
	b = MINIFP.encode([1.0, -1.0, -np.inf, 0.0])
	np.testing.assert_array_equal(MINIFP.decode(add_packed(MINIFP, a, b))[:2], [2.0, -0.5])
	assert np.isnan(MINIFP.decode(add_packed(MINIFP, a, b))[2])
	np.testing.assert_array_equal(MINIFP.decode(subtract_packed(MINIFP, a, b)), [0.0, 1.5, np.inf, 3.0])
	product = multiply_packed(MINIFP, a, b)
	assert product.dtype == MINIFP.dtype
	np.testing.assert_array_equal(MINIFP.decode(product), [1.0, -0.5, -np.inf, 0.0])


def test_negate_packed_is_involutive():
	packed = np.arange(1 << 11, dtype=MINIFP.dtype)
	negated = negate_packed(MINIFP, packed)
	assert negated.dtype == MINIFP.dtype
	np.testing.assert_array_equal(negate_packed(MINIFP, negated), packed)
	assert int(negated[0x1C0]) == 0x5C0
