import pytest

from minifp.bits import EXPONENT_ALL_ONES, exponent_field

ALL_PATTERNS = list(range(1 << 11))
FINITE_PATTERNS = [v for v in ALL_PATTERNS if exponent_field(v) != EXPONENT_ALL_ONES]


@pytest.fixture
def finite_patterns():
	return FINITE_PATTERNS
