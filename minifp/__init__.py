from .bits import (
	NAN,
	NEG_INFINITY,
	POS_INFINITY,
	POS_ZERO,
	is_denormalized,
	is_infinity,
	is_nan,
	is_negative,
	is_zero,
)
from .format import MINIFP, MiniFPFormat
from .number import Number, NumberMissingError, to_minifp, to_number
from .ops import (
	add,
	add_packed,
	multiply,
	multiply_packed,
	negate,
	negate_packed,
	subtract,
	subtract_packed,
)

__all__ = [
	"NAN",
	"NEG_INFINITY",
	"POS_INFINITY",
	"POS_ZERO",
	"is_denormalized",
	"is_infinity",
	"is_nan",
	"is_negative",
	"is_zero",
	"MINIFP",
	"MiniFPFormat",
	"Number",
	"NumberMissingError",
	"to_minifp",
	"to_number",
	"add",
	"subtract",
	"multiply",
	"negate",
	"add_packed",
	"subtract_packed",
	"multiply_packed",
	"negate_packed",
]
