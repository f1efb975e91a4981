
import logging

import numpy as np

from minifp import MINIFP, Number, to_minifp, to_number
from minifp.ops import add_packed, multiply_packed, negate_packed


def main() -> None:
	logging.basicConfig(level=logging.DEBUG)

	print("Format:", MINIFP.storage_info())

	x = np.array([0.0, -0.0, 0.1, 0.25, 0.5, 1.0, -1.0, 10.0, 1000.0, 0.001, np.inf, -np.inf, np.nan])
	packed = MINIFP.encode(x)
	decoded = MINIFP.decode(packed)

	print("Original:", x)
	print("Packed (hex):", [f"0x{int(p):03x}" for p in packed])
	print("Decoded:", decoded)

	fields = MINIFP.view_fields(packed)
	print("Fields sample (first 5):")
	print(fields[:5])

	sum_packed = add_packed(MINIFP, packed, packed)
	prod_packed = multiply_packed(MINIFP, packed, packed)
	diff_packed = add_packed(MINIFP, packed, negate_packed(MINIFP, packed))
	print("Sum decoded:", MINIFP.decode(sum_packed))
	print("Prod decoded:", MINIFP.decode(prod_packed))
	print("Diff decoded:", MINIFP.decode(diff_packed))

	one = to_minifp(Number(whole=1))
	number = to_number(Number(), one)
	print(f"1.0 -> 0x{one:03x} -> {number}")


if __name__ == "__main__":
	main()
