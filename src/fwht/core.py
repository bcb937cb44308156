from .errors import LengthError


def is_valid_length(n: int) -> bool:
	"""True for 0 and every power of two."""
	return n == 0 or (n > 0 and (n & (n - 1)) == 0)


def next_power_of_two(n: int) -> int:
	"""Smallest power of two >= n, handy for zero-padding to a valid length."""
	if n < 0:
		raise ValueError("n must be >= 0")
	if n <= 1:
		return 1
	return 1 << (n - 1).bit_length()


def fwht_inplace(a) -> None:
	"""In-place Fast Walsh-Hadamard Transform (FWHT), unnormalized.

	`a` is any mutable indexable sequence whose elements support + and -.
	Applying the transform twice scales every element by len(a).
	The length is checked before any element is touched.
	"""
	n = len(a)
	if not is_valid_length(n):
		raise LengthError(n)
	h = 1
	while h < n:
		for i in range(0, n, h * 2):
			for j in range(i, i + h):
				x = a[j]
				y = a[j + h]
				a[j] = x + y
				a[j + h] = x - y
		h *= 2
