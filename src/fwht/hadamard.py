import numpy as np

from .core import is_valid_length
from .errors import LengthError


def generate_hadamard_matrix(n: int) -> np.ndarray:
	"""Generate Sylvester-type Hadamard matrix of order n (n must be power of two).

	Entries are +1 and -1, dtype float64.
	"""
	if n <= 0 or not is_valid_length(n):
		raise LengthError(n, f"Hadamard matrix order must be a power of two and >= 1, got {n}")
	H = np.array([[1.0]])
	while H.shape[0] < n:
		H = np.block([[H, H], [H, -H]])
	return H


def dense_fwht(x: np.ndarray) -> np.ndarray:
	"""O(n^2) reference transform H @ x, in the same (natural) order as the butterfly."""
	x = np.asarray(x, dtype=np.float64)
	if x.ndim != 1:
		raise ValueError("Input must be 1D array")
	if x.shape[0] == 0:
		return x.copy()
	return generate_hadamard_matrix(x.shape[0]) @ x
