import numpy as np
import pytest

from fwht import LengthError, dense_fwht, fwht, generate_hadamard_matrix


def test_matrix_is_orthogonal_up_to_scale():
	for n in [1, 2, 4, 8, 16]:
		H = generate_hadamard_matrix(n)
		assert H.shape == (n, n)
		assert np.allclose(H @ H.T, n * np.eye(n))


@pytest.mark.parametrize("n", [0, 3, 6])
def test_matrix_rejects_bad_order(n):
	with pytest.raises(LengthError, match=">= 1"):
		generate_hadamard_matrix(n)


def test_fast_matches_dense():
	rng = np.random.default_rng(1)
	for n in [1, 2, 4, 8, 16, 32, 64]:
		x = rng.standard_normal(n)
		assert np.allclose(fwht(x), dense_fwht(x), atol=1e-9)


def test_dense_empty():
	assert dense_fwht(np.zeros(0)).shape == (0,)


def test_matrix_order_zero_message():
	with pytest.raises(LengthError) as excinfo:
		generate_hadamard_matrix(0)
	assert excinfo.value.length == 0
	assert "0 or a power of two" not in str(excinfo.value)
