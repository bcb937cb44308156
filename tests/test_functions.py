from array import array

import numpy as np
import pytest

from fwht import LayoutError, LengthError, fwht, fwht_mut, transform_copy, transform_in_place


@pytest.mark.parametrize(
	"make",
	[
		list,
		tuple,
		lambda v: array("d", v),
		lambda v: memoryview(array("d", v)),
		lambda v: np.array(v, dtype=np.float64),
	],
)
def test_copy_isolates_every_container(make):
	data = make([1.0, 1.0, 1.0, 0.0])
	result = fwht(data)
	assert type(result) is type(data)
	assert list(result) == [3.0, 1.0, 1.0, -1.0]
	assert list(data) == [1.0, 1.0, 1.0, 0.0]


@pytest.mark.parametrize(
	"make",
	[
		list,
		lambda v: array("d", v),
		lambda v: memoryview(array("d", v)),
		lambda v: np.array(v, dtype=np.float64),
	],
)
@pytest.mark.parametrize("n", [3, 5, 6, 7, 9])
def test_bad_length_in_place_is_atomic(make, n):
	values = [float(i) for i in range(n)]
	data = make(values)
	with pytest.raises(LengthError):
		fwht_mut(data)
	assert list(data) == values


@pytest.mark.parametrize("n", [0, 1, 2, 4, 8, 16, 32])
def test_power_of_two_lengths_accepted(n):
	data = np.ones(n)
	result = fwht(data)
	assert result.shape == (n,)
	if n:
		assert result[0] == n
		assert np.count_nonzero(result) == 1


def test_mutating_result_does_not_touch_source():
	data = [1, 2, 3, 4]
	result = fwht(data)
	result[0] = 0
	data[1] = 99
	assert result == [0, -2, -4, 0]
	assert data == [1, 99, 3, 4]


def test_in_place_involution():
	rng = np.random.default_rng(3)
	x = rng.standard_normal(32)
	data = x.copy()
	fwht_mut(data)
	fwht_mut(data)
	assert np.allclose(data, 32 * x, atol=1e-9)


def test_bytearray_rejected_as_unsigned():
	data = bytearray([1, 2])
	with pytest.raises(TypeError):
		fwht_mut(data)
	assert data == bytearray([1, 2])


def test_tuple_in_place_is_layout_error():
	with pytest.raises(LayoutError):
		fwht_mut((1, 2))


def test_aliases():
	assert transform_in_place is fwht_mut
	assert transform_copy is fwht
