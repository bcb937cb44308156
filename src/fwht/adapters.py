import array
import collections
import copy
import ctypes
import logging
from collections.abc import MutableSequence

import numpy as np

from .core import fwht_inplace
from .errors import LayoutError


logger = logging.getLogger(__name__)

# struct/array codes whose sum and difference stay in the same type
SIGNED_OR_FLOAT_CODES = frozenset("bhilqnfd")
# numpy dtype kinds closed under + and -; unsigned kinds are excluded as for buffer codes
NUMERIC_KINDS = frozenset("ifcm")


def _check_code(code: str, what: str) -> None:
	if code not in SIGNED_OR_FLOAT_CODES:
		raise TypeError(f"Unsupported {what} {code!r}: elements must be signed integers or floats")


class ContainerAdapter:
	"""Maps one container kind onto the kernel's contiguous-sequence contract.

	Subclasses implement:
	- view(data): the mutable contiguous sequence the kernel runs on, or LayoutError
	- clone(data): fresh writable storage holding a copy of the elements
	- finish(data, work): turn the cloned storage into the caller's container kind

	clone() applies the same layout rules as view() but accepts read-only sources.
	The copying form runs the kernel on view(clone(data)).
	"""

	def view(self, data):
		raise NotImplementedError

	def clone(self, data):
		raise NotImplementedError

	def finish(self, data, work):
		return work

	def fwht_mut(self, data) -> None:
		"""Transform `data` in place."""
		fwht_inplace(self.view(data))

	def fwht(self, data):
		"""Return a transformed copy of `data`; `data` itself is never written."""
		work = self.clone(data)
		fwht_inplace(self.view(work))
		return self.finish(data, work)


class ListAdapter(ContainerAdapter):
	"""list and its subclasses."""

	def view(self, data):
		return data

	def clone(self, data):
		return copy.copy(data)


class SequenceAdapter(ListAdapter):
	"""Any other contiguous MutableSequence."""

	def clone(self, data):
		# shallow copies of wrapper classes can share their backing storage
		return copy.deepcopy(data)


class ArrayAdapter(ContainerAdapter):
	"""array.array with a signed integer or float typecode."""

	def view(self, data):
		_check_code(data.typecode, "array typecode")
		return data

	def clone(self, data):
		_check_code(data.typecode, "array typecode")
		return array.array(data.typecode, data)


class TupleAdapter(ContainerAdapter):
	"""Tuples are fixed-size and immutable, so only the copying form works."""

	def view(self, data):
		if isinstance(data, tuple):
			raise LayoutError(f"{type(data).__name__} is immutable; use fwht() for a transformed copy")
		return data

	def clone(self, data):
		return list(data)

	def finish(self, data, work):
		if type(data) is tuple:
			return tuple(work)
		if hasattr(data, "_make"):
			return data._make(work)
		return type(data)(work)


class CtypesArrayAdapter(ContainerAdapter):
	"""Fixed-size ctypes arrays such as (c_double * 4), transformed in their own storage."""

	def _check(self, data: ctypes.Array) -> None:
		code = getattr(data._type_, "_type_", None)
		if not isinstance(code, str):
			raise LayoutError(f"{type(data).__name__} is not a one-dimensional array of simple values")
		_check_code(code, "ctypes element code")

	def view(self, data):
		self._check(data)
		return data

	def clone(self, data):
		self._check(data)
		return type(data)(*data)


class MemoryviewAdapter(ContainerAdapter):
	"""One-dimensional C-contiguous memoryviews of a native signed/float format."""

	def _check(self, data: memoryview) -> None:
		if data.ndim != 1:
			raise LayoutError(f"memoryview must be one-dimensional, got ndim={data.ndim}")
		if not data.c_contiguous:
			raise LayoutError("memoryview is not contiguous")
		_check_code(data.format.lstrip("@"), "buffer format")

	def view(self, data):
		self._check(data)
		if data.readonly:
			raise LayoutError("memoryview is read-only")
		return data

	def clone(self, data):
		self._check(data)
		return memoryview(bytearray(data.tobytes())).cast(data.format)


class BufferAdapter(MemoryviewAdapter):
	"""Objects exposing the buffer protocol; copies come back as memoryviews."""

	def view(self, data):
		return super().view(memoryview(data))

	def clone(self, data):
		with memoryview(data) as mv:
			return super().clone(mv)


class NdarrayAdapter(ContainerAdapter):
	"""numpy.ndarray restricted to its one-dimensional, C-contiguous form."""

	def _check(self, data: np.ndarray) -> None:
		if data.ndim != 1:
			raise LayoutError(f"array must be one-dimensional, got shape {data.shape}")
		if not data.flags.c_contiguous:
			raise LayoutError("array is not contiguous")
		if data.dtype.kind not in NUMERIC_KINDS:
			raise TypeError(f"Unsupported dtype {data.dtype}")

	def view(self, data):
		self._check(data)
		if not data.flags.writeable:
			raise LayoutError("array is read-only")
		return data

	def clone(self, data):
		self._check(data)
		return data.copy()


class NonContiguousAdapter(ContainerAdapter):
	"""Sequences stored in linked blocks; the kernel never runs over them."""

	def view(self, data):
		raise LayoutError(f"{type(data).__name__} is not stored contiguously")

	def clone(self, data):
		raise LayoutError(f"{type(data).__name__} is not stored contiguously")


BUFFER = BufferAdapter()
SEQUENCE = SequenceAdapter()

_registry: dict = {
	list: ListAdapter(),
	tuple: TupleAdapter(),
	ctypes.Array: CtypesArrayAdapter(),
	array.array: ArrayAdapter(),
	memoryview: MemoryviewAdapter(),
	np.ndarray: NdarrayAdapter(),
	collections.deque: NonContiguousAdapter(),
}


def register_adapter(cls: type, adapter: ContainerAdapter) -> None:
	"""Use `adapter` for instances of `cls` and its subclasses."""
	_registry[cls] = adapter


def adapter_for(data) -> ContainerAdapter:
	"""Resolve the adapter for `data`.

	Registered types win (most derived first); otherwise anything exposing the
	buffer protocol, then any MutableSequence.
	"""
	for cls in type(data).__mro__:
		adapter = _registry.get(cls)
		if adapter is not None:
			return adapter
	try:
		memoryview(data).release()
	except TypeError:
		pass
	else:
		logger.debug("Using buffer protocol for %s", type(data).__name__)
		return BUFFER
	if isinstance(data, MutableSequence):
		logger.debug("Using generic sequence adapter for %s", type(data).__name__)
		return SEQUENCE
	raise TypeError(f"Unsupported container type: {type(data).__name__}")
