import logging

from .adapters import adapter_for
from .errors import FWHTError


logger = logging.getLogger(__name__)


def fwht_mut(data) -> None:
	"""Apply the FWHT in place to any supported container.

	Raises LengthError if len(data) is not 0 or a power of two and
	LayoutError if no contiguous mutable view of `data` exists. On error
	`data` is left unchanged.

	>>> data = [1.0, 1.0, 1.0, 0.0]
	>>> fwht_mut(data)
	>>> data
	[3.0, 1.0, 1.0, -1.0]
	"""
	adapter = adapter_for(data)
	try:
		adapter.fwht_mut(data)
	except FWHTError as e:
		logger.debug("fwht_mut rejected %s: %s", type(data).__name__, e)
		raise


def fwht(data):
	"""Return the FWHT of `data` as a new container of the same kind.

	Same validation as fwht_mut(); `data` is never modified.

	>>> fwht((1, 2, 3, 4))
	(10, -2, -4, 0)
	"""
	adapter = adapter_for(data)
	try:
		return adapter.fwht(data)
	except FWHTError as e:
		logger.debug("fwht rejected %s: %s", type(data).__name__, e)
		raise


transform_in_place = fwht_mut
transform_copy = fwht
