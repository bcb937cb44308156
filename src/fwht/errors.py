class FWHTError(ValueError):
	"""Base class for errors raised by the transform."""


class LengthError(FWHTError):
	"""Sequence length is nonzero and not a power of two."""

	def __init__(self, length: int, message: str | None = None):
		self.length = length
		if message is None:
			message = f"Input length must be 0 or a power of two, got {length}"
		super().__init__(message)


class LayoutError(FWHTError):
	"""Container cannot provide a contiguous mutable one-dimensional view."""
