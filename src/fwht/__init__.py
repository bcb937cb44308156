from .core import fwht_inplace, is_valid_length, next_power_of_two
from .errors import FWHTError, LengthError, LayoutError
from .adapters import ContainerAdapter, adapter_for, register_adapter
from .functions import fwht, fwht_mut, transform_copy, transform_in_place
from .hadamard import generate_hadamard_matrix, dense_fwht

__all__ = [
	"fwht",
	"fwht_mut",
	"transform_copy",
	"transform_in_place",
	"fwht_inplace",
	"is_valid_length",
	"next_power_of_two",
	"FWHTError",
	"LengthError",
	"LayoutError",
	"ContainerAdapter",
	"adapter_for",
	"register_adapter",
	"generate_hadamard_matrix",
	"dense_fwht",
]
