import argparse
import ctypes
import logging
from array import array

import numpy as np

from .errors import FWHTError
from .functions import fwht, fwht_mut
from .hadamard import dense_fwht


logger = logging.getLogger(__name__)

CONTAINERS = {
	"list": list,
	"tuple": tuple,
	"array": lambda values: array("d", values),
	"ctypes": lambda values: (ctypes.c_double * len(values))(*values),
	"memoryview": lambda values: memoryview(array("d", values)),
	"ndarray": lambda values: np.asarray(values, dtype=np.float64),
}


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="fwht", description="Fast Walsh-Hadamard Transform")
	p.add_argument("values", type=float, nargs="*", help="Input sequence; random when omitted")
	p.add_argument("--size", type=int, default=8, help="Random input length (power of two)")
	p.add_argument("--seed", type=int, default=123)
	p.add_argument("--container", type=str, default="list", choices=sorted(CONTAINERS), help="Container to transform")
	p.add_argument("--inplace", action="store_true", help="Transform the container in place")
	p.add_argument("--check", action="store_true", help="Compare against the dense Hadamard product")
	p.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
	return p


def main(argv=None) -> int:
	p = build_parser()
	args = p.parse_args(argv)

	logging.basicConfig(
		level=getattr(logging, args.log_level),
		format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
	)

	if args.values:
		x = np.asarray(args.values, dtype=np.float64)
	else:
		if args.size < 0:
			p.error("--size must be >= 0")
		rng = np.random.default_rng(args.seed)
		x = rng.standard_normal(args.size)

	data = CONTAINERS[args.container](x.tolist())
	logger.info("Transforming %d values as %s", len(x), args.container)

	try:
		if args.inplace:
			fwht_mut(data)
			result = data
		else:
			result = fwht(data)
	except FWHTError as e:
		logger.error("Transform failed: %s", e)
		p.exit(2, f"{p.prog}: error: {e}\n")

	y = np.asarray(list(result), dtype=np.float64)
	n = len(y)

	print(f"container={args.container} N={n}")
	print("result=" + " ".join(f"{v:.6g}" for v in y))

	if args.check and n > 0:
		y_ideal = dense_fwht(x)
		rmse = np.sqrt(np.mean((y_ideal - y) ** 2))
		psnr = 20 * np.log10(np.max(np.abs(y_ideal)) / (rmse + 1e-12))
		twice = fwht(y)
		involution_err = float(np.max(np.abs(twice - n * x)))
		print(f"RMSE={rmse:.6g} PSNR={psnr:.3f} dB")
		print(f"involution_error={involution_err:.6g}")

	return 0


if __name__ == "__main__":
	raise SystemExit(main())
