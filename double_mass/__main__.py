"""Print the consistency report for the bundled 1990-2019 sample record."""

from __future__ import annotations

import argparse
import logging

from . import config
from .dataset import SAMPLE_RAINFALL
from .report import get_consistency_report


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m double_mass",
        description="Double mass curve consistency check of the sample record.",
    )
    parser.add_argument("--min-segment", type=int, default=config.MIN_SEGMENT_YEARS)
    parser.add_argument(
        "--correlation-threshold", type=float, default=config.CORRELATION_THRESHOLD
    )
    parser.add_argument(
        "--significance-threshold", type=float, default=config.SIGNIFICANCE_THRESHOLD
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log every split")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    print(
        get_consistency_report(
            observations=SAMPLE_RAINFALL,
            detector_kwargs={
                "min_segment": args.min_segment,
                "correlation_threshold": args.correlation_threshold,
                "significance_threshold": args.significance_threshold,
            },
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
