"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import numpy as np

from wordvec import config
from wordvec.analysis.model import load_model
from wordvec.errors import WordVecError
from wordvec.logging_config import setup_logging

logger = logging.getLogger("wordvec.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wordvec",
        description="Inspect a word-vector bundle: sentence vectors and token similarity.",
    )
    parser.add_argument("bundle", help="Path to the bundle (zip archive).")
    parser.add_argument(
        "--entry",
        default=config.PAYLOAD_ENTRY_NAME,
        help=f"Substring of the payload entry name (default: {config.PAYLOAD_ENTRY_NAME}).",
    )
    parser.add_argument(
        "--transform",
        nargs="+",
        metavar="TOKEN",
        help="Print the averaged vector of these tokens.",
    )
    parser.add_argument(
        "--distance",
        nargs=2,
        metavar=("TOKEN1", "TOKEN2"),
        help="Print the cosine similarity of two tokens.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", help="Also write logs to this file.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {config.APP_VERSION}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    try:
        model = load_model(args.bundle, entry_name=args.entry)
        print(f"op: {model.op or '-'}")
        print(f"tokens: {len(model.store)}")
        print(f"dimensionality: {model.dimensionality}")

        if args.transform:
            vector = model.transform(args.transform)
            print("transform: " + np.array2string(vector, precision=6, separator=", "))

        if args.distance:
            token1, token2 = args.distance
            print(f"distance: {model.distance(token1, token2):.6f}")

    except WordVecError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
