"""
Run the Parameter Store examples.

    python main.py                     # put, get, get-parameters, get-parameters-by-path, delete
    python main.py get get-parameters  # only the named examples, in the given order
"""
import argparse
import sys
from typing import List, Optional

from examples import EXAMPLES
from logger_config import get_logger

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="AWS SSM Parameter Store examples"
    )
    parser.add_argument(
        "examples",
        nargs="*",
        metavar="EXAMPLE",
        help=f"examples to run, any of: {', '.join(EXAMPLES)} (default: all)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    unknown = [name for name in args.examples if name not in EXAMPLES]
    if unknown:
        parser.error(f"unknown example(s): {', '.join(unknown)}")

    selected = args.examples or list(EXAMPLES)
    logger.info(f"Running examples: {', '.join(selected)}")
    for name in selected:
        EXAMPLES[name]()
    return 0


if __name__ == "__main__":
    sys.exit(main())
