"""``blockmine`` command: validate a block file against the sliding-window rule.

Exit status: 0 when every block is valid, 1 when an invalid block is found,
2 when the input cannot be read or is shorter than the window.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import config as _cfg
from .engine import ENGINES, EngineName
from .errors import BlockFormatError, InvalidInitialWindow
from .loader import read_blocks
from .mine import InvalidBlock, Mine

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blockmine",
        description="Check that every block is the sum of two of the previous N blocks.",
    )
    parser.add_argument("path", help="Text file with one block value per line")
    parser.add_argument(
        "-w",
        "--window-size",
        type=int,
        default=_cfg.WINDOW_SIZE,
        help=f"Validation window size (default: {_cfg.WINDOW_SIZE})",
    )
    parser.add_argument(
        "-e",
        "--engine",
        choices=sorted(ENGINES),
        default=_cfg.ENGINE,
        help=f"Validation engine (default: {_cfg.ENGINE})",
    )
    parser.add_argument(
        "--bits",
        type=int,
        choices=_cfg.SUPPORTED_BITS,
        default=_cfg.BLOCK_BITS,
        help=f"Block width in bits (default: {_cfg.BLOCK_BITS})",
    )
    parser.add_argument(
        "--all",
        action="store_true",
        help="Report every invalid block instead of stopping at the first",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser


def run(path: str, window_size: int, engine: EngineName, bits: int, report_all: bool) -> int:
    """Validate *path* and print the result; return the process exit status."""
    blocks = read_blocks(path, bits)
    mine, remaining = Mine.from_blocks(blocks, window_size, engine=engine, bits=bits)
    logger.info("Seeded %r from %s", mine, path)

    invalid = 0
    for _, outcome in mine.validate_stream(remaining):
        if isinstance(outcome, InvalidBlock):
            invalid += 1
            print(f"INVALID block #{outcome.position}: {outcome.block}")
            if not report_all:
                break

    if invalid:
        logger.info("%d invalid block(s) after %d accepted", invalid, mine.total_blocks)
        return EXIT_INVALID
    print(f"OK {mine.total_blocks} blocks validated")
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # argparse does not check defaults (taken from the environment) against choices
    if args.engine not in ENGINES:
        parser.error(f"invalid engine {args.engine!r} (choose from {', '.join(sorted(ENGINES))})")
    if args.bits not in _cfg.SUPPORTED_BITS:
        parser.error(f"invalid block width {args.bits} (choose from {_cfg.SUPPORTED_BITS})")

    logging.basicConfig(
        level=logging.DEBUG if (args.debug or _cfg.DEBUG) else logging.INFO,
        format=_cfg.LOG_FORMAT,
    )

    try:
        return run(args.path, args.window_size, args.engine, args.bits, args.all)
    except (BlockFormatError, InvalidInitialWindow) as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except OSError as exc:
        print(f"[ERROR] Cannot read {args.path}: {exc.strerror or exc}", file=sys.stderr)
        return EXIT_BAD_INPUT


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
