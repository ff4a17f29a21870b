#!/usr/bin/env python
"""
Quote a single swap against a pool snapshot.

Reads a YAML pool snapshot (slot0, ticks, fee), runs the swap engine and
prints the result as JSON. Nothing is written back to the snapshot.

Usage:
  python -m uniswap_v3_swap.scripts.quote_swap --amount 1000000
  python -m uniswap_v3_swap.scripts.quote_swap --snapshot pool.yaml --amount -500 --one-for-zero
  python -m uniswap_v3_swap.scripts.quote_swap --amount 1000000000000000000 --limit 79228162514264337593543950336
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from ..config import settings
from ..constants import MIN_SQRT_RATIO, MAX_SQRT_RATIO
from ..data.snapshot import load_snapshot
from ..errors import SwapError
from ..math.sqrt_price_math import sqrt_price_x96_to_price
from ..swap import swap

logger = logging.getLogger(__name__)


def default_price_limit(zero_for_one: bool) -> int:
    """Widest allowed limit in the swap direction."""
    return MIN_SQRT_RATIO + 1 if zero_for_one else MAX_SQRT_RATIO - 1


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Quote a Uniswap V3 swap from a pool snapshot')
    parser.add_argument('--snapshot', type=str, default=settings.SNAPSHOT_PATH,
                        help='Pool snapshot YAML file')
    parser.add_argument('--amount', type=int, required=True,
                        help='Positive for exact input, negative for exact output')
    parser.add_argument('--one-for-zero', action='store_true',
                        help='Sell token1 for token0 (price goes up)')
    parser.add_argument('--limit', type=int, default=None,
                        help='sqrtPriceX96 limit (default: widest allowed)')
    parser.add_argument('--decimals0', type=int, default=18, help='token0 decimals')
    parser.add_argument('--decimals1', type=int, default=18, help='token1 decimals')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=settings.get_log_level(), format=settings.LOG_FORMAT)

    zero_for_one = not args.one_for_zero
    limit = args.limit if args.limit is not None else default_price_limit(zero_for_one)

    try:
        snapshot = load_snapshot(args.snapshot, default_fee=settings.DEFAULT_FEE_TIER)
        logger.info(
            "Quoting %s swap of %d on %s (fee=%d, spacing=%d, ticks=%d)",
            "zeroForOne" if zero_for_one else "oneForZero", args.amount,
            args.snapshot, snapshot.fee, snapshot.tick_spacing, len(snapshot.ticks),
        )
        result = swap(
            snapshot.ticks,
            snapshot.tick_bitmap,
            snapshot.tick_spacing,
            zero_for_one,
            args.amount,
            limit,
            snapshot.slot0,
            snapshot.fee,
        )
    except SwapError as exc:
        print(json.dumps({"error": exc.code, "message": str(exc)}))
        return 1

    output = result.to_dict()
    output["priceAfter"] = sqrt_price_x96_to_price(
        result.sqrt_price_after, args.decimals0, args.decimals1
    )
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
