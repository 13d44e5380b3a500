#!/usr/bin/env python
"""
Replay an access trace through BoundedOrderedCache and report hit rates.

The trace is either read from a file (one key per line) or generated
synthetically. Several capacities can be given to sweep the same trace.

Usage:
    ordcache-replay --capacity 64
    ordcache-replay --capacity 16 --capacity 64 --capacity 256 --distribution uniform --seed 0
    ordcache-replay --trace_file requests.txt --capacity 128 --output summary.json
    python scripts/replay_trace.py --requests 100000 --key_space 5000 --progress
"""

import argparse
import json
import logging
import time
from pathlib import Path
from typing import List, Optional

from ordcache.constants import (
    DEFAULT_CAPACITY,
    DEFAULT_KEY_SPACE,
    DEFAULT_TRACE_DISTRIBUTION,
    DEFAULT_TRACE_REQUESTS,
    DEFAULT_ZIPF_EXPONENT,
    TRACE_DISTRIBUTIONS,
)
from ordcache.errors import InputError
from ordcache.trace import generate_trace, load_trace, sweep_capacities

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Replay an access trace through an LRU cache and report hit rates'
    )
    parser.add_argument(
        '--capacity', type=int, action='append', default=None,
        help=f'Cache capacity; repeat to sweep several (default: {DEFAULT_CAPACITY})'
    )
    parser.add_argument(
        '--trace_file', type=str, default=None,
        help='Trace file with one key per line (overrides synthetic generation)'
    )
    parser.add_argument(
        '--requests', type=int, default=DEFAULT_TRACE_REQUESTS,
        help=f'Number of synthetic requests (default: {DEFAULT_TRACE_REQUESTS})'
    )
    parser.add_argument(
        '--key_space', type=int, default=DEFAULT_KEY_SPACE,
        help=f'Number of distinct synthetic keys (default: {DEFAULT_KEY_SPACE})'
    )
    parser.add_argument(
        '--distribution', type=str.lower, default=DEFAULT_TRACE_DISTRIBUTION,
        choices=TRACE_DISTRIBUTIONS,
        help=f'Synthetic key distribution (default: {DEFAULT_TRACE_DISTRIBUTION})'
    )
    parser.add_argument(
        '--zipf_exponent', type=float, default=DEFAULT_ZIPF_EXPONENT,
        help=f'Zipf skew, must be > 1 (default: {DEFAULT_ZIPF_EXPONENT})'
    )
    parser.add_argument(
        '--seed', type=int, default=None,
        help='Random seed for synthetic traces'
    )
    parser.add_argument(
        '--output', type=str, default=None,
        help='Write a JSON summary of the results to this path'
    )
    parser.add_argument(
        '--progress', action='store_true',
        help='Show a progress bar while replaying'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s | %(levelname)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    args = build_parser().parse_args(argv)
    capacities = args.capacity or [DEFAULT_CAPACITY]

    try:
        bad = [c for c in capacities if c <= 0]
        if bad:
            raise InputError(f"capacity must be > 0, got {bad}")
        if args.trace_file:
            keys = load_trace(args.trace_file)
            source = args.trace_file
        else:
            keys = generate_trace(
                args.requests, args.key_space,
                distribution=args.distribution,
                zipf_exponent=args.zipf_exponent,
                seed=args.seed,
            )
            source = f"synthetic:{args.distribution}"
    except InputError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Replaying {len(keys)} requests from {source} at capacities {capacities}")
    start_time = time.time()
    results = sweep_capacities(keys, capacities, progress=args.progress)
    elapsed = time.time() - start_time

    # Summary
    logger.info("=" * 60)
    logger.info("SUMMARY")
    logger.info("=" * 60)
    logger.info(f"Trace: {source} ({len(keys)} requests, {len(set(keys))} distinct keys)")
    for result in results:
        logger.info(
            f"  capacity={result.capacity:>8d}  hit_rate={result.hit_rate:.4f}  "
            f"hits={result.hits}  misses={result.misses}  evictions={result.evictions}"
        )
    logger.info(f"Time: {elapsed:.2f}s")

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        summary = {
            "source": source,
            "requests": len(keys),
            "results": [result.as_dict() for result in results],
        }
        with open(output_path, 'w') as f:
            json.dump(summary, f, indent=2)
        logger.info(f"Summary saved to: {output_path}")

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
