#!/usr/bin/env python3
"""
Generate scale-free benchmark graphs and write them as JSON instances.

Usage
-----
    python scripts/generate_graphs.py --size 100 --size 500 --count 3 --seed 42 -o graphs.json
    python scripts/generate_graphs.py --size 50 --custom my_graphs.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from scalefree.config import GeneratorConfig, InstanceConfig, RandomBackend
from scalefree.engine.builder import InstanceBuilder
from scalefree.errors import ScaleFreeError
from scalefree.utils.instance_loader import load_instances, save_instances

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate scale-free graph instances.")
    parser.add_argument("--size", "-n", type=int, action="append", required=True, help="Number of vertices; repeat for several sizes.")
    parser.add_argument("--count", "-k", type=int, default=1, help="Instances per size (default: 1).")
    parser.add_argument("--seed", "-s", type=int, default=None, help="Base seed; instance i uses seed + i. Random when omitted.")
    parser.add_argument("--rng", type=str, default=RandomBackend.JAVA.value, choices=[b.value for b in RandomBackend], help="PRNG backend.")
    parser.add_argument("--undirected", action="store_true", help="Drop edge directions in the output.")
    parser.add_argument("--custom", "-c", type=str, action="append", default=[], help="JSON instance file to append to the output; repeatable.")
    parser.add_argument("--output", "-o", type=str, default=None, help="Output JSON path (default: stdout).")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s | %(message)s",
    )

    try:
        custom = [inst for path in args.custom for inst in load_instances(path)]
        config = InstanceConfig(
            generators=[
                GeneratorConfig(
                    type="scale_free",
                    sizes=args.size,
                    count_per_size=args.count,
                    seed=args.seed,
                    directed=not args.undirected,
                    params={"random_source": args.rng},
                ),
            ],
            custom_instances=custom,
        )
        instances = InstanceBuilder(config).generate_instances()
    except (ScaleFreeError, ValueError, OSError) as exc:
        logger.error("Generation failed: %s", exc)
        return 1

    if args.output:
        save_instances(instances, args.output)
    else:
        json.dump(instances, sys.stdout, indent=2)
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
