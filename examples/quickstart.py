#!/usr/bin/env python3
"""Quickstart example for the high-level API.

This example demonstrates the simplest way to use the package:
- Size IDs from an expected total and an acceptable collision risk
- Generate a few IDs with the chosen alphabet
- Inspect the generator (length, efficiencies, entropy source)
- Measure how many random bits bit-saving spends per symbol
"""

from __future__ import annotations

import argparse

from puidkit import Puid, preset_names, prng_source
from puidkit.eval import measure_bit_usage, naive_bits_per_symbol, waste_reduction


def main() -> None:
    parser = argparse.ArgumentParser(description="Quickstart API example")
    parser.add_argument(
        "--chars",
        default="safe64",
        help=f"Preset name or custom symbols (presets: {', '.join(preset_names())})",
    )
    parser.add_argument(
        "--total",
        type=float,
        default=1e6,
        help="Number of IDs expected (default: 1e6)",
    )
    parser.add_argument(
        "--risk",
        type=float,
        default=1e12,
        help="Acceptable collision risk, 1-in-N (default: 1e12)",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=5,
        help="Number of IDs to print",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Use a seeded PRNG instead of the CSPRNG (reproducible, not secure)",
    )
    args = parser.parse_args()

    if args.seed is None:
        rand_id = Puid(chars=args.chars, total=args.total, risk=args.risk)
    else:
        rand_id = Puid(
            chars=args.chars,
            total=args.total,
            risk=args.risk,
            rand_bytes=prng_source(seed=args.seed),
        )

    for _ in range(args.count):
        print(rand_id.generate())

    info = rand_id.info()
    print(f"Alphabet: {info.preset_name} ({len(info.characters)} symbols, {info.bits_per_symbol} bits/slice)")
    print(f"Length: {info.length} symbols, {info.total_entropy_bits} bits of entropy")
    print(f"ere={info.ere} ete={info.ete} source={info.source_description}")
    print(f"Supports {rand_id.total(args.risk):,} IDs at 1-in-{args.risk:g}")

    usage = measure_bit_usage(rand_id.alphabet, 100_000, prng_source(seed=0))
    print(
        f"Measured {usage['bits_per_symbol']:.3f} bits/symbol "
        f"(whole-slice rejection: {naive_bits_per_symbol(rand_id.alphabet):.3f}, "
        f"waste avoided: {waste_reduction(rand_id.alphabet, usage['bits_per_symbol']):.1%})"
    )


if __name__ == "__main__":
    main()
