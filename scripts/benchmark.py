#!/usr/bin/env python3
"""Benchmark script for declcheck performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated

from declcheck import Range, Required, Validatable, Validate, ValidatorConfig, check


@dataclass
class Item(Validatable):
    name: Annotated[str | None, Required(), Range(1, 32)] = "item"
    quantity: Annotated[int | None, Required(), Range(1, 100)] = 1


@dataclass
class Chain(Validatable):
    label: Annotated[str | None, Required(with_fields="items")] = "node"
    items: Annotated[list[Item], Validate(), Range(0, 1000)] = field(default_factory=list)
    next: Annotated[Chain | None, Validate()] = None


def _build_chain(length: int, width: int) -> Chain:
    head: Chain | None = None
    for _ in range(length):
        head = Chain(items=[Item() for _ in range(width)], next=head)
    assert head is not None
    return head


def benchmark_import_time() -> float:
    """Measure import time of declcheck package."""
    start = time.perf_counter()
    import declcheck  # noqa: F401

    return time.perf_counter() - start


def benchmark_wide_graph() -> float:
    """Measure validation of one object with 10k collection elements."""
    root = _build_chain(1, 10000)
    start = time.perf_counter()
    check(root)
    return time.perf_counter() - start


def benchmark_deep_graph() -> float:
    """Measure validation of a 200-level chain (100 rounds)."""
    root = _build_chain(200, 1)
    config = ValidatorConfig()
    start = time.perf_counter()
    for _ in range(100):
        check(root, config)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run declcheck benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = []

    # Import time
    import_time = benchmark_import_time()
    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": import_time,
        }
    )

    results.append(
        {
            "name": "Wide Graph (10k elements)",
            "unit": "seconds",
            "value": benchmark_wide_graph(),
        }
    )

    results.append(
        {
            "name": "Deep Graph (200 levels, 100 rounds)",
            "unit": "seconds",
            "value": benchmark_deep_graph(),
        }
    )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
