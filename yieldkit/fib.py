"""Fibonacci numbers produced by a generator body that suspends with ``yield_``."""

from __future__ import annotations

import argparse
import sys
from typing import Any, Sequence

from yieldkit.coroutine import Generator, GeneratorState
from yieldkit.threaded import ThreadedGenerator

FIB_COUNT = 10
MAX_STEPS = 15
_INT64_MAX = 2**63 - 1


def fib_generator_func(gen: Any) -> None:
    """Yield the first ten Fibonacci numbers, starting 1, 1."""
    a, b = 1, 1
    for _ in range(FIB_COUNT):
        gen.yield_(a)
        a, b = b, a + b
        if a > _INT64_MAX or b > _INT64_MAX:
            print("[Fib Generator] Overflow detected.", file=sys.stderr)
            break
    print("[Fib Generator] Function finished.")


def collect(gen: Any, limit: int = MAX_STEPS) -> list[Any]:
    """Advance ``gen`` at most ``limit`` times and return the values it yielded."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    values = []
    for _ in range(limit):
        step = gen.next()
        if step.done:
            break
        values.append(step.value)
    return values


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="yieldkit-fib", description="Print Fibonacci numbers from a generator."
    )
    parser.add_argument(
        "--threaded",
        action="store_true",
        help="run the generator body in its own worker thread",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Create a Fibonacci generator, print what it yields and close it."""
    args = _parse_args(argv)
    print("Creating Fibonacci generator...")
    gen = (
        ThreadedGenerator(fib_generator_func)
        if args.threaded
        else Generator(fib_generator_func)
    )
    print("Generating Fibonacci numbers using the generator wrapper:")
    with gen:
        for value in collect(gen, MAX_STEPS):
            print(value)
        if gen.state is GeneratorState.FINISHED:
            print("Generator finished.")
        else:
            print("Stopped after reaching max count.")
        print("Destroying generator...")
    print("Finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())