"""Checking the binary-search-tree property with two in-order generators."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from yieldkit.coroutine import Generator
from yieldkit.threaded import ThreadedGenerator

CHECK_STACK_SIZE = 32 * 1024
MAX_COMPARISONS = 100


@dataclass
class TreeNode:
    """A node of a binary tree."""

    data: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def _inorder(gen: Any, node: TreeNode | None) -> None:
    if node is None:
        return
    _inorder(gen, node.left)
    gen.yield_(node.data)
    _inorder(gen, node.right)


def bst_inorder_generator(gen: Any) -> None:
    """Yield the values of the tree in ``gen.user_data`` in in-order."""
    _inorder(gen, gen.user_data)


def _default_factory(func: Callable[[Any], Any], user_data: Any) -> Generator:
    return Generator(func, user_data, CHECK_STACK_SIZE)


def check_bst_property(
    root: TreeNode | None,
    factory: Callable[[Callable[[Any], Any], Any], Any] | None = None,
) -> bool:
    """Return whether the in-order sequence of ``root`` is strictly increasing.

    Two generators walk the same tree, one a step ahead of the other. More
    than ``MAX_COMPARISONS`` + 1 comparisons trip a safety stop and count
    as a failure.
    """
    make = factory if factory is not None else _default_factory
    print("\n--- Checking BST Property ---")
    if root is None:
        print("Empty tree, property holds.")
        return True

    with make(bst_inorder_generator, root) as gen_a, make(
        bst_inorder_generator, root
    ) as gen_b:
        print("Advancing generator A once...")
        first = gen_a.next()
        if first.done:
            print("Tree has 0 or 1 node. Property holds.")
            return True
        print(f"Generator A first value: {first.value}")

        print("Starting simultaneous iteration (like zip)...")
        result = True
        step = 0
        while True:
            current = gen_b.next()
            ahead = gen_a.next()
            if current.done or ahead.done:
                print("One of the generators finished. All comparisons passed.")
                break
            print(
                f"Step {step}: Comparing A={ahead.value} (next) "
                f"with B={current.value} (current)"
            )
            if ahead.value <= current.value:
                print(
                    f"Check FAILED: {ahead.value} <= {current.value}. "
                    "Not strictly increasing."
                )
                result = False
                break
            print(f"Check OK: {ahead.value} > {current.value}")
            step += 1
            if step > MAX_COMPARISONS:
                print(
                    "Error: Safety break triggered in comparison loop.",
                    file=sys.stderr,
                )
                result = False
                break
        print("Cleaning up generators...")
    print(f"--- Check Finished (Result: {'true' if result else 'false'}) ---")
    return result


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="yieldkit-bst", description="Check sample trees for the BST property."
    )
    parser.add_argument(
        "--threaded",
        action="store_true",
        help="run the generator bodies in worker threads",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Check one valid and one invalid tree; return 0 if both are judged right."""
    args = _parse_args(argv)
    factory = ThreadedGenerator if args.threaded else None

    print("Building valid BST...")
    valid = TreeNode(50, TreeNode(30, right=TreeNode(40)), TreeNode(70))
    if not check_bst_property(valid, factory):
        print("Error: valid tree was rejected.", file=sys.stderr)
        return 1

    print("\n=========================")

    print("\nBuilding invalid tree (manual violation)...")
    invalid = TreeNode(50, TreeNode(30, right=TreeNode(60)), TreeNode(70))
    if check_bst_property(invalid, factory):
        print("Error: invalid tree was accepted.", file=sys.stderr)
        return 1

    print("\nExample finished.")
    return 0


if __name__ == "__main__":
    sys.exit(main())