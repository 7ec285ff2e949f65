"""Generator objects driven by next() and yield_(), with hand-off and thread-backed variants."""

__version__ = "0.1.0"

__all__ = ["coroutine", "threaded", "fib", "bst"]