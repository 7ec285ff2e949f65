# yieldkit

Generator objects in which a plain function, not a Python generator
function, produces values by calling `yield_()` on the object it is given.
`yield_()` may be called from any call depth, so a recursive helper can
hand values out directly. The caller pulls values one at a time with
`next()` or ordinary iteration.

Two interchangeable implementations are provided:

- `yieldkit.coroutine.Generator` runs the producing function on a helper
  thread, started at the first `next()`, and passes control back and forth
  with a strict hand-off: at any moment either the caller or the producing
  function runs, never both.
- `yieldkit.threaded.ThreadedGenerator` starts a worker thread when it is
  created and hands values across with a lock and a condition variable.

Both start suspended: the producing function does not run until the first
value is requested. When the function returns, the generator is finished.
Closing a generator early (`close()`, or leaving a `with` block) stops it:
a suspended producing function is unwound from its pending `yield_()`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

A producing function receives the generator object and calls `yield_()`
for every value it wants to hand back. Whatever was passed as `user_data`
is available as `gen.user_data`:

```python
from yieldkit.coroutine import Generator

def countdown(gen):
    n = gen.user_data
    while n > 0:
        gen.yield_(n)
        n -= 1

with Generator(countdown, 3) as gen:
    print(list(gen))   # [3, 2, 1]
```

The thread-backed variant is used the same way:

```python
from yieldkit.threaded import ThreadedGenerator

with ThreadedGenerator(countdown, 3) as gen:
    for value in gen:
        print(value)
```

`next()` returns a `Step(value, done)` for callers that prefer to drive
the generator by hand. Once the generator has finished, `done` is true and
`value` is the last value yielded (0 if nothing was ever yielded); further
calls keep returning that. Iteration stops at the point the generator
finishes. The `state` property reports a `GeneratorState` (`RUNNING`,
`SUSPENDED` or `FINISHED`) and `value` the most recently yielded value.

An exception raised by the producing function ends the generator and is
raised again from the `next()` (or `close()`) call that observes it.
`GeneratorError` is raised when a generator is driven the wrong way:
calling `yield_()` from outside the producing function, or `next()` or
`close()` from inside it.

`Generator` also takes a `stack_size` argument (default 16 KiB when 0);
it is recorded on the object but does not limit the producing function.

## Examples

`yieldkit.fib` has `fib_generator_func()`, which yields the first ten
Fibonacci numbers (1, 1, 2, 3, ...), and `collect(gen, limit)`, which
advances any generator at most `limit` times (15 by default) and returns
the values it yielded.

`yieldkit.bst` has a `TreeNode` dataclass, `bst_inorder_generator()`,
which walks the tree in `gen.user_data` in order with recursive `yield_()`
calls, and `check_bst_property(root, factory)`, which uses two generators
over the same tree, one a step ahead of the other, to confirm that the
in-order sequence is strictly increasing. It prints a trace of each
comparison as it goes. `factory` is called as `factory(func, user_data)`;
by default it builds a `Generator`:

```python
from yieldkit.bst import TreeNode, check_bst_property
from yieldkit.threaded import ThreadedGenerator

root = TreeNode(50)
root.left = TreeNode(30)
root.right = TreeNode(70)
root.left.right = TreeNode(40)

check_bst_property(root, ThreadedGenerator)   # True
```

Both examples can be run from the command line:

```
yieldkit-fib
yieldkit-bst
```

Each takes `--threaded` to use `ThreadedGenerator` instead of `Generator`.
`yieldkit-bst` checks one valid and one invalid sample tree and exits
with status 1 if either is judged wrongly.