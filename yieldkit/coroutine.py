"""Stackful generators driven by strict hand-off between caller and body.

The generator body is an ordinary function that receives the generator and
calls :meth:`Generator.yield_` from any call depth, including from inside
recursive helpers. At any moment only one side runs: either the caller of
:meth:`Generator.next` or the body.
"""

from __future__ import annotations

import enum
import threading
from typing import Any, Callable, NamedTuple

DEFAULT_STACK_SIZE = 16 * 1024


class GeneratorState(enum.Enum):
    """Lifecycle state of a generator."""

    RUNNING = "running"
    SUSPENDED = "suspended"
    FINISHED = "finished"


class GeneratorError(RuntimeError):
    """Raised when a generator is driven in a way its state does not allow."""


class Step(NamedTuple):
    """Result of advancing a generator once.

    When ``done`` is true, ``value`` is the last value that was yielded
    (or 0 if nothing was ever yielded).
    """

    value: Any
    done: bool


class _Close(BaseException):
    """Raised inside the body to unwind it when the generator is closed."""


class Generator:
    """A generator whose body suspends itself with :meth:`yield_`."""

    def __init__(
        self,
        func: Callable[["Generator"], Any],
        user_data: Any = None,
        stack_size: int = 0,
    ) -> None:
        if not callable(func):
            raise TypeError("generator function must be callable")
        if stack_size < 0:
            raise ValueError("stack_size must not be negative")
        self.user_data = user_data
        self.stack_size = stack_size if stack_size > 0 else DEFAULT_STACK_SIZE
        self._func = func
        self._state = GeneratorState.SUSPENDED
        self._value: Any = 0
        self._error: BaseException | None = None
        self._closing = False
        self._resume = threading.Semaphore(0)
        self._suspend = threading.Semaphore(0)
        self._thread: threading.Thread | None = None

    @property
    def state(self) -> GeneratorState:
        return self._state

    @property
    def value(self) -> Any:
        """The most recently yielded value."""
        return self._value

    def _in_body(self) -> bool:
        return self._thread is not None and threading.current_thread() is self._thread

    def _body(self) -> None:
        self._resume.acquire()
        try:
            if not self._closing:
                self._func(self)
        except _Close:
            pass
        except BaseException as exc:  # handed over to the caller
            self._error = exc
        finally:
            self._state = GeneratorState.FINISHED
            self._suspend.release()

    def _switch_in(self) -> None:
        if self._thread is None:
            self._thread = threading.Thread(
                target=self._body, name="yieldkit-generator", daemon=True
            )
            self._thread.start()
        self._resume.release()
        self._suspend.acquire()

    def _take_error(self) -> BaseException | None:
        error, self._error = self._error, None
        return error

    def next(self) -> Step:
        """Run the body until it yields or returns."""
        if self._in_body():
            raise GeneratorError("next() called from inside the generator body")
        if self._state is GeneratorState.FINISHED:
            return Step(self._value, True)
        if self._state is GeneratorState.RUNNING:
            raise GeneratorError("generator is already running")
        self._state = GeneratorState.RUNNING
        self._switch_in()
        error = self._take_error()
        if error is not None:
            raise error
        return Step(self._value, self._state is GeneratorState.FINISHED)

    def yield_(self, value: Any) -> None:
        """Hand ``value`` to the caller and suspend until resumed."""
        if not self._in_body() or self._state is not GeneratorState.RUNNING:
            raise GeneratorError(
                "yield_() called outside of a running generator context"
            )
        self._value = value
        self._state = GeneratorState.SUSPENDED
        self._suspend.release()
        self._resume.acquire()
        if self._closing:
            raise _Close()

    def close(self) -> None:
        """Stop the generator, unwinding a suspended body."""
        if self._in_body():
            raise GeneratorError("close() called from inside the generator body")
        if self._state is GeneratorState.FINISHED:
            return
        self._closing = True
        if self._thread is None:
            self._state = GeneratorState.FINISHED
            return
        self._resume.release()
        self._suspend.acquire()
        self._thread.join()
        error = self._take_error()
        if error is not None:
            raise error

    def __iter__(self) -> "Generator":
        return self

    def __next__(self) -> Any:
        step = self.next()
        if step.done:
            raise StopIteration
        return step.value

    def __enter__(self) -> "Generator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()