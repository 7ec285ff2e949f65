"""Generators whose body runs in its own thread, synchronised by a condition."""

from __future__ import annotations

import threading
from typing import Any, Callable

from yieldkit.coroutine import GeneratorError, GeneratorState, Step


class _Cancelled(BaseException):
    """Raised inside the body when the generator has been closed."""


class ThreadedGenerator:
    """A generator whose body runs in a dedicated worker thread.

    The thread starts at construction and waits for the first :meth:`next`.
    """

    def __init__(
        self, func: Callable[["ThreadedGenerator"], Any], user_data: Any = None
    ) -> None:
        if not callable(func):
            raise TypeError("generator function must be callable")
        self.user_data = user_data
        self._func = func
        self._cond = threading.Condition()
        self._state = GeneratorState.SUSPENDED
        self._value: Any = 0
        self._value_ready = False
        self._error: BaseException | None = None
        self._thread = threading.Thread(
            target=self._run, name="yieldkit-threaded-generator", daemon=True
        )
        self._thread.start()

    @property
    def state(self) -> GeneratorState:
        with self._cond:
            return self._state

    @property
    def value(self) -> Any:
        """The most recently yielded value."""
        with self._cond:
            return self._value

    def _in_body(self) -> bool:
        return threading.current_thread() is self._thread

    def _run(self) -> None:
        with self._cond:
            while self._state is GeneratorState.SUSPENDED:
                self._cond.wait()
            if self._state is GeneratorState.FINISHED:
                return
        try:
            self._func(self)
        except _Cancelled:
            pass
        except BaseException as exc:  # handed over to the caller
            with self._cond:
                self._error = exc
        finally:
            with self._cond:
                self._state = GeneratorState.FINISHED
                self._value_ready = True
                self._cond.notify_all()

    def next(self) -> Step:
        """Wake the body and wait until it yields or returns."""
        if self._in_body():
            raise GeneratorError("next() called from inside the generator body")
        with self._cond:
            if self._state is GeneratorState.FINISHED:
                return Step(self._value, True)
            if self._state is GeneratorState.RUNNING:
                raise GeneratorError("generator is already running")
            self._state = GeneratorState.RUNNING
            self._value_ready = False
            self._cond.notify_all()
            while not self._value_ready and self._state is not GeneratorState.FINISHED:
                self._cond.wait()
            error, self._error = self._error, None
            step = Step(self._value, self._state is GeneratorState.FINISHED)
        if error is not None:
            raise error
        return step

    def yield_(self, value: Any) -> None:
        """Hand ``value`` to the caller and wait to be resumed."""
        if not self._in_body():
            raise GeneratorError(
                "yield_() called outside of the generator's own thread"
            )
        with self._cond:
            if self._state is GeneratorState.FINISHED:
                raise _Cancelled()
            self._value = value
            self._value_ready = True
            self._state = GeneratorState.SUSPENDED
            self._cond.notify_all()
            while self._state is GeneratorState.SUSPENDED:
                self._cond.wait()
            finished = self._state is GeneratorState.FINISHED
        if finished:
            raise _Cancelled()

    def close(self) -> None:
        """Mark the generator finished and wait for its thread to end."""
        if self._in_body():
            raise GeneratorError("close() called from inside the generator body")
        with self._cond:
            self._state = GeneratorState.FINISHED
            self._value_ready = True
            self._cond.notify_all()
        self._thread.join()
        with self._cond:
            error, self._error = self._error, None
        if error is not None:
            raise error

    def __iter__(self) -> "ThreadedGenerator":
        return self

    def __next__(self) -> Any:
        step = self.next()
        if step.done:
            raise StopIteration
        return step.value

    def __enter__(self) -> "ThreadedGenerator":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()