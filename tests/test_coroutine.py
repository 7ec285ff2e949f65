import pytest

from yieldkit.coroutine import (
    DEFAULT_STACK_SIZE,
    Generator,
    GeneratorError,
    GeneratorState,
    Step,
)


def _yield_items(gen):
    for item in gen.user_data:
        gen.yield_(item)


def _walk(gen, node):
    if node is None:
        return
    value, left, right = node
    _walk(gen, left)
    gen.yield_(value)
    _walk(gen, right)


def _inorder(gen):
    _walk(gen, gen.user_data)


def test_iteration_yields_all_items():
    items = [4, 8, 15, 16, 23, 42]
    with Generator(_yield_items, items) as gen:
        assert list(gen) == items


def test_next_returns_steps_and_last_value_when_done():
    items = [7, 9]
    gen = Generator(_yield_items, items)
    assert gen.next() == Step(7, False)
    assert gen.next() == Step(9, False)
    assert gen.next() == Step(9, True)
    assert gen.next() == Step(9, True)
    assert gen.state is GeneratorState.FINISHED


def test_empty_body_finishes_with_zero():
    gen = Generator(lambda g: None)
    value, done = gen.next()
    assert done is True
    assert value == 0


def test_default_and_explicit_stack_size():
    assert Generator(_yield_items, []).stack_size == DEFAULT_STACK_SIZE == 16384
    assert Generator(_yield_items, [], 65536).stack_size == 65536


def test_negative_stack_size_rejected():
    with pytest.raises(ValueError):
        Generator(_yield_items, [], -1)


def test_non_callable_rejected():
    with pytest.raises(TypeError):
        Generator(None)


def test_yield_outside_body_raises():
    gen = Generator(_yield_items, [1])
    with pytest.raises(GeneratorError):
        gen.yield_(5)


def test_state_transitions():
    seen = []

    def body(g):
        seen.append(g.state)
        g.yield_(1)
        seen.append(g.state)

    gen = Generator(body)
    assert gen.state is GeneratorState.SUSPENDED
    gen.next()
    assert gen.state is GeneratorState.SUSPENDED
    gen.next()
    assert gen.state is GeneratorState.FINISHED
    assert seen == [GeneratorState.RUNNING, GeneratorState.RUNNING]


def test_recursive_yield_from_nested_calls():
    tree = (50, (30, None, (40, None, None)), (70, None, None))
    assert list(Generator(_inorder, tree)) == [30, 40, 50, 70]


def test_two_generators_are_independent():
    items = list(range(6))
    a = Generator(_yield_items, items)
    b = Generator(_yield_items, items)
    a.next()
    pairs = list(zip(a, b))
    assert pairs == list(zip(items[1:], items))
    a.close()
    b.close()


def test_exception_in_body_propagates_and_finishes():
    def body(g):
        g.yield_(1)
        raise KeyError("boom")

    gen = Generator(body)
    assert gen.next() == Step(1, False)
    with pytest.raises(KeyError):
        gen.next()
    assert gen.next() == Step(1, True)


def test_close_unwinds_suspended_body():
    cleaned = []

    def body(g):
        try:
            while True:
                g.yield_("tick")
        finally:
            cleaned.append(True)

    gen = Generator(body)
    assert gen.next().value == "tick"
    gen.close()
    assert cleaned == [True]
    assert gen.state is GeneratorState.FINISHED
    assert gen.next().done is True


def test_close_before_start_never_runs_body():
    calls = []
    gen = Generator(lambda g: calls.append(1))
    gen.close()
    assert gen.next().done is True
    assert calls == []


def test_yield_during_close_is_reported():
    def body(g):
        try:
            g.yield_(1)
        except BaseException:
            g.yield_(2)

    gen = Generator(body)
    gen.next()
    with pytest.raises(GeneratorError):
        gen.close()
    assert gen.state is GeneratorState.FINISHED


def test_next_from_inside_body_raises():
    errors = []

    def body(g):
        try:
            g.next()
        except GeneratorError as exc:
            errors.append(exc)

    gen = Generator(body)
    assert gen.next().done is True
    assert len(errors) == 1