import pytest

from thunk import Thunk


def counter(value):
    calls = []

    def compute():
        calls.append(1)
        return value

    return compute, calls


def test_thunk_is_not_evaluated_on_creation():
    compute, calls = counter(1)
    thunk = Thunk(compute)
    assert calls == []
    assert not thunk.is_forced


def test_force_returns_value():
    assert Thunk(lambda: 42).force() == 42


def test_force_evaluates_once():
    compute, calls = counter('x')
    thunk = Thunk(compute)
    assert thunk.force() == 'x'
    assert thunk.force() == 'x'
    assert len(calls) == 1
    assert thunk.is_forced


def test_force_returns_identical_object():
    thunk = Thunk(object)
    assert thunk.force() is thunk.force()


def test_calling_a_thunk_forces_it():
    compute, calls = counter(3)
    thunk = Thunk(compute)
    assert thunk() == 3
    assert thunk.force() == 3
    assert len(calls) == 1


def test_failed_computation_is_retried():
    attempts = []

    def flaky():
        attempts.append(1)
        if len(attempts) == 1:
            raise ValueError('first attempt')
        return 'ok'

    thunk = Thunk(flaky)
    with pytest.raises(ValueError):
        thunk.force()
    assert not thunk.is_forced
    assert thunk.force() == 'ok'
    assert thunk.force() == 'ok'
    assert len(attempts) == 2


def test_none_is_a_cached_value():
    compute, calls = counter(None)
    thunk = Thunk(compute)
    assert thunk.force() is None
    assert thunk.force() is None
    assert len(calls) == 1


def test_repr():
    thunk = Thunk(lambda: 'a')
    assert repr(thunk) == 'Thunk(?)'
    thunk.force()
    assert repr(thunk) == "Thunk('a')"
