'''
Deferred value tests
'''

from copy import copy, deepcopy

from lazycalc.lazy import Lazy

from pytest import raises


def counting(counter, value):
    def f():
        counter.append(value)
        return value
    return f


def test_force():
    assert Lazy(lambda: 4)() == 4
    assert Lazy(lambda: 4).force() == 4
    assert Lazy.constant(-2)() == -2


def test_not_memoized():
    runs = []
    lazy = Lazy(counting(runs, 2))
    assert runs == []
    assert lazy() == 2
    assert lazy() == 2
    assert runs == [2, 2]


def test_compose_is_lazy():
    runs = []
    calls = []

    def fn(a, b):
        calls.append((a, b))
        return 0

    a = Lazy(counting(runs, 4))
    b = Lazy(counting(runs, 2))
    composed = Lazy.compose(fn, a, b)
    assert calls == []
    assert composed() == 0
    # Operands handed over unforced, as is.
    assert calls == [(a, b)]
    assert runs == []


def test_compose_operand_order():
    composed = Lazy.compose(lambda a, b: a() - b(),
                            Lazy.constant(2),
                            Lazy.constant(4))
    assert composed() == -2


def test_compose_nests():
    add = Lazy.compose(lambda a, b: a() + b(),
                       Lazy.constant(4), Lazy.constant(2))
    mul = Lazy.compose(lambda a, b: a() * b(), add, Lazy.constant(2))
    assert mul() == 12


def test_copies_share():
    runs = []
    lazy = Lazy(counting(runs, 0))
    copy(lazy)()
    deepcopy(lazy)()
    assert runs == [0, 0]


def test_not_callable():
    with raises(TypeError):
        Lazy(4)


def test_immutable():
    lazy = Lazy.constant(0)
    with raises(AttributeError):
        lazy.other = 1
