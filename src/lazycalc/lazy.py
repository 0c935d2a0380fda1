'''
Deferred integer computations.

A Lazy is what the calculator keeps on its stack and what operators receive
as operands. Nothing is cached: forcing twice runs the computation twice,
side effects included. That is what lets an operator skip an operand
entirely, or run it many times over.
'''


class Lazy:
    '''
    Zero-argument, repeatable computation yielding an int.

    Forcing a composed Lazy recurses through every level of composition, a
    few interpreter frames per level, so a chain of a few hundred operators
    hits the recursion limit (RecursionError) when forced. See
    sys.setrecursionlimit for deeper expressions.
    '''

    __slots__ = ('_f',)

    def __init__(self, f):
        '''
        :param f: Callable taking no arguments, returning an int.
        '''
        if not callable(f):
            raise TypeError('{!r} is not callable'.format(f))
        self._f = f

    def __call__(self):
        return self._f()

    force = __call__

    def __copy__(self):
        # Immutable; a copy may as well be the same object.
        return self

    def __deepcopy__(self, memo):
        return self

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, self._f)

    @classmethod
    def constant(cls, value):
        '''
        Lazy that always forces to value.
        '''
        return cls(lambda: value)

    @classmethod
    def compose(cls, fn, a, b):
        '''
        Defer fn(a, b).

        fn only runs when the result is forced, and gets a and b unforced;
        whether, and how often, they run is up to fn.
        '''
        return cls(lambda: fn(a, b))
