'''
Binary functions that make use of lazy operands.

Each takes two Lazy operands and returns an int, so any of them can be handed
to Calculator.define_function as is.
'''


def concat(a, b):
    '''
    Glue two digits together: 4 2 → 42.
    '''
    return a() * 10 + b()


def sequence(a, b):
    '''
    Force a for its side effects, then yield b.
    '''
    a()
    return b()


def when(a, b):
    '''
    b if a is non-zero, else 0. b isn't forced at all when a is 0.
    '''
    return b() if a() else 0


def times(n, fn):
    '''
    Force fn n times over, for its side effects. Yields 0.
    '''
    for _ in range(n()):
        fn()
    return 0


def constant(value):
    '''
    Return a binary function yielding value, forcing neither operand.
    '''
    def const(a, b):
        return value
    return const


def emitter(sink, text):
    '''
    Return a binary function appending text to sink, forcing neither operand.

    :param sink: Anything with either an append (list) or a write (file-like)
                 method.
    '''
    put = getattr(sink, 'append', None) or sink.write

    def emit(a, b):
        put(text)
        return 0
    return emit


EXTENDED = {
    '!': concat,
    ',': sequence,
    '?': when,
    '$': times,
}


def install(calculator, mapping=EXTENDED):
    '''
    Define every token → binary function of mapping on calculator.
    '''
    for token, fn in mapping.items():
        calculator.define_function(token, fn)
