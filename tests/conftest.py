from pytest import Item, fixture

from lazycalc.machine import Calculator


@fixture
def calculator() -> Calculator:
    '''
    Calculator with only the default tokens.
    '''
    return Calculator()


@fixture
def buffer() -> list:
    '''
    Sink for side-effecting operators; join it to see what ran.
    '''
    return []


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases. Use with pytest -rP, and
    enable_assertion_pass_hook set.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          '\n'.join(str(expl).splitlines()[:-2]))
