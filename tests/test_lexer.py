'''
Line lexer tests
'''

from lazycalc.lexer import Lexer


def test_every_character_is_a_token():
    l = Lexer()
    assert list(l.lex('42+')) == ['4', '2', '+']


def test_spaces_dropped():
    l = Lexer()
    assert list(l.lex(' 4 2\t+\n')) == ['4', '2', '+']


def test_blank():
    l = Lexer()
    assert list(l.lex('')) == []
    assert list(l.lex('   \n')) == []


def test_unknown_characters_pass_through():
    # Whether they mean anything is the calculator's business.
    l = Lexer()
    assert list(l.lex('02&')) == ['0', '2', '&']
    assert list(l.lex('4«')) == ['4', '«']


def test_spaces_not_feedable():
    l = Lexer()
    matches = list(l.matches('4 2'))
    assert [l.isfeedable(m) for m in matches] == [True, False, True]
