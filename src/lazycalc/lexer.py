from functools import reduce
import operator

import regex


class Lexer:
    '''
    Lexer for typed-in lines.

    The calculator itself only knows single-character tokens; this is just
    there so people can space out what they type. Every non-space character
    is a token of its own, known to the calculator or not.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    SPACE = r'\s+'
    TOKEN = r'\S'

    # All possible lexemes.
    LEXEME = r'(?<space>' + SPACE + r')|' \
             r'(?<token>' + TOKEN + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1},
                   0)

    def matches(self, line):
        '''
        Take a line and yield all lexeme matches, spaces included.
        '''
        return regex.finditer(type(self).LEXEME, line,
                              flags=type(self).FLAGS)

    def lex(self, line):
        '''
        Take a line and yield its tokens, dropping whitespace.
        '''
        for match in self.matches(line):
            if self.isfeedable(match):
                yield match.group('token')

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to the calculator.
        '''
        return match.group('token') is not None
