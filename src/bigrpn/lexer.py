from functools import reduce
import operator

import regex


class Lexer:
    '''
    Lexer for the postfix *regular* grammar.

    Lexemes are whitespace-delimited. A lexeme made only of decimal digits is
    a number; anything else is a word, for the machine's commands to claim.

    For consistency, needs to be instantiated, despite holding no internal
    state.
    '''
    # Number: ASCII digits only, and the whole lexeme. 12a is a word.
    NUMBER = r'''
              [0-9]+
              (?=\s|$)
              '''
    # Word, as in operator or command name
    WORD = r'\S+'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<number>' + NUMBER + r')|' \
             r'(?<word>' + WORD + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.DOTALL,
                    regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def lex(self, line):
        '''
        Take a line and yield all lexemes.
        '''
        pattern = regex.compile(type(self).LEXEME, flags=type(self).FLAGS)
        for match in pattern.finditer(line):
            yield match

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to machine.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Return the lexeme's matched groups.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
