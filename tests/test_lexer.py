'''
Lexer tests
'''

from bigrpn.lexer import Lexer


def test_numbers_and_words():
    l = Lexer()
    groups = [l.matchedgroups(m) for m in l.lex('3 2 * 4 ^')]
    assert [g for g in groups if 'space' not in g] == [
        {'number': '3'},
        {'number': '2'},
        {'word': '*'},
        {'number': '4'},
        {'word': '^'},
    ]


def test_trailing_garbage_is_a_word():
    l = Lexer()
    assert [l.matchedgroups(m) for m in l.lex('12a')] == [{'word': '12a'}]


def test_non_ascii_digits_are_words():
    l = Lexer()
    one = '\N{ARABIC-INDIC DIGIT ONE}'
    assert [l.matchedgroups(m) for m in l.lex(one)] == [{'word': one}]


def test_feedable_lexemes_skip_any_whitespace():
    l = Lexer()
    assert [m.group(0) for m in l.lex('  1\t22 \n+. ')
            if l.isfeedable(m)] == ['1', '22', '+.']


def test_empty_line():
    l = Lexer()
    assert list(l.lex('')) == []


def test_number_at_end_of_line():
    l = Lexer()
    matches = list(l.lex('+ 007\n'))
    assert 'number' in l.matchedgroups(matches[-2])
    assert matches[-2].group(0) == '007'
    assert not l.isfeedable(matches[-1])
