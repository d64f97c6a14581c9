'''
Postfix calculator over arbitrarily large non-negative integers.

BigInt is the number type: decimal digits, any length, no sign. Machine
evaluates lines of postfix tokens over BigInts, and CLI wraps it in a prompt.

    >>> from bigrpn import BigInt, Machine
    >>> BigInt(2) ** 100
    BigInt('1267650600228229401496703205376')
    >>> Machine().evaluate('3 2 * 4 ^')
    BigInt('1296')

Negative results are errors, not numbers. So are 0 ^ 0 and division by zero.
'''

from .bigint import BigInt
from .cli import CLI
from .lexer import Lexer
from .machine import Machine, Outcome


__all__ = 'BigInt', 'Machine', 'Outcome', 'Lexer', 'CLI'
