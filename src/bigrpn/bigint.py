'''
Arbitrary-precision non-negative integers.

Digits are kept in base 10, least significant first, so that carries run
forwards through the list. Compound operators do the raw digit work in a
private helper and only then trim the result, once. Subtraction calls
addition, for example, and the intermediate sum must keep its padding.

Negative numbers are not representable. Subtracting a larger number from a
smaller one is an error, not a wraparound.
'''

from functools import total_ordering

import regex

from .util import (MalformedInputError, NegativeResultError, DivisionByZero,
                   UndefinedResultError, NarrowingOverflowError)


# ASCII only. \d would also accept other scripts' digits.
_DIGITS = regex.compile(r'[0-9]+')


def _carry(digits):
    '''
    Resolve every position into 0-9, pushing the excess up.

    Whatever carries out of the last position is dropped; callers pad first.
    '''
    carry = 0
    for i, digit in enumerate(digits):
        carry, digits[i] = divmod(digit + carry, 10)


def _to_nines_complement(digits):
    for i, digit in enumerate(digits):
        digits[i] = 9 - digit


@total_ordering
class BigInt:
    '''
    Non-negative integer of any size.

    Construct from a non-negative int, a string of decimal digits, or another
    BigInt (copied). No argument means zero.
    '''

    # Range of the native unsigned long that int() narrows to.
    NATIVE_MAX = 2 ** 64 - 1

    def __init__(self, value=0):
        if isinstance(value, BigInt):
            self._digits = list(value._digits)
        elif isinstance(value, str):
            self._digits = self._parse(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            if value < 0:
                raise MalformedInputError(
                    'Attempted conversion from negative integer {}'
                    .format(value))
            self._digits = []
            while True:
                value, digit = divmod(value, 10)
                self._digits.append(digit)
                if value == 0:
                    break
        else:
            raise TypeError('Cannot make a BigInt from {}'
                            .format(type(value).__name__))

    @staticmethod
    def _parse(s):
        if _DIGITS.fullmatch(s) is None:
            raise MalformedInputError(
                "Attempted conversion from non-numeric token '{}'".format(s))
        return [int(c) for c in reversed(s.lstrip('0') or '0')]

    @classmethod
    def _blank(cls):
        '''
        Return a BigInt with no digits at all, the only falsy state.
        '''
        blank = cls()
        blank._digits = []
        return blank

    @classmethod
    def _coerce(cls, other):
        '''
        Return other as a BigInt, or None if it isn't number-like.
        '''
        if isinstance(other, BigInt):
            return other
        if isinstance(other, (int, str)) and not isinstance(other, bool):
            return cls(other)
        return None

    def _operand(self, other):
        '''
        Coerce the right side of an in-place operator, unaliased from self.
        '''
        other = self._coerce(other)
        if other is self:
            other = other.copy()
        return other

    @classmethod
    def read(cls, stream):
        '''
        Parse the next whitespace-delimited token of a text stream.

        Leading whitespace is skipped. The whitespace ending the token is left
        on the stream if it is seekable, and consumed otherwise.

        :raises MalformedInputError: on no token, or a bad one.
        '''
        token = []
        seekable = stream.seekable()
        while True:
            position = stream.tell() if seekable and token else None
            char = stream.read(1)
            if not char:
                break
            if char.isspace():
                if token:
                    if position is not None:
                        stream.seek(position)
                    break
                continue
            token.append(char)
        return cls(''.join(token))

    def write(self, stream):
        '''
        Write canonical decimal form to a text stream.
        '''
        stream.write(str(self))

    def copy(self):
        return type(self)(self)

    @property
    def digits(self):
        '''
        Digits, least significant first, as a tuple.
        '''
        return tuple(self._digits)

    def __bool__(self):
        return bool(self._digits)

    def __str__(self):
        return ''.join(map(str, reversed(self._digits)))

    def __repr__(self):
        return '{}({!r})'.format(type(self).__name__, str(self))

    def __int__(self):
        '''
        Narrow to a native unsigned integer.

        :raises NarrowingOverflowError: past NATIVE_MAX.
        '''
        value = int(str(self))
        if value > self.NATIVE_MAX:
            raise NarrowingOverflowError(
                '{} does not fit an unsigned long'.format(self))
        return value

    def __float__(self):
        # Goes through int(), so this is no way out for huge values either.
        return float(int(self))

    __hash__ = None

    def __eq__(self, other):
        try:
            other = self._coerce(other)
        except MalformedInputError:
            # Not a number, so not this one.
            return False
        if other is None:
            return NotImplemented
        return self._digits == other._digits

    def __lt__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        lhs, rhs = self._digits, other._digits
        # Both canonical, so fewer digits means smaller.
        if len(lhs) != len(rhs):
            return len(lhs) < len(rhs)
        for lhs_digit, rhs_digit in zip(reversed(lhs), reversed(rhs)):
            if lhs_digit != rhs_digit:
                return lhs_digit < rhs_digit
        return False

    def _trim(self):
        '''
        Drop most significant zeros, keeping at least one digit.
        '''
        digits = self._digits
        while len(digits) > 1 and digits[-1] == 0:
            digits.pop()

    def _pad(self, n):
        '''
        Zero-extend to n digits.
        '''
        self._digits.extend([0] * (n - len(self._digits)))

    def _add(self, other):
        lhs, rhs = self._digits, other._digits
        # One more than the widest, for the final carry.
        self._pad(max(len(lhs), len(rhs)) + 1)
        for i, digit in enumerate(rhs):
            lhs[i] += digit
        _carry(lhs)

    def _subtract(self, other):
        # https://en.wikipedia.org/wiki/Method_of_complements
        if other > self:
            raise NegativeResultError(
                "Negative results unsupported '{} - {}'".format(self, other))
        _to_nines_complement(self._digits)
        self._add(other)
        _to_nines_complement(self._digits)
        # The padding digit _add grew is always 9 once complemented back.
        self._digits.pop()

    def _multiply(self, other):
        # Acyclic convolution, schoolbook style.
        # TODO: Schönhage-Strassen (FFT) multiplication for large operands.
        if self == 0 or other == 0:
            self._digits = [0]
            return
        if other == 1:
            return
        if self == 1:
            self._digits = list(other._digits)
            return
        lhs, rhs = self._digits, other._digits
        result = [0] * (max(len(lhs), len(rhs)) * 2)
        for m, rhs_digit in enumerate(rhs):
            for i, lhs_digit in enumerate(lhs):
                result[m + i] += lhs_digit * rhs_digit
            _carry(result)
        self._digits = result

    def _divide(self, other):
        # Repeated subtraction: linear in the quotient, not in its length.
        if other == 0:
            raise DivisionByZero("Division by zero '{} / {}'"
                                 .format(self, other))
        if self == 0:
            return
        quotient = type(self)()
        while self >= other:
            self -= other
            quotient.increment()
        self._digits = quotient._digits

    def _exponentiate(self, other):
        # https://en.wikipedia.org/wiki/Exponentiation_by_squaring
        if self == 0 and other == 0:
            raise UndefinedResultError("Result of '{} ^ {}' undefined"
                                       .format(self, other))
        if self == 0:
            return
        if other == 0:
            self._digits = [1]
            return
        base = self.copy()
        exponent = other.copy()
        result = type(self)(1)
        # The exponent is decimal, so halve it by division, not shifting.
        while exponent != 0:
            if exponent._digits[0] % 2 == 1:
                result *= base
                exponent.decrement()
            base *= base
            exponent //= 2
        self._digits = result._digits

    def increment(self):
        '''
        Add one in place, and return self.
        '''
        self += 1
        return self

    def decrement(self):
        '''
        Subtract one in place, and return self.

        :raises NegativeResultError: if self is zero.
        '''
        self -= 1
        return self

    def __iadd__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        if other == 0:
            return self
        self._add(other)
        self._trim()
        return self

    def __isub__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        self._subtract(other)
        self._trim()
        return self

    def __imul__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        self._multiply(other)
        self._trim()
        return self

    def __ifloordiv__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        self._divide(other)
        self._trim()
        return self

    # Division is always integral.
    __itruediv__ = __ifloordiv__

    def __imod__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        self -= self // other * other
        return self

    def __ipow__(self, other):
        other = self._operand(other)
        if other is None:
            return NotImplemented
        self._exponentiate(other)
        self._trim()
        return self

    # As written on the calculator.
    __ixor__ = __ipow__

    def _binary(inplace):
        '''
        Make a binary operator that applies inplace to a copy of the left side.
        '''
        def operator(self, other):
            result = self.copy()
            return inplace(result, other)
        operator.__name__ = inplace.__name__.replace('__i', '__', 1)
        operator.__doc__ = inplace.__doc__
        return operator

    def _reflected(inplace):
        '''
        Make the reflected operator, for int or str on the left side.
        '''
        def operator(self, other):
            lhs = self._coerce(other)
            if lhs is None:
                return NotImplemented
            return inplace(lhs.copy(), self)
        operator.__name__ = inplace.__name__.replace('__i', '__r', 1)
        return operator

    __add__ = _binary(__iadd__)
    __sub__ = _binary(__isub__)
    __mul__ = _binary(__imul__)
    __floordiv__ = _binary(__ifloordiv__)
    __truediv__ = _binary(__itruediv__)
    __mod__ = _binary(__imod__)
    __pow__ = _binary(__ipow__)
    __xor__ = _binary(__ixor__)

    __radd__ = _reflected(__iadd__)
    __rsub__ = _reflected(__isub__)
    __rmul__ = _reflected(__imul__)
    __rfloordiv__ = _reflected(__ifloordiv__)
    __rtruediv__ = _reflected(__itruediv__)
    __rmod__ = _reflected(__imod__)
    __rpow__ = _reflected(__ipow__)

    del _binary, _reflected

    def __divmod__(self, other):
        quotient = self // other
        return quotient, self - quotient * other
