'''
Property-based BigInt tests, with Python's own int as the oracle.
'''

from hypothesis import assume, example, given
from hypothesis import strategies as st
from pytest import raises

from bigrpn import BigInt
from bigrpn.util import NegativeResultError, DivisionByZero


naturals = st.integers(min_value=0)
# Fifty digits and more.
huge = st.integers(min_value=10 ** 49, max_value=10 ** 60)
small = st.integers(min_value=0, max_value=10 ** 4)
exponents = st.integers(min_value=0, max_value=40)
digit_strings = st.text(alphabet='0123456789', min_size=1, max_size=80)


@given(naturals, naturals)
def test_add(a, b):
    assert str(BigInt(a) + BigInt(b)) == str(a + b)


@given(huge, huge)
def test_add_huge(a, b):
    assert str(BigInt(a) + BigInt(b)) == str(a + b)


@given(naturals, naturals)
def test_multiply(a, b):
    assert str(BigInt(a) * BigInt(b)) == str(a * b)


@given(huge, huge)
def test_multiply_huge(a, b):
    assert str(BigInt(a) * BigInt(b)) == str(a * b)


@given(naturals, naturals)
@example(1000, 1)
@example(5, 9)
def test_subtract(a, b):
    if a >= b:
        assert str(BigInt(a) - BigInt(b)) == str(a - b)
    else:
        with raises(NegativeResultError):
            BigInt(a) - BigInt(b)


@given(small, exponents)
def test_exponentiate(x, n):
    assume(x or n)
    assert str(BigInt(x) ** BigInt(n)) == str(x ** n)


# Division is repeated subtraction, so keep quotients small.
@given(st.integers(min_value=0, max_value=10 ** 3),
       st.integers(min_value=1, max_value=10 ** 3))
@example(7, 2)
def test_division_identity(a, b):
    quotient = BigInt(a) // BigInt(b)
    remainder = BigInt(a) % BigInt(b)
    assert str(quotient) == str(a // b)
    assert str(remainder) == str(a % b)
    assert quotient * BigInt(b) + remainder == BigInt(a)


@given(naturals)
def test_division_by_zero(a):
    with raises(DivisionByZero):
        BigInt(a) // BigInt(0)
    with raises(DivisionByZero):
        BigInt(a) % BigInt(0)


@given(digit_strings)
@example('00042')
@example('0')
@example('000')
def test_string_round_trip_is_canonical(s):
    assert str(BigInt(s)) == (s.lstrip('0') or '0')


@given(naturals, naturals)
def test_ordering(a, b):
    assert (BigInt(a) < BigInt(b)) == (a < b)
    assert (BigInt(a) == BigInt(b)) == (a == b)


@given(st.integers(min_value=0, max_value=BigInt.NATIVE_MAX))
def test_int_round_trip_within_native_range(a):
    assert int(BigInt(a)) == a
