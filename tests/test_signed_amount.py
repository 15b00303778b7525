import pytest
from hypothesis import given
from hypothesis import strategies as st

from beldex.amount import Amount
from beldex.denomination import (
    Denomination as D,
    InvalidFormatError,
    NegativeAmountError,
    TooBigError,
    TooPreciseError,
)
from beldex.signed_amount import SignedAmount

I64_MAX = (1 << 63) - 1
I64_MIN = -(1 << 63)


def spico(n):
    return SignedAmount.from_pico(n)


def pico(n):
    return Amount.from_pico(n)


def test_arithmetic_operators():
    assert spico(15) - spico(20) == spico(-5)
    assert spico(-14) * 3 == spico(-42)
    assert spico(-14) // 2 == spico(-7)
    assert spico(-14) % 3 == spico(-2)


def test_augmented_assignment():
    b = spico(-5)
    b += spico(13)
    assert b == spico(8)
    b -= spico(3)
    assert b == spico(5)
    b *= 6
    assert b == spico(30)
    b //= 3
    assert b == spico(10)
    b %= 3
    assert b == spico(1)


def test_operator_overflow_raises():
    with pytest.raises(OverflowError):
        SignedAmount.max_value() + spico(1)
    with pytest.raises(OverflowError):
        SignedAmount.min_value() - spico(1)
    with pytest.raises(OverflowError):
        SignedAmount.min_value() // -1
    with pytest.raises(ZeroDivisionError):
        spico(5) // 0
    with pytest.raises(ZeroDivisionError):
        spico(5) % 0


def test_checked_arithmetic():
    assert SignedAmount.max_value().checked_add(spico(1)) is None
    assert SignedAmount.min_value().checked_sub(spico(1)) is None
    assert spico(5).checked_sub(spico(6)) == spico(-1)
    assert spico(-6).checked_div(2) == spico(-3)
    assert spico(-7).checked_div(2) == spico(-3)
    assert spico(5).checked_div(0) is None
    assert spico(5).checked_rem(0) is None
    assert SignedAmount.min_value().checked_rem(-1) is None
    assert spico(-7).checked_rem(2) == spico(-1)


def test_positive_sub():
    assert spico(-5).positive_sub(spico(3)) is None
    assert spico(5).positive_sub(spico(-3)) is None
    assert spico(3).positive_sub(spico(5)) is None
    assert spico(3).positive_sub(spico(3)) == spico(0)
    assert spico(5).positive_sub(spico(3)) == spico(2)


def test_sign_helpers():
    assert spico(-3).signum() == -1
    assert spico(0).signum() == 0
    assert spico(9).signum() == 1
    assert spico(9).is_positive() and not spico(9).is_negative()
    assert spico(-9).is_negative() and not spico(-9).is_positive()
    assert not spico(0).is_positive() and not spico(0).is_negative()
    assert spico(-9).abs() == spico(9)
    assert SignedAmount.min_value().checked_abs() is None
    with pytest.raises(OverflowError):
        SignedAmount.min_value().abs()


def test_floating_point():
    assert SignedAmount.from_float_in(-11.22, D.MILLINERO) == spico(-11220000000)
    assert SignedAmount.from_float_in(-0.00012345, D.MONERO) == spico(-123450000)
    with pytest.raises(TooPreciseError):
        SignedAmount.from_float_in(-0.1, D.PICONERO)
    with pytest.raises(TooBigError):
        SignedAmount.from_float_in(-184467440738.0, D.MONERO)
    with pytest.raises(TooBigError):
        Amount.from_float_in(
            SignedAmount.max_value().to_float_in(D.PICONERO) + 1.0, D.PICONERO
        )


def test_float_conversion_values():
    assert SignedAmount.from_xmr(2.5).to_float_in(D.MONERO) == 2.5
    assert SignedAmount.from_xmr(-2.5).to_float_in(D.MILLINERO) == -2500.0
    assert SignedAmount.from_xmr(-2.5).to_float_in(D.MICRONERO) == -2500000.0
    assert SignedAmount.from_xmr(-2.5).to_float_in(D.NANONERO) == -2500000000.0
    assert SignedAmount.from_xmr(2.5).to_float_in(D.PICONERO) == 2500000000000.0
    assert SignedAmount.from_xmr(-2.5).as_xmr() == -2.5


def test_parsing():
    with pytest.raises(InvalidFormatError):
        SignedAmount.from_str_in("-", D.MONERO)
    assert SignedAmount.from_str_in("-.5", D.MONERO) == spico(-500_000_000_000)
    assert SignedAmount.from_str_in("-0.0", D.MONERO) == spico(0)


def test_to_string():
    assert spico(-42).to_string_in(D.MONERO) == "-0.000000000042"
    assert SignedAmount.ONE_BDX.to_string_with_denomination(D.PICONERO) == (
        "1000000000 piconero"
    )
    assert spico(-42).to_string_with_denomination(D.MONERO) == "-0.000000000042 xmr"
    assert str(spico(-42)) == "-0.000000000042 xmr"
    assert repr(spico(-2_500_000_000_000)) == "SignedAmount(-2.500000000000 xmr)"


def test_unsigned_signed_conversion():
    with pytest.raises(NegativeAmountError):
        spico(-1).to_unsigned()
    assert spico(I64_MAX).to_unsigned() == pico(I64_MAX)
    assert spico(0).to_unsigned().to_signed() == spico(0)
    assert spico(1).to_unsigned().to_signed() == spico(1)
    assert spico(I64_MAX).to_unsigned().to_signed() == spico(I64_MAX)


@pytest.mark.parametrize(
    "text, error",
    [
        ("-0.1 piconero", TooPreciseError),
        ("-1.0001 nanonero", TooPreciseError),
        ("-200000000000 XMR", TooBigError),
        ("-42 piconero XMR", InvalidFormatError),
    ],
)
def test_from_str_errors(text, error):
    with pytest.raises(error):
        SignedAmount.from_str_with_denomination(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("-.5 nanonero", -500),
        ("-5 piconero", -5),
        ("-10 nanonero", -10_000),
        ("-10 micronero", -10_000_000),
        ("-10 millinero", -10_000_000_000),
    ],
)
def test_from_str(text, expected):
    assert SignedAmount.from_str_with_denomination(text) == spico(expected)


def test_to_from_string_in():
    assert spico(-500).to_string_in(D.NANONERO) == "-0.500"
    assert spico(-5).to_string_in(D.PICONERO) == "-5"
    assert spico(-10_000).to_string_in(D.NANONERO) == "-10.000"
    assert SignedAmount.from_str_in(
        spico(-1).to_string_in(D.MICRONERO), D.MICRONERO
    ) == spico(-1)
    with pytest.raises(TooBigError):
        SignedAmount.from_str_in(spico(I64_MAX).to_string_in(D.PICONERO), D.MICRONERO)
    with pytest.raises(TooBigError):
        SignedAmount.from_str_in(spico(I64_MIN).to_string_in(D.PICONERO), D.MICRONERO)


def test_out_of_range_construction():
    with pytest.raises(OverflowError):
        SignedAmount(I64_MAX + 1)
    with pytest.raises(TypeError):
        SignedAmount(1.5)


@given(st.integers(min_value=I64_MIN + 1, max_value=I64_MAX), st.sampled_from(list(D)))
def test_string_round_trip(value, denom):
    amount = spico(value)
    assert SignedAmount.from_str_in(amount.to_string_in(denom), denom) == amount
    assert (
        SignedAmount.from_str_with_denomination(amount.to_string_with_denomination(denom))
        == amount
    )


@given(
    st.integers(min_value=-(1 << 62), max_value=1 << 62),
    st.integers(min_value=-(1 << 62), max_value=1 << 62),
)
def test_add_sub_inverse(a, b):
    assert (spico(a) + spico(b)) - spico(b) == spico(a)


@given(
    st.integers(min_value=I64_MIN + 1, max_value=I64_MAX),
    st.integers(min_value=1, max_value=1000),
)
def test_div_rem_identity(a, b):
    q = spico(a) // b
    r = spico(a) % b
    assert q.piconero * b + r.piconero == a
    assert abs(r.piconero) < b
    assert r.piconero == 0 or (r.piconero < 0) == (a < 0)