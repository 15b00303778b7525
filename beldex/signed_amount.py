"""Signed amounts of coin, held internally as a whole number of piconero."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .amount import Amount, _float_to_string
from .denomination import (
    Denomination,
    InvalidFormatError,
    NegativeAmountError,
    TooBigError,
    format_piconero,
    parse_signed_to_piconero,
)

_I64_MAX = (1 << 63) - 1
_I64_MIN = -(1 << 63)


def _require_i64(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, not {type(value).__name__}")
    if not _I64_MIN <= value <= _I64_MAX:
        raise OverflowError(f"{what} {value} does not fit in a signed 64-bit integer")
    return value


def _fits(value: int) -> bool:
    return _I64_MIN <= value <= _I64_MAX


def _truncating_div(a: int, b: int) -> int:
    """Integer quotient rounded toward zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


@dataclass(frozen=True, order=True)
class SignedAmount:
    """A signed quantity of coin, stored as piconero (-2**63 to 2**63 - 1)."""

    piconero: int = 0

    ZERO: ClassVar[SignedAmount]
    ONE_PICO: ClassVar[SignedAmount]
    ONE_BDX: ClassVar[SignedAmount]

    def __post_init__(self) -> None:
        _require_i64(self.piconero, "piconero")

    @classmethod
    def from_pico(cls, piconero: int) -> SignedAmount:
        """Create an amount of the given number of piconero."""
        return cls(piconero)

    @classmethod
    def max_value(cls) -> SignedAmount:
        """The largest representable amount."""
        return cls(_I64_MAX)

    @classmethod
    def min_value(cls) -> SignedAmount:
        """The smallest representable amount."""
        return cls(_I64_MIN)

    @classmethod
    def from_xmr(cls, xmr: float) -> SignedAmount:
        """Convert a floating-point number of xmr into an amount."""
        return cls.from_float_in(xmr, Denomination.MONERO)

    @classmethod
    def from_str_in(cls, s: str, denom: Denomination) -> SignedAmount:
        """Parse a decimal string (without denomination) expressed in ``denom``."""
        negative, piconero = parse_signed_to_piconero(s, denom)
        if piconero > _I64_MAX:
            raise TooBigError()
        return cls(-piconero if negative else piconero)

    @classmethod
    def from_str_with_denomination(cls, s: str) -> SignedAmount:
        """Parse a string such as ``"-1.5 xmr"``: a value, one space, a denomination."""
        parts = s.split(" ", 2)
        if len(parts) != 2:
            raise InvalidFormatError()
        amount_text, denom_text = parts
        denom = Denomination.parse(denom_text)
        return cls.from_str_in(amount_text, denom)

    @classmethod
    def from_float_in(cls, value: float, denom: Denomination) -> SignedAmount:
        """Convert a floating-point value expressed in ``denom`` into an amount."""
        return cls.from_str_in(_float_to_string(value), denom)

    def to_float_in(self, denom: Denomination) -> float:
        """This amount as a float in ``denom``; beware of float rounding."""
        return float(self.to_string_in(denom))

    def as_xmr(self) -> float:
        """This amount as a float in xmr."""
        return self.to_float_in(Denomination.MONERO)

    def to_string_in(self, denom: Denomination) -> str:
        """This amount as a decimal string in ``denom``, without the denomination."""
        return format_piconero(abs(self.piconero), self.piconero < 0, denom)

    def to_string_with_denomination(self, denom: Denomination) -> str:
        """This amount in ``denom`` followed by a space and the denomination name."""
        return f"{self.to_string_in(denom)} {denom}"

    def abs(self) -> SignedAmount:
        """The absolute value; raises OverflowError for the minimum value."""
        result = self.checked_abs()
        if result is None:
            raise OverflowError("SignedAmount absolute value error")
        return result

    def signum(self) -> int:
        """-1, 0 or 1 according to the sign of this amount."""
        return (self.piconero > 0) - (self.piconero < 0)

    def is_positive(self) -> bool:
        """True if strictly greater than zero."""
        return self.piconero > 0

    def is_negative(self) -> bool:
        """True if strictly less than zero."""
        return self.piconero < 0

    def checked_abs(self) -> SignedAmount | None:
        """The absolute value, or None for the minimum value."""
        magnitude = abs(self.piconero)
        return SignedAmount(magnitude) if magnitude <= _I64_MAX else None

    def checked_add(self, rhs: SignedAmount) -> SignedAmount | None:
        """Sum, or None on overflow."""
        total = self.piconero + rhs.piconero
        return SignedAmount(total) if _fits(total) else None

    def checked_sub(self, rhs: SignedAmount) -> SignedAmount | None:
        """Difference, or None on overflow."""
        difference = self.piconero - rhs.piconero
        return SignedAmount(difference) if _fits(difference) else None

    def checked_mul(self, rhs: int) -> SignedAmount | None:
        """Product with a signed integer, or None on overflow."""
        product = self.piconero * _require_i64(rhs, "multiplier")
        return SignedAmount(product) if _fits(product) else None

    def checked_div(self, rhs: int) -> SignedAmount | None:
        """Quotient rounded toward zero, or None on division by zero or overflow."""
        divisor = _require_i64(rhs, "divisor")
        if divisor == 0:
            return None
        quotient = _truncating_div(self.piconero, divisor)
        return SignedAmount(quotient) if _fits(quotient) else None

    def checked_rem(self, rhs: int) -> SignedAmount | None:
        """Remainder with the sign of the dividend, or None on zero or overflow."""
        modulus = _require_i64(rhs, "modulus")
        if modulus == 0:
            return None
        quotient = _truncating_div(self.piconero, modulus)
        if not _fits(quotient):
            return None
        return SignedAmount(self.piconero - quotient * modulus)

    def positive_sub(self, rhs: SignedAmount) -> SignedAmount | None:
        """Subtraction where neither operand nor the result may be negative."""
        if self.is_negative() or rhs.is_negative() or rhs > self:
            return None
        return self.checked_sub(rhs)

    def to_unsigned(self) -> Amount:
        """Convert to an unsigned amount; raises NegativeAmountError below zero."""
        if self.is_negative():
            raise NegativeAmountError()
        return Amount.from_pico(self.piconero)

    def __add__(self, other: object) -> SignedAmount:
        if not isinstance(other, SignedAmount):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise OverflowError("SignedAmount addition error")
        return result

    def __sub__(self, other: object) -> SignedAmount:
        if not isinstance(other, SignedAmount):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise OverflowError("SignedAmount subtraction error")
        return result

    def __mul__(self, other: object) -> SignedAmount:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        result = self.checked_mul(other)
        if result is None:
            raise OverflowError("SignedAmount multiplication error")
        return result

    def __floordiv__(self, other: object) -> SignedAmount:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("SignedAmount division error")
        result = self.checked_div(other)
        if result is None:
            raise OverflowError("SignedAmount division error")
        return result

    def __mod__(self, other: object) -> SignedAmount:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("SignedAmount remainder error")
        result = self.checked_rem(other)
        if result is None:
            raise OverflowError("SignedAmount remainder error")
        return result

    def __str__(self) -> str:
        return self.to_string_with_denomination(Denomination.MONERO)

    def __repr__(self) -> str:
        return f"SignedAmount({self.as_xmr():.12f} xmr)"


SignedAmount.ZERO = SignedAmount(0)
SignedAmount.ONE_PICO = SignedAmount(1)
SignedAmount.ONE_BDX = SignedAmount(1_000_000_000)