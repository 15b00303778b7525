"""Unsigned amounts of coin, held internally as a whole number of piconero."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar

from .denomination import (
    Denomination,
    InvalidFormatError,
    NegativeAmountError,
    TooBigError,
    format_piconero,
    parse_signed_to_piconero,
)

if TYPE_CHECKING:
    from .signed_amount import SignedAmount

_U64_MAX = (1 << 64) - 1
_I64_MAX = (1 << 63) - 1


def _float_to_string(value: float) -> str:
    """Render a float as a plain decimal string, never in exponent notation.

    Whole values carry no fractional part ("100", not "100.0"), and the sign of
    a negative zero is kept.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    number = Decimal(repr(value))
    if number == number.to_integral_value():
        text = str(int(number))
        if number.is_signed() and not text.startswith("-"):
            text = "-" + text
        return text
    return format(number, "f")


def _require_u64(value: object, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{what} must be an int, not {type(value).__name__}")
    if not 0 <= value <= _U64_MAX:
        raise OverflowError(f"{what} {value} does not fit in an unsigned 64-bit integer")
    return value


@dataclass(frozen=True, order=True)
class Amount:
    """An unsigned quantity of coin, stored as piconero (0 to 2**64 - 1)."""

    piconero: int = 0

    ZERO: ClassVar[Amount]
    ONE_PICO: ClassVar[Amount]
    ONE_BDX: ClassVar[Amount]

    def __post_init__(self) -> None:
        _require_u64(self.piconero, "piconero")

    @classmethod
    def from_pico(cls, piconero: int) -> Amount:
        """Create an amount of the given number of piconero."""
        return cls(piconero)

    @classmethod
    def max_value(cls) -> Amount:
        """The largest representable amount."""
        return cls(_U64_MAX)

    @classmethod
    def min_value(cls) -> Amount:
        """The smallest representable amount."""
        return cls(0)

    @classmethod
    def from_xmr(cls, xmr: float) -> Amount:
        """Convert a floating-point number of xmr into an amount."""
        return cls.from_float_in(xmr, Denomination.MONERO)

    @classmethod
    def from_str_in(cls, s: str, denom: Denomination) -> Amount:
        """Parse a decimal string (without denomination) expressed in ``denom``."""
        negative, piconero = parse_signed_to_piconero(s, denom)
        if negative:
            raise NegativeAmountError()
        if piconero > _I64_MAX:
            raise TooBigError()
        return cls(piconero)

    @classmethod
    def from_str_with_denomination(cls, s: str) -> Amount:
        """Parse a string such as ``"1.5 xmr"``: a value, one space, a denomination."""
        parts = s.split(" ", 2)
        if len(parts) != 2:
            raise InvalidFormatError()
        amount_text, denom_text = parts
        denom = Denomination.parse(denom_text)
        return cls.from_str_in(amount_text, denom)

    @classmethod
    def from_float_in(cls, value: float, denom: Denomination) -> Amount:
        """Convert a floating-point value expressed in ``denom`` into an amount."""
        if value < 0.0:
            raise NegativeAmountError()
        return cls.from_str_in(_float_to_string(value), denom)

    def to_float_in(self, denom: Denomination) -> float:
        """This amount as a float in ``denom``; beware of float rounding."""
        return float(self.to_string_in(denom))

    def as_xmr(self) -> float:
        """This amount as a float in xmr."""
        return self.to_float_in(Denomination.MONERO)

    def to_string_in(self, denom: Denomination) -> str:
        """This amount as a decimal string in ``denom``, without the denomination."""
        return format_piconero(self.piconero, False, denom)

    def to_string_with_denomination(self, denom: Denomination) -> str:
        """This amount in ``denom`` followed by a space and the denomination name."""
        return f"{self.to_string_in(denom)} {denom}"

    def checked_add(self, rhs: Amount) -> Amount | None:
        """Sum, or None on overflow."""
        total = self.piconero + rhs.piconero
        return Amount(total) if total <= _U64_MAX else None

    def checked_sub(self, rhs: Amount) -> Amount | None:
        """Difference, or None if it would be negative."""
        difference = self.piconero - rhs.piconero
        return Amount(difference) if difference >= 0 else None

    def checked_mul(self, rhs: int) -> Amount | None:
        """Product with an unsigned integer, or None on overflow."""
        product = self.piconero * _require_u64(rhs, "multiplier")
        return Amount(product) if product <= _U64_MAX else None

    def checked_div(self, rhs: int) -> Amount | None:
        """Integer quotient (remainder dropped), or None when dividing by zero."""
        divisor = _require_u64(rhs, "divisor")
        if divisor == 0:
            return None
        return Amount(self.piconero // divisor)

    def checked_rem(self, rhs: int) -> Amount | None:
        """Remainder, or None when dividing by zero."""
        modulus = _require_u64(rhs, "modulus")
        if modulus == 0:
            return None
        return Amount(self.piconero % modulus)

    def to_signed(self) -> SignedAmount:
        """Convert to a signed amount; raises TooBigError past the signed maximum."""
        if self.piconero > _I64_MAX:
            raise TooBigError()
        from .signed_amount import SignedAmount

        return SignedAmount.from_pico(self.piconero)

    def __add__(self, other: object) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise OverflowError("Amount addition error")
        return result

    def __sub__(self, other: object) -> Amount:
        if not isinstance(other, Amount):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise OverflowError("Amount subtraction error")
        return result

    def __mul__(self, other: object) -> Amount:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        result = self.checked_mul(other)
        if result is None:
            raise OverflowError("Amount multiplication error")
        return result

    def __floordiv__(self, other: object) -> Amount:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        result = self.checked_div(other)
        if result is None:
            raise ZeroDivisionError("Amount division error")
        return result

    def __mod__(self, other: object) -> Amount:
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        result = self.checked_rem(other)
        if result is None:
            raise ZeroDivisionError("Amount remainder error")
        return result

    def __str__(self) -> str:
        return self.to_string_with_denomination(Denomination.MONERO)

    def __repr__(self) -> str:
        return f"Amount({self.as_xmr():.12f} xmr)"


Amount.ZERO = Amount(0)
Amount.ONE_PICO = Amount(1)
Amount.ONE_BDX = Amount(1_000_000_000)