"""Denominations, amount parsing errors and the decimal parse/format routines."""

from __future__ import annotations

from enum import Enum

_U64_MAX = (1 << 64) - 1
_MAX_INPUT_LEN = 50
_DIGITS = "0123456789"


class ParsingError(ValueError):
    """Base class of every error raised while parsing an amount."""

    message = "Amount parsing error"

    def __init__(self, *args: object) -> None:
        super().__init__(*(args or (self.message,)))

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args  # type: ignore[union-attr]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class NegativeAmountError(ParsingError):
    """Amount is negative."""

    message = "Amount is negative"


class TooBigError(ParsingError):
    """Amount is too big to fit inside the type."""

    message = "Amount is too big to fit inside the type"


class TooPreciseError(ParsingError):
    """Amount has higher precision than supported by the type."""

    message = "Amount has higher precision than supported by the type"


class InvalidFormatError(ParsingError):
    """Invalid number format."""

    message = "Invalid number format"


class InputTooLargeError(ParsingError):
    """Input string was too large."""

    message = "Input string was too large"


class InvalidCharacterError(ParsingError):
    """Invalid character in input."""

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(f"Invalid character in input: {char}")


class UnknownDenominationError(ParsingError):
    """The denomination was unknown."""

    def __init__(self, denomination: str) -> None:
        self.denomination = denomination
        super().__init__(f"The denomination was unknown: {denomination}")


class Denomination(Enum):
    """A set of denominations in which amounts can be expressed."""

    MONERO = "xmr"
    MILLINERO = "millinero"
    MICRONERO = "micronero"
    NANONERO = "nanonero"
    PICONERO = "piconero"

    def precision(self) -> int:
        """The number of decimal places more than a piconero (zero or negative)."""
        return _PRECISIONS[self]

    @classmethod
    def parse(cls, s: str) -> "Denomination":
        """Parse a denomination name or abbreviation."""
        try:
            return _ALIASES[s]
        except KeyError:
            raise UnknownDenominationError(s) from None

    def __str__(self) -> str:
        return self.value


_PRECISIONS = {
    Denomination.MONERO: -12,
    Denomination.MILLINERO: -9,
    Denomination.MICRONERO: -6,
    Denomination.NANONERO: -3,
    Denomination.PICONERO: 0,
}

_ALIASES = {
    "xmr": Denomination.MONERO,
    "XMR": Denomination.MONERO,
    "monero": Denomination.MONERO,
    "millinero": Denomination.MILLINERO,
    "mXMR": Denomination.MILLINERO,
    "micronero": Denomination.MICRONERO,
    "µXMR": Denomination.MICRONERO,
    "mcXMR": Denomination.MICRONERO,
    "nanonero": Denomination.NANONERO,
    "nXMR": Denomination.NANONERO,
    "piconero": Denomination.PICONERO,
    "pXMR": Denomination.PICONERO,
}


def _is_too_precise(s: str, precision: int) -> bool:
    tail = s[-precision:] if precision else ""
    return "." in s or precision >= len(s) or any(d != "0" for d in tail)


def parse_signed_to_piconero(s: str, denom: Denomination) -> tuple[bool, int]:
    """Parse a decimal string in ``denom`` into ``(is_negative, piconero)``.

    The piconero value is the magnitude and fits in an unsigned 64-bit integer.
    """
    if not s:
        raise InvalidFormatError()
    if len(s.encode("utf-8")) > _MAX_INPUT_LEN:
        raise InputTooLargeError()

    is_negative = s.startswith("-")
    if is_negative:
        if len(s) == 1:
            raise InvalidFormatError()
        s = s[1:]

    precision_diff = -denom.precision()
    if precision_diff < 0:
        # Parsing into a less precise unit: only whole numbers ending in enough zeroes.
        last_n = -precision_diff
        if _is_too_precise(s, last_n):
            raise TooPreciseError()
        s = s[:-last_n]
        max_decimals = 0
    else:
        max_decimals = precision_diff

    decimals: int | None = None
    value = 0
    for c in s:
        if c in _DIGITS:
            value = value * 10 + int(c)
            if value > _U64_MAX:
                raise TooBigError()
            if decimals is not None:
                if decimals < max_decimals:
                    decimals += 1
                else:
                    raise TooPreciseError()
        elif c == ".":
            if decimals is not None:
                raise InvalidFormatError()
            decimals = 0
        else:
            raise InvalidCharacterError(c)

    for _ in range(max_decimals - (decimals or 0)):
        value *= 10
        if value > _U64_MAX:
            raise TooBigError()

    return is_negative, value


def format_piconero(piconero: int, negative: bool, denom: Denomination) -> str:
    """Format a piconero magnitude in ``denom``, without the denomination suffix."""
    sign = "-" if negative else ""
    precision = denom.precision()
    if precision > 0:
        return f"{sign}{piconero}{'0' * precision}"
    if precision == 0:
        return f"{sign}{piconero}"
    nb_decimals = -precision
    real = str(piconero).rjust(nb_decimals, "0")
    whole, fraction = real[:-nb_decimals], real[-nb_decimals:]
    return f"{sign}{whole or '0'}.{fraction}"