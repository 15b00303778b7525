"""Conversion of amounts to and from plain serializable values.

Amounts can be written either as integers of piconero or as decimal strings
in xmr. Strings are used for xmr because floats would lose precision. Every
single-value helper passes ``None`` through, so optional fields work too.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

from .amount import Amount
from .denomination import Denomination
from .signed_amount import SignedAmount

AnyAmount = Union[Amount, SignedAmount]

_U64_MAX = (1 << 64) - 1
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


def _describe(value: object) -> str:
    if isinstance(value, bool):
        return f"boolean `{str(value).lower()}`"
    if isinstance(value, int):
        return f"integer `{value}`"
    if isinstance(value, float):
        return f"floating point `{value}`"
    if isinstance(value, str):
        return f'string "{value}"'
    if isinstance(value, dict):
        return "map"
    if isinstance(value, (list, tuple)):
        return "sequence"
    return type(value).__name__


def _check_amount(amount: object) -> AnyAmount:
    if not isinstance(amount, (Amount, SignedAmount)):
        raise TypeError(f"expected an Amount or SignedAmount, not {type(amount).__name__}")
    return amount


def _list_of(values: object, expected: str) -> list:
    if not isinstance(values, (list, tuple)):
        raise TypeError(f"invalid type: {_describe(values)}, expected a {expected}")
    return list(values)


def to_pico(amount: AnyAmount | None) -> int | None:
    """The amount as an integer number of piconero; None stays None."""
    if amount is None:
        return None
    return _check_amount(amount).piconero


def from_pico(value: int | None, signed: bool = False) -> AnyAmount | None:
    """Build an amount from an integer of piconero; None stays None.

    Raises TypeError for a non-integer and ValueError when the integer does
    not fit the target type (u64 for Amount, i64 for SignedAmount).
    """
    if value is None:
        return None
    expected = "i64" if signed else "u64"
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"invalid type: {_describe(value)}, expected {expected}")
    low, high = (_I64_MIN, _I64_MAX) if signed else (0, _U64_MAX)
    if not low <= value <= high:
        raise ValueError(f"invalid value: integer `{value}`, expected {expected}")
    return SignedAmount.from_pico(value) if signed else Amount.from_pico(value)


def to_xmr(amount: AnyAmount | None) -> str | None:
    """The amount as a decimal string in xmr; None stays None."""
    if amount is None:
        return None
    return _check_amount(amount).to_string_in(Denomination.MONERO)


def from_xmr(value: str | None, signed: bool = False) -> AnyAmount | None:
    """Parse a decimal string in xmr; None stays None.

    Raises TypeError for a non-string and a ParsingError for a bad amount.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"invalid type: {_describe(value)}, expected a string")
    cls = SignedAmount if signed else Amount
    return cls.from_str_in(value, Denomination.MONERO)


def to_pico_list(amounts: Iterable[AnyAmount]) -> list[int]:
    """Every amount as an integer of piconero."""
    return [_check_amount(a).piconero for a in amounts]


def to_xmr_list(amounts: Iterable[AnyAmount]) -> list[str]:
    """Every amount as a decimal string in xmr."""
    return [_check_amount(a).to_string_in(Denomination.MONERO) for a in amounts]


def amounts_from_pico_list(values: object) -> list[Amount]:
    """Read a list of piconero integers as unsigned amounts."""
    return [from_pico(v, signed=False) for v in _list_of(values, "Vec<u64>")]


def signed_amounts_from_pico_list(values: object) -> list[SignedAmount]:
    """Read a list of piconero integers as signed amounts."""
    return [from_pico(v, signed=True) for v in _list_of(values, "Vec<i64>")]


def amounts_from_xmr_list(values: object) -> list[Amount]:
    """Read a list of xmr decimal strings as unsigned amounts."""
    return [from_xmr(v, signed=False) for v in _list_of(values, "Vec<String>")]


def signed_amounts_from_xmr_list(values: object) -> list[SignedAmount]:
    """Read a list of xmr decimal strings as signed amounts."""
    return [from_xmr(v, signed=True) for v in _list_of(values, "Vec<String>")]