# beldex

Exact Beldex amounts in plain Python, with no third-party dependencies.
Amounts can be parsed from text, formatted in any denomination, and used in
arithmetic that never silently overflows.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Amounts

`beldex.amount.Amount` holds an unsigned quantity. `beldex.signed_amount.SignedAmount`
holds a signed one. Both count piconero, the smallest unit, in the `piconero`
field, so arithmetic is exact. Both are frozen, ordered dataclasses.

The ranges are those of 64-bit integers:

- `Amount` runs from 0 to 2**64 - 1.
- `SignedAmount` runs from -2**63 to 2**63 - 1.

Building either from an integer outside its range raises `OverflowError`.
Building it from a value that is not an `int` raises `TypeError`.

The operators `+`, `-`, `*`, `//` and `%` are supported.

- `+` and `-` take another amount of the same type.
- `*`, `//` and `%` take a plain integer.
- Overflow raises `OverflowError`.
- Division or remainder by zero raises `ZeroDivisionError`.

The `checked_add`, `checked_sub`, `checked_mul`, `checked_div` and `checked_rem`
methods return `None` instead of raising. For `SignedAmount`, division rounds
toward zero and the remainder takes the sign of the dividend.

```python
from beldex.amount import Amount
from beldex.signed_amount import SignedAmount
from beldex.denomination import Denomination

xmr = Denomination.parse("xmr")
pico = Denomination.parse("piconero")

a = Amount.from_str_in("1.5", xmr)
print(a.to_string_with_denomination(xmr))   # 1.500000000000 xmr
print(a.to_string_in(pico))                 # 1500000000000

b = Amount.from_str_with_denomination("0.25 xmr")
print(a + b)                                # 1.750000000000 xmr
print((a * 2) // 3)                         # 1.000000000000 xmr
print(a.checked_sub(a + b))                 # None

s = SignedAmount.from_str_in("-.5", xmr)
print(s.is_negative(), s.abs())             # True 0.500000000000 xmr
```

### Other operations

Both types have the following:

- `from_pico`, `max_value` and `min_value`.
- Constants: `ZERO`, `ONE_PICO`, and `ONE_BDX`, which is 1,000,000,000 piconero.
- `from_xmr`, `from_float_in`, `to_float_in` and `as_xmr`, which convert
  to and from floats through their decimal text. Beware of float rounding.
- `str()`, which gives the value in xmr with the suffix, as in
  `1.500000000000 xmr`.
- `repr()`, which gives the value in xmr to twelve places, as in
  `Amount(1.500000000000 xmr)`.

`SignedAmount` also has the following:

- `signum`, `is_positive` and `is_negative`.
- `abs`, which raises `OverflowError` for the minimum value, and `checked_abs`.
- `positive_sub`, which returns `None` if either operand or the result would be negative.

To convert between the two types:

- `Amount.to_signed()` raises `TooBigError` above 2**63 - 1.
- `SignedAmount.to_unsigned()` raises `NegativeAmountError` below zero.

Parsing text with `from_str_in` or `from_str_with_denomination` accepts at most
2**63 - 1 piconero, for `Amount` as well as for `SignedAmount`.

### Denominations

`beldex.denomination.Denomination` has the members `MONERO`, `MILLINERO`,
`MICRONERO`, `NANONERO` and `PICONERO`. `Denomination.parse` accepts the
following names:

- `xmr`, `XMR`, `monero`
- `millinero`, `mXMR`
- `micronero`, `µXMR`, `mcXMR`
- `nanonero`, `nXMR`
- `piconero`, `pXMR`

`str()` of a member gives its canonical name, such as `xmr` or `piconero`.

The module also exposes the two routines underneath the amount types:

- `parse_signed_to_piconero(s, denom)` returns `(is_negative, piconero)`.
- `format_piconero(piconero, negative, denom)` returns the decimal text.

### Parsing errors

Parsing failures raise subclasses of `beldex.denomination.ParsingError`, which
is itself a `ValueError`:

| Error | Raised when |
| --- | --- |
| `NegativeAmountError` | a negative value is given for an unsigned `Amount` |
| `TooBigError` | the value does not fit |
| `TooPreciseError` | the value has more decimals than the denomination allows |
| `InvalidFormatError` | the text is empty, is a lone `-`, has two decimal points, or is not exactly "value, space, denomination" |
| `InputTooLargeError` | the text is longer than 50 bytes |
| `InvalidCharacterError` | the text contains a character that is not a digit or a point (available as `.char`) |
| `UnknownDenominationError` | the denomination name is not recognised (available as `.denomination`) |

```python
from beldex.denomination import TooPreciseError

try:
    Amount.from_str_in("0.0000000000042", xmr)
except TooPreciseError:
    ...
```

### Converting to and from plain values

`beldex.amount_serde` turns amounts into values that JSON can hold, and back.
It supports two forms:

- whole numbers of piconero, with `to_pico` and `from_pico`;
- decimal strings in xmr, with `to_xmr` and `from_xmr`.

The single-value helpers pass `None` through unchanged, which suits optional
fields. Pass `signed=True` to `from_pico` or `from_xmr` to get a `SignedAmount`.

Lists are handled by these helpers:

- `to_pico_list` and `to_xmr_list` write a list.
- `amounts_from_pico_list`, `signed_amounts_from_pico_list`,
  `amounts_from_xmr_list` and `signed_amounts_from_xmr_list` read one.

Wrong input types raise `TypeError`. An integer outside the target range
raises `ValueError`. A bad xmr string raises the matching `ParsingError`.

```python
import json
from beldex import amount_serde

doc = json.dumps({"fee": amount_serde.to_xmr(a)})        # {"fee": "1.500000000000"}
fee = amount_serde.from_xmr(json.loads(doc)["fee"], signed=False)

amount_serde.signed_amounts_from_pico_list([-1000, 2000])
```

## What this package does not do

This package handles amounts only. It has no keys, no curve arithmetic, no
addresses and no transactions. It has no command-line program.