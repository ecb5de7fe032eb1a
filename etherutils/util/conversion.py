from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Tuple

from typing_extensions import final

from etherutils.types.wei import Wei
from etherutils.util.errors import (
    EmptyInputError,
    FractionalBaseUnitError,
    MalformedInputError,
    NegativeResultError,
    UnitOverflowError,
)
from etherutils.util.units import metric_units, unit_to_multiplier

log = logging.getLogger(__name__)

integer_re = re.compile(r"[0-9]+")
decimal_re = re.compile(r"[0-9]*\.[0-9]+")

# Python refuses int <-> str conversions past a configurable digit limit (never below 640),
# so long numbers are converted in chunks that stay under it
digit_chunk = 600


def digits_to_int(digits: str) -> int:
    result = 0
    for start in range(0, len(digits), digit_chunk):
        chunk = digits[start : start + digit_chunk]
        result = result * 10 ** len(chunk) + int(chunk)
    return result


def int_to_digits(value: int) -> str:
    if value < 0:
        return "-" + int_to_digits(-value)
    base = 10**digit_chunk
    chunks = []
    while value >= base:
        value, chunk = divmod(value, base)
        chunks.append(str(chunk).zfill(digit_chunk))
    return str(value) + "".join(reversed(chunks))


@final
@dataclass(frozen=True)
class ParsedQuantity:
    """
    The textual pieces of an amount, e.g. "1.5 ether" is ("1", "5", "ether").
    An empty integer or fraction means the part was not given.
    """

    integer: str
    fraction: str
    unit: str

    def __str__(self) -> str:
        number = self.integer
        if self.fraction != "":
            number += "." + self.fraction
        return f"{number} {self.unit}"


@final
@dataclass(frozen=True)
class FormattedQuantity:
    value: str
    unit: str

    def __str__(self) -> str:
        return f"{self.value} {self.unit}"


def split_amount(value: str) -> ParsedQuantity:
    if value == "":
        raise EmptyInputError()

    if " " in value:
        parts = value.split(" ")
        if len(parts) != 2:
            raise MalformedInputError(value, "expected a number followed by a unit")
        number, unit = parts
    else:
        # No space so we're a simple number of Wei
        number, unit = value, "wei"

    if integer_re.fullmatch(number) is not None:
        return ParsedQuantity(integer=number, fraction="", unit=unit)
    if decimal_re.fullmatch(number) is not None:
        integer, fraction = number.split(".")
        return ParsedQuantity(integer=integer, fraction=fraction, unit=unit)
    raise MalformedInputError(value, f"{number!r} is not a valid number")


def quantity_to_wei(quantity: ParsedQuantity) -> Wei:
    multiplier = unit_to_multiplier(quantity.unit)
    trimmed_fraction = quantity.fraction.rstrip("0")
    # A missing integer part, as in ".5 ether", counts as zero
    integer_value = digits_to_int(quantity.integer)
    fraction_value = digits_to_int(trimmed_fraction)

    result = integer_value * multiplier
    if fraction_value != 0:
        # Scale the multiplier down rather than the fraction up so that only integers are involved
        scale = 10 ** len(trimmed_fraction)
        if multiplier % scale != 0:
            raise FractionalBaseUnitError(str(quantity))
        result += (multiplier // scale) * fraction_value

    if result < 0:
        raise NegativeResultError(str(quantity))
    return Wei(result)


def string_to_wei(value: str) -> Wei:
    """
    Turn a string in to a number of Wei.

    The string can be a simple number of Wei, e.g. "1000000000000000", or a number
    followed by a unit, e.g. "10 ether" or "1.5 gwei".  Unit names are case-insensitive
    and can be either given names (e.g. "finney") or metric names (e.g. "milliether").
    The period is the only accepted decimal separator.
    """
    wei = quantity_to_wei(split_amount(value))
    if log.isEnabledFor(logging.DEBUG):
        log.debug(f"Parsed {value!r} as {int_to_digits(wei)} Wei")
    return wei


def reduce_tiers(wei: int) -> Tuple[int, int]:
    """
    Step down whole thousands, returning the reduced value and the number of steps taken.
    """
    tier = 0
    while wei >= 1000 and wei % 1000 == 0:
        wei //= 1000
        tier += 1
    return wei, tier


def place_decimal(value: int, tier: int, standard: bool = False) -> FormattedQuantity:
    # String manipulation places the decimal point, floating point would lose precision
    digits = int_to_digits(value)

    desired_tier = tier
    if len(digits) > 3:
        desired_tier += len(digits) // 3
        if len(digits) % 3 == 0:
            desired_tier -= 1
    if standard and desired_tier > 3:
        # Up to 999999999999 is shown in (K|M|G)Wei, anything higher in Ether
        desired_tier = 6
    if desired_tier >= len(metric_units):
        raise UnitOverflowError(desired_tier)

    if desired_tier < tier:
        digits += "000" * (tier - desired_tier)
        decimal_place = len(digits)
    else:
        decimal_place = len(digits) - 3 * (desired_tier - tier)

    if decimal_place <= 0:
        digits = "0." + "0" * -decimal_place + digits
    elif decimal_place < len(digits):
        digits = digits[:decimal_place] + "." + digits[decimal_place:]

    if "." in digits:
        digits = digits.rstrip("0").rstrip(".")

    return FormattedQuantity(value=digits, unit=metric_units[desired_tier])


def wei_to_string(wei: int, standard: bool = False) -> str:
    """
    Turn a number of Wei in to a string such as "1.5 Ether".

    If 'standard' is True the value is displayed in either (K|M|G)Wei or Ether only.
    """
    if wei < 0:
        raise NegativeResultError(int_to_digits(wei))
    value, tier = reduce_tiers(wei)
    return str(place_decimal(value, tier, standard))
