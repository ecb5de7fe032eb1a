from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

from etherutils.util.errors import UnknownUnitError

# Everything inside etherutils works in Wei.
# Only use these units for user facing interfaces.
units: Mapping[str, int] = MappingProxyType(
    {
        "": 1,
        "wei": 1,
        "ada": 10**3,
        "kwei": 10**3,
        "kilowei": 10**3,
        "babbage": 10**6,
        "mwei": 10**6,
        "megawei": 10**6,
        "shannon": 10**9,
        "gwei": 10**9,
        "gigawei": 10**9,
        "szazbo": 10**12,
        "micro": 10**12,
        "microether": 10**12,
        "finney": 10**15,
        "milli": 10**15,
        "milliether": 10**15,
        "ether": 10**18,  # 1 ether is 1,000,000,000,000,000,000 wei
        "einstein": 10**21,
        "kilo": 10**21,
        "kiloether": 10**21,
        "mega": 10**24,
        "megaether": 10**24,
        "giga": 10**27,
        "gigaether": 10**27,
        "tera": 10**30,
        "teraether": 10**30,
    }
)

# Display labels, metric_units[i] is worth 1000**i Wei
metric_units: Tuple[str, ...] = (
    "Wei",
    "KWei",
    "MWei",
    "GWei",
    "Microether",
    "Milliether",
    "Ether",
    "Kiloether",
    "Megaether",
    "Gigaether",
    "Teraether",
)


def unit_to_multiplier(unit: str) -> int:
    """
    Take an Ethereum unit name, either given (e.g. "finney") or metric (e.g. "milliether"),
    and return how many Wei one of it is worth.  Matching is case-insensitive.
    """
    try:
        return units[unit.lower()]
    except KeyError:
        raise UnknownUnitError(unit) from None


def aliases_for_multiplier(multiplier: int) -> Tuple[str, ...]:
    return tuple(name for name, value in units.items() if value == multiplier and name != "")
