from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import click

from etherutils.types.wei import Wei
from etherutils.util.config import load_config_or_default
from etherutils.util.conversion import int_to_digits, string_to_wei, wei_to_string
from etherutils.util.errors import ConversionError
from etherutils.util.etherutils_logging import initialize_logging
from etherutils.util.units import aliases_for_multiplier, metric_units

log = logging.getLogger(__name__)


def load_cli_config(root_path: Path) -> Dict[str, Any]:
    config = load_config_or_default(root_path)
    initialize_logging("etherutils", config["logging"], root_path)
    return config


def display_standard(config: Dict[str, Any], standard: Optional[bool]) -> bool:
    if standard is not None:
        return standard
    return bool(config["display"]["standard"])


def format_or_fail(amount: int, standard: bool) -> str:
    try:
        return wei_to_string(amount, standard)
    except ConversionError as e:
        log.warning(f"Unable to format {int_to_digits(amount)} Wei: {e}")
        raise click.ClickException(str(e)) from e


def to_wei(root_path: Path, amount: Wei) -> None:
    load_cli_config(root_path)
    print(int_to_digits(amount))


def from_wei(root_path: Path, amount: Wei, standard: Optional[bool]) -> None:
    config = load_cli_config(root_path)
    print(format_or_fail(amount, display_standard(config, standard)))


def print_units() -> None:
    for tier, label in enumerate(metric_units):
        multiplier = 1000**tier
        aliases = ", ".join(aliases_for_multiplier(multiplier))
        print(f"{label:<11} {multiplier:>31}  {aliases}")


def transaction_fee(
    root_path: Path, gas_limit: Optional[int], gas_price: Optional[Wei], standard: Optional[bool]
) -> None:
    config = load_cli_config(root_path)
    if gas_limit is None:
        try:
            gas_limit = int(config["gas_limit"])
        except (TypeError, ValueError) as e:
            raise click.ClickException(f"Invalid gas_limit in config.yaml: {config['gas_limit']!r}") from e
        if gas_limit < 0:
            raise click.ClickException(f"Invalid gas_limit in config.yaml: {gas_limit}")
    if gas_price is None:
        try:
            gas_price = string_to_wei(str(config["gas_price"]))
        except ConversionError as e:
            raise click.ClickException(f"Invalid gas_price in config.yaml: {e}") from e
    fee = gas_limit * gas_price
    log.info(
        f"Transaction fee for gas limit {gas_limit} at {int_to_digits(gas_price)} Wei per gas"
        f" is {int_to_digits(fee)} Wei"
    )
    print(f"Gas limit: {gas_limit}")
    print(f"Gas price: {format_or_fail(gas_price, display_standard(config, standard))}")
    print(f"Maximum fee: {format_or_fail(fee, display_standard(config, standard))}")
