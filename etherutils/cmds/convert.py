from __future__ import annotations

from typing import Optional

import click

from etherutils.cmds.param_types import WeiParamType
from etherutils.types.wei import Wei


@click.group("convert", help="Convert amounts between Wei and other Ether units")
@click.pass_context
def convert_cmd(ctx: click.Context) -> None:
    pass


@convert_cmd.command("to-wei", help="Show an amount such as '1.5 ether' as an exact number of Wei")
@click.argument("amount", type=WeiParamType())
@click.pass_context
def to_wei_cmd(ctx: click.Context, amount: Wei) -> None:
    from .convert_funcs import to_wei

    to_wei(ctx.obj["root_path"], amount)


@convert_cmd.command("from-wei", help="Show an amount in the most readable unit")
@click.argument("amount", type=WeiParamType())
@click.option(
    "--standard/--no-standard",
    default=None,
    help="Only use (K|M|G)Wei and Ether units. Defaults to display.standard in config.yaml",
)
@click.pass_context
def from_wei_cmd(ctx: click.Context, amount: Wei, standard: Optional[bool]) -> None:
    from .convert_funcs import from_wei

    from_wei(ctx.obj["root_path"], amount, standard)


@convert_cmd.command("units", help="List the known units and their value in Wei")
def units_cmd() -> None:
    from .convert_funcs import print_units

    print_units()


@convert_cmd.command("fee", help="Show the maximum cost of a transaction, gas limit times gas price")
@click.option(
    "-l",
    "--gas-limit",
    help="Gas limit. [default: gas_limit in config.yaml]",
    type=click.IntRange(min=0),
    default=None,
)
@click.option(
    "-g",
    "--gas-price",
    help="Gas price, e.g. '20 GWei'. [default: gas_price in config.yaml]",
    type=WeiParamType(),
    default=None,
)
@click.option(
    "--standard/--no-standard",
    default=None,
    help="Only use (K|M|G)Wei and Ether units. Defaults to display.standard in config.yaml",
)
@click.pass_context
def fee_cmd(ctx: click.Context, gas_limit: Optional[int], gas_price: Optional[Wei], standard: Optional[bool]) -> None:
    from .convert_funcs import transaction_fee

    transaction_fee(ctx.obj["root_path"], gas_limit, gas_price, standard)
