from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from etherutils.cmds.param_types import WeiParamType
from etherutils.types.wei import Wei
from etherutils.util.config import CONFIG_YAML, lock_and_load_config, save_config, str2bool
from etherutils.util.conversion import wei_to_string


def configure(
    root_path: Path,
    set_log_level: str,
    set_standard: str,
    set_gas_price: Optional[Wei],
    set_gas_limit: Optional[int],
) -> None:
    with lock_and_load_config(root_path, CONFIG_YAML) as config:
        change_made = False
        if set_log_level:
            levels = ["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]
            if set_log_level in levels:
                config["logging"]["log_level"] = set_log_level
                print(f"Logging level updated. Check {root_path}/log/debug.log")
                change_made = True
            else:
                print(f"Logging level not updated. Use one of: {levels}")
        if set_standard:
            config["display"]["standard"] = str2bool(set_standard)
            if str2bool(set_standard):
                print("Standard units enabled")
            else:
                print("Standard units disabled")
            change_made = True
        if set_gas_price is not None:
            # Stored in a readable form, it is parsed again when used
            config["gas_price"] = wei_to_string(set_gas_price, standard=True)
            print(f"Default gas price updated to {config['gas_price']}")
            change_made = True
        if set_gas_limit is not None:
            config["gas_limit"] = set_gas_limit
            print(f"Default gas limit updated to {set_gas_limit}")
            change_made = True

        if change_made:
            print("Configuration updated")
            save_config(root_path, CONFIG_YAML, config)


@click.command("configure", help="Modify configuration", no_args_is_help=True)
@click.option("--log-level", "--set-log-level", help="Set the logging level", type=str)
@click.option(
    "--standard",
    "--set-standard",
    help="Only show amounts in (K|M|G)Wei and Ether units",
    type=click.Choice(["true", "t", "false", "f"]),
)
@click.option("--gas-price", "--set-gas-price", help="Set the default gas price, e.g. '20 GWei'", type=WeiParamType())
@click.option("--gas-limit", "--set-gas-limit", help="Set the default gas limit", type=click.IntRange(min=0))
@click.pass_context
def configure_cmd(
    ctx: click.Context,
    log_level: str,
    standard: str,
    gas_price: Optional[Wei],
    gas_limit: Optional[int],
) -> None:
    configure(
        ctx.obj["root_path"],
        log_level,
        standard,
        gas_price,
        gas_limit,
    )
