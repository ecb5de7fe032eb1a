from __future__ import annotations

import click


@click.command("init", short_help="Create the configuration")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config.yaml with the defaults")
@click.pass_context
def init_cmd(ctx: click.Context, force: bool) -> None:
    """
    Create a new config.yaml under the root path, see `etherutils --root-path`
    """
    from etherutils.util.config import CONFIG_YAML, config_path_for_filename, create_default_etherutils_config

    root_path = ctx.obj["root_path"]
    path = config_path_for_filename(root_path, CONFIG_YAML)
    if path.is_file() and not force:
        print(f"{path} already exists, no update to config.yaml")
        return
    create_default_etherutils_config(root_path)
    print(f"Wrote default configuration to {path}")
