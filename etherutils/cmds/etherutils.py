from __future__ import annotations

import click

from etherutils import __version__
from etherutils.cmds.configure import configure_cmd
from etherutils.cmds.convert import convert_cmd
from etherutils.cmds.init import init_cmd
from etherutils.util.default_root import DEFAULT_ROOT_PATH

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(
    help=f"\n  Convert between Wei and human readable Ether amounts ({__version__})\n",
    epilog="Try 'etherutils convert to-wei \"1.5 ether\"' or 'etherutils convert from-wei 1500000000000000000'",
    context_settings=CONTEXT_SETTINGS,
)
@click.option("--root-path", default=DEFAULT_ROOT_PATH, help="Config file root", type=click.Path(), show_default=True)
@click.pass_context
def cli(ctx: click.Context, root_path: str) -> None:
    from pathlib import Path

    ctx.ensure_object(dict)
    ctx.obj["root_path"] = Path(root_path)


@cli.command("version", help="Show etherutils version")
def version_cmd() -> None:
    print(__version__)


cli.add_command(init_cmd)
cli.add_command(configure_cmd)
cli.add_command(convert_cmd)


def main() -> None:
    cli()  # pylint: disable=no-value-for-parameter


if __name__ == "__main__":
    main()
