from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner, Result

from etherutils import __version__
from etherutils.cmds.etherutils import cli
from etherutils.util.config import CONFIG_YAML, config_path_for_filename, lock_and_load_config, save_config


def run_cli(root_path: Path, *args: str) -> Result:
    return CliRunner().invoke(cli, ["--root-path", str(root_path), *args])


def test_version(tmp_etherutils_root: Path) -> None:
    result = run_cli(tmp_etherutils_root, "version")
    assert result.exit_code == 0
    assert result.output == f"{__version__}\n"


def test_to_wei(tmp_etherutils_root: Path) -> None:
    result = run_cli(tmp_etherutils_root, "convert", "to-wei", "1.5 ether")
    assert result.exit_code == 0
    assert result.output == "1500000000000000000\n"

    result = run_cli(tmp_etherutils_root, "convert", "to-wei", "1000000000000000000")
    assert result.exit_code == 0
    assert result.output == "1000000000000000000\n"


def test_to_wei_failures(tmp_etherutils_root: Path) -> None:
    result = run_cli(tmp_etherutils_root, "convert", "to-wei", "0.1 wei")
    assert result.exit_code == 2
    assert "fractional number of Wei" in result.output

    result = run_cli(tmp_etherutils_root, "convert", "to-wei", "5 bogus")
    assert result.exit_code == 2
    assert "Unknown unit 'bogus'" in result.output

    result = run_cli(tmp_etherutils_root, "convert", "to-wei", "")
    assert result.exit_code == 2
    assert "empty value" in result.output


def test_from_wei(tmp_etherutils_root: Path) -> None:
    result = run_cli(tmp_etherutils_root, "convert", "from-wei", "1500000000000000000")
    assert result.exit_code == 0
    assert result.output == "1.5 Ether\n"

    result = run_cli(tmp_etherutils_root, "convert", "from-wei", "1 finney")
    assert result.exit_code == 0
    assert result.output == "1 Milliether\n"

    result = run_cli(tmp_etherutils_root, "convert", "from-wei", "1 finney", "--standard")
    assert result.exit_code == 0
    assert result.output == "0.001 Ether\n"


def test_from_wei_uses_configured_display(root_path_populated_with_config: Path) -> None:
    root_path = root_path_populated_with_config
    with lock_and_load_config(root_path, CONFIG_YAML) as config:
        config["display"]["standard"] = True
        save_config(root_path, CONFIG_YAML, config)

    result = run_cli(root_path, "convert", "from-wei", "1000000000000000")
    assert result.exit_code == 0
    assert result.output == "0.001 Ether\n"

    result = run_cli(root_path, "convert", "from-wei", "1000000000000000", "--no-standard")
    assert result.exit_code == 0
    assert result.output == "1 Milliether\n"


def test_from_wei_too_large(tmp_etherutils_root: Path) -> None:
    result = run_cli(tmp_etherutils_root, "convert", "from-wei", str(10**33))
    assert result.exit_code == 1
    assert "too large to display" in result.output

    result = run_cli(tmp_etherutils_root, "convert", "from-wei", str(10**33), "--standard")
    assert result.exit_code == 0
    assert result.output == "1000000000000000 Ether\n"


def test_units(tmp_etherutils_root: Path) -> None:
    result = run_cli(tmp_etherutils_root, "convert", "units")
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 11
    assert lines[0].split() == ["Wei", "1", "wei"]
    assert lines[5].split() == ["Milliether", "1000000000000000", "finney,", "milli,", "milliether"]
    assert lines[6].split() == ["Ether", "1000000000000000000", "ether"]


def test_fee_defaults(tmp_etherutils_root: Path) -> None:
    result = run_cli(tmp_etherutils_root, "convert", "fee")
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "Gas limit: 50000",
        "Gas price: 20 GWei",
        "Maximum fee: 1 Milliether",
    ]


def test_fee(tmp_etherutils_root: Path) -> None:
    result = run_cli(tmp_etherutils_root, "convert", "fee", "-l", "21000", "-g", "50 gwei")
    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "Gas limit: 21000",
        "Gas price: 50 GWei",
        "Maximum fee: 1.05 Milliether",
    ]

    result = run_cli(tmp_etherutils_root, "convert", "fee", "-l", "21000", "-g", "50 gwei", "--standard")
    assert result.exit_code == 0
    assert "Maximum fee: 0.00105 Ether" in result.output

    result = run_cli(tmp_etherutils_root, "convert", "fee", "--gas-limit", "-1")
    assert result.exit_code == 2

    result = run_cli(tmp_etherutils_root, "convert", "fee", "--gas-price", "twenty")
    assert result.exit_code == 2


def test_fee_invalid_config(root_path_populated_with_config: Path) -> None:
    root_path = root_path_populated_with_config
    with lock_and_load_config(root_path, CONFIG_YAML) as config:
        config["gas_price"] = "20 gwie"
        save_config(root_path, CONFIG_YAML, config)

    result = run_cli(root_path, "convert", "fee")
    assert result.exit_code == 1
    assert "Invalid gas_price in config.yaml" in result.output


def test_commands_log_to_root_path(root_path_populated_with_config: Path) -> None:
    root_path = root_path_populated_with_config
    with lock_and_load_config(root_path, CONFIG_YAML) as config:
        config["logging"]["log_level"] = "DEBUG"
        save_config(root_path, CONFIG_YAML, config)

    result = run_cli(root_path, "convert", "fee")
    assert result.exit_code == 0
    log_file = root_path / "log" / "debug.log"
    assert log_file.is_file()
    assert "Transaction fee for gas limit 50000" in log_file.read_text()


def test_very_long_amounts(tmp_etherutils_root: Path) -> None:
    result = run_cli(tmp_etherutils_root, "convert", "to-wei", "1" + "0" * 5000)
    assert result.exit_code == 0
    assert result.output == "1" + "0" * 5000 + "\n"

    result = run_cli(tmp_etherutils_root, "convert", "from-wei", "1" + "0" * 4999 + "1")
    assert result.exit_code == 1
    assert "too large to display" in result.output

    result = run_cli(tmp_etherutils_root, "convert", "from-wei", "1" + "0" * 5000, "--standard")
    assert result.exit_code == 0
    assert result.output == "1" + "0" * 4982 + " Ether\n"


def test_unusable_config_files(root_path_populated_with_config: Path) -> None:
    root_path = root_path_populated_with_config
    path = config_path_for_filename(root_path, CONFIG_YAML)

    path.write_text("display: [1, 2\n")
    result = run_cli(root_path, "convert", "from-wei", "1000000000000000")
    assert result.exit_code == 0
    assert result.output.splitlines()[-1] == "1 Milliether"

    path.write_text("display: 5\n")
    result = run_cli(root_path, "convert", "from-wei", "1000000000000000")
    assert result.exit_code == 0
    assert result.output.splitlines()[-1] == "1 Milliether"

    path.write_text("gas_limit: lots\n")
    result = run_cli(root_path, "convert", "fee")
    assert result.exit_code == 1
    assert "Invalid gas_limit in config.yaml: 'lots'" in result.output
