from __future__ import annotations

import contextlib
import copy
import logging
import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Any, Dict, Iterator, Union

import importlib_resources
import yaml
from filelock import FileLock, Timeout

from etherutils.util.errors import ConfigLockError

log = logging.getLogger(__name__)

CONFIG_YAML = "config.yaml"


def initial_config_file(filename: Union[str, Path]) -> str:
    initial_config_path = importlib_resources.files(__name__.rpartition(".")[0]).joinpath(f"initial-{filename}")
    contents: str = initial_config_path.read_text(encoding="utf-8")
    return contents


def create_default_etherutils_config(root_path: Path, filename: str = CONFIG_YAML) -> Path:
    default_config_file_data: str = initial_config_file(filename)
    path: Path = config_path_for_filename(root_path, filename)
    tmp_path: Path = path.with_suffix("." + str(os.getpid()))
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(tmp_path, "w") as f:
        f.write(default_config_file_data)
    try:
        os.replace(str(tmp_path), str(path))
    except PermissionError:
        shutil.move(str(tmp_path), str(path))
    return path


def config_path_for_filename(root_path: Path, filename: Union[str, Path]) -> Path:
    path_filename = Path(filename)
    if path_filename.is_absolute():
        return path_filename
    return root_path / "config" / filename


@contextlib.contextmanager
def lock_config(root_path: Path, filename: Union[str, Path], timeout: float = -1) -> Iterator[None]:
    config_path = config_path_for_filename(root_path, filename)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    lock = FileLock(config_path.with_name(config_path.name + ".lock"))
    try:
        lock.acquire(timeout=timeout, poll_interval=0.05)
    except Timeout as e:
        raise ConfigLockError(f"Timed out waiting for the lock on {config_path}") from e
    try:
        yield
    finally:
        lock.release()


@contextlib.contextmanager
def lock_and_load_config(root_path: Path, filename: Union[str, Path]) -> Iterator[Dict[str, Any]]:
    with lock_config(root_path=root_path, filename=filename):
        config = _load_config_maybe_locked(root_path=root_path, filename=filename, acquire_lock=False)
        yield config


def save_config(root_path: Path, filename: Union[str, Path], config_data: Any) -> None:
    # This must be called under an acquired config lock
    path: Path = config_path_for_filename(root_path, filename)
    with tempfile.TemporaryDirectory(dir=path.parent) as tmp_dir:
        tmp_path: Path = Path(tmp_dir) / Path(filename)
        with open(tmp_path, "w") as f:
            yaml.safe_dump(config_data, f)
        try:
            os.replace(str(tmp_path), path)
        except PermissionError:
            shutil.move(str(tmp_path), str(path))


def load_config(root_path: Path, filename: Union[str, Path], exit_on_error: bool = True) -> Dict[str, Any]:
    return _load_config_maybe_locked(
        root_path=root_path,
        filename=filename,
        exit_on_error=exit_on_error,
        acquire_lock=True,
    )


def _load_config_maybe_locked(
    root_path: Path,
    filename: Union[str, Path],
    exit_on_error: bool = True,
    acquire_lock: bool = True,
) -> Dict[str, Any]:
    # This must be called under an acquired config lock, or acquire_lock should be True
    path = config_path_for_filename(root_path, filename)

    if not path.is_file():
        if not exit_on_error:
            raise ValueError("Config not found")
        print(f"can't find {path}")
        print("** please run `etherutils init` to create a new config file **")
        sys.exit(-1)

    with contextlib.ExitStack() as exit_stack:
        if acquire_lock:
            exit_stack.enter_context(lock_config(root_path, filename))
        with open(path) as opened_config_file:
            r = yaml.safe_load(opened_config_file)
    if not isinstance(r, dict):
        raise ValueError(f"Config file {path} does not contain a mapping")
    return fill_missing_defaults(r, filename)


def load_config_or_default(root_path: Path, filename: str = CONFIG_YAML) -> Dict[str, Any]:
    """
    Loads the config under root_path, falling back to the packaged defaults when the
    config has not been created with `etherutils init`.
    """
    try:
        return load_config(root_path, filename, exit_on_error=False)
    except (ValueError, yaml.YAMLError) as e:
        log.warning(f"No usable config under {root_path}, using defaults: {e}")
        config: Dict[str, Any] = yaml.safe_load(initial_config_file(filename))
        return config


def fill_missing_defaults(config: Dict[str, Any], filename: Union[str, Path]) -> Dict[str, Any]:
    # Older or hand written configs may lack whole sections
    defaults: Dict[str, Any] = yaml.safe_load(initial_config_file(Path(filename).name))
    filled = copy.deepcopy(config)
    for key, value in defaults.items():
        if key not in filled:
            filled[key] = value
        elif isinstance(value, dict):
            if not isinstance(filled[key], dict):
                log.warning(f"Replacing invalid {key!r} section of {filename} with the defaults")
                filled[key] = value
                continue
            for sub_key, sub_value in value.items():
                filled[key].setdefault(sub_key, sub_value)
    return filled


def str2bool(v: Union[str, bool]) -> bool:
    # Source from https://stackoverflow.com/questions/15008758/parsing-boolean-values-with-argparse
    if isinstance(v, bool):
        return v
    if v.lower() in ("yes", "true", "t", "y", "1"):
        return True
    elif v.lower() in ("no", "false", "f", "n", "0"):
        return False
    else:
        raise ValueError("Boolean value expected.")
