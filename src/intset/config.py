"""Project configuration loading for intset.

Only reads `intset.toml` and validates the handful of values the command line
needs. The library itself never consults configuration: `BoundedIntSet`
takes its capacity from the constructor.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from intset.bounded import MAX_SIZE
from intset.errors import IntSetConfigError

CONFIG_FILENAME = "intset.toml"


@dataclass(frozen=True)
class SetConfig:
    max_size: int


@dataclass(frozen=True)
class DumpConfig:
    trailing_newline: bool


@dataclass(frozen=True)
class IntSetConfig:
    version: int
    set: SetConfig
    dump: DumpConfig


def default_config() -> IntSetConfig:
    """Configuration used when no `intset.toml` is present."""

    return IntSetConfig(
        version=1,
        set=SetConfig(max_size=MAX_SIZE),
        dump=DumpConfig(trailing_newline=True),
    )


def find_project_root(start: Path) -> Path:
    """Walk upward from `start` (file or directory) looking for `intset.toml`."""

    cur = start
    try:
        if cur.is_file():
            cur = cur.parent
    except OSError:
        cur = cur.parent

    cur = cur.resolve()
    while True:
        if (cur / CONFIG_FILENAME).is_file():
            return cur
        if cur.parent == cur:
            break
        cur = cur.parent

    raise IntSetConfigError(f"Could not find {CONFIG_FILENAME} by walking upward from start path.")


def _as_table(value: Any, *, name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise IntSetConfigError(f"Expected [{name}] to be a table.")
    return value


def _as_bool(value: Any, *, name: str) -> bool:
    if not isinstance(value, bool):
        raise IntSetConfigError(f"Expected {name} to be a boolean.")
    return value


def _as_int(value: Any, *, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise IntSetConfigError(f"Expected {name} to be an integer.")
    return value


def load_config(*, root: Path | None = None, config_path: Path | None = None) -> IntSetConfig:
    """Load and validate `intset.toml`.

    If neither `root` nor `config_path` are provided, the project root is
    discovered by walking upward from the current working directory.
    """

    if config_path is None:
        if root is None:
            root = find_project_root(Path.cwd())
        config_path = root / CONFIG_FILENAME

    try:
        raw = config_path.read_bytes()
    except FileNotFoundError as e:
        raise IntSetConfigError(f"Missing {CONFIG_FILENAME} at: {config_path}") from e
    except OSError as e:
        raise IntSetConfigError(f"Failed reading config file: {config_path}") from e

    try:
        data = tomllib.loads(raw.decode("utf-8"))
    except UnicodeDecodeError as e:
        raise IntSetConfigError(f"Config is not valid UTF-8: {config_path}") from e
    except tomllib.TOMLDecodeError as e:
        raise IntSetConfigError(f"Invalid TOML in {config_path}: {e}") from e

    version = data.get("version", None)
    if version is None:
        raise IntSetConfigError(f"Missing required `version = 1` in {CONFIG_FILENAME}.")
    version_i = _as_int(version, name="version")
    if version_i != 1:
        raise IntSetConfigError(f"Unsupported config version: {version_i} (expected 1).")

    set_tbl = _as_table(data.get("set"), name="set")
    dump_tbl = _as_table(data.get("dump"), name="dump")

    if "max_size" in set_tbl:
        max_size = _as_int(set_tbl["max_size"], name="set.max_size")
    else:
        max_size = MAX_SIZE

    if "trailing_newline" in dump_tbl:
        trailing_newline = _as_bool(dump_tbl["trailing_newline"], name="dump.trailing_newline")
    else:
        trailing_newline = True

    if max_size < 1:
        raise IntSetConfigError("Invalid config: set.max_size must be >= 1.")

    return IntSetConfig(
        version=version_i,
        set=SetConfig(max_size=max_size),
        dump=DumpConfig(trailing_newline=trailing_newline),
    )
