"""Typed configuration loading.

The configuration file is optional. It only supplies defaults for what
the command line can also say:

    commit_message = "Automatic commit"
    strict = false
    status_width = 30
    directories = ["~/src/website", "~/src/dotfiles"]

    [aliases]
    sync = ["pull", "push"]
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from mgit.platform.paths import user_config_dir

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_int, get_str, get_str_list, get_table

__all__ = [
    "Config",
    "ConfigError",
    "CONFIG_ENV_VAR",
    "DEFAULT_COMMIT_MESSAGE",
    "DEFAULT_STATUS_WIDTH",
    "default_config_path",
    "load_config",
    "load_config_or_default",
]

CONFIG_ENV_VAR = "MGIT_CONFIG"
DEFAULT_COMMIT_MESSAGE = "Automatic commit"
DEFAULT_STATUS_WIDTH = 30


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container.

    Attributes:
        commit_message: Message used by `commit` when -m is not given
        strict: Exit non-zero when any git command fails
        status_width: Column at which the status report aligns its colon
        directories: Directories used when none are given on the command line
        aliases: Extra command names, each expanding to a command sequence
    """

    commit_message: str = DEFAULT_COMMIT_MESSAGE
    strict: bool = False
    status_width: int = DEFAULT_STATUS_WIDTH
    directories: tuple[str, ...] = ()
    aliases: dict[str, tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If a value is present but malformed.
        """
        width = get_int(data, "status_width")
        if width is not None and width < 1:
            raise ValueError(f"status_width must be positive, got {width}")

        directories: list[str] = []
        if "directories" in data:
            raw_dirs = get_str_list(data, "directories")
            if raw_dirs is None:
                raise ValueError("directories must be a list of strings")
            directories = [os.path.expanduser(d) for d in raw_dirs]

        return cls(
            commit_message=get_str(data, "commit_message") or DEFAULT_COMMIT_MESSAGE,
            strict=bool(get_bool(data, "strict")),
            status_width=width or DEFAULT_STATUS_WIDTH,
            directories=tuple(directories),
            aliases=_parse_aliases(get_table(data, "aliases") or {}),
        )


def _parse_aliases(table: StrDict) -> dict[str, tuple[str, ...]]:
    aliases: dict[str, tuple[str, ...]] = {}
    for name in table:
        commands = get_str_list(table, name)
        if not commands:
            raise ValueError(f"alias '{name}' must be a non-empty list of command names")
        aliases[name] = tuple(commands)
    return aliases


def default_config_path() -> Path:
    """Location of the config file when --config is not given.

    $MGIT_CONFIG wins over the per-user config directory.
    """
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return user_config_dir() / "config.toml"


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to config.toml

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path | None = None) -> Result[Config, ConfigError]:
    """Load an explicit config file, or the default one if it exists.

    An explicitly requested file must exist. The default location is
    optional: when nothing is there, the built-in defaults apply.
    """
    if path is not None:
        return load_config(path)

    default = default_config_path()
    if not default.is_file():
        return Ok(Config())
    return load_config(default)
