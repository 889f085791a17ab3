"""Configuration file loading for the command-line shell."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Sequence

import yaml

try:
    import tomllib
except ImportError:
    import toml as tomllib  # type: ignore

from .errors import ConfigError


logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("plain", "json", "tree")
ASCII_STYLES = ("tree", "ascii")

DEFAULT_CONFIG: Dict[str, Any] = {
    "suffix": ".d",
    "format": "plain",
    "ascii_style": "tree",
    "output": None,
    "verbose": False,
}

# Expected type of each key; None values are accepted for "output" only
_KEY_TYPES = {
    "suffix": str,
    "format": str,
    "ascii_style": str,
    "output": str,
    "verbose": bool,
}


def load_config(config_path: Path) -> Dict[str, Any]:
    """
    Load CLI defaults from a YAML, TOML or JSON file.

    Args:
        config_path: Path to the configuration file. The format is chosen
            from its extension; anything other than .yaml/.yml/.toml is
            read as JSON.

    Returns:
        DEFAULT_CONFIG updated with the values found in the file.

    Raises:
        ConfigError: If the file cannot be read or parsed, or holds unknown
            keys or values of the wrong type.
    """
    data = _parse_config_file(config_path)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(str(config_path), "top level must be a mapping")

    config = dict(DEFAULT_CONFIG)
    for key, value in data.items():
        key = str(key).replace("-", "_")
        if key not in _KEY_TYPES:
            raise ConfigError(str(config_path), f"unknown key '{key}'")
        if value is None and key == "output":
            config[key] = None
            continue
        if not isinstance(value, _KEY_TYPES[key]):
            raise ConfigError(
                str(config_path),
                f"'{key}' must be of type {_KEY_TYPES[key].__name__}",
            )
        config[key] = value

    _check_choice(config_path, "format", config["format"], OUTPUT_FORMATS)
    _check_choice(config_path, "ascii_style", config["ascii_style"], ASCII_STYLES)
    if not config["suffix"]:
        raise ConfigError(str(config_path), "'suffix' must not be empty")

    logger.debug("Loaded configuration from %s: %s", config_path, config)
    return config


def _parse_config_file(config_path: Path) -> Any:
    suffix = config_path.suffix.lower()

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(str(config_path), f"cannot be read ({exc})") from exc

    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(content)
        elif suffix == ".toml":
            return tomllib.loads(content)
        else:
            return json.loads(content)
    except Exception as exc:
        raise ConfigError(str(config_path), f"cannot be parsed ({exc})") from exc


def _check_choice(config_path: Path, key: str, value: str, choices: Sequence[str]) -> None:
    if value not in choices:
        raise ConfigError(
            str(config_path),
            f"'{key}' must be one of {', '.join(choices)}",
        )
