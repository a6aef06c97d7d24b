"""Persistent settings for mediaparser.

Settings live in ``$XDG_CONFIG_HOME/mediaparser/config.toml`` (default
``~/.config/mediaparser/config.toml``) and are parsed with tomli. Any setting can
be overridden by an environment variable or a CLI option; see
:func:`resolve_setting` for the precedence rules.

Example config::

    [output]
    json = true

    [classify]
    fail_on_unresolved = true
"""

import os
from pathlib import Path
from typing import Any, TypeVar, cast

import tomli

# Determine config directory respecting XDG_CONFIG_HOME if set.
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
CONFIG_DIR = _xdg_config_home / "mediaparser"
CONFIG_FILE = CONFIG_DIR / "config.toml"

ENV_PREFIX = "MEDIAPARSER_"

_TRUTHY = {"1", "true", "yes", "on"}

T = TypeVar("T")


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""
    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve a nested value from *data* given a dotted key path.

    Example: dotted_key="output.json" looks up ``data["output"]["json"]`` and
    returns None if any level is missing.
    """
    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str) -> str:
    """Convert a dotted key path to an env var name.

    Example: "classify.fail_on_unresolved" -> "MEDIAPARSER_CLASSIFY_FAIL_ON_UNRESOLVED".
    """
    return ENV_PREFIX + dotted_key.replace(".", "_").upper()


def _coerce(value: Any, default: T) -> T:
    """Coerce a raw env/config *value* to the type of *default*.

    Bool settings accept truthy strings ("1", "true", "yes", "on"); a non-bool,
    non-string value for a bool setting falls back to *default*. Other values
    are returned as-is.
    """
    if isinstance(default, bool):
        if isinstance(value, bool):
            return cast(T, value)
        if isinstance(value, str):
            return cast(T, value.strip().lower() in _TRUTHY)
        return default
    return cast(T, value)


def resolve_setting(
    key: str,
    *,
    default: T,
    cli_value: T | None = None,
) -> T:
    """Resolve a configuration *key* using precedence CLI > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"output.json"``.
        default: Value to fall back to when no overrides are found. Its type
            drives coercion of env and config values.
        cli_value: Value passed from a CLI option (``None`` when not provided).

    Returns:
        The resolved value.
    """
    if cli_value is not None:
        return cli_value

    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        return _coerce(os.environ[env_var], default)

    file_val = _lookup_nested(_read_config_file(), key)
    if file_val is not None:
        return _coerce(file_val, default)

    return default
