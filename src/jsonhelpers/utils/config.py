"""Persistent default serializer settings.

Reads and writes the ``[serializer]`` table of
``$XDG_CONFIG_HOME/jsonhelpers/config.toml`` (``~/.config`` when unset) using
tomli/tomli-w. Environment variables named ``JSONHELPERS_<DOTTED_KEY>``
override the file.

Facade helpers never read this file on their own: ``options=None`` always
means engine defaults. Callers opt in with ``load_default_options()``.
"""

import contextlib
import logging
import os
from pathlib import Path
from typing import Any, Optional, TypeVar, cast

import tomli
import tomli_w
from pydantic import ValidationError

from jsonhelpers.errors import ConfigurationError
from jsonhelpers.models.options import SerializerOptions

logger = logging.getLogger(__name__)

_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
CONFIG_DIR = _xdg_config_home / "jsonhelpers"
CONFIG_FILE = CONFIG_DIR / "config.toml"

ENV_PREFIX = "JSONHELPERS_"
SECTION = "serializer"

# Settings persisted under [serializer]; converters are code and stay out.
PERSISTED_FIELDS = ("indent", "newline", "by_alias", "exclude_none", "strict", "inf_nan_mode")

# TOML has no escape-free way to show a bare CR, so newlines are stored by name.
_NEWLINE_NAMES = {"lf": "\n", "crlf": "\r\n", "cr": "\r"}

_TRUTHY = {"1", "true", "yes", "on"}

T = TypeVar("T")


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""
    if not CONFIG_FILE.exists():
        return {}
    with CONFIG_FILE.open("rb") as f:
        return tomli.load(f)


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve ``data["a"]["b"]`` for ``dotted_key="a.b"``, or None."""
    current: Any = data
    for part in dotted_key.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert ``serializer.indent`` to ``JSONHELPERS_SERIALIZER_INDENT``."""
    return prefix + dotted_key.replace(".", "_").upper()


def _coerce(raw: Any, default: T) -> T:
    """Coerce *raw* to the type of *default*, falling back to *default*."""
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return cast(T, raw)
        if isinstance(raw, str):
            return cast(T, raw.lower() in _TRUTHY)
        return default
    if isinstance(default, int):
        if isinstance(raw, int) and not isinstance(raw, bool):
            return cast(T, raw)
        if isinstance(raw, str):
            with contextlib.suppress(ValueError):
                return cast(T, int(raw))
        return default
    if isinstance(default, float):
        if isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return cast(T, float(raw))
        if isinstance(raw, str):
            with contextlib.suppress(ValueError):
                return cast(T, float(raw))
        return default
    return cast(T, raw)


def resolve_setting(key: str, *, default: T, cli_value: T | None = None) -> T:
    """Resolve *key* using precedence CLI > env > config file > default.

    Args:
        key: Dotted key path, e.g. ``"serializer.indent"``.
        default: Value to fall back to; its type drives coercion.
        cli_value: Value passed on the command line, ``None`` when absent.
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


def load_default_options(**overrides: Any) -> SerializerOptions:
    """Build SerializerOptions from the config file and environment.

    Keyword *overrides* win over both (``None`` values are ignored).

    Raises:
        ConfigurationError: If the config file is not valid TOML or a resolved
            value is not a valid option (e.g. ``JSONHELPERS_SERIALIZER_INDENT=0``).
    """
    defaults = SerializerOptions()
    values: dict[str, Any] = {}
    try:
        for name in PERSISTED_FIELDS:
            value = resolve_setting(
                f"{SECTION}.{name}",
                default=getattr(defaults, name),
                cli_value=overrides.get(name),
            )
            if name == "newline" and isinstance(value, str):
                value = _NEWLINE_NAMES.get(value.lower(), value)
            values[name] = value
    except tomli.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid config file {CONFIG_FILE}: {exc}") from exc
    logger.debug("Resolved serializer options: %s", values)
    try:
        return SerializerOptions(**values)
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) for error in exc.errors()
        )
        raise ConfigurationError(
            f"Invalid serializer default(s): {fields} "
            f"(check {CONFIG_FILE} and {ENV_PREFIX}{SECTION.upper()}_* variables)"
        ) from exc


def save_default_options(options: SerializerOptions) -> Path:
    """Persist the scalar fields of *options* to the ``[serializer]`` table.

    Other tables in the config file are preserved.

    Returns:
        Path of the written config file.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    data = _read_config_file()
    section: dict[str, Any] = {}
    for name in PERSISTED_FIELDS:
        section[name] = getattr(options, name)
    reverse = {v: k for k, v in _NEWLINE_NAMES.items()}
    section["newline"] = reverse[options.newline]
    data[SECTION] = section
    with CONFIG_FILE.open("wb") as f:
        tomli_w.dump(data, f)
    logger.info("Saved serializer defaults to %s", CONFIG_FILE)
    return CONFIG_FILE


def config_path() -> Optional[Path]:
    """Return the config file path if it exists."""
    return CONFIG_FILE if CONFIG_FILE.exists() else None
