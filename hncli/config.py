"""Config file support for hncli.

Loads default CLI arguments from:
  1. ~/.hncli.yaml  (user-level)
  2. ./hncli.yaml   (project-level, overrides user-level)

Example config file:

    # ~/.hncli.yaml
    style: markdown
    limit: 25
    ranking: best
    timeout: 10
"""
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict

import yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "HNCLI_"

_TRUE_WORDS = ("1", "true", "yes", "on")
_FALSE_WORDS = ("0", "false", "no", "off", "")


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ValueError("not a boolean")


def _to_int(value: Any) -> int:
    # YAML gives ints directly; env vars arrive as strings
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    raise ValueError("not an integer")


def _to_float(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        raise ValueError("not a number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError("not a number") from None


def _to_str(value: Any) -> str:
    # `tags: [story, front_page]` is accepted as well as `tags: story,front_page`
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    if value is None or isinstance(value, dict):
        raise ValueError("not a string")
    return str(value)


# CLI dest -> converter for every option a config source may set
_FIELDS: Dict[str, Callable[[Any], Any]] = {
    "verbose": _to_bool,
    "limit": _to_int,
    "timeout": _to_float,
    "style": _to_str,
    "ranking": _to_str,
    "query": _to_str,
    "tags": _to_str,
    "output": _to_str,
}


def coerce(key: str, value: Any) -> Any:
    """Convert a raw config value to the type of its CLI option.

    Raises KeyError for unknown options and ValueError for values of the
    wrong shape (including YAML nulls).
    """
    return _FIELDS[key](value)


def config_paths():
    return [
        Path.home() / ".hncli.yaml",
        Path.home() / ".hncli.yml",
        Path("hncli.yaml"),
        Path("hncli.yml"),
    ]


def load_config() -> Dict[str, Any]:
    """Load raw config from YAML files, merging user + project level."""
    config: Dict[str, Any] = {}

    for p in config_paths():
        if not p.is_file():
            continue
        try:
            with open(p, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"[Config] Failed to load {p}: {e}")
            continue
        if not isinstance(data, dict):
            logger.warning(f"[Config] Ignoring {p}: top level is not a mapping")
            continue
        # Normalize keys: dashes → underscores
        config.update({str(k).replace("-", "_"): v for k, v in data.items()})
        logger.debug(f"[Config] Loaded {p}")

    return config


def load_env_config() -> Dict[str, Any]:
    """Load typed config from HNCLI_* environment variables.

    HNCLI_STYLE=md → style="md", HNCLI_LIMIT=20 → limit=20,
    HNCLI_VERBOSE=1 → verbose=True. Values that don't convert are logged and
    skipped. URL overrides (HNCLI_BASE_URL, ...) are read by the client itself.
    """
    config: Dict[str, Any] = {}
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field = key[len(ENV_PREFIX):].lower()
        if field not in _FIELDS:
            continue
        try:
            config[field] = coerce(field, value)
        except ValueError as e:
            logger.warning(f"[Config] Ignoring {key}={value!r}: {e}")
    return config


def apply_config_defaults(parser, args):
    """Fill CLI options the user left at their defaults.

    Priority: CLI flags > env vars (HNCLI_*) > config files > parser defaults.
    A value that doesn't fit its option is logged and skipped, never fatal.
    """
    config = load_config()
    config.update(load_env_config())

    for key, value in config.items():
        if key not in _FIELDS or not hasattr(args, key):
            continue
        if getattr(args, key) != parser.get_default(key):
            continue
        try:
            setattr(args, key, coerce(key, value))
        except ValueError as e:
            logger.warning(f"[Config] Ignoring {key}={value!r}: {e}")

    return args
