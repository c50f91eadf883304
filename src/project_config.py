"""Loading of the project-wide ``config.toml``."""

from __future__ import annotations

import copy
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Mapping

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]


_LOGGER = logging.getLogger(__name__)
_CONFIG_FILENAME = "config.toml"
_REPORT_FORMATS = ("text", "json")
_FORMAT_ENV_KEY = "POURING_REPORT_FORMAT"

# Used when the package is installed away from the repository checkout.
_DEFAULTS: Dict[str, Any] = {
    "EXAMPLE": {"goal": 41, "capacities": [4, 9, 17, 51]},
    "REPORT": {"format": "text"},
    "LOG": {"dir": "logs/solve", "max_bytes": 100 * 1024 * 1024},
}


def _config_path() -> Path:
    return Path(__file__).resolve().parents[1] / _CONFIG_FILENAME


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Load and cache the project configuration as a dictionary.

    Sections missing from the file, or the whole file when it is absent,
    fall back to the built-in defaults.
    """
    config = copy.deepcopy(_DEFAULTS)
    path = _config_path()
    try:
        with path.open("rb") as fh:
            loaded = tomllib.load(fh)
    except FileNotFoundError:
        _LOGGER.debug("%s not found at %s; using built-in defaults", _CONFIG_FILENAME, path)
        return config

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    return config


def get_section(path: str, default: Any = None) -> Any:
    """Retrieve a nested configuration value using dotted notation."""

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        else:
            if default is not None:
                return default
            raise KeyError(f"Configuration path '{path}' not found")
    return data


def _normalise_format(value: Any) -> str:
    normalised = str(value).strip().lower()
    if normalised not in _REPORT_FORMATS:
        raise ValueError(f"Unsupported report format: {value!r}")
    return normalised


def resolve_report_format(cli_value: str | None = None, env: Mapping[str, str] | None = None) -> str:
    """Pick the report format: CLI flag, then environment, then ``config.toml``.

    The configuration file is only consulted when neither override is set.
    """

    if cli_value is not None:
        return _normalise_format(cli_value)
    if env and env.get(_FORMAT_ENV_KEY) is not None:
        return _normalise_format(env[_FORMAT_ENV_KEY])
    return _normalise_format(get_section("REPORT.format", "text"))


__all__ = ["get_config", "get_section", "resolve_report_format"]
