from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional

import yaml

from expando.core.errors import ConfigError


OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class ExpandConfig:
    # Keep the historical behavior: lines without groups pass through untrimmed.
    trim_unexpanded: bool = False
    encoding: str = "utf-8"
    format: str = "text"


DEFAULT_CONFIG = ExpandConfig()

_FIELD_TYPES: dict[str, type] = {
    "trim_unexpanded": bool,
    "encoding": str,
    "format": str,
}


def load_config_file(path: str | Path) -> dict[str, Any]:
    """Load run options from a YAML file.

    Format:
      trim_unexpanded: false
      encoding: utf-8
      format: text

    Returns only the keys present in the file, validated.
    """
    p = Path(path)
    if not p.exists():
        raise ConfigError(
            code="E_CONFIG_NOT_FOUND",
            message="config file does not exist",
            file=str(p),
        )

    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(code="E_CONFIG_PARSE", message=str(e), file=str(p)) from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(
            code="E_CONFIG_INVALID",
            message="config file must be a mapping of option -> value",
            file=str(p),
        )

    out: dict[str, Any] = {}
    for k, v in raw.items():
        if k not in _FIELD_TYPES:
            raise ConfigError(
                code="E_CONFIG_INVALID",
                message=f"unknown option: {k} (choose from: {', '.join(sorted(_FIELD_TYPES))})",
                file=str(p),
                path=str(k),
            )
        expected = _FIELD_TYPES[k]
        if not isinstance(v, expected):
            raise ConfigError(
                code="E_CONFIG_INVALID",
                message=f"option '{k}' must be of type {expected.__name__}",
                file=str(p),
                path=k,
            )
        if expected is str and not v.strip():
            raise ConfigError(
                code="E_CONFIG_INVALID",
                message=f"option '{k}' must be a non-empty string",
                file=str(p),
                path=k,
            )
        out[k] = v.strip() if isinstance(v, str) else v

    fmt = out.get("format")
    if fmt is not None and fmt not in OUTPUT_FORMATS:
        raise ConfigError(
            code="E_CONFIG_INVALID",
            message=f"unknown format: {fmt} (choose one of: {', '.join(OUTPUT_FORMATS)})",
            file=str(p),
            path="format",
        )
    return out


def merged_config(overrides: dict[str, Any] | None = None) -> ExpandConfig:
    """Return DEFAULT_CONFIG with overrides applied. None values are ignored."""
    if not overrides:
        return DEFAULT_CONFIG
    return replace(DEFAULT_CONFIG, **{k: v for k, v in overrides.items() if v is not None})


def load_and_merge(config_file: Optional[str], **cli_overrides: Any) -> ExpandConfig:
    """File values override defaults; CLI values (when not None) override the file."""
    options: dict[str, Any] = {}
    if config_file:
        options.update(load_config_file(config_file))
    options.update({k: v for k, v in cli_overrides.items() if v is not None})
    return merged_config(options)
