from __future__ import annotations

import codecs
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Optional, Tuple

import yaml

import config


class ConfigError(Exception):
    '''when the configuration from YAML is invalid'''


@dataclass(frozen=True)
class RunConfig:
    input_path: Optional[Path]
    year: int = config.DEFAULT_YEAR
    verbosity: int = config.DEFAULT_VERBOSITY
    basins: Tuple[str, ...] = config.DEFAULT_BASINS
    encoding: str = config.DEFAULT_ENCODING
    csv_path: Optional[Path] = None
    excel_path: Optional[Path] = None
    plot_path: Optional[Path] = None

    def with_overrides(self, **overrides: Any) -> RunConfig:
        '''Return a copy with every non-None override applied, then validated.'''
        changes = {key: val for key, val in overrides.items() if val is not None}
        merged = replace(self, **changes)
        validate(merged)
        return merged


def _parse_basins(raw_val: Any) -> Tuple[str, ...]:
    if isinstance(raw_val, list):
        return tuple(str(b).strip().upper() for b in raw_val if str(b).strip())
    if isinstance(raw_val, str):
        return tuple(b.strip().upper() for b in raw_val.split(",") if b.strip())
    raise ConfigError("basins must be a list or comma-separated string")


def _optional_path(raw: dict[str, Any], key: str) -> Optional[Path]:
    val = raw.get(key)
    if val is None or str(val).strip() == "":
        return None
    return Path(str(val))


def _as_int(raw: dict[str, Any], key: str, default: int) -> int:
    val = raw.get(key, default)
    try:
        return int(val)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be an integer, got {val!r}") from exc


def validate(cfg: RunConfig) -> None:
    if not 0 <= cfg.verbosity <= config.MAX_VERBOSITY:
        raise ConfigError(f"verbosity must be between 0 and {config.MAX_VERBOSITY}, got {cfg.verbosity}")
    if not cfg.basins:
        raise ConfigError("at least one basin code is required")
    for code in cfg.basins:
        if len(code) != 2 or not code.isalpha() or not code.isupper():
            raise ConfigError(f"basin code must be two uppercase letters: {code!r}")
    try:
        codecs.lookup(cfg.encoding)
    except LookupError as exc:
        raise ConfigError(f"unknown encoding: {cfg.encoding!r}") from exc


def load_config(path: Path) -> RunConfig:
    if not path.exists():
        raise ConfigError(f"YAML file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Error reading YAML file: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("YAML root must be a mapping")

    basins = _parse_basins(raw["basins"]) if "basins" in raw else config.DEFAULT_BASINS

    cfg = RunConfig(
        input_path=_optional_path(raw, "input_path"),
        year=_as_int(raw, "year", config.DEFAULT_YEAR),
        verbosity=_as_int(raw, "verbosity", config.DEFAULT_VERBOSITY),
        basins=basins,
        encoding=str(raw.get("encoding", config.DEFAULT_ENCODING)),
        csv_path=_optional_path(raw, "csv_path"),
        excel_path=_optional_path(raw, "excel_path"),
        plot_path=_optional_path(raw, "plot_path"),
    )
    validate(cfg)
    return cfg
