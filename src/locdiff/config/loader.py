"""Load and merge configuration from .locdiff.toml, CLI flags, and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from locdiff.config.defaults import CONFIG_FILENAME
from locdiff.config.schema import (
    FAIL_ON_LEVELS,
    OUTPUT_FORMATS,
    CompareConfig,
    InputConfig,
    LocDiffConfig,
    OutputConfig,
)


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _merge_env_overrides(cfg: LocDiffConfig) -> None:
    """Apply LOCDIFF_* environment variable overrides."""
    if val := os.environ.get("LOCDIFF_FAIL_ON"):
        if val in FAIL_ON_LEVELS:
            cfg.compare.fail_on = val  # type: ignore[assignment]
    if val := os.environ.get("LOCDIFF_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("LOCDIFF_MAX_FILE_SIZE_KB"):
        try:
            cfg.input.max_file_size_kb = int(val)
        except ValueError:
            pass


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.get(section, {}).items() if k in valid_fields}
    return cls(**filtered)


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> LocDiffConfig:
    """Load, validate, and return a LocDiffConfig."""
    config_path = find_config_file(root, config_override)

    if config_path is None:
        cfg = LocDiffConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = LocDiffConfig(
            version=raw.get("version", "1.0"),
            compare=_build_section(raw, CompareConfig, "compare"),
            input=_build_section(raw, InputConfig, "input"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        if cfg.compare.fail_on not in FAIL_ON_LEVELS:
            raise ConfigError(f"Invalid compare.fail_on: {cfg.compare.fail_on!r}")
        if cfg.output.format not in OUTPUT_FORMATS:
            raise ConfigError(f"Invalid output.format: {cfg.output.format!r}")

    _merge_env_overrides(cfg)
    return cfg
