"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

FailOn = Literal["never", "missing", "different"]
OutputFormat = Literal["terminal", "json"]

FAIL_ON_LEVELS = ("never", "missing", "different")
OUTPUT_FORMATS = ("terminal", "json")


@dataclass
class CompareConfig:
    fail_on: FailOn = "never"  # exit 1 on missing keys, or on any difference
    show_identical: bool = True


@dataclass
class InputConfig:
    max_file_size_kb: int = 1024


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True
    indent: int = 2
    max_value_length: int = 50


@dataclass
class LocDiffConfig:
    version: str = "1.0"
    compare: CompareConfig = field(default_factory=CompareConfig)
    input: InputConfig = field(default_factory=InputConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
