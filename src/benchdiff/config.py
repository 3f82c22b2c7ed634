from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .differ import ZeroBaselinePolicy
from .errors import ConfigError


class LogFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


class TableStyle(str, Enum):
    BLANK = "blank"
    SIMPLE = "simple"
    ROUNDED = "rounded"
    ASCII = "ascii"


def _represent_enum(dumper, data):
    return dumper.represent_scalar("tag:yaml.org,2002:str", data.value)


for _enum in (LogFormat, TableStyle, ZeroBaselinePolicy):
    yaml.SafeDumper.add_representer(_enum, _represent_enum)


class DiffConfig(BaseModel):
    """Settings that shape a comparison run and its output."""

    log_level: str = Field(default="WARNING", description="Log level")
    log_format: LogFormat = Field(default=LogFormat.TEXT, description="Log format: json or text")
    precision: int = Field(
        default=5, ge=0, le=12, description="Decimal places of the percentage column"
    )
    zero_baseline: ZeroBaselinePolicy = Field(
        default=ZeroBaselinePolicy.PROPAGATE,
        description="Handling of a zero old score: propagate (inf/nan) or error",
    )
    table_style: TableStyle = Field(default=TableStyle.BLANK, description="Table border style")

    @field_validator("log_level")
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "DiffConfig":
        """Load configuration from a YAML file."""
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigError(f"cannot read {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigError(f"{path} must contain a mapping")
        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigError(f"invalid settings in {path}: {exc}") from exc

    def save_to_file(self, path: Union[str, Path]) -> None:
        """Save configuration to a YAML file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.model_dump(), f, default_flow_style=False, sort_keys=False)
