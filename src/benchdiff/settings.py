"""Environment-based configuration using pydantic-settings.

Loads BENCHDIFF_* environment variables (and an optional .env file) and
layers them over a DiffConfig loaded from YAML or built from defaults.
"""

from __future__ import annotations

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import DiffConfig, LogFormat, TableStyle
from .differ import ZeroBaselinePolicy


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="BENCHDIFF_", case_sensitive=False, extra="ignore"
    )

    log_level: Optional[str] = None
    log_format: Optional[LogFormat] = None
    precision: Optional[int] = None
    zero_baseline: Optional[ZeroBaselinePolicy] = None
    table_style: Optional[TableStyle] = None

    def to_runtime_config(self, base: Optional[DiffConfig] = None) -> DiffConfig:
        """Merge environment settings into a DiffConfig.

        Values set in the environment take precedence over ``base``.
        """
        if base is None:
            base = DiffConfig()
        overrides = self.model_dump(exclude_none=True)
        return DiffConfig.model_validate({**base.model_dump(), **overrides})
