"""Application configuration via environment variables with DIGIT_GROUP_ prefix."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from digit_group.models.grouping import GroupingConfig, get_preset


class Settings(BaseSettings):
    """Default grouping parameters for scripts and applications.

    All settings are read from environment variables prefixed with
    ``DIGIT_GROUP_``.  The grouping functions never read these implicitly;
    callers resolve them with :meth:`grouping_config` and pass them on.
    """

    model_config = SettingsConfigDict(env_prefix="DIGIT_GROUP_")

    # ── Grouping ───────────────────────────────────────────────────────────
    # When set, the named preset overrides the individual fields below
    preset: str | None = None
    decimal_mark: str = Field(default=".", min_length=1, max_length=1)
    grouping_delimiter: str = Field(default=",", max_length=1)
    first_group_size: int = Field(default=3, ge=1)
    group_size: int = Field(default=3, ge=1)
    group_fractional_part: bool = False

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = True

    def grouping_config(self) -> GroupingConfig:
        """Resolve the configured preset or individual fields to a ``GroupingConfig``."""
        if self.preset:
            return get_preset(self.preset)
        return GroupingConfig(
            decimal_mark=self.decimal_mark,
            grouping_delimiter=self.grouping_delimiter,
            first_group_size=self.first_group_size,
            group_size=self.group_size,
            group_fractional_part=self.group_fractional_part,
        )
