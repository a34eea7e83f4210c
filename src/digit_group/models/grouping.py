"""Grouping conventions as data.

Provides the ``GroupingConfig`` model that bundles the five grouping
parameters, plus a small registry of named presets for common conventions.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from digit_group.errors import UnknownPresetError
from digit_group.grouping.composer import custom_group


class GroupingConfig(BaseModel):
    """Parameters for :func:`~digit_group.grouping.composer.custom_group`."""

    model_config = ConfigDict(frozen=True)

    decimal_mark: str = Field(default=".", min_length=1, max_length=1)
    grouping_delimiter: str = Field(default=",", max_length=1)
    first_group_size: int = Field(default=3, ge=1, strict=True)
    group_size: int = Field(default=3, ge=1, strict=True)
    group_fractional_part: bool = False

    def apply(self, number_string: str) -> str:
        """Group a pre-formatted number string with this configuration."""
        return custom_group(
            number_string,
            self.decimal_mark,
            self.grouping_delimiter,
            self.first_group_size,
            self.group_size,
            self.group_fractional_part,
        )


# ---------------------------------------------------------------------------
# Presets
# ---------------------------------------------------------------------------

GROUPING_PRESETS: dict[str, GroupingConfig] = {
    # 123,456,789.01
    "commas": GroupingConfig(),
    # ISO 80000-1: 123 456 789.012 34
    "si": GroupingConfig(grouping_delimiter=" ", group_fractional_part=True),
    # Lakh/crore: 12,34,567.89
    "indian": GroupingConfig(first_group_size=3, group_size=2),
    # Myriad: 123,4567.89
    "chinese": GroupingConfig(first_group_size=4, group_size=3),
}


def get_preset(name: str) -> GroupingConfig:
    """Return the preset registered under *name* (case-insensitive)."""
    try:
        return GROUPING_PRESETS[name.lower()]
    except KeyError:
        raise UnknownPresetError(name, sorted(GROUPING_PRESETS)) from None
