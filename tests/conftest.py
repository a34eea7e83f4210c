"""Shared test fixtures."""
import pytest
import structlog

from digit_group.models.grouping import GroupingConfig


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo any ``setup_logging`` call so tests see structlog defaults."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def commas_config():
    return GroupingConfig()


@pytest.fixture
def si_config():
    return GroupingConfig(grouping_delimiter=" ", group_fractional_part=True)
