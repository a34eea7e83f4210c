#!/usr/bin/env python3
"""Group one or more numbers given on the command line.

Grouping parameters come from ``DIGIT_GROUP_*`` environment variables (or a
``.env`` file), e.g. ``DIGIT_GROUP_PRESET=indian``.
"""
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from digit_group.config import Settings
from digit_group.errors import DigitGroupError
from digit_group.utils.logging import get_logger, setup_logging


def main(numbers: list[str]) -> int:
    """Print each number grouped with the configured convention."""
    settings = Settings()
    setup_logging(settings.log_level, json=settings.log_json)
    logger = get_logger("group_number")

    try:
        config = settings.grouping_config()
    except DigitGroupError as e:
        print(f"Error: {e}")
        return 1

    logger.info("grouping_numbers", count=len(numbers), config=config.model_dump())

    status = 0
    for number in numbers:
        try:
            print(config.apply(number))
        except DigitGroupError as e:
            print(f"Error: {e}")
            status = 1
    return status


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/group_number.py <number> [<number> ...]")
        sys.exit(1)
    sys.exit(main(sys.argv[1:]))
