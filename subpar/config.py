"""Configuration constants and .env loading.

WHY: The width and last-line defaults are the only knobs the filter has.
Users who always wrap to, say, 72 columns should not have to pass --width on
every invocation, so the defaults can come from the environment or a .env
file in the working directory.

HOW: python-dotenv loads the .env file on import. Defaults are module-level
constants read from the environment. load_format_config() turns them into a
validated FormatConfig.

RULES:
- SUBPAR_WIDTH must be a positive integer (default 79).
- SUBPAR_LAST accepts true/1/yes/on (case-insensitive); anything else is off.
- SENTENCE_ENDINGS is the full set of sentence terminators.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

from .models import FormatConfig

load_dotenv()

DEFAULT_WIDTH = 79

# Characters that may end a sentence
SENTENCE_ENDINGS = ".!?…"

_TRUE_VALUES = {"true", "1", "yes", "on"}


def parse_width(value: str) -> int:
    """Parse a width setting, rejecting anything but a positive integer.

    Raises:
        ValueError: If value is not a positive integer.
    """
    try:
        width = int(value)
    except (TypeError, ValueError):
        raise ValueError("Width must be a positive integer, got {!r}".format(value)) from None
    if width < 1:
        raise ValueError("Width must be a positive integer, got {!r}".format(value))
    return width


def load_format_config() -> FormatConfig:
    """Build a FormatConfig from the environment.

    WHY: The CLI uses these values as its option defaults, so a .env file
    or exported variable changes the default behaviour of the filter.

    HOW: Reads SUBPAR_WIDTH and SUBPAR_LAST from os.environ (populated by
    python-dotenv), falling back to width 79 and last-line discount on.

    RULES:
    - Raises ValueError if SUBPAR_WIDTH is set but invalid
    - Never silently replaces an invalid width with the default
    """
    return FormatConfig(width=load_width(), full_last_line=load_full_last_line())


def load_width() -> int:
    """Default width from SUBPAR_WIDTH, or DEFAULT_WIDTH when unset.

    Raises:
        ValueError: If SUBPAR_WIDTH is set but not a positive integer.
    """
    return parse_width(os.getenv("SUBPAR_WIDTH", str(DEFAULT_WIDTH)).strip())


def load_full_last_line() -> bool:
    """Default for the last-line option from SUBPAR_LAST."""
    return os.getenv("SUBPAR_LAST", "false").strip().lower() in _TRUE_VALUES
