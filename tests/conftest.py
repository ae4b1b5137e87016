"""Shared test fixtures for the subpar test suite.

WHY: Several test modules need the same sample paragraphs and the same
clean environment. Centralizing them here keeps the expected layouts in
one place.

HOW: Pytest fixtures provide a small three-word paragraph whose optimal
layout is worked out by hand, a longer prose paragraph for property checks,
and an autouse fixture that clears the SUBPAR_* environment variables.

RULES:
- The hand-checked paragraph uses width 9: "aaaa bbbb" fills a line exactly.
- Tests never depend on a .env file or exported variables.
"""

from typing import List

import pytest

from subpar.models import Word

PROSE = (
    "The quick brown fox jumps over the lazy dog.  Pack my box with five "
    "dozen liquor jugs.  How vexingly quick daft zebras jump!  Sphinx of "
    "black quartz, judge my vow."
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove subpar settings inherited from the environment."""
    monkeypatch.delenv("SUBPAR_WIDTH", raising=False)
    monkeypatch.delenv("SUBPAR_LAST", raising=False)


@pytest.fixture
def three_words() -> List[Word]:
    """aaaa bbbb cccc, all normal words of four characters."""
    return [Word("aaaa"), Word("bbbb"), Word("cccc")]


@pytest.fixture
def prose() -> str:
    """One paragraph of prose with sentence ends and a comma."""
    return PROSE
