"""Subpar — a filter for optimal paragraph reformatting.

WHY: Plain-text paragraphs wrapped greedily end up with ragged right edges
and awkward short lines. Subpar rewraps each paragraph so that no line is
wider than the configured width while minimising the raggedness of the
paragraph as a whole.

HOW: The single public entry point is format_text(text, width, ...). It
tokenizes the text into paragraphs of tagged words, breaks each paragraph
with the dynamic-programming line breaker, and returns the rendered
paragraphs in input order.

RULES:
- format_text() is the public API for producing reformatted text.
- Paragraphs are independent; formatting one never affects another.
- Only ordinary spaces are inserted between words: one after a normal
  word, two after a sentence end. No hyphenation, no justification.
"""

from typing import List, Optional

from .core import badness, break_lines, reformat, render_paragraph
from .models import FormatConfig, Word
from .tokenizer import tokenize

__version__ = "0.1.0"

__all__ = [
    "format_text",
    "FormatConfig",
    "Word",
    "tokenize",
    "badness",
    "break_lines",
    "render_paragraph",
]


def format_text(
    text: str,
    width: int = 79,
    full_last_line: bool = False,
    config: Optional[FormatConfig] = None,
    ruler: bool = False,
) -> List[str]:
    """Reformat every paragraph of a text.

    Args:
        text: The whole input text.
        width: Maximum line width in characters, newline excluded.
        full_last_line: Make the last line of each paragraph as long as the
            others instead of allowing it to be short.
        config: Optional FormatConfig. If provided, width and full_last_line
            are ignored.
        ruler: Mark the right margin on every line (diagnostic output).

    Returns:
        One rendered string per paragraph, each line ending in a newline.
        A text without words yields a single empty string.

    Raises:
        ValueError: If the width is not a positive integer.
    """
    if config is None:
        config = FormatConfig(width=width, full_last_line=full_last_line)
    if config.width < 1:
        raise ValueError("Width must be a positive integer, got {!r}".format(config.width))

    return [reformat(paragraph, config, ruler=ruler) for paragraph in tokenize(text)]
