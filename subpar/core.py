"""Core reformatting logic: line lengths, badness, line breaking and rendering.

WHY: Greedy wrapping fills each line as far as it goes and leaves whatever
is left for the following lines, which produces ragged paragraphs. This
module instead chooses the line breaks that minimise the total badness of
the whole paragraph.

HOW: The pipeline for one paragraph has three stages:
  1. line_lengths() — rendered length of every candidate line words[i..i+j].
  2. best_layout() — dynamic programming over suffixes of the paragraph.
     dp[i] is the minimum total badness of laying out words[i:], together
     with the number of words on the first line of that layout. The table
     is filled from the end, then walked forwards to recover the lines.
  3. render_paragraph() — joins the words of each line with one or two
     spaces and strips trailing spaces.

RULES:
- ALL functions take the width (or a FormatConfig) explicitly — no global
  state, so paragraphs can be formatted independently.
- Word text is never modified; only line breaks are chosen.
- Lengths count characters, not bytes.
- Overflowing a line costs 1,000,000 per extra character, so an overflow is
  only chosen when no layout avoids it. A single word wider than the line
  is put on its own line, never split.
- Among layouts with equal badness the shortest first line wins.
- Cost is O(n^2) time and memory in the number of words per paragraph,
  which is fine for prose paragraphs but not for huge unbroken texts.
"""

import logging
from typing import List, Tuple

from .models import FormatConfig, Word

logger = logging.getLogger(__name__)

OVERFLOW_PENALTY = 1_000_000
LAST_LINE_DISCOUNT = 100

Span = Tuple[int, int]


# =============================================================================
# Cost Model
# =============================================================================

def badness(length: int, width: int) -> int:
    """Badness of a single line of the given length.

    Short lines cost the cube of the missing characters; overflowing lines
    cost OVERFLOW_PENALTY per extra character.
    """
    if length > width:
        return OVERFLOW_PENALTY * (length - width)
    return (width - length) ** 3


def line_lengths(words: List[Word]) -> List[List[int]]:
    """Rendered lengths of every candidate line of a paragraph.

    Returns:
        Triangular table where lengths[i][j] is the length of a line made of
        words i to i+j inclusive, trailing spaces excluded.
    """
    lengths = []
    for i in range(len(words)):
        row = []
        length = 0
        for word in words[i:]:
            length += len(word.text)
            row.append(length)
            length += word.spacing
        lengths.append(row)
    return lengths


# =============================================================================
# Line Breaking (Dynamic Programming)
# =============================================================================

def best_layout(words: List[Word], config: FormatConfig) -> Tuple[int, List[Span]]:
    """Choose the line breaks with minimum total badness.

    WHY: A break that looks best locally can force a very short or
    overflowing line further down. Scoring every layout of the paragraph
    finds the globally best one.

    HOW: For i from n-1 down to 0, try every first line words[i:i+j] and
    add the badness of that line to the best cost of the remaining suffix
    dp[i+j]. The smallest total wins; ties keep the shorter line. The last
    line gets its badness divided by 100 (integer division) when
    it is between a quarter of the width and the full width, unless
    config.full_last_line is set.

    RULES:
    - dp has exactly n+1 entries and dp[n] = (0, 0).
    - The returned spans are contiguous, in order, and cover every word.
    - An empty paragraph returns no spans.

    Args:
        words: The words of one paragraph.
        config: Width and last-line option.

    Returns:
        Tuple of the total badness and the list of (start, end) spans, one
        per output line, end exclusive.
    """
    width = config.width
    n = len(words)
    lengths = line_lengths(words)

    dp = [(0, 0)] * (n + 1)  # type: List[Tuple[int, int]]
    for i in range(n - 1, -1, -1):
        best = None
        for j in range(1, n - i + 1):
            length = lengths[i][j - 1]
            cost = badness(length, width) + dp[i + j][0]
            if not config.full_last_line and i + j == n:
                if width // 4 < length < width:
                    cost //= LAST_LINE_DISCOUNT
            if best is None or cost < best[0]:
                best = (cost, j)
        dp[i] = best

    spans = []
    i = 0
    while i < n:
        span = dp[i][1]
        spans.append((i, i + span))
        i += span

    logger.debug(
        "Broke %d words into %d lines (width %d, total badness %d)",
        n, len(spans), width, dp[0][0],
    )
    return dp[0][0], spans


def break_lines(words: List[Word], config: FormatConfig) -> List[Span]:
    """Spans of the minimum-badness layout of a paragraph (see best_layout)."""
    return best_layout(words, config)[1]


# =============================================================================
# Rendering
# =============================================================================

def render_line(words: List[Word]) -> str:
    """Join the words of one line, stripping trailing spaces only."""
    parts = []
    for word in words:
        parts.append(word.text)
        parts.append(" " * word.spacing)
    return "".join(parts).rstrip(" ")


def render_lines(words: List[Word], spans: List[Span]) -> List[str]:
    """Render each span of a paragraph as one line of text (no newline)."""
    return [render_line(words[start:end]) for start, end in spans]


def render_paragraph(words: List[Word], spans: List[Span]) -> str:
    """Render a paragraph, each line terminated by exactly one newline."""
    return "".join(line + "\n" for line in render_lines(words, spans))


def render_ruler(words: List[Word], spans: List[Span], width: int) -> str:
    """Render a paragraph with a right margin marker on every line.

    Lines that fit are padded with spaces to the width and followed by
    "|<width>". Overflowing lines are left as they are, without a marker,
    so they stick out past the margin.
    """
    out = []
    for line in render_lines(words, spans):
        if len(line) <= width:
            line = "{}{}|{}".format(line, " " * (width - len(line)), width)
        out.append(line + "\n")
    return "".join(out)


def reformat(words: List[Word], config: FormatConfig, ruler: bool = False) -> str:
    """Break and render one paragraph.

    Args:
        words: The words of one paragraph.
        config: Width and last-line option.
        ruler: Render with a right margin marker (see render_ruler).

    Returns:
        The rendered paragraph; empty for an empty paragraph.
    """
    spans = break_lines(words, config)
    if ruler:
        return render_ruler(words, spans, config.width)
    return render_paragraph(words, spans)
