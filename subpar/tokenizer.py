"""Tokenizer: split raw text into paragraphs of tagged words.

WHY: The line breaker works on one paragraph at a time and needs to know,
for every word, whether it ends a sentence (two trailing spaces) or not
(one). Both facts come from the whitespace of the original text, which is
thrown away once the words are extracted.

HOW: Scan the text line by line and split each line on single spaces. A word
is only tagged once the next word is seen, because its tag depends on what
followed it: more than one space, or a line break, after a terminator makes
it a sentence end. Two or more line breaks before the next word close the
current paragraph.

RULES:
- Lines are split on "\\n" only; a trailing "\\r" is dropped from each line.
- A word ending in a terminator is a sentence end only if followed by two or
  more spaces or a line break. One space means it stays a normal word.
- The last word of the text is always a sentence end.
- At least one paragraph is always returned, even for text without words.
"""

from typing import List

from .config import SENTENCE_ENDINGS
from .models import Word


def input_lines(text: str) -> List[str]:
    """Split text into lines the way a line-oriented reader sees them.

    A final newline does not produce an extra empty line, and "\\r\\n"
    endings are accepted.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def ends_with_terminator(word: str) -> bool:
    """True if the word's last character is one of . ! ? …"""
    return bool(word) and word[-1] in SENTENCE_ENDINGS


def tokenize(text: str) -> List[List[Word]]:
    """Split text into paragraphs, each an ordered list of tagged words.

    Args:
        text: The whole input text.

    Returns:
        List of paragraphs in input order. Never empty; a text without
        words yields a single empty paragraph.
    """
    paragraphs = []  # type: List[List[Word]]
    paragraph = []  # type: List[Word]
    pending = None
    many_spaces = False
    newlines = 0

    for line in input_lines(text):
        for token in line.split(" "):
            if not token:
                many_spaces = True
                continue
            if pending is not None:
                eos = ends_with_terminator(pending) and (many_spaces or newlines > 0)
                paragraph.append(Word(pending, end_of_sentence=eos))
                many_spaces = False
                if newlines > 1:
                    paragraphs.append(paragraph)
                    paragraph = []
                newlines = 0
            pending = token
        newlines += 1

    if pending is not None:
        paragraph.append(Word(pending, end_of_sentence=True))
    paragraphs.append(paragraph)
    return paragraphs
