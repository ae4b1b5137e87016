"""Data models for the paragraph reformatter.

WHY: Every stage of the pipeline (tokenizer, line breaker, renderer) talks
about the same two things: a word lifted from the input text, and the
settings that drive the line breaker. Keeping both as plain dataclasses
gives the stages a shared, explicit contract.

HOW: Word holds the word text plus a single sentence-end flag, which is all
the renderer needs to decide between one and two trailing spaces.
FormatConfig holds the target width and the last-line option.

RULES:
- Word.text is never modified — it is the exact run of non-space characters
  from the input.
- end_of_sentence words are followed by two spaces, all others by one.
- width excludes the line terminator.
"""

from dataclasses import dataclass


@dataclass
class Word:
    """A single word from the input text.

    Attributes:
        text: The word, a contiguous run of non-space characters.
        end_of_sentence: True if the word ends a sentence and must be
            followed by two spaces when rendered.
    """
    text: str
    end_of_sentence: bool = False

    @property
    def spacing(self) -> int:
        """Number of spaces that follow this word on a rendered line."""
        return 2 if self.end_of_sentence else 1


@dataclass
class FormatConfig:
    """Settings for the line breaker.

    Attributes:
        width: No output line may contain more than this many characters
            (newline excluded), unless a single word is wider.
        full_last_line: Make the last line of a paragraph as long as the
            others. Disables the short-last-line discount.
    """
    width: int = 79
    full_last_line: bool = False
