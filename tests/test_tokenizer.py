"""Unit tests for the tokenizer.

WHY: Sentence-end tags decide between one and two spaces in the output,
and paragraph boundaries decide what the line breaker optimises together.
Both are inferred from whitespace alone, so small rule changes would
silently alter every reformatted text.

HOW: Tests feed short literal texts to tokenize() and compare the result
with the expected paragraphs of Word objects.

RULES:
- Two or more spaces, or a line break, after a terminator mark a sentence end.
- A single space never does.
- A blank line (even one made of spaces) separates paragraphs.
"""

from subpar.models import Word
from subpar.tokenizer import ends_with_terminator, input_lines, tokenize


class TestInputLines:
    """input_lines splits on newlines like a line reader."""

    def test_final_newline_adds_no_line(self):
        assert input_lines("a\nb\n") == ["a", "b"]

    def test_no_final_newline(self):
        assert input_lines("a\nb") == ["a", "b"]

    def test_blank_line_before_final_newline_is_kept(self):
        assert input_lines("a\n\n") == ["a", ""]

    def test_crlf_endings(self):
        assert input_lines("a\r\nb\r\n") == ["a", "b"]

    def test_empty_text(self):
        assert input_lines("") == []


class TestSentenceEnds:
    """Tagging of words that end a sentence."""

    def test_two_spaces_after_period(self):
        assert tokenize("End.  Next") == [[Word("End.", True), Word("Next", True)]]

    def test_one_space_after_period(self):
        assert tokenize("End. Next") == [[Word("End.", False), Word("Next", True)]]

    def test_line_break_after_period(self):
        assert tokenize("End.\nNext") == [[Word("End.", True), Word("Next", True)]]

    def test_other_terminators(self):
        paragraphs = tokenize("Wait!  Why?  Well…  ok")
        assert [w.end_of_sentence for w in paragraphs[0]] == [True, True, True, True]

    def test_comma_is_not_a_terminator(self):
        assert tokenize("Well,  then") == [[Word("Well,", False), Word("then", True)]]

    def test_many_spaces_without_terminator(self):
        assert tokenize("Hello   world") == [[Word("Hello", False), Word("world", True)]]

    def test_line_break_without_terminator(self):
        assert tokenize("one\ntwo") == [[Word("one", False), Word("two", True)]]

    def test_last_word_always_ends_sentence(self):
        assert tokenize("no punctuation")[0][-1] == Word("punctuation", True)

    def test_ends_with_terminator(self):
        assert ends_with_terminator("yes.")
        assert ends_with_terminator("…")
        assert not ends_with_terminator("yes")
        assert not ends_with_terminator("")


class TestParagraphs:
    """Blank lines split the text into paragraphs."""

    def test_blank_line_splits(self):
        assert tokenize("one two\n\nthree four") == [
            [Word("one"), Word("two")],
            [Word("three"), Word("four", True)],
        ]

    def test_two_blank_lines_split_once(self):
        paragraphs = tokenize("one\n\n\nthree")
        assert len(paragraphs) == 2

    def test_line_of_spaces_counts_as_blank(self):
        paragraphs = tokenize("one\n   \ntwo")
        assert len(paragraphs) == 2

    def test_single_line_break_keeps_paragraph(self):
        paragraphs = tokenize("one two\nthree four\n")
        assert len(paragraphs) == 1
        assert [w.text for w in paragraphs[0]] == ["one", "two", "three", "four"]

    def test_trailing_blank_lines_add_no_paragraph(self):
        assert tokenize("a b\n\n\n") == [[Word("a"), Word("b", True)]]

    def test_leading_blank_lines_add_no_paragraph(self):
        assert tokenize("\n\nword") == [[Word("word", True)]]

    def test_every_word_kept_in_order(self, prose):
        text = prose + "\n\n" + prose
        words = [w.text for p in tokenize(text) for w in p]
        assert words == text.split()


class TestEmptyInput:
    """Text without words still yields one paragraph."""

    def test_empty_text(self):
        assert tokenize("") == [[]]

    def test_only_whitespace(self):
        assert tokenize("   \n\n  \n") == [[]]
