"""
Tests for the interactive highlighter.
"""
from prompt_toolkit.document import Document

from iso_lexer import IsomorphLexer
from palettes import DiscretePalette, style_of


RED = style_of(DiscretePalette()[0])


def lex(text, line=0, **kwargs):
    return IsomorphLexer(DiscretePalette(), **kwargs).lex_document(Document(text))(line)


class TestIsomorphLexer:

    def test_colors_shared_good_words(self):
        assert lex("egg add abc") == [
            (RED, "egg"), ("", " "), (RED, "add"), ("", " "), ("", "abc"),
        ]

    def test_plain_line(self):
        assert lex("abc abc") == [("", "abc"), ("", " "), ("", "abc")]

    def test_classes_span_lines(self):
        lexer = IsomorphLexer(DiscretePalette())
        get_line = lexer.lex_document(Document("egg\nadd"))
        assert get_line(0) == [(RED, "egg")]
        assert get_line(1) == [(RED, "add")]

    def test_double_space_kept(self):
        assert lex("aa  bb") == [(RED, "aa"), ("", " "), ("", " "), (RED, "bb")]

    def test_ignore_case(self):
        assert lex("Aa bb") == [("", "Aa"), ("", " "), ("", "bb")]
        assert lex("Aa bb", chars=str.lower) == [(RED, "Aa"), ("", " "), (RED, "bb")]

    def test_line_out_of_range(self):
        assert lex("egg add", line=3) == []

    def test_empty_document(self):
        assert lex("") == []
