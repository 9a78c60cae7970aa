"""Tests for line normalization and token sequence validation."""

import pytest

import wordsim as ws

from tests.fixtures.real_data import PRODUCT_NAMES


class TestNormalizeToken:
    """Tests for the canonical token text."""

    def test_lowercase(self):
        assert ws.normalize_token("HeLLo") == "hello"

    def test_removes_all_whitespace(self):
        assert ws.normalize_token("  hello   world\t") == "helloworld"
        assert ws.normalize_token("a b c") == "abc", "Unicode whitespace is removed too"

    def test_whitespace_only_becomes_empty(self):
        assert ws.normalize_token(" \t ") == ""

    def test_product_variants_collapse(self):
        texts = {ws.normalize_token(name) for name in PRODUCT_NAMES}
        assert texts == {"iphone15pro", "galaxys24"}


class TestNormalizeLines:
    """Tests for normalize_lines."""

    def test_basic(self):
        tokens = ws.normalize_lines(["hello world", "Hello Wrold"])
        assert tokens == (
            ws.Token(1, "helloworld", "hello world"),
            ws.Token(2, "hellowrold", "Hello Wrold"),
        )

    def test_returns_immutable_tuple(self):
        tokens = ws.normalize_lines(["a", "b"])
        assert isinstance(tokens, tuple)

    def test_strips_one_line_terminator(self):
        tokens = ws.normalize_lines(["alpha\n", "beta\r\n", "gamma"])
        assert [t.raw for t in tokens] == ["alpha", "beta", "gamma"]

    def test_duplicates_are_kept(self):
        tokens = ws.normalize_lines(["same", "same", "Same "])
        assert [t.index for t in tokens] == [1, 2, 3]
        assert {t.text for t in tokens} == {"same"}

    def test_empty_line_rejected(self):
        with pytest.raises(ws.EmptyLineError) as excinfo:
            ws.normalize_lines(["one", "", "three"])
        assert excinfo.value.line_number == 2

    def test_bare_newline_is_empty(self):
        with pytest.raises(ws.EmptyLineError):
            ws.normalize_lines(["one\n", "\n", "three\n"])

    def test_whitespace_line_is_not_empty(self):
        tokens = ws.normalize_lines(["one", "   ", "three"])
        assert tokens[1].text == ""
        assert tokens[1].raw == "   "

    def test_empty_line_checked_before_count(self):
        with pytest.raises(ws.EmptyLineError):
            ws.normalize_lines([""])

    def test_too_few(self):
        with pytest.raises(ws.InvalidCountError) as excinfo:
            ws.normalize_lines(["only"])
        err = excinfo.value
        assert (err.count, err.min_words, err.max_words) == (1, ws.MIN_WORDS, ws.MAX_WORDS)

    def test_no_lines(self):
        with pytest.raises(ws.InvalidCountError):
            ws.normalize_lines([])

    def test_min_words_boundary(self):
        assert len(ws.normalize_lines(["a", "b"])) == ws.MIN_WORDS

    def test_custom_bounds(self):
        lines = ["a", "b", "c", "d"]
        assert len(ws.normalize_lines(lines, min_words=4, max_words=4)) == 4
        with pytest.raises(ws.InvalidCountError, match="between 1 and 3"):
            ws.normalize_lines(lines, min_words=1, max_words=3)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            ws.normalize_lines(["a", ""])
        with pytest.raises(ws.WordSimError):
            ws.normalize_lines(["a"])


class TestReadTokens:
    """Tests for reading token files."""

    def test_reads_utf8_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("Müller\nMueller\n", encoding="utf-8")
        tokens = ws.read_tokens(path)
        assert [t.text for t in tokens] == ["müller", "mueller"]

    def test_trailing_newline_is_not_a_line(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat\ndog\n", encoding="utf-8")
        assert len(ws.read_tokens(path)) == 2

    def test_crlf_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_bytes(b"cat\r\ndog\r\n")
        assert [t.raw for t in ws.read_tokens(path)] == ["cat", "dog"]

    def test_blank_line_in_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("cat\n\ndog\n", encoding="utf-8")
        with pytest.raises(ws.EmptyLineError) as excinfo:
            ws.read_tokens(path)
        assert excinfo.value.line_number == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            ws.read_tokens(tmp_path / "missing.txt")

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "words.bin"
        path.write_bytes(b"caf\xe9\ndog\n")
        with pytest.raises(UnicodeDecodeError):
            ws.read_tokens(path)
