"""
Tests for Core.reader.read_line.
"""

import io

import pytest

from Core.reader import read_line


class ExplodingStream:
    def read(self, size=-1):
        raise MemoryError


class TestReadLine:

    def test_strips_newline(self):
        assert read_line(io.StringIO("ls -l\n")) == "ls -l"

    def test_reads_one_line_at_a_time(self):
        stream = io.StringIO("first\nsecond\n")
        assert read_line(stream) == "first"
        assert read_line(stream) == "second"

    def test_empty_line_is_empty_string(self):
        assert read_line(io.StringIO("\nnext\n")) == ""

    def test_last_line_without_newline(self):
        stream = io.StringIO("echo hi")
        assert read_line(stream) == "echo hi"
        with pytest.raises(EOFError):
            read_line(stream)

    def test_end_of_stream_raises_eof(self):
        with pytest.raises(EOFError):
            read_line(io.StringIO(""))

    def test_line_longer_than_any_buffer(self):
        text = "x" * 5000
        assert read_line(io.StringIO(text + "\n")) == text

    def test_keeps_other_whitespace(self):
        assert read_line(io.StringIO("a\tb\r\n")) == "a\tb\r"

    def test_defaults_to_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("pwd\n"))
        assert read_line() == "pwd"

    def test_allocation_failure_is_fatal(self, capsys):
        with pytest.raises(SystemExit) as exc:
            read_line(ExplodingStream())
        assert exc.value.code == 1
        assert capsys.readouterr().err == "tinysh: allocation error\n"
