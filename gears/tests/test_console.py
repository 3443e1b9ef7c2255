"""Tests for gears.console table output."""

import io

import pytest
from rich.console import Console

from gears.console import print_table, write_table
from gears.errors import InvalidCellType


ROWS = [["name", "size", "note"], ["a.txt", "12", "[bold]not markup[/bold]"]]
EXPECTED = (
    "name  size note\n"
    "a.txt 12   [bold]not markup[/bold]\n"
)


class TestWriteTable:

    def test_writes_lines_to_stream(self):
        stream = io.StringIO()
        count = write_table(ROWS, stream, padding=1, width_fn=len)

        assert count == 2
        assert stream.getvalue() == EXPECTED

    def test_defaults_to_stdout(self, capsys):
        write_table([["x", "y"]], padding=1, width_fn=len)
        assert capsys.readouterr().out == "x y\n"

    def test_nothing_written_on_invalid_input(self):
        stream = io.StringIO()
        with pytest.raises(InvalidCellType):
            write_table([["ok"], [None]], stream, padding=1, width_fn=len)
        assert stream.getvalue() == ""

    def test_empty_table(self):
        stream = io.StringIO()
        assert write_table([], stream, padding=1, width_fn=len) == 0
        assert stream.getvalue() == ""


class TestPrintTable:

    def _console(self, buffer):
        return Console(file=buffer, width=200, color_system=None, force_terminal=False)

    def test_prints_verbatim(self):
        buffer = io.StringIO()
        print_table(ROWS, console=self._console(buffer), padding=1, width_fn=len)

        assert buffer.getvalue() == EXPECTED

    def test_emoji_codes_untouched(self):
        buffer = io.StringIO()
        print_table([[":smile:", "x"]], console=self._console(buffer), padding=1, width_fn=len)

        assert buffer.getvalue() == ":smile: x\n"

    def test_invalid_input_prints_nothing(self):
        buffer = io.StringIO()
        with pytest.raises(InvalidCellType):
            print_table([[1]], console=self._console(buffer), padding=1, width_fn=len)
        assert buffer.getvalue() == ""
