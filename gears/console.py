"""Write formatted tables to a rich Console or a plain text stream.

The table formatter itself does no I/O; these helpers are the edge where
rendered lines leave the process.
"""

import sys
from typing import Any, Optional, TextIO

from rich.console import Console

from .table_formatter import Table, TableFormatter


def print_table(rows: Table, console: Optional[Console] = None, **format_kwargs: Any) -> None:
    """Render rows and print them to a rich Console.

    Cell text is written verbatim: rich markup, emoji codes and
    highlighting are disabled so cell contents are not restyled.

    Args:
        rows: Table rows of str cells.
        console: Target console; a new Console() is created if omitted.
        **format_kwargs: padding / width_fn passed to TableFormatter.
    """
    text = TableFormatter(**format_kwargs).format(rows)
    if console is None:
        console = Console(highlight=False)
    console.print(text, end="", markup=False, emoji=False, highlight=False, soft_wrap=True)


def write_table(rows: Table, stream: Optional[TextIO] = None, **format_kwargs: Any) -> int:
    """Render rows and write each line to a text stream.

    Args:
        rows: Table rows of str cells.
        stream: Destination; defaults to sys.stdout.
        **format_kwargs: padding / width_fn passed to TableFormatter.

    Returns:
        Number of lines written.
    """
    if stream is None:
        stream = sys.stdout
    count = 0
    for line in TableFormatter(**format_kwargs).iter_lines(rows):
        stream.write(line)
        count += 1
    return count


__all__ = [
    'print_table',
    'write_table',
]
