"""Fixed-width text table rendering.

Lays out rows of string cells in aligned columns. Column widths come from
a pluggable width function, so styled (ANSI) or double-width text can be
aligned by what it looks like on screen rather than by len(). The last
cell of every row is never padded, which lets trailing free text such as
descriptions run on without trailing whitespace.

Usage:
    from gears.table_formatter import TableFormatter, format_table

    text = format_table([["name", "size"], ["a.txt", "12"]])

    formatter = TableFormatter(padding=2, width_fn=terminal_width)
    for line in formatter.iter_lines(rows):
        stream.write(line)
"""

import collections.abc
import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from .config import load_config
from .display_width import WidthFunction, get_width_function
from .errors import InvalidCellType, InvalidWidth

logger = logging.getLogger(__name__)

Row = Sequence[str]
Table = Sequence[Row]


def _default_padding() -> int:
    return load_config().padding


def _default_width_fn() -> WidthFunction:
    return get_width_function(load_config().width_mode)


@dataclass
class TableOptions:
    """Options for TableFormatter.

    Attributes:
        padding: Spaces added after every non-last cell on top of the
            column alignment (default: GEARS_TABLE_PADDING, or 1).
        width_fn: Measures a cell's on-screen width (default: the function
            named by GEARS_TABLE_WIDTH, or char_count).
    """
    padding: int = field(default_factory=_default_padding)
    width_fn: WidthFunction = field(default_factory=_default_width_fn)


class TableFormatter:
    """Renders tables of string cells as aligned, newline-terminated lines.

    Output is one line per input row. Every cell except the last in its
    row is followed by ``column_width - width_fn(cell) + padding`` spaces.
    Ragged rows are right-padded with empty cells before columns are
    measured.

    All cells are validated before anything is measured or emitted, so
    invalid input raises InvalidCellType without producing partial output.
    """

    def __init__(
        self,
        options: Optional[TableOptions] = None,
        *,
        padding: Optional[int] = None,
        width_fn: Optional[WidthFunction] = None,
    ):
        self._options = options or TableOptions()
        self._padding = padding if padding is not None else self._options.padding
        self._width_fn = width_fn if width_fn is not None else self._options.width_fn

        if isinstance(self._padding, bool) or not isinstance(self._padding, int):
            raise ValueError(f"padding must be an int, got {self._padding!r}")
        if self._padding < 0:
            raise ValueError(f"padding must be non-negative, got {self._padding}")
        if not callable(self._width_fn):
            raise TypeError(f"width_fn must be callable, got {self._width_fn!r}")

    @property
    def padding(self) -> int:
        return self._padding

    @property
    def width_fn(self) -> WidthFunction:
        return self._width_fn

    def format(self, rows: Table) -> str:
        """Format rows into a single string.

        Args:
            rows: Sequence of rows, each a sequence of str cells.

        Returns:
            The rendered table, one "\\n"-terminated line per row; "" for
            an empty table.

        Raises:
            InvalidCellType: If any cell is not a str.
            InvalidWidth: If width_fn returns a negative or non-int value.
        """
        return "".join(self.iter_lines(rows))

    def iter_lines(self, rows: Table) -> Iterator[str]:
        """Format rows, returning an iterator of "\\n"-terminated lines.

        Validation and measurement happen eagerly, before the iterator is
        returned, so a failure never leaves the caller with partial output.
        """
        return iter(self._render(rows))

    def _render(self, rows: Table) -> List[str]:
        # rows may be a one-shot iterable; it is read twice below
        rows = list(rows)
        self._validate_rows(rows)
        normalized = self._normalize(rows)
        self._validate(normalized)
        widths = self._column_widths(normalized)

        logger.debug(
            "Formatting table: %d rows, %d columns, widths=%s, padding=%d",
            len(normalized), len(widths), widths, self._padding,
        )

        return [self._render_row(row, widths) for row in normalized]

    @staticmethod
    def _validate_rows(rows: List[Row]) -> None:
        """Reject rows that are not sequences of cells.

        A bare str or bytes row would otherwise be split into one cell
        per character.
        """
        for row_idx, row in enumerate(rows):
            if (isinstance(row, (str, bytes, bytearray))
                    or not isinstance(row, collections.abc.Sequence)):
                logger.debug(
                    "Rejecting table: row %d is %s, not a sequence of cells",
                    row_idx, type(row).__name__,
                )
                raise InvalidCellType(row_idx, None, row)

    @staticmethod
    def _normalize(rows: Table) -> List[List[str]]:
        """Right-pad ragged rows with empty cells to the widest row."""
        max_cols = max((len(row) for row in rows), default=0)
        return [list(row) + [""] * (max_cols - len(row)) for row in rows]

    @staticmethod
    def _validate(rows: List[List[str]]) -> None:
        for row_idx, row in enumerate(rows):
            for col_idx, cell in enumerate(row):
                if not isinstance(cell, str):
                    logger.debug(
                        "Rejecting table: cell (%d, %d) is %s",
                        row_idx, col_idx, type(cell).__name__,
                    )
                    raise InvalidCellType(row_idx, col_idx, cell)

    def _measure(self, cell: str) -> int:
        width = self._width_fn(cell)
        if isinstance(width, bool) or not isinstance(width, int) or width < 0:
            raise InvalidWidth(cell, width)
        return width

    def _column_widths(self, rows: List[List[str]]) -> List[int]:
        """Compute the widest cell of each column."""
        if not rows:
            return []
        return [max(self._measure(cell) for cell in column) for column in zip(*rows)]

    def _render_row(self, row: List[str], widths: List[int]) -> str:
        parts = []
        last = len(row) - 1
        for col_idx, cell in enumerate(row):
            if col_idx == last:
                parts.append(cell)
            else:
                # Clamped in case width_fn disagrees with its earlier answer
                pad = max(0, widths[col_idx] - self._measure(cell) + self._padding)
                parts.append(cell + " " * pad)
        parts.append("\n")
        return "".join(parts)


def format_table(
    rows: Table,
    padding: Optional[int] = None,
    width_fn: Optional[WidthFunction] = None,
) -> str:
    """Format rows with a one-off TableFormatter.

    Args:
        rows: Sequence of rows, each a sequence of str cells.
        padding: Spaces after each non-last cell (default from config).
        width_fn: Width function (default from config).

    Returns:
        The rendered table.
    """
    return TableFormatter(padding=padding, width_fn=width_fn).format(rows)


__all__ = [
    'Row',
    'Table',
    'TableFormatter',
    'TableOptions',
    'format_table',
]
