"""Exception types for the gears utilities.

All gears exceptions derive from GearsError. Where a standard library
exception already describes the failure, the gears type also inherits
from it so callers can catch either.
"""

from typing import Any, Optional


class GearsError(Exception):
    """Base class for gears errors."""
    pass


class InvalidCellType(GearsError, TypeError):
    """A table cell was not a string, or a row was not a sequence of cells.

    Raised by the table formatter during validation, before any output
    is produced. column is None when the whole row was rejected.
    """

    def __init__(self, row: int, column: Optional[int], value: Any):
        self.row = row
        self.column = column
        self.value_type = type(value)
        if column is None:
            where = f"row {row} is {self.value_type.__name__}, not a sequence of cells"
        else:
            where = f"row {row}, column {column} is {self.value_type.__name__}"
        super().__init__(
            f"TableFormatter requires all cells to be str; {where}: {value!r}"
        )


class InvalidWidth(GearsError, ValueError):
    """A width function returned something other than a non-negative int."""

    def __init__(self, cell: str, width: Any):
        self.cell = cell
        self.width = width
        super().__init__(
            f"width function must return a non-negative int; "
            f"got {width!r} for cell {cell!r}"
        )


class FileOperationError(GearsError, OSError):
    """A filesystem operation failed for a reason other than a missing path.

    Attributes:
        action: Short name of the operation (e.g. "rm").
        path: The path the operation was applied to.
        reason: Human-readable reason, usually the OS strerror.
    """

    def __init__(self, action: str, path: str, reason: Optional[str] = None,
                 errno_code: Optional[int] = None):
        self.action = action
        self.path = path
        self.reason = reason or "unknown error"
        super().__init__(errno_code, f"could not {action} {path}: {self.reason}")

    def __str__(self) -> str:
        return f"could not {self.action} {self.path}: {self.reason}"


class ResultError(GearsError):
    """Raised by ok_or_raise for an Err whose descriptor is not an exception."""

    def __init__(self, error: Any):
        self.error = error
        super().__init__(f"result was an error: {error!r}")
