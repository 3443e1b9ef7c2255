"""Width functions for measuring table cells.

A width function maps a string to a non-negative int. The table formatter
uses one to decide how much padding a cell needs, so swapping it changes
how styled or wide text lines up:

- char_count: one unit per character (the default)
- half_width_length: Han ideographs make the whole string double-width
- terminal_width: per-character wcwidth, for real terminal columns
- styled_width: ANSI-aware terminal width via rich
- ansi_stripped_length: character count after removing escape sequences
"""

import re
from typing import Callable, Dict

import wcwidth
from rich.text import Text

from .string_utils import strip_ansi

WidthFunction = Callable[[str], int]

# Han ideograph blocks: CJK Unified Ideographs, Extension A, Compatibility
# Ideographs, Extensions B-F, Compatibility Supplement and Extension G.
_HAN_PATTERN = re.compile(
    '['
    '\u3400-\u4dbf'
    '\u4e00-\u9fff'
    '\uf900-\ufaff'
    '\U00020000-\U0002ebef'
    '\U0002f800-\U0002fa1f'
    '\U00030000-\U0003134f'
    ']'
)


def char_count(text: str) -> int:
    """Count one unit per character."""
    return len(text)


def contains_cjk(text: str) -> bool:
    """Return True if text contains any Han ideograph."""
    return _HAN_PATTERN.search(text) is not None


def half_width_length(text: str) -> int:
    """Approximate display width, treating Han text as double-width.

    The whole string is assumed to be uniformly single- or double-width:
    if any Han ideograph is present, every character counts as 2. Strings
    that mix Han with Latin text are over-measured. Combining marks,
    emoji and other wide scripts are not handled; use terminal_width
    when that matters.

    Args:
        text: The string to measure.

    Returns:
        len(text) * 2 if text contains Han ideographs, else len(text).
    """
    if contains_cjk(text):
        return len(text) * 2
    return len(text)


def terminal_width(text: str) -> int:
    """Sum the terminal columns of each character.

    Unlike half_width_length, every character is judged on its own, so
    text mixing Latin with CJK or emoji is measured correctly. Control
    characters, which wcwidth reports as -1, add nothing.
    """
    return sum(max(wcwidth.wcwidth(char), 0) for char in text)


def styled_width(text: str) -> int:
    """Terminal width of text that may carry ANSI styling.

    Any escape sequence, CSI styling or OSC 8 hyperlink alike, is decoded
    by rich so only the visible text is counted.
    """
    if '\x1b' in text:
        return Text.from_ansi(text).cell_len
    return terminal_width(text)


def ansi_stripped_length(text: str) -> int:
    """Character count of text with ANSI escape sequences removed."""
    return len(strip_ansi(text))


WIDTH_FUNCTIONS: Dict[str, WidthFunction] = {
    "chars": char_count,
    "cjk": half_width_length,
    "terminal": terminal_width,
    "styled": styled_width,
    "ansi": ansi_stripped_length,
}


def get_width_function(name: str) -> WidthFunction:
    """Look up a width function by its short name.

    Raises:
        ValueError: If name is not one of WIDTH_FUNCTIONS.
    """
    try:
        return WIDTH_FUNCTIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown width function {name!r}. "
            f"Valid: {', '.join(sorted(WIDTH_FUNCTIONS))}"
        ) from None


__all__ = [
    'WIDTH_FUNCTIONS',
    'WidthFunction',
    'ansi_stripped_length',
    'char_count',
    'contains_cjk',
    'get_width_function',
    'half_width_length',
    'styled_width',
    'terminal_width',
]
