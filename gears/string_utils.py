"""String helpers: grep, ANSI stripping, pluralized counts and line editing."""

import re
from typing import List, Optional, Union

# CSI sequences (colors, cursor movement) and OSC sequences (titles,
# hyperlinks) terminated by BEL or ST.
_ANSI_ESCAPE_PATTERN = re.compile(
    r'\x1b\[[0-9;?]*[ -/]*[@-~]'
    r'|\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)'
)


def grep(text: str, pattern: Union[str, re.Pattern]) -> List[str]:
    """Return the lines of text that match pattern.

    Lines are split on "\\n" only, so a trailing newline produces a final
    empty line that a pattern like ``^$`` can match.

    Args:
        text: Text to search.
        pattern: Regex string or compiled pattern, matched with search().

    Returns:
        Matching lines in their original order.
    """
    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    return [line for line in text.split("\n") if regex.search(line)]


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    if not text or '\x1b' not in text:
        return text
    return _ANSI_ESCAPE_PATTERN.sub('', text)


def counted_noun(count: int, singular: str, plural: Optional[str] = None) -> str:
    """Format a count with the right noun form.

    Args:
        count: The number of things.
        singular: Noun used when count is exactly 1.
        plural: Noun used otherwise; defaults to singular + "s".

    Returns:
        A string like "1 file" or "3 files".
    """
    if count == 1:
        noun = singular
    else:
        noun = plural if plural is not None else singular + "s"
    return f"{count} {noun}"


def prefix_every_line(text: str, prefix: str) -> str:
    """Prepend prefix to each line, without prefixing after a final newline."""
    if not text:
        return text
    trailing = text.endswith("\n")
    body = text[:-1] if trailing else text
    out = "\n".join(prefix + line for line in body.split("\n"))
    return out + "\n" if trailing else out


def remove_empty_lines(text: str) -> str:
    # whitespace-only lines count as empty
    return "\n".join(line for line in text.split("\n") if line.strip())


__all__ = [
    'counted_noun',
    'grep',
    'prefix_every_line',
    'remove_empty_lines',
    'strip_ansi',
]
