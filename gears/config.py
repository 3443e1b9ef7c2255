"""Environment-driven defaults for the gears utilities.

Usage:
    from gears.config import load_config

    config = load_config()
    config.padding       # default table padding
    config.width_mode    # "chars" | "cjk" | "terminal" | "styled" | "ansi"

Environment Variables:
    GEARS_TABLE_PADDING: Default inter-column padding (default: 1)
    GEARS_TABLE_WIDTH: Name of the default width function (default: chars)
    GEARS_TMPDIR: Directory used by temp_path/temp_dir (default: system temp dir)
"""

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from .display_width import WIDTH_FUNCTIONS

logger = logging.getLogger(__name__)

DEFAULT_PADDING = 1
DEFAULT_WIDTH_MODE = "chars"


def _padding_from_env() -> int:
    raw = os.environ.get("GEARS_TABLE_PADDING")
    if raw is None or raw.strip() == "":
        return DEFAULT_PADDING
    try:
        value = int(raw)
    except ValueError:
        logger.warning(
            "Ignoring GEARS_TABLE_PADDING=%r (not an integer), using %d",
            raw, DEFAULT_PADDING,
        )
        return DEFAULT_PADDING
    if value < 0:
        logger.warning(
            "Ignoring GEARS_TABLE_PADDING=%r (negative), using %d",
            raw, DEFAULT_PADDING,
        )
        return DEFAULT_PADDING
    return value


def _width_mode_from_env() -> str:
    raw = os.environ.get("GEARS_TABLE_WIDTH", "").strip().lower()
    if not raw:
        return DEFAULT_WIDTH_MODE
    if raw not in WIDTH_FUNCTIONS:
        logger.warning(
            "Unknown GEARS_TABLE_WIDTH=%r, using %r (valid: %s)",
            raw, DEFAULT_WIDTH_MODE, ", ".join(sorted(WIDTH_FUNCTIONS)),
        )
        return DEFAULT_WIDTH_MODE
    return raw


def _tmp_dir_from_env() -> Optional[str]:
    return os.environ.get("GEARS_TMPDIR") or None


@dataclass
class GearsConfig:
    """Defaults shared by the table formatter and the file helpers."""
    padding: int = field(default_factory=_padding_from_env)
    width_mode: str = field(default_factory=_width_mode_from_env)
    tmp_dir: Optional[str] = field(default_factory=_tmp_dir_from_env)


def load_config() -> GearsConfig:
    """Read a fresh GearsConfig from the environment."""
    return GearsConfig()


__all__ = [
    'DEFAULT_PADDING',
    'DEFAULT_WIDTH_MODE',
    'GearsConfig',
    'load_config',
]
