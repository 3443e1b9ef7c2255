"""Filesystem helpers: unique temp paths, forced removal, existence checks."""

import logging
import os
import secrets
import tempfile
from typing import Optional

from .config import load_config
from .errors import FileOperationError
from .lang_utils import append_if

logger = logging.getLogger(__name__)


def _tmp_root(tmp_dir: Optional[str] = None) -> str:
    return tmp_dir or load_config().tmp_dir or tempfile.gettempdir()


def temp_path(prefix: str, extension: str = "", tmp_dir: Optional[str] = None) -> str:
    """Return a unique, not yet created path in the temp directory.

    The name is ``{prefix}-{random}`` where random is 16 bytes of
    URL-safe base64 without padding. ``.{extension}`` is appended only
    when extension is non-empty.

    Args:
        prefix: Leading part of the file name.
        extension: Optional extension, without the dot.
        tmp_dir: Directory override; defaults to GEARS_TMPDIR or the
            system temp directory.

    Returns:
        The generated path. Nothing is created on disk.
    """
    random = secrets.token_urlsafe(16)
    path = os.path.join(_tmp_root(tmp_dir), f"{prefix}-{random}")
    return append_if(path, bool(extension), lambda: f".{extension}")


def temp_dir(prefix: str, tmp_dir: Optional[str] = None) -> str:
    """Create a new directory under the temp directory and return its path."""
    path = temp_path(prefix, tmp_dir=tmp_dir)
    os.makedirs(path, exist_ok=True)
    logger.debug("Created temp dir %s", path)
    return path


def rm_f(path: str) -> None:
    """Remove a file or an empty directory, ignoring a missing path.

    The parent directories must exist in any case.

    Raises:
        FileOperationError: If removal fails for any reason other than
            the path not existing (e.g. a non-empty directory, or
            missing permissions).
    """
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.unlink(path)
    except FileNotFoundError:
        return
    except OSError as e:
        raise FileOperationError(
            "rm", os.fspath(path), e.strerror, errno_code=e.errno
        ) from e
    logger.debug("Removed %s", path)


def exists(path: str) -> bool:
    """Return True if anything exists at path, including a dangling symlink."""
    try:
        os.lstat(path)
    except FileNotFoundError:
        return False
    except NotADirectoryError:
        return False
    return True


def is_symlink(path: str) -> bool:
    return os.path.islink(path)


def is_dangling_symlink(path: str) -> bool:
    """Return True if path is a symlink whose target does not exist."""
    return os.path.islink(path) and not os.path.exists(path)


__all__ = [
    'exists',
    'is_dangling_symlink',
    'is_symlink',
    'rm_f',
    'temp_dir',
    'temp_path',
]
