"""Read the CREATE TABLE statement and the prefix/suffix boilerplate files.

The boilerplate files are looked up in the current working directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PREFIX_PATH = Path("prefix")
SUFFIX_PATH = Path("suffix")


def load_statement(path: Path | str) -> str:
    """Load the statement text from disk.

    OSError and UnicodeDecodeError (non UTF-8 input) propagate to the caller.
    """
    with open(path, encoding="utf-8") as f:
        return f.read()


def load_boilerplate(path: Path | str) -> str:
    """Load a boilerplate file, substituting "" when it cannot be read."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read boilerplate file %s: %s", path, e)
        return ""


def load_prefix(path: Path | None = None) -> str:
    return load_boilerplate(path or PREFIX_PATH)


def load_suffix(path: Path | None = None) -> str:
    return load_boilerplate(path or SUFFIX_PATH)
