"""
passmeter.dictionary

Loads the list of known common passwords from a headerless CSV file.
The password is taken from the second column of each row; the first
column (a rank in the bundled list) is ignored.
"""

import csv
import logging
import os
from typing import FrozenSet, Optional

from .errors import DictionaryLoadError

logger = logging.getLogger(__name__)

PASSWORD_COLUMN = 1


def bundled_path() -> str:
    """Path of the common-password list shipped with the package."""
    return os.path.join(os.path.dirname(__file__), "data", "common-passwords.csv")


def load_common_passwords(source: Optional[str] = None, column: int = PASSWORD_COLUMN) -> FrozenSet[str]:
    """
    Read `source` row by row and return the set of trimmed, non-empty
    passwords found in `column`.

    Raises DictionaryLoadError if the file cannot be opened, decoded or parsed.
    """
    path = source or bundled_path()
    logger.info("Loading common passwords from %s", path)
    passwords = set()
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            for row in csv.reader(f):
                if len(row) <= column:
                    continue
                pw = row[column].strip()
                if pw:
                    passwords.add(pw)
    except (OSError, csv.Error, UnicodeDecodeError) as e:
        logger.error("Failed to load common passwords from %s: %s", path, e)
        raise DictionaryLoadError(f"cannot load common passwords from {path}: {e}") from e

    logger.info("%d common passwords loaded", len(passwords))
    return frozenset(passwords)
