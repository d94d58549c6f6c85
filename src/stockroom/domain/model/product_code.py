"""Product code rules.

A product code is 16 alphanumerics in four hyphen-separated groups,
e.g. ``A12T-4GH7-QPL9-3N4M``.  Codes are stored exactly as supplied and
compared case-insensitively; every comparison in the codebase goes
through ``normalize`` so lookup, duplicate detection and deletion agree.
"""

from __future__ import annotations

import re

CODE_PATTERN = re.compile(r"[A-Za-z0-9]{4}(?:-[A-Za-z0-9]{4}){3}")


def normalize(key: str) -> str:
    """Fold *key* to a single case for comparison only."""
    return key.casefold()


def is_valid_code(code: str) -> bool:
    return CODE_PATTERN.fullmatch(code) is not None


def same_key(left: str, right: str) -> bool:
    return normalize(left) == normalize(right)
