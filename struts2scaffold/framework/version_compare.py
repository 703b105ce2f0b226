"""
Version-aware comparison of framework version strings.

Versions are split into numeric and alphabetic tokens. Numeric tokens compare
as integers, so "2.10" is newer than "2.9" and "2.1" equals "2.1.0".
Well-known qualifiers order as snapshot < milestone < eap/preview < alpha
< beta < rc < (release); "final", "ga" and "release" are ignored.

Example:
    >>> compare_versions("2.10", "2.1")
    1
    >>> compare_versions("2.1", "2.1.0")
    0
    >>> compare_versions("2.1.0-beta1", "2.1")
    -1
"""

from __future__ import annotations

import functools
import re
from typing import List, Tuple

_TOKEN_RE = re.compile(r"\d+|[a-z]+")

_QUALIFIER_PRIORITY = {
    "snap": 0,
    "snapshot": 0,
    "m": 1,
    "milestone": 1,
    "eap": 2,
    "pre": 2,
    "preview": 2,
    "alpha": 3,
    "a": 3,
    "beta": 4,
    "b": 4,
    "rc": 5,
    "cr": 5,
}

_IGNORED_WORDS = frozenset({"final", "ga", "release"})

# unknown words sort after known qualifiers but still before any number
_UNKNOWN_WORD_PRIORITY = 6

_PADDING: Tuple = (0, 0)


def _tokenize(version: str) -> List[Tuple]:
    tokens: List[Tuple] = []
    for raw in _TOKEN_RE.findall(version.strip().lower()):
        if raw.isdigit():
            tokens.append((0, int(raw)))
        elif raw in _IGNORED_WORDS:
            continue
        elif raw in _QUALIFIER_PRIORITY:
            tokens.append((-1, _QUALIFIER_PRIORITY[raw]))
        else:
            tokens.append((-1, _UNKNOWN_WORD_PRIORITY, raw))
    return tokens


def compare_versions(v1: str, v2: str) -> int:
    """
    Compare two version strings.

    Returns:
        -1 if v1 is older than v2, 0 if equal, 1 if newer
    """
    tokens1 = _tokenize(v1)
    tokens2 = _tokenize(v2)

    for i in range(max(len(tokens1), len(tokens2))):
        t1 = tokens1[i] if i < len(tokens1) else _PADDING
        t2 = tokens2[i] if i < len(tokens2) else _PADDING
        if t1 != t2:
            return 1 if t1 > t2 else -1
    return 0


def is_newer(version: str, than: str) -> bool:
    """True if ``version`` is strictly newer than ``than``."""
    return compare_versions(version, than) > 0


version_sort_key = functools.cmp_to_key(compare_versions)
