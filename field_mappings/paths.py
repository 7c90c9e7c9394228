# ==============================================
# Path Patterns
# ==============================================
#
# PURPOSE:
#   Everything that understands the shape of a data field key lives
#   here, so callers never build regexes themselves.
#
#   Keys are dotted paths with optional bracketed indices:
#     "client.first_name"
#     "client.household_members[2].first_name"   (concrete)
#     "client.household_members[*].first_name"   (template)
#
# CLASSES:
# --------
# - PathPattern (abstract)
#     matches(key) -> bool
#     index_of(key) -> int | None     first bracketed integer of a concrete key
#     signature -> str                every bracket group rewritten to [*]
#
# - RegexPathPattern(PathPattern)
#     Rewrites each "[*]" or "[N]" in the template into a pattern that
#     matches brackets holding one or more digits, anchored at both ends.
#
# FUNCTIONS:
# ----------
# - path_signature(key) -> str
# - compile_pattern(template) -> PathPattern
# - split_path(path) -> list[str | int]
# - get_nested_value(data, path) -> Any     None on any miss
#
# ==============================================

import re
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Union

BRACKET_RE = re.compile(r"\[(\*|\d+)\]")
INDEX_RE = re.compile(r"\[(\d+)\]")
_SEGMENT_RE = re.compile(r"([^.\[\]]+)|\[(\d+)\]")


def path_signature(key: str) -> str:
    """Normalize a key so that every template or concrete index reads `[*]`."""
    return BRACKET_RE.sub("[*]", key)


class PathPattern(ABC):
    """Matches concrete data field keys against one template key."""

    def __init__(self, template: str):
        self.template = template

    @property
    def signature(self) -> str:
        return path_signature(self.template)

    @abstractmethod
    def matches(self, key: str) -> bool:
        ...

    def index_of(self, key: str) -> Optional[int]:
        m = INDEX_RE.search(key)
        return int(m.group(1)) if m else None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.template!r})"


class RegexPathPattern(PathPattern):

    def __init__(self, template: str):
        super().__init__(template)
        parts = BRACKET_RE.split(template)
        # split() with one capture group alternates literal text and bracket contents
        literal = [re.escape(p) if i % 2 == 0 else r"\[\d+\]" for i, p in enumerate(parts)]
        self._regex = re.compile("^" + "".join(literal) + "$")

    def matches(self, key: str) -> bool:
        return bool(self._regex.match(key or ""))


def compile_pattern(template: str) -> PathPattern:
    return RegexPathPattern(template)


def split_path(path: str) -> List[Union[str, int]]:
    """
    Split "a.b[2].c" into ["a", "b", 2, "c"]. Purely numeric dotted
    segments ("a.0.c") are kept as strings and handled by the reader.
    """
    segments: List[Union[str, int]] = []
    for name, index in _SEGMENT_RE.findall(path or ""):
        if index:
            segments.append(int(index))
        else:
            segments.append(name)
    return segments


def get_nested_value(data: Any, path: str) -> Any:
    """
    Read a value from a nested document using dot / bracket notation.

    Returns None when any step is missing or of the wrong shape; never raises.
    """
    if not path:
        return None
    current = data
    for segment in split_path(path):
        if current is None:
            return None
        if isinstance(current, dict):
            current = current.get(segment if isinstance(segment, str) else str(segment))
        elif isinstance(current, (list, tuple)):
            try:
                idx = int(segment)
            except (TypeError, ValueError):
                return None
            if idx < 0 or idx >= len(current):
                return None
            current = current[idx]
        else:
            return None
    return current
