# ==============================================
# ResolutionDiagnostics
# ==============================================
#
# PURPOSE:
#   The resolvers never raise on unmatched or orphaned entities; they
#   degrade to None / [] / "drop it". This collector is where those
#   silent outcomes are counted so a caller can still see them.
#
# EVENTS:
# -------
# - field_not_found        → no exact or template definition for a key
# - orphaned_group         → group's parent is not a top-level group
# - unresolved_collection  → template pattern with no collection binding
#
# A collector is optional everywhere; passing one never changes
# what a resolver returns. Every event is also logged at DEBUG.
#
# ==============================================

from collections import Counter, deque
from typing import Any, Deque, Dict, List, Optional

from field_mappings.logging_utils import create_logger

logger = create_logger(__name__)

FIELD_NOT_FOUND = "field_not_found"
ORPHANED_GROUP = "orphaned_group"
UNRESOLVED_COLLECTION = "unresolved_collection"


class ResolutionDiagnostics:
    """Counts degrade-gracefully events by kind and remembers the latest subjects."""

    def __init__(self, max_subjects: int = 20):
        self.max_subjects = max_subjects
        self.counts: Counter = Counter()
        self._recent: Dict[str, Deque[str]] = {}

    def record(self, kind: str, subject: str) -> None:
        self.counts[kind] += 1
        self._recent.setdefault(kind, deque(maxlen=self.max_subjects)).append(subject)

    def count(self, kind: str) -> int:
        return self.counts.get(kind, 0)

    def recent(self, kind: str) -> List[str]:
        return list(self._recent.get(kind, ()))

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def reset(self) -> None:
        self.counts.clear()
        self._recent.clear()

    def to_dict(self) -> Dict[str, Any]:
        return {
            kind: {"count": self.counts[kind], "recent": self.recent(kind)}
            for kind in sorted(self.counts)
        }


def emit(diagnostics: Optional[ResolutionDiagnostics], kind: str, subject: str) -> None:
    logger.debug(f"{kind}: {subject}")
    if diagnostics is not None:
        diagnostics.record(kind, subject)
