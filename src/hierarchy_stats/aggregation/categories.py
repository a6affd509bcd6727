"""Category ranking - the categories tagged on the most records."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable

from hierarchy_stats.errors import InvalidArgumentError
from hierarchy_stats.models.record import FileRecord

logger = logging.getLogger(__name__)


def count_categories(records: Iterable[FileRecord]) -> Counter[str]:
    """Count every category occurrence, repeats within a record included."""
    counts: Counter[str] = Counter()
    for record in records:
        counts.update(record.categories)
    return counts


def k_largest_categories(records: Iterable[FileRecord], k: int) -> list[str]:
    """Return the k most frequent categories, most frequent first.

    Equal counts are ordered by category name. When k exceeds the number of
    distinct categories, every category is returned.

    Raises:
        InvalidArgumentError: If k is negative or not an integer
    """
    if isinstance(k, bool) or not isinstance(k, int):
        raise InvalidArgumentError(f"k must be an integer, got {k!r}")
    if k < 0:
        raise InvalidArgumentError(f"k must be non-negative, got {k}")

    counts = count_categories(records)
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    if k > len(ranked):
        logger.debug("k=%d exceeds %d distinct categories, clamping", k, len(ranked))
    return [category for category, _ in ranked[:k]]
