"""Technique catalog and its query functions.

The catalog is loaded once at import and never changes afterwards, so every
function here is a plain read over the same tuple. Results keep declaration
order.
"""

import json
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .models import Category, Difficulty, Position, Technique
from .techniques_data import all_techniques

logger = logging.getLogger(__name__)

ALL = "all"


def load_techniques(data: dict) -> tuple[Technique, ...]:
    records = []
    for category_id, category_data in data.items():
        for technique_id, raw in category_data["items"].items():
            records.append(Technique.from_dict(technique_id, category_id, raw))
    return tuple(records)


TECHNIQUES = load_techniques(all_techniques)

# first occurrence wins if an id is ever declared twice
_by_id = {}
for _technique in TECHNIQUES:
    _by_id.setdefault(_technique.id, _technique)


@dataclass(frozen=True)
class CatalogStats:
    total: int
    by_category: dict = field(default_factory=dict)
    by_difficulty: dict = field(default_factory=dict)


@dataclass(frozen=True)
class CatalogIssue:
    kind: str
    technique_id: str
    detail: str


def get_techniques_by_category(category) -> list[Technique]:
    return [t for t in TECHNIQUES if t.category == category]


def get_techniques_by_difficulty(difficulty) -> list[Technique]:
    return [t for t in TECHNIQUES if t.difficulty == difficulty]


def get_techniques_by_position(position) -> list[Technique]:
    """Techniques that start or end in the given position."""
    return [
        t for t in TECHNIQUES
        if (t.starting_position is not None and t.starting_position == position)
        or (t.ending_position is not None and t.ending_position == position)
    ]


def _matches(technique: Technique, lowered_query: str) -> bool:
    return any(lowered_query in text.lower() for text in technique.search_fields())


def search_techniques(query: str, techniques: Optional[Iterable[Technique]] = None) -> list[Technique]:
    """Case-insensitive substring search over name, description, aliases and key points.

    An empty query matches every technique.
    """
    pool = TECHNIQUES if techniques is None else techniques
    lowered = query.lower()
    return [t for t in pool if _matches(t, lowered)]


def get_technique_by_id(technique_id: str) -> Optional[Technique]:
    return _by_id.get(technique_id)


def get_stats(techniques: Optional[Iterable[Technique]] = None) -> CatalogStats:
    pool = TECHNIQUES if techniques is None else tuple(techniques)
    by_category = Counter(t.category.value for t in pool)
    by_difficulty = Counter(t.difficulty.value for t in pool)
    return CatalogStats(
        total=len(pool),
        by_category=dict(by_category),
        by_difficulty=dict(by_difficulty),
    )


def filter_techniques(query: Optional[str] = None, category=ALL, difficulty=ALL,
                      techniques: Optional[Iterable[Technique]] = None) -> list[Technique]:
    """Combine search, category and difficulty filters with AND.

    A missing or empty query and the value "all" skip their filter.
    """
    results = list(TECHNIQUES if techniques is None else techniques)

    if query:
        results = search_techniques(query, results)

    if category != ALL:
        results = [t for t in results if t.category == category]

    if difficulty != ALL:
        results = [t for t in results if t.difficulty == difficulty]

    return results


def group_by_category(techniques: Iterable[Technique]) -> list[tuple[Category, list[Technique]]]:
    """Bucket techniques by category in Category declaration order, skipping empty buckets."""
    buckets = {category: [] for category in Category}
    for technique in techniques:
        buckets[technique.category].append(technique)
    return [(category, items) for category, items in buckets.items() if items]


def get_related_techniques(technique: Technique) -> list[Technique]:
    related = []
    for related_id in technique.related_techniques or ():
        found = get_technique_by_id(related_id)
        if found is None:
            logger.debug("technique %s references unknown id %s", technique.id, related_id)
            continue
        related.append(found)
    return related


def validate_catalog(techniques: Iterable[Technique] = TECHNIQUES) -> list[CatalogIssue]:
    """Report duplicate ids and related-technique references that do not resolve."""
    techniques = tuple(techniques)
    issues = []

    seen = set()
    for technique in techniques:
        if technique.id in seen:
            issues.append(CatalogIssue("duplicate-id", technique.id, "id declared more than once"))
        seen.add(technique.id)

    for technique in techniques:
        for related_id in technique.related_techniques or ():
            if related_id not in seen:
                issues.append(CatalogIssue(
                    "dangling-reference",
                    technique.id,
                    f"related technique {related_id!r} does not exist",
                ))

    return issues


def export_catalog(techniques: Optional[Iterable[Technique]] = None) -> str:
    pool = TECHNIQUES if techniques is None else techniques
    return json.dumps([t.to_dict() for t in pool], indent=2, ensure_ascii=False)


def parse_category(value: str) -> Optional[Category]:
    try:
        return Category(value)
    except ValueError:
        return None


def parse_difficulty(value: str) -> Optional[Difficulty]:
    try:
        return Difficulty(value)
    except ValueError:
        return None


def parse_position(value: str) -> Optional[Position]:
    try:
        return Position(value)
    except ValueError:
        return None
