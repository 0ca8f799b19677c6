"""
Step 2: Balanced Selector

Draws questions from a pool without replacement.

Two modes:
  - per course outcome: uniform shuffle of the matching questions, take `count`
  - balanced: round-robin over course outcomes, one random pick per turn,
    then a final shuffle so the round-robin order does not show

Both work on private copies of the pool and degrade to fewer questions when
the pool runs short; the Availability Checker is the gate, not this module.
"""

import logging
import random
from typing import Dict, List, Sequence, TypeVar

from generation.schemas import Question

log = logging.getLogger("generation.pipeline")

T = TypeVar("T")


def _random_index(n: int) -> int:
    """Uniform index in [0, n): floor(random() * n)."""
    return int(random.random() * n)


def shuffle(items: Sequence[T]) -> List[T]:
    """Fisher–Yates shuffle. Returns a new list; `items` is untouched."""
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = _random_index(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def _eligible(
    pool: Sequence[Question], marks: int, include_alternatives: bool
) -> List[Question]:
    return [
        q for q in pool
        if q.marks == marks and (include_alternatives or not q.is_alternative)
    ]


def select_for_outcome(
    pool: Sequence[Question],
    course_outcome: str,
    marks: int,
    count: int,
    include_alternatives: bool = True,
) -> List[Question]:
    """
    Pick `count` random questions of one course outcome and mark-value.

    Returns fewer than `count` if the pool is short. The result is not
    shuffled again here; the assembler shuffles per mark-value.
    """
    if count <= 0:
        return []
    candidates = [
        q for q in _eligible(pool, marks, include_alternatives)
        if q.course_outcome == course_outcome
    ]
    picked = shuffle(candidates)[:count]
    if len(picked) < count:
        log.warning(
            f"[SELECT] {course_outcome}/{marks}m: wanted {count}, only {len(picked)} available"
        )
    return picked


def select_balanced(
    pool: Sequence[Question],
    marks: int,
    count: int,
    include_alternatives: bool = True,
) -> List[Question]:
    """
    Pick `count` questions of one mark-value spread across course outcomes.

    Turn i goes to outcome i mod len(outcomes) (first-seen order). An outcome
    that has run dry forfeits its turn; no other outcome fills in, so the
    result can be shorter than `count`.
    """
    if count <= 0:
        return []

    by_outcome: Dict[str, List[Question]] = {}
    for q in _eligible(pool, marks, include_alternatives):
        by_outcome.setdefault(q.course_outcome, []).append(q)

    outcome_keys = list(by_outcome.keys())
    if not outcome_keys:
        return []

    selected: List[Question] = []
    for i in range(count):
        remaining = by_outcome[outcome_keys[i % len(outcome_keys)]]
        if remaining:
            selected.append(remaining.pop(_random_index(len(remaining))))

    if len(selected) < count:
        log.warning(f"[SELECT] balanced {marks}m: wanted {count}, picked {len(selected)}")
    return shuffle(selected)
