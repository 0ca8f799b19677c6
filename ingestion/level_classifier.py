"""
Cognitive Level Classifier: runs when questions are added to the bank

Scores question text against weighted keyword lists to pick a Bloom's level
(L1 Remember … L6 Create). Pure keyword matching, no NLP:

  - primary keyword hit:   +3 to that level
  - secondary keyword hit: +1 to that level
  - compound bonuses for phrasings that point strongly at one level
  - highest score wins; ties go to the lower level
  - no hits at all → question-word / punctuation fallback (default L2)

confidence() uses its own 0–100 scale (30 per primary, 15 per secondary hit
on the chosen level) and is only meant for display next to the detected level.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from generation.schemas import CognitiveLevel

PRIMARY_WEIGHT = 3
SECONDARY_WEIGHT = 1

CONFIDENCE_PRIMARY = 30
CONFIDENCE_SECONDARY = 15
CONFIDENCE_MAX = 100


@dataclass(frozen=True)
class LevelKeywords:
    """Keyword lists for one cognitive level."""
    primary: Tuple[str, ...]
    secondary: Tuple[str, ...]


# ── Keyword table (iteration order L1 → L6 decides ties) ──────────────────────
LEVEL_KEYWORDS: Mapping[CognitiveLevel, LevelKeywords] = MappingProxyType({
    CognitiveLevel.L1: LevelKeywords(
        primary=("define", "list", "name", "state", "recall", "identify", "what is"),
        secondary=("who", "when", "where", "recognize", "label", "outline", "mention"),
    ),
    CognitiveLevel.L2: LevelKeywords(
        primary=("explain", "describe", "discuss", "summarize", "interpret"),
        secondary=("illustrate", "classify", "give an account", "understand",
                   "with example", "paraphrase"),
    ),
    CognitiveLevel.L3: LevelKeywords(
        primary=("calculate", "solve", "apply", "implement", "demonstrate", "compute"),
        secondary=("use", "show", "find", "determine", "make use of", "derive"),
    ),
    CognitiveLevel.L4: LevelKeywords(
        primary=("analyze", "analyse", "compare", "contrast", "distinguish",
                 "differentiate", "examine"),
        secondary=("investigate", "break down", "categorize", "relationship", "inspect"),
    ),
    CognitiveLevel.L5: LevelKeywords(
        primary=("evaluate", "assess", "judge", "critique", "justify"),
        secondary=("recommend", "conclude", "defend", "prioritize", "argue", "validate"),
    ),
    CognitiveLevel.L6: LevelKeywords(
        primary=("design", "create", "develop", "construct", "formulate"),
        secondary=("generate", "produce", "invent", "propose", "compose", "plan",
                   "draw", "sketch"),
    ),
})

DEFAULT_LEVEL = CognitiveLevel.L2


def _keyword_score(text: str, keywords: LevelKeywords) -> int:
    # Containment test per keyword: repeats of one keyword count once
    score = sum(PRIMARY_WEIGHT for kw in keywords.primary if kw in text)
    score += sum(SECONDARY_WEIGHT for kw in keywords.secondary if kw in text)
    return score


def _compound_bonus(text: str, level: CognitiveLevel) -> int:
    if level == CognitiveLevel.L2 and "define" in text and "with example" in text:
        return 2
    if level == CognitiveLevel.L3 and any(p in text for p in ("calculate", "find the", "solve for")):
        return 3
    if level == CognitiveLevel.L4 and "compare" in text and "contrast" in text:
        return 2
    if level == CognitiveLevel.L6 and any(p in text for p in ("design", "create", "develop")):
        return 3
    return 0


def _fallback_level(text: str) -> CognitiveLevel:
    stripped = text.strip()
    if stripped.startswith(("what", "who", "when")):
        return CognitiveLevel.L1
    if stripped.startswith(("how", "why")):
        return CognitiveLevel.L2
    return DEFAULT_LEVEL


def score_levels(text: str) -> Mapping[CognitiveLevel, int]:
    """Weighted score per level, bonuses included."""
    lowered = (text or "").lower()
    return {
        level: _keyword_score(lowered, keywords) + _compound_bonus(lowered, level)
        for level, keywords in LEVEL_KEYWORDS.items()
    }


def classify(text: str) -> CognitiveLevel:
    """
    Infer the cognitive level of a question.

    Args:
        text: Question text as typed by the instructor

    Returns:
        Level with the strictly highest score, first level on ties,
        fallback heuristic when nothing matched.
    """
    scores = score_levels(text)
    best_level, best_score = DEFAULT_LEVEL, 0
    for level, score in scores.items():
        if score > best_score:
            best_level, best_score = level, score

    if best_score == 0:
        return _fallback_level((text or "").lower())
    return best_level


def confidence(text: str, level: CognitiveLevel) -> int:
    """Display confidence (0–100) that `text` belongs to `level`."""
    lowered = (text or "").lower()
    keywords = LEVEL_KEYWORDS[level]
    value = sum(CONFIDENCE_PRIMARY for kw in keywords.primary if kw in lowered)
    value += sum(CONFIDENCE_SECONDARY for kw in keywords.secondary if kw in lowered)
    return min(value, CONFIDENCE_MAX)
