"""
CO (Course Outcome) Mapper

Maps a course outcome label → display code.
Labels such as "CO3: Apply sorting" carry their own code; any other label is
coded by its position in the course outcome list: 1st → CO1, 2nd → CO2, etc.
"""

import re
from typing import Dict, Sequence

CO_PATTERN = re.compile(r"^(CO\d+)", re.IGNORECASE)


def resolve_co_code(label: str, outcomes: Sequence[str]) -> str:
    """
    Return the CO code for `label`, e.g. "CO3".

    Args:
        label: Course outcome label attached to a question
        outcomes: Ordered course outcome labels (defines positional codes)

    Returns:
        Explicit prefix uppercased, else CO<1-based position>. A label missing
        from `outcomes` gets position 0.
    """
    match = CO_PATTERN.match(label)
    if match:
        return match.group(1).upper()
    position = list(outcomes).index(label) + 1 if label in outcomes else 0
    return f"CO{position}"


def build_co_map(outcomes: Sequence[str]) -> Dict[str, str]:
    """Full label → CO code map, used by the frontend listing."""
    return {label: resolve_co_code(label, outcomes) for label in outcomes}
