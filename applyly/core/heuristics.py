"""
Ordered fallback chains for heuristic extraction.

Extractors list their candidate strategies (callables or regexes) in priority
order; the first one that yields a non-empty result wins.
"""

import re
from typing import Callable, Optional, Pattern, Sequence, TypeVar

T = TypeVar("T")


def first_result(strategies: Sequence[Callable[[T], str]], subject: T) -> str:
    """Run strategies on `subject` in order and return the first non-empty (stripped) result."""
    for strategy in strategies:
        result = (strategy(subject) or "").strip()
        if result:
            return result
    return ""


def first_match(
    patterns: Sequence[Pattern[str]],
    text: str,
    group: int = 1,
    accept: Optional[Callable[[str], bool]] = None,
) -> str:
    """
    Search patterns in order and return the requested group of the first match.

    `accept` can veto a candidate (e.g. length limits); a vetoed match falls
    through to the next pattern.
    """
    for pattern in patterns:
        m = pattern.search(text)
        if not m:
            continue
        value = (m.group(group) or "").strip()
        if value and (accept is None or accept(value)):
            return value
    return ""


def strip_bullet(line: str) -> str:
    return re.sub(r"^[•\-–*]\s*", "", line.strip())
