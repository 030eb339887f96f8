from typing import Optional, Pattern

from constants import PREP_TIME_RE, COOK_TIME_RE, SERVINGS_RE


def _first_phrase(pattern: Pattern[str], text: str) -> Optional[str]:
    match = pattern.search(text)
    if not match:
        return None
    return match.group(1).strip()


def extract_prep_time(text: str) -> Optional[str]:
    """Raw prep time phrase, e.g. "15 minutes" from "Prep time: 15 minutes."."""
    return _first_phrase(PREP_TIME_RE, text)


def extract_cook_time(text: str) -> Optional[str]:
    return _first_phrase(COOK_TIME_RE, text)


def extract_servings(text: str) -> Optional[int]:
    match = SERVINGS_RE.search(text)
    if not match:
        return None
    return int(match.group(1))
