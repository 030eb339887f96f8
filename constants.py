import re
from typing import Pattern, List, Tuple

INGREDIENT_MAX_LEN = 100
INSTRUCTION_MAX_LEN = 500
TITLE_MAX_LEN = 50
TITLE_ELLIPSIS = "..."

INGREDIENTS_LABELS: Tuple[str, ...] = ("ingredients",)
INGREDIENTS_ENDINGS: Tuple[str, ...] = (
    "instructions", "directions", "method", "steps", "preparation"
)

NEED_LABELS: Tuple[str, ...] = ("you will need", "you'll need", "need")
NEED_ENDINGS: Tuple[str, ...] = (
    "steps", "instructions", "directions", "method", "to prepare", "preparation"
)

INSTRUCTIONS_LABELS: Tuple[str, ...] = (
    "instructions", "directions", "method", "steps", "preparation"
)

SENTENCE_END_RE = re.compile(r"[.!?]")

INGREDIENT_SPLIT_RE = re.compile(r"\r?\n|,|•|\*|(?<!\d)\d+[ \t]*[.)](?!\d)")
INSTRUCTION_SPLIT_RE = re.compile(r"\r?\n|step[ \t]*\d+|^[ \t]*\d+[ \t]*[.)]", re.I | re.M)
SENTENCE_SPLIT_RE = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9])")

LIST_PREFIX_RE = re.compile(r"^\s*(?:[-\*•]|\d+[\).](?!\d))\s*")

_DURATION = r"(\d+\s*(?:min|minute|hour|hr)[^\n.]*)"

TIME_PATTERNS: List[Pattern[str]] = [
    re.compile(rf"prep(?:aration)?\s*time:?\s*{_DURATION}", re.I),
    re.compile(rf"cook(?:ing)?\s*time:?\s*{_DURATION}", re.I),
]
PREP_TIME_RE, COOK_TIME_RE = TIME_PATTERNS

SERVINGS_RE = re.compile(r"(?:serves|servings|yield):?\s*(\d+)", re.I)
