import logging
import re
from typing import Iterable, List, NamedTuple, Optional, Pattern

from constants import (
    INGREDIENT_MAX_LEN,
    INGREDIENT_SPLIT_RE,
    INGREDIENTS_ENDINGS,
    INGREDIENTS_LABELS,
    INSTRUCTION_MAX_LEN,
    INSTRUCTION_SPLIT_RE,
    INSTRUCTIONS_LABELS,
    LIST_PREFIX_RE,
    NEED_ENDINGS,
    NEED_LABELS,
    SENTENCE_END_RE,
    SENTENCE_SPLIT_RE,
    TITLE_ELLIPSIS,
    TITLE_MAX_LEN,
)
from recipe_metadata import extract_cook_time, extract_prep_time, extract_servings
from recipe_models import RecipeDraft

log = logging.getLogger(__name__)


def _keyword_re(words: Iterable[str]) -> Pattern[str]:
    # Literal alternation only: a search is a single left-to-right scan.
    return re.compile("|".join(re.escape(w) for w in words), re.IGNORECASE)


INGREDIENTS_LABEL_RE = _keyword_re(INGREDIENTS_LABELS)
INGREDIENTS_ENDING_RE = _keyword_re(INGREDIENTS_ENDINGS)
NEED_LABEL_RE = _keyword_re(NEED_LABELS)
NEED_ENDING_RE = _keyword_re(NEED_ENDINGS)
INSTRUCTIONS_LABEL_RE = _keyword_re(INSTRUCTIONS_LABELS)


class Section(NamedTuple):
    """A labeled block of the transcript and where it sits in the original text."""

    start: int
    end: int
    text: str


def _section_between(text: str, label_re: Pattern[str], ending_re: Pattern[str]) -> Optional[Section]:
    """Body between the first label and the first ending keyword after it.

    The body must hold at least one character. A colon right after the label
    belongs to the label unless the body would then be empty.
    """
    label = label_re.search(text)
    if not label:
        return None
    body = label.end()
    if text.startswith(":", body):
        ending = ending_re.search(text, body + 2)
        if ending:
            return Section(body + 1, ending.start(), text[body + 1:ending.start()])
    ending = ending_re.search(text, body + 1)
    if not ending:
        return None
    return Section(body, ending.start(), text[body:ending.start()])


def _section_to_end(text: str, label_re: Pattern[str]) -> Optional[Section]:
    label = label_re.search(text)
    if not label or label.end() >= len(text):
        return None
    body = label.end()
    if text[body] == ":" and body + 1 < len(text):
        body += 1
    return Section(body, len(text), text[body:])


def extract_title(text: str) -> str:
    end = SENTENCE_END_RE.search(text)
    if end and end.start() > 0:
        return text[:end.start()].strip()
    first_line = text.split("\n", 1)[0]
    if len(first_line) > TITLE_MAX_LEN:
        return first_line[:TITLE_MAX_LEN] + TITLE_ELLIPSIS
    return first_line


def find_ingredients_section(text: str) -> Optional[Section]:
    section = _section_between(text, INGREDIENTS_LABEL_RE, INGREDIENTS_ENDING_RE)
    if section is None:
        section = _section_between(text, NEED_LABEL_RE, NEED_ENDING_RE)
        if section is not None:
            log.debug("No 'ingredients' label, using 'need' list at %d-%d", section.start, section.end)
    return section


def find_instructions_section(text: str, ingredients: Optional[Section] = None) -> Optional[Section]:
    section = _section_to_end(text, INSTRUCTIONS_LABEL_RE)
    if section is None and ingredients is not None:
        log.debug("No instructions label, using text after offset %d", ingredients.end)
        section = Section(ingredients.end, len(text), text[ingredients.end:])
    return section


def split_sentences(text: str) -> List[str]:
    parts = SENTENCE_SPLIT_RE.split(text.strip())
    return [p.strip() for p in parts if p.strip()]


def split_ingredients(block: str) -> List[str]:
    items: List[str] = []
    for candidate in INGREDIENT_SPLIT_RE.split(block):
        candidate = candidate.strip()
        if not candidate or len(candidate) >= INGREDIENT_MAX_LEN:
            continue
        item = LIST_PREFIX_RE.sub("", candidate).rstrip(".,;:").strip()
        if item:
            items.append(item)
    return items


def split_instructions(block: str) -> List[str]:
    steps: List[str] = []
    for chunk in INSTRUCTION_SPLIT_RE.split(block):
        for sentence in split_sentences(chunk):
            step = LIST_PREFIX_RE.sub("", sentence).strip()
            if step and len(step) < INSTRUCTION_MAX_LEN:
                steps.append(step)
    return steps


class RecipeTextParser:
    """Turns a free-form transcript into a RecipeDraft.

    Every field is best effort: text that matches nothing gives a draft with
    the fallback title and empty fields, never an exception.
    """

    def parse(self, text: str) -> RecipeDraft:
        text = text or ""
        ingredients_section = find_ingredients_section(text)
        instructions_section = find_instructions_section(text, ingredients_section)

        draft = RecipeDraft(
            title=extract_title(text),
            ingredients=split_ingredients(ingredients_section.text) if ingredients_section else [],
            instructions=split_instructions(instructions_section.text) if instructions_section else [],
            prep_time=extract_prep_time(text),
            cook_time=extract_cook_time(text),
            servings=extract_servings(text),
        )
        log.debug(
            "Parsed %r: %d ingredients, %d instructions",
            draft.title, len(draft.ingredients), len(draft.instructions)
        )
        return draft


def parse_recipe_text(text: str) -> RecipeDraft:
    return RecipeTextParser().parse(text)
