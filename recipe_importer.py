import logging
import time
import uuid
from dataclasses import replace
from typing import Callable, Optional

from recipe_models import Recipe, RecipeDraft

log = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class RecipeImporter:
    """Gives a parsed draft an identity and fills the gaps a saved recipe can't have."""

    def __init__(
        self,
        default_title: str = "Imported Recipe",
        missing_ingredients: str = "No ingredients provided",
        missing_instructions: str = "No instructions provided",
        clock: Callable[[], float] = time.time,
        id_factory: Callable[[], str] = _new_id,
    ):
        self.default_title = default_title
        self.missing_ingredients = missing_ingredients
        self.missing_instructions = missing_instructions
        self.clock = clock
        self.id_factory = id_factory

    def title_for(self, draft: RecipeDraft, recipient_name: Optional[str] = None) -> str:
        if draft.title.strip():
            return draft.title.strip()
        if recipient_name and recipient_name.strip():
            return f"Recipe from {recipient_name.strip()}"
        return self.default_title

    def build(self, draft: RecipeDraft, recipient_name: Optional[str] = None) -> Recipe:
        recipe = Recipe(
            id=self.id_factory(),
            title=self.title_for(draft, recipient_name),
            created_at=int(self.clock() * 1000),
            ingredients=list(draft.ingredients) or [self.missing_ingredients],
            instructions=list(draft.instructions) or [self.missing_instructions],
            prep_time=draft.prep_time,
            cook_time=draft.cook_time,
            servings=draft.servings,
        )
        log.info("Imported recipe %s (%s)", recipe.id, recipe.title)
        return recipe

    def merge(self, recipe: Recipe, draft: RecipeDraft) -> Recipe:
        """Fold a new draft into an existing recipe.

        Only fields the draft actually found replace the recipe's; empty
        titles and lists, and missing times or servings, keep what is there.
        """
        merged = replace(
            recipe,
            title=draft.title or recipe.title,
            ingredients=list(draft.ingredients or recipe.ingredients),
            instructions=list(draft.instructions or recipe.instructions),
            prep_time=draft.prep_time or recipe.prep_time,
            cook_time=draft.cook_time or recipe.cook_time,
            servings=draft.servings or recipe.servings,
        )
        log.info("Merged draft into recipe %s (%s)", merged.id, merged.title)
        return merged
