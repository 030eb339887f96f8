import pytest

from recipe_models import RecipeDraft
from recipe_parser import (
    RecipeTextParser,
    extract_title,
    find_ingredients_section,
    find_instructions_section,
    parse_recipe_text,
    split_ingredients,
    split_instructions,
)


CHILI = (
    "Grandma's Chili. Ingredients: beans, tomatoes, onion. "
    "Instructions: Brown the meat. Add beans. Simmer for 20 minutes."
)


def test_parse_labeled_sections():
    draft = parse_recipe_text(CHILI)

    assert draft.title == "Grandma's Chili"
    assert draft.ingredients == ["beans", "tomatoes", "onion"]
    assert draft.instructions == ["Brown the meat.", "Add beans.", "Simmer for 20 minutes."]
    assert draft.prep_time is None
    assert draft.cook_time is None
    assert draft.servings is None


def test_parse_metadata_only():
    draft = parse_recipe_text("Prep time: 15 minutes. Cook time: 1 hour. Serves: 4.")

    assert "15 minutes" in draft.prep_time
    assert "1 hour" in draft.cook_time
    assert draft.servings == 4
    assert draft.ingredients == []
    assert draft.instructions == []


def test_parse_empty_string():
    assert parse_recipe_text("") == RecipeDraft(title="")


def test_parse_none_is_treated_as_empty():
    assert parse_recipe_text(None) == RecipeDraft()


def test_parse_is_idempotent():
    parser = RecipeTextParser()
    assert parser.parse(CHILI) == parser.parse(CHILI)


@pytest.mark.parametrize("text", [
    " ",
    ".",
    "???",
    ":",
    "\n\n",
    "ingredients",
    "ingredients:",
    "Ingredients: steps",
    "steps:",
    "need",
    "1. 2. 3)",
    "step 1 step 2",
    "just talking about the weather today",
])
def test_parse_never_raises(text):
    draft = parse_recipe_text(text)
    assert isinstance(draft, RecipeDraft)
    assert isinstance(draft.title, str)


def test_title_falls_back_to_truncated_first_line():
    line = "grandma talking about her smoky chili recipe from texas okay"
    assert len(line) == 60

    assert extract_title(line + "\nbeans and more beans") == line[:50] + "..."


def test_title_short_first_line_kept_as_is():
    assert extract_title("tomato soup\nthen blend it") == "tomato soup"


def test_title_sentence_may_span_lines():
    assert extract_title("Pancakes\nfor two! Ingredients") == "Pancakes\nfor two"


def test_title_leading_terminator_uses_first_line():
    assert extract_title("...and then we cook") == "...and then we cook"


def test_instructions_fall_back_to_text_after_ingredients():
    text = "You will need: eggs, milk, butter. To prepare, whisk the eggs.\nMelt the butter."
    draft = parse_recipe_text(text)

    assert draft.ingredients == ["eggs", "milk", "butter"]
    assert draft.instructions == ["To prepare, whisk the eggs.", "Melt the butter."]


def test_instructions_fallback_uses_section_offsets():
    # " salt. Then " also occurs before the ingredients list.
    text = "Add salt. Then taste. You'll need: salt. Then to prepare: bake it."

    section = find_ingredients_section(text)
    assert text[section.start:section.end] == section.text == " salt. Then "
    assert section.start > text.index(" salt. Then ")

    assert parse_recipe_text(text).instructions == ["to prepare: bake it."]


def test_no_instructions_without_label_or_ingredients():
    assert find_instructions_section("Mix it all and bake.") is None


def test_labeled_ingredients_take_priority_over_need():
    text = "You need patience. Ingredients: rice, water. Method: boil the water."
    draft = parse_recipe_text(text)

    assert draft.ingredients == ["rice", "water"]
    assert draft.instructions == ["boil the water."]


def test_numbered_and_bulleted_ingredients():
    text = "Ingredients\n1. flour\n2. sugar\n3) butter\n• salt * pepper\n- 2 eggs\nMethod\nMix."
    draft = parse_recipe_text(text)

    assert draft.ingredients == ["flour", "sugar", "butter", "salt", "pepper", "2 eggs"]
    assert draft.instructions == ["Mix."]


def test_decimal_quantities_are_not_list_markers():
    assert split_ingredients(" 1.5 cups rice, water. ") == ["1.5 cups rice", "water"]


def test_overlong_items_are_dropped():
    long_item = "a" * 120
    assert split_ingredients(f"{long_item}, salt") == ["salt"]
    assert split_instructions("x" * 600 + "\nServe.") == ["Serve."]


def test_split_instructions_on_step_markers():
    text = "Steps: step 1 chop the onion step 2 fry it"
    assert parse_recipe_text(text).instructions == ["chop the onion", "fry it"]


def test_split_instructions_on_numbered_lines():
    block = "\n1. Rub the chicken.\n2) Roast it. Rest before serving.\n"
    assert split_instructions(block) == ["Rub the chicken.", "Roast it.", "Rest before serving."]


def test_instructions_keep_order_of_appearance():
    text = "Directions:\nFirst boil.\nThen drain.\nFinally serve."
    assert parse_recipe_text(text).instructions == ["First boil.", "Then drain.", "Finally serve."]


def test_instructions_label_at_end_of_text_is_ignored():
    text = "Ingredients: eggs, milk. Steps"
    draft = parse_recipe_text(text)

    assert draft.ingredients == ["eggs", "milk"]
    # no labeled body, so the remainder after the ingredients is used
    assert draft.instructions == ["Steps"]


def test_repetitive_input_completes():
    text = "Ingredients: " + "salt " * 20000 + ("need prep time " * 5000)
    draft = parse_recipe_text(text)
    assert draft.ingredients == []
    assert draft.instructions == []


def test_long_punctuation_run_in_ingredients_completes():
    text = "Ingredients: " + ";." * 20000 + "x Steps: mix."
    draft = parse_recipe_text(text)

    assert draft.ingredients == []
    assert draft.instructions == ["mix."]
    assert split_ingredients(";" * 40000 + "x") == []


def test_ingredient_length_cap_applies_before_punctuation_strip():
    assert split_ingredients("a" * 99 + ".") == []
    assert split_ingredients("a" * 98 + ".") == ["a" * 98]
