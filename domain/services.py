"""What the add-recipe form does before anything reaches the store."""

import re

from domain.errors import InvalidArgument
from domain.models import Recipe
from domain.repository import RecipeStore


NEWLINE_RE = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """One entry per non-blank line, trimmed. Only ``\\n`` and ``\\r\\n`` end a line."""
    return [line.strip() for line in NEWLINE_RE.split(text) if line.strip()]


def validate_recipe_form(
    title: str,
    ingredients_text: str,
    steps_text: str,
) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not title.strip():
        errors["title"] = "Recipe name is required."
    if not split_lines(ingredients_text):
        errors["ingredients"] = "Enter at least one ingredient."
    if not split_lines(steps_text):
        errors["steps"] = "Enter at least one step."
    return errors


def create_recipe_from_form(
    store: RecipeStore,
    *,
    title: str,
    ingredients_text: str,
    steps_text: str,
) -> Recipe:
    errors = validate_recipe_form(title, ingredients_text, steps_text)
    if errors:
        raise InvalidArgument("Recipe form is incomplete.", errors=errors)

    return store.add_recipe(
        title.strip(),
        split_lines(ingredients_text),
        split_lines(steps_text),
    )
