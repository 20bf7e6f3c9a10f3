import logging
import threading
from typing import Iterable

from domain.errors import InvalidArgument
from domain.models import Recipe


logger = logging.getLogger(__name__)


def _check_lines(name: str, lines: Iterable[str]) -> tuple[str, ...]:
    # A bare string is iterable too, one character at a time.
    if isinstance(lines, str):
        raise InvalidArgument(f"{name} must be a sequence of lines, not a string.")
    try:
        entries = tuple(lines)
    except TypeError:
        raise InvalidArgument(f"{name} must be a sequence of lines.") from None
    if not entries:
        raise InvalidArgument(f"{name} must contain at least one entry.")
    if any(not isinstance(line, str) or not line.strip() for line in entries):
        raise InvalidArgument(f"{name} must not contain blank entries.")
    return entries


class RecipeStore:
    """In-memory recipes, in the order they were added.

    Recipes are only ever appended. Ids are ``1 + max(ids)``, ``0`` when empty.
    """

    def __init__(self) -> None:
        self._recipes: list[Recipe] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._recipes)

    def add_recipe(
        self,
        title: str,
        ingredients: Iterable[str],
        steps: Iterable[str],
    ) -> Recipe:
        try:
            if not isinstance(title, str) or not title.strip():
                raise InvalidArgument("title must not be blank.")
            ingredients = _check_lines("ingredients", ingredients)
            steps = _check_lines("steps", steps)
        except InvalidArgument as e:
            logger.debug("Rejected recipe: %s", e)
            raise

        with self._lock:
            id = max((r.id for r in self._recipes), default=-1) + 1
            recipe = Recipe(
                id=id,
                title=title,
                ingredients=ingredients,
                steps=steps,
            )
            self._recipes.append(recipe)

        logger.info("Added recipe %d: %s", recipe.id, recipe.title)
        return recipe

    def list_recipes(self) -> tuple[Recipe, ...]:
        with self._lock:
            return tuple(self._recipes)

    def get_recipe_by_id(self, id: int) -> Recipe | None:
        if isinstance(id, bool) or not isinstance(id, int):
            return None
        for recipe in self.list_recipes():
            if recipe.id == id:
                return recipe
        return None
