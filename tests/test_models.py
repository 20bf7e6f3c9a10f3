import pydantic
import pytest

from domain.models import Recipe


def test_recipe_is_immutable() -> None:
    recipe = Recipe(id=0, title="Pasta", ingredients=("Pasta",), steps=("Boil",))
    with pytest.raises(pydantic.ValidationError):
        recipe.title = "Pizza"  # type: ignore[misc]


def test_negative_id_rejected() -> None:
    with pytest.raises(pydantic.ValidationError):
        Recipe(id=-1, title="Pasta", ingredients=("Pasta",), steps=("Boil",))


@pytest.mark.parametrize(
    "ingredients,steps,expected",
    (
        (("Pasta",), ("Boil",), "1 ingredient • 1 step"),
        (("Pasta", "Salt"), ("Boil water", "Add pasta"), "2 ingredients • 2 steps"),
    ),
)
def test_summary(ingredients: tuple[str, ...], steps: tuple[str, ...], expected: str) -> None:
    recipe = Recipe(id=0, title="Pasta", ingredients=ingredients, steps=steps)
    assert recipe.summary == expected


def test_to_dict() -> None:
    recipe = Recipe(id=3, title="Pasta", ingredients=("Pasta", "Salt"), steps=("Boil",))
    assert recipe.to_dict() == {
        "id": 3,
        "title": "Pasta",
        "ingredients": ["Pasta", "Salt"],
        "steps": ["Boil"],
    }
