from typing import Any

from pydantic import BaseModel, ConfigDict, NonNegativeInt


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: NonNegativeInt
    title: str
    ingredients: tuple[str, ...]
    steps: tuple[str, ...]

    def __repr__(self) -> str:
        return f"<Recipe(id={self.id}, title={self.title})>"

    def __str__(self) -> str:
        return self.title

    @property
    def summary(self) -> str:
        return (
            f"{_plural(len(self.ingredients), 'ingredient')} • "
            f"{_plural(len(self.steps), 'step')}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "ingredients": list(self.ingredients),
            "steps": list(self.steps),
        }
