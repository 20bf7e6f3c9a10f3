from pydantic import BaseModel


class RecipeIn(BaseModel):
    """Body of ``POST /recipes``."""

    title: str
    ingredients: list[str]
    steps: list[str]
