from jinja2 import Environment

from domain.models import Recipe


class RecipeDetail:
    def __init__(
        self,
        recipe: Recipe,
        *,
        environment: Environment,
        template_name: str = "recipe-detail.html",
    ) -> None:
        self.recipe = recipe
        self.env = environment
        self.name = template_name

    @property
    def title(self) -> str:
        return self.recipe.title

    @property
    def ingredients(self) -> tuple[str, ...]:
        return self.recipe.ingredients

    @property
    def steps(self) -> list[tuple[int, str]]:
        return list(enumerate(self.recipe.steps, start=1))

    def render(self) -> str:
        return self.env.get_template(self.name).render(recipe=self, active="home")
