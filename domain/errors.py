class DinnerAppError(Exception):
    pass


class InvalidArgument(DinnerAppError, ValueError):
    def __init__(self, message: str, errors: dict[str, str] | None = None) -> None:
        super().__init__(message)
        self.errors = {} if errors is None else errors


class RecipeNotFound(DinnerAppError):
    def __init__(self, id: int | str) -> None:
        super().__init__(f"Recipe {id} not found")
        self.id = id
