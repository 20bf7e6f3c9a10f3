import functools
import logging
from typing import Any, Awaitable, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles

from app import config
from app.html.recipe_detail import RecipeDetail
from app.logs import configure_logging
from app.schemas import RecipeIn
from domain.errors import InvalidArgument, RecipeNotFound
from domain.repository import RecipeStore
from domain.services import create_recipe_from_form


logger = logging.getLogger(__name__)


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


def _store(request: Request) -> RecipeStore:
    return request.app.state.store


def _templates(request: Request) -> Environment:
    return request.app.state.templates


@aHTMLResponse
async def homepage(request: Request) -> str:
    recipes = _store(request).list_recipes()
    return _templates(request).get_template("index.html").render(
        recipes=recipes, active="home"
    )


async def add_recipe(request: Request) -> HTMLResponse | RedirectResponse:
    template = _templates(request).get_template("create.html")
    match request.method.lower():
        case "get":
            return HTMLResponse(template.render(form={}, errors={}, active="add"))
        case "post":
            async with request.form() as form:
                fields = {
                    "title": str(form.get("title", "")),
                    "ingredients": str(form.get("ingredients", "")),
                    "steps": str(form.get("steps", "")),
                }
            try:
                create_recipe_from_form(
                    _store(request),
                    title=fields["title"],
                    ingredients_text=fields["ingredients"],
                    steps_text=fields["steps"],
                )
            except InvalidArgument as e:
                return HTMLResponse(
                    template.render(form=fields, errors=e.errors, active="add"),
                    status_code=400,
                )
            return RedirectResponse("/", status_code=303)
        case _:
            raise ValueError("Unsupported method.")


@aHTMLResponse
async def recipe_detail(request: Request) -> str:
    id: int = request.path_params["id"]
    recipe = _store(request).get_recipe_by_id(id)
    if recipe is None:
        raise RecipeNotFound(id)
    return RecipeDetail(recipe, environment=_templates(request)).render()


@aHTMLResponse
async def recipe_detail_missing_id(request: Request) -> tuple[str, int]:
    html = _templates(request).get_template("error.html").render(
        message="No recipe id supplied.", active="home"
    )
    return html, 400


@aHTMLResponse
async def settings(request: Request) -> str:
    return _templates(request).get_template("settings.html").render(active="settings")


async def recipes(request: Request) -> JSONResponse:
    store = _store(request)
    match request.method.lower():
        case "get":
            return JSONResponse([r.to_dict() for r in store.list_recipes()])
        case "post":
            try:
                body = RecipeIn.model_validate_json(await request.body())
            except ValidationError as e:
                detail = [
                    {"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()
                ]
                return JSONResponse({"detail": detail}, status_code=422)
            try:
                recipe = store.add_recipe(body.title, body.ingredients, body.steps)
            except InvalidArgument as e:
                return JSONResponse({"detail": str(e)}, status_code=400)
            return JSONResponse(recipe.to_dict(), status_code=201)
        case _:
            raise ValueError("Unsupported method.")


async def recipe(request: Request) -> JSONResponse:
    raw: str = request.path_params["id"]
    try:
        id = int(raw)
    except ValueError:
        raise RecipeNotFound(raw) from None
    found = _store(request).get_recipe_by_id(id)
    if found is None:
        raise RecipeNotFound(id)
    return JSONResponse(found.to_dict())


async def recipe_not_found(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, RecipeNotFound)
    logger.info("Recipe %s not found (%s)", exc.id, request.url.path)
    if request.url.path.startswith("/recipes"):
        return JSONResponse({"detail": str(exc)}, status_code=404)
    html = _templates(request).get_template("error.html").render(
        message="Recipe not found", active="home"
    )
    return HTMLResponse(html, status_code=404)


def create_app(
    cfg: config.Config | None = None,
    store: RecipeStore | None = None,
) -> Starlette:
    cfg = config.Config() if cfg is None else cfg
    configure_logging(cfg.log_level)

    app = Starlette(
        debug=True if cfg.env == config.Env.local else False,
        routes=[
            Route("/", homepage),
            Route("/add_recipe", add_recipe, methods=["GET", "POST"]),
            Route("/recipe_detail", recipe_detail_missing_id),
            Route("/recipe_detail/{id:int}", recipe_detail),
            Route("/settings", settings),
            Route("/recipes", recipes, methods=["GET", "POST"]),
            Route("/recipes/{id}", recipe),
            Mount("/assets", StaticFiles(directory=cfg.assets_dir), name="assets"),
        ],
        exception_handlers={RecipeNotFound: recipe_not_found},
    )

    app.state.config = cfg
    app.state.store = RecipeStore() if store is None else store
    app.state.templates = Environment(
        loader=FileSystemLoader(cfg.html_dir),
        autoescape=select_autoescape(),
    )
    return app


app = create_app()
