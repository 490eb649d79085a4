# ruff: noqa: D101
"""State shapes and stores of the demo applications."""

from __future__ import annotations

from typing import TypeAlias

from immutable import Immutable

from redux_demos.basic_types import BaseAction, InitAction, StoreOptions
from redux_demos.combine_reducers import combine_reducers
from redux_demos.ingredients import IngredientsState, ingredients_reducer
from redux_demos.main import Store
from redux_demos.movies import MoviesState as MoviesSlice
from redux_demos.movies import movies_reducer
from redux_demos.pets import PetsState as PetsSlice
from redux_demos.pets import pets_reducer
from redux_demos.recipe_form import RecipeForm, recipe_form_reducer
from redux_demos.recipes import RecipesState as RecipesSlice
from redux_demos.recipes import recipes_reducer


class PetsState(Immutable):
    pets: PetsSlice


class MoviesState(Immutable):
    movies: MoviesSlice


class RecipesState(Immutable):
    ingredients: IngredientsState
    recipes: RecipesSlice
    recipe_form: RecipeForm


class AppState(Immutable):
    pets: PetsSlice
    movies: MoviesSlice
    ingredients: IngredientsState
    recipes: RecipesSlice
    recipe_form: RecipeForm


ActionType: TypeAlias = BaseAction | InitAction

pets_app_reducer = combine_reducers(PetsState, pets=pets_reducer)
movies_app_reducer = combine_reducers(MoviesState, movies=movies_reducer)
recipes_app_reducer = combine_reducers(
    RecipesState,
    ingredients=ingredients_reducer,
    recipes=recipes_reducer,
    recipe_form=recipe_form_reducer,
)
app_reducer = combine_reducers(
    AppState,
    pets=pets_reducer,
    movies=movies_reducer,
    ingredients=ingredients_reducer,
    recipes=recipes_reducer,
    recipe_form=recipe_form_reducer,
)


def create_pets_store(
    options: StoreOptions | None = None,
) -> Store[PetsState, ActionType]:
    """Create the store of the pets demo."""
    return Store(pets_app_reducer, options)


def create_movies_store(
    options: StoreOptions | None = None,
) -> Store[MoviesState, ActionType]:
    """Create the store of the movies demo."""
    return Store(movies_app_reducer, options)


def create_recipes_store(
    options: StoreOptions | None = None,
) -> Store[RecipesState, ActionType]:
    """Create the store of the recipes demo."""
    return Store(recipes_app_reducer, options)


def create_app_store(
    options: StoreOptions | None = None,
) -> Store[AppState, ActionType]:
    """Create a store holding the slices of every demo."""
    return Store(app_reducer, options)
