# ruff: noqa: D101, D103
"""Recipes slice."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

from immutable import Immutable

from redux_demos.basic_types import (
    BaseAction,
    InitAction,
    InitializationActionError,
    InvalidPayloadError,
)
from redux_demos.utils import generate_id, optional_number, require_text


class Recipe(Immutable):
    id: str
    name: str
    calories: float | None = None
    ingredient_ids: tuple[str, ...] = ()


class RecipePayload(Immutable):
    name: str
    calories: float | None = None
    ingredient_ids: Sequence[str] = ()


class AddRecipeAction(BaseAction):
    payload: RecipePayload


RecipesState: TypeAlias = tuple[Recipe, ...]


def add_recipe(
    name: str,
    calories: float | None = None,
    ingredient_ids: Sequence[str] = (),
) -> AddRecipeAction:
    return AddRecipeAction(
        payload=RecipePayload(
            name=name,
            calories=calories,
            ingredient_ids=tuple(ingredient_ids),
        ),
    )


def recipes_reducer(state: RecipesState | None, action: BaseAction) -> RecipesState:
    if state is None:
        if isinstance(action, InitAction):
            return ()
        raise InitializationActionError(action)
    if isinstance(action, AddRecipeAction):
        ingredient_ids = action.payload.ingredient_ids
        if isinstance(ingredient_ids, str) or not all(
            isinstance(ingredient_id, str) for ingredient_id in ingredient_ids
        ):
            raise InvalidPayloadError(
                action,
                'ingredient_ids',
                f'expected a sequence of ids, got {ingredient_ids!r}',
            )
        # ingredient ids are references only, they are not checked against the
        # ingredients slice
        recipe = Recipe(
            id=generate_id(),
            name=require_text(action, 'name', action.payload.name),
            calories=optional_number(action, 'calories', action.payload.calories),
            ingredient_ids=tuple(ingredient_ids),
        )
        return (*state, recipe)
    return state


def find_recipe_by_id(recipe_id: str, recipes: Sequence[Recipe]) -> Recipe | None:
    return next((recipe for recipe in recipes if recipe.id == recipe_id), None)
