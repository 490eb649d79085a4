# ruff: noqa: D101
"""Ingredients slice and the selectors the recipe form reads through."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, TypeAlias

from immutable import Immutable

from redux_demos.basic_types import (
    BaseAction,
    InitAction,
    InitializationActionError,
)
from redux_demos.utils import generate_id, optional_number, require_text

if TYPE_CHECKING:
    from collections.abc import Collection

    from redux_demos.apps import RecipesState


class Ingredient(Immutable):
    id: str
    name: str
    calories: float | None = None


class IngredientPayload(Immutable):
    name: str
    calories: float | None = None


class CreateIngredientAction(BaseAction):
    payload: IngredientPayload


IngredientsState: TypeAlias = tuple[Ingredient, ...]


def create_ingredient(
    name: str,
    calories: float | None = None,
) -> CreateIngredientAction:
    """Build the action creating an ingredient, the id is assigned when reduced."""
    return CreateIngredientAction(
        payload=IngredientPayload(name=name, calories=calories),
    )


def ingredients_reducer(
    state: IngredientsState | None,
    action: BaseAction,
) -> IngredientsState:
    """Reduce the ingredients slice."""
    if state is None:
        if isinstance(action, InitAction):
            return ()
        raise InitializationActionError(action)
    if isinstance(action, CreateIngredientAction):
        ingredient = Ingredient(
            id=generate_id(),
            name=require_text(action, 'name', action.payload.name),
            calories=optional_number(action, 'calories', action.payload.calories),
        )
        return (*state, ingredient)
    return state


def find_ingredient_by_id(
    ingredient_id: str,
    ingredients: Sequence[Ingredient],
) -> Ingredient | None:
    """Return the first ingredient with `ingredient_id`, or `None`."""
    return next(
        (ingredient for ingredient in ingredients if ingredient.id == ingredient_id),
        None,
    )


def unselected_ingredients(
    ingredients: Sequence[Ingredient],
    selected_ids: Collection[str],
) -> IngredientsState:
    """Return the ingredients whose id is in `selected_ids`, in their own order.

    Despite its name this keeps the members of `selected_ids`, which is what the
    recipe form relies on. Ids without an ingredient are ignored.
    """
    return tuple(
        ingredient for ingredient in ingredients if ingredient.id in selected_ids
    )


def selected_ingredients(state: RecipesState) -> IngredientsState:
    """Resolve the ingredient ids of the recipe form, in the order they were added."""
    resolved = (
        find_ingredient_by_id(ingredient_id, state.ingredients)
        for ingredient_id in state.recipe_form.ingredient_ids
    )
    return tuple(ingredient for ingredient in resolved if ingredient is not None)
