# ruff: noqa: D101, D103
"""Draft of the recipe being composed."""

from __future__ import annotations

from dataclasses import replace

from immutable import Immutable

from redux_demos.basic_types import (
    BaseAction,
    InitAction,
    InitializationActionError,
)
from redux_demos.utils import require_text


class RecipeForm(Immutable):
    ingredient_ids: tuple[str, ...] = ()


class RecipeFormAction(BaseAction): ...


class RecipeFormAddIngredientAction(RecipeFormAction):
    payload: str


class RecipeFormResetAction(RecipeFormAction): ...


def recipe_form_add_ingredient(ingredient_id: str) -> RecipeFormAddIngredientAction:
    return RecipeFormAddIngredientAction(payload=ingredient_id)


def recipe_form_reset() -> RecipeFormResetAction:
    return RecipeFormResetAction()


def recipe_form_reducer(state: RecipeForm | None, action: BaseAction) -> RecipeForm:
    if state is None:
        if isinstance(action, InitAction):
            return RecipeForm()
        raise InitializationActionError(action)
    if isinstance(action, RecipeFormAddIngredientAction):
        ingredient_id = require_text(action, 'payload', action.payload)
        return replace(state, ingredient_ids=(*state.ingredient_ids, ingredient_id))
    if isinstance(action, RecipeFormResetAction):
        # adding a recipe does not clear the draft, callers reset it explicitly
        return RecipeForm()
    return state
