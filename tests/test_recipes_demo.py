# ruff: noqa: D100, D101, D102, D103, D104, D107
from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from redux_demos import (
    AddRecipeAction,
    CreateIngredientAction,
    InitAction,
    RecipeForm,
    RecipeFormAddIngredientAction,
    RecipeFormResetAction,
    StoreOptions,
    add_recipe,
    create_ingredient,
    create_recipes_store,
    recipe_form_add_ingredient,
    recipe_form_reset,
    selected_ingredients,
    unselected_ingredients,
)

if TYPE_CHECKING:
    from redux_demos import BaseAction, RecipesState, Store
    from redux_demos_pytest.fixtures import StoreMonitor


@pytest.fixture
def store() -> Store[RecipesState, BaseAction]:
    return create_recipes_store()


def test_pizza(store: Store[RecipesState, BaseAction]) -> None:
    assert store.state.ingredients == ()
    assert store.state.recipe_form == RecipeForm(ingredient_ids=())

    store.dispatch(create_ingredient('dough'))
    dough_id = store.state.ingredients[-1].id
    store.dispatch(create_ingredient('cheese'))
    cheese_id = store.state.ingredients[-1].id
    store.dispatch(recipe_form_add_ingredient(dough_id))
    store.dispatch(add_recipe('pizza', ingredient_ids=[dough_id]))

    assert dough_id != cheese_id
    assert store.state.recipes[0].name == 'pizza'
    assert store.state.recipes[0].ingredient_ids == (dough_id,)
    assert len(store.state.ingredients) == 2
    assert {ingredient.name for ingredient in store.state.ingredients} == {
        'dough',
        'cheese',
    }


def test_compose_recipe_from_form(
    store: Store[RecipesState, BaseAction],
    store_monitor: StoreMonitor,
) -> None:
    store.dispatch(create_ingredient('dough', 300), create_ingredient('cheese', 90))
    dough, cheese = store.state.ingredients

    store.dispatch(recipe_form_add_ingredient(cheese.id))
    store.dispatch(recipe_form_add_ingredient(dough.id))

    assert selected_ingredients(store.state) == (cheese, dough)
    assert unselected_ingredients(
        store.state.ingredients,
        store.state.recipe_form.ingredient_ids,
    ) == (dough, cheese)

    store.dispatch(
        add_recipe(
            'pizza',
            calories=390,
            ingredient_ids=store.state.recipe_form.ingredient_ids,
        ),
        recipe_form_reset(),
    )

    assert store.state.recipes[0].ingredient_ids == (cheese.id, dough.id)
    assert store.state.recipe_form == RecipeForm()
    assert store_monitor.dispatched_types() == [
        CreateIngredientAction,
        CreateIngredientAction,
        RecipeFormAddIngredientAction,
        RecipeFormAddIngredientAction,
        AddRecipeAction,
        RecipeFormResetAction,
    ]
    store_monitor.dispatched_actions.assert_any_call(recipe_form_reset())


def test_stale_draft_leaks_into_next_recipe_without_reset(
    store: Store[RecipesState, BaseAction],
) -> None:
    store.dispatch(create_ingredient('dough'))
    dough_id = store.state.ingredients[0].id
    store.dispatch(recipe_form_add_ingredient(dough_id))
    for name in ['pizza', 'bread']:
        store.dispatch(
            add_recipe(name, ingredient_ids=store.state.recipe_form.ingredient_ids),
        )

    assert [recipe.ingredient_ids for recipe in store.state.recipes] == [
        (dough_id,),
        (dough_id,),
    ]


def test_monitor_sees_init_when_attached_before_init(
    store_monitor: StoreMonitor,
) -> None:
    store = create_recipes_store(StoreOptions(auto_init=False))
    store_monitor.monitor(store)
    store.dispatch(InitAction())

    store_monitor.dispatched_actions.assert_called_once_with(InitAction())
