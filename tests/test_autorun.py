# ruff: noqa: D100, D101, D102, D103, D104, D107
from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from redux_demos import (
    AutorunOptions,
    BaseAction,
    Ingredient,
    create_ingredient,
    create_recipes_store,
    recipe_form_add_ingredient,
    selected_ingredients,
)

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

    from redux_demos import RecipesState, Store


class UnknownAction(BaseAction): ...


@pytest.fixture
def store() -> Store[RecipesState, BaseAction]:
    return create_recipes_store()


def test_name_attr(store: Store[RecipesState, BaseAction]) -> None:
    @store.autorun(lambda state: state.ingredients)
    def decorated(ingredients: tuple[Ingredient, ...]) -> int:
        return len(ingredients)

    assert decorated.__name__ == 'Autorun:decorated'

    inline_decorated = store.autorun(lambda state: state.ingredients)(
        lambda ingredients: ingredients,
    )

    assert inline_decorated.__name__ == 'Autorun:<lambda>'


def test_runs_on_selection_change(
    store: Store[RecipesState, BaseAction],
    mocker: MockerFixture,
) -> None:
    render = mocker.stub()

    @store.autorun(selected_ingredients)
    def names(ingredients: tuple[Ingredient, ...]) -> list[str]:
        render(ingredients)
        return [ingredient.name for ingredient in ingredients]

    store.dispatch(create_ingredient('dough'))
    store.dispatch(UnknownAction())
    store.dispatch(recipe_form_add_ingredient(store.state.ingredients[0].id))

    assert render.call_count == 2
    assert names.value == ['dough']
    assert names() == ['dough']
    assert render.call_count == 2


def test_comparator(store: Store[RecipesState, BaseAction]) -> None:
    calls: list[int] = []

    @store.autorun(
        lambda state: state.ingredients,
        lambda state: len(state.ingredients) // 2,
    )
    def count(ingredients: tuple[Ingredient, ...]) -> int:
        calls.append(len(ingredients))
        return len(ingredients)

    for name in ['dough', 'cheese', 'basil', 'oil']:
        store.dispatch(create_ingredient(name))

    assert calls == [0, 2, 4]
    assert count.value == 4


def test_initial_call_disabled(store: Store[RecipesState, BaseAction]) -> None:
    calls: list[int] = []

    @store.autorun(
        lambda state: len(state.ingredients),
        options=AutorunOptions(initial_call=False, default_value=-1),
    )
    def count(value: int) -> int:
        calls.append(value)
        return value

    assert count.value == -1
    assert calls == []

    store.dispatch(create_ingredient('dough'))

    assert calls == [1]


def test_without_memoization(store: Store[RecipesState, BaseAction]) -> None:
    calls = 0

    @store.autorun(
        lambda state: len(state.ingredients),
        options=AutorunOptions(memoization=False),
    )
    def count(value: int) -> int:
        nonlocal calls
        calls += 1
        return value

    assert count() == 0
    assert count() == 0
    assert calls == 3


def test_subscribe(store: Store[RecipesState, BaseAction]) -> None:
    @store.autorun(lambda state: len(state.ingredients))
    def count(value: int) -> int:
        return value

    values: list[int] = []
    unsubscribe = count.subscribe(values.append)
    store.dispatch(create_ingredient('dough'))
    unsubscribe()
    store.dispatch(create_ingredient('cheese'))

    assert values == [0, 1]
    assert count.value == 2


def test_unsubscribe(store: Store[RecipesState, BaseAction]) -> None:
    @store.autorun(lambda state: len(state.ingredients))
    def count(value: int) -> int:
        return value

    count.unsubscribe()
    count.unsubscribe()
    store.dispatch(create_ingredient('dough'))

    assert count.value == 0
    assert count() == 1


def test_subscription_unsubscribed_twice_keeps_other_subscriptions(
    store: Store[RecipesState, BaseAction],
) -> None:
    @store.autorun(lambda state: len(state.ingredients))
    def count(value: int) -> int:
        return value

    values: list[int] = []
    first = count.subscribe(values.append, initial_run=False)
    count.subscribe(values.append, initial_run=False)
    first()
    first()
    store.dispatch(create_ingredient('dough'))

    assert values == [1]
