# ruff: noqa: D100, D103, T201
from __future__ import annotations

import logging

from redux_demos import (
    Pet,
    add_pet,
    add_recipe,
    create_app_store,
    create_ingredient,
    fetch_pets,
    recipe_form_add_ingredient,
    recipe_form_reset,
    selected_ingredients,
)

SAMPLE_PETS = (
    Pet(id=1, name='Grover', description='A Furry Blue Guy who is very cute'),
    Pet(id=2, name='Fido', description='A pretty normal looking dog'),
    Pet(id=3, name='Sparky', description='Orange cat with a laid back attitude'),
)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    # Initialization <
    store = create_app_store()
    # >

    # -----

    # Subscription <
    store.subscribe(lambda: print('Subscription state:', store.snapshot))
    # >

    # -----

    # Autorun <
    @store.autorun(selected_ingredients)
    def render(ingredients: tuple) -> list[str]:
        print('Autorun:', ingredients)
        return [ingredient.name for ingredient in ingredients]

    render.subscribe(lambda names: print('Selected ingredients:', names))
    # >

    # -----

    # Pets <
    store.dispatch(fetch_pets(SAMPLE_PETS))
    store.dispatch(add_pet('Rex', 'A good boy'))
    # >

    # Recipes <
    store.dispatch(create_ingredient('dough', 300), create_ingredient('cheese', 90))
    for ingredient in store.state.ingredients:
        store.dispatch(recipe_form_add_ingredient(ingredient.id))
    print(f'Render output {render()}')

    store.dispatch(
        add_recipe(
            'pizza',
            calories=390,
            ingredient_ids=store.state.recipe_form.ingredient_ids,
        ),
        recipe_form_reset(),
    )
    print(f'Render output {render()}')
    # >


if __name__ == '__main__':
    main()
