"""Redux-style state core of the pets, movies and recipes demos."""

from .apps import (
    AppState,
    MoviesState,
    PetsState,
    RecipesState,
    create_app_store,
    create_movies_store,
    create_pets_store,
    create_recipes_store,
)
from .autorun import Autorun
from .basic_types import (
    ActionMiddleware,
    AutorunOptions,
    BaseAction,
    InitAction,
    InitializationActionError,
    InvalidPayloadError,
    ReducerType,
    ReentrantDispatchError,
    StoreOptions,
)
from .combine_reducers import combine_reducers
from .ingredients import (
    CreateIngredientAction,
    Ingredient,
    IngredientPayload,
    create_ingredient,
    find_ingredient_by_id,
    ingredients_reducer,
    selected_ingredients,
    unselected_ingredients,
)
from .main import Store
from .movies import (
    AddMovieAction,
    FetchMoviesAction,
    Movie,
    add_movie,
    fetch_movies,
    find_movie_by_id,
    movies_reducer,
)
from .pets import (
    AddPetAction,
    FetchPetsAction,
    Pet,
    PetPayload,
    add_pet,
    fetch_pets,
    find_pet_by_id,
    pets_reducer,
)
from .recipe_form import (
    RecipeForm,
    RecipeFormAddIngredientAction,
    RecipeFormResetAction,
    recipe_form_add_ingredient,
    recipe_form_reducer,
    recipe_form_reset,
)
from .recipes import (
    AddRecipeAction,
    Recipe,
    RecipePayload,
    add_recipe,
    find_recipe_by_id,
    recipes_reducer,
)

__all__ = (
    'ActionMiddleware',
    'AddMovieAction',
    'AddPetAction',
    'AddRecipeAction',
    'AppState',
    'Autorun',
    'AutorunOptions',
    'BaseAction',
    'CreateIngredientAction',
    'FetchMoviesAction',
    'FetchPetsAction',
    'Ingredient',
    'IngredientPayload',
    'InitAction',
    'InitializationActionError',
    'InvalidPayloadError',
    'Movie',
    'MoviesState',
    'Pet',
    'PetPayload',
    'PetsState',
    'Recipe',
    'RecipeForm',
    'RecipeFormAddIngredientAction',
    'RecipeFormResetAction',
    'RecipePayload',
    'RecipesState',
    'ReducerType',
    'ReentrantDispatchError',
    'Store',
    'StoreOptions',
    'add_movie',
    'add_pet',
    'add_recipe',
    'combine_reducers',
    'create_app_store',
    'create_ingredient',
    'create_movies_store',
    'create_pets_store',
    'create_recipes_store',
    'fetch_movies',
    'fetch_pets',
    'find_ingredient_by_id',
    'find_movie_by_id',
    'find_pet_by_id',
    'find_recipe_by_id',
    'ingredients_reducer',
    'movies_reducer',
    'pets_reducer',
    'recipe_form_add_ingredient',
    'recipe_form_reducer',
    'recipe_form_reset',
    'recipes_reducer',
    'selected_ingredients',
    'unselected_ingredients',
)
