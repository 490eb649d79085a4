# ruff: noqa: A002, D101, D103
"""Movies slice."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

from immutable import Immutable

from redux_demos.basic_types import (
    BaseAction,
    InitAction,
    InitializationActionError,
)
from redux_demos.utils import require_text


class Movie(Immutable):
    id: int | None = None
    title: str


class MoviesAction(BaseAction): ...


class FetchMoviesAction(MoviesAction):
    movies: Sequence[Movie]


class AddMovieAction(MoviesAction):
    movie: Movie


MoviesState: TypeAlias = tuple[Movie, ...]


def fetch_movies(movies: Sequence[Movie]) -> FetchMoviesAction:
    return FetchMoviesAction(movies=tuple(movies))


def add_movie(title: str, id: int | None = None) -> AddMovieAction:
    return AddMovieAction(movie=Movie(id=id, title=title))


def movies_reducer(state: MoviesState | None, action: BaseAction) -> MoviesState:
    if state is None:
        if isinstance(action, InitAction):
            return ()
        raise InitializationActionError(action)
    if isinstance(action, FetchMoviesAction):
        return tuple(action.movies)
    if isinstance(action, AddMovieAction):
        # the movie is stored as given, no id is assigned here
        require_text(action, 'title', action.movie.title)
        return (*state, action.movie)
    return state


def find_movie_by_id(movie_id: int, movies: Sequence[Movie]) -> Movie | None:
    return next((movie for movie in movies if movie.id == movie_id), None)
