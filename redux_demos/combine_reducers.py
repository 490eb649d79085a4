"""Redux combine_reducers module."""

from __future__ import annotations

import dataclasses
from typing import Any

from redux_demos.basic_types import Action, ReducerType, State


def combine_reducers(
    state_type: type[State],
    **reducers: ReducerType[Any, Action],
) -> ReducerType[State, Action]:
    """Combine slice reducers into a reducer for `state_type`.

    Each slice reducer receives only its own attribute of the state and the whole
    action. The new state object is built after all slice reducers returned, so a
    failing slice leaves the previous state untouched. When no slice changed the
    previous state object is returned as is.
    """
    field_names = {field.name for field in dataclasses.fields(state_type)}
    if unknown := set(reducers) - field_names:
        msg = f'`{state_type.__name__}` has no slice named {sorted(unknown)}'
        raise KeyError(msg)
    if missing := field_names - set(reducers):
        msg = f'No reducer for slices {sorted(missing)} of `{state_type.__name__}`'
        raise KeyError(msg)

    def combined_reducer(state: State | None, action: Action) -> State:
        slices = {
            key: reducer(None if state is None else getattr(state, key), action)
            for key, reducer in reducers.items()
        }
        if state is not None and all(
            slices[key] is getattr(state, key) for key in slices
        ):
            return state
        return state_type(**slices)

    combined_reducer.__name__ = f'combined_reducer:{state_type.__name__}'
    return combined_reducer
