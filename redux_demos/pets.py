# ruff: noqa: D101, D103
"""Pets slice: a fetched list of pets that the user can add to."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

from immutable import Immutable

from redux_demos.basic_types import (
    BaseAction,
    InitAction,
    InitializationActionError,
)
from redux_demos.utils import require_str, require_text


class Pet(Immutable):
    id: int
    name: str
    description: str


class PetPayload(Immutable):
    name: str
    description: str = ''


class PetsAction(BaseAction): ...


class FetchPetsAction(PetsAction):
    pets: Sequence[Pet]


class AddPetAction(PetsAction):
    pet: PetPayload


PetsState: TypeAlias = tuple[Pet, ...]


def fetch_pets(pets: Sequence[Pet]) -> FetchPetsAction:
    return FetchPetsAction(pets=tuple(pets))


def add_pet(name: str, description: str = '') -> AddPetAction:
    return AddPetAction(pet=PetPayload(name=name, description=description))


def pets_reducer(state: PetsState | None, action: BaseAction) -> PetsState:
    if state is None:
        if isinstance(action, InitAction):
            return ()
        raise InitializationActionError(action)
    if isinstance(action, FetchPetsAction):
        return tuple(action.pets)
    if isinstance(action, AddPetAction):
        # ids follow the collection length, removing pets would reuse them
        pet = Pet(
            id=len(state) + 1,
            name=require_text(action, 'name', action.pet.name),
            description=require_str(action, 'description', action.pet.description),
        )
        return (*state, pet)
    return state


def find_pet_by_id(pet_id: int, pets: Sequence[Pet]) -> Pet | None:
    return next((pet for pet in pets if pet.id == pet_id), None)
