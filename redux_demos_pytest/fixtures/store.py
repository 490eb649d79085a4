"""Provide store for tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from redux_demos import create_app_store

if TYPE_CHECKING:
    from redux_demos import AppState, BaseAction, Store


@pytest.fixture
def store() -> Store[AppState, BaseAction]:
    """Provide a store holding the slices of every demo, tests may override it."""
    return create_app_store()
