"""Pytest configuration file for the tests."""

from __future__ import annotations

import random
import uuid

import pytest

from redux_demos_pytest.fixtures import store, store_monitor

__all__ = [
    'store',
    'store_monitor',
]


@pytest.fixture(autouse=True)
def _(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make generated ids deterministic."""
    random.seed(0)

    monkeypatch.setattr(uuid, 'uuid4', lambda: uuid.UUID(int=random.getrandbits(128)))
