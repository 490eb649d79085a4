"""Utility fixtures for testing redux store."""

import pytest

pytest.register_assert_rewrite(
    'redux_demos_pytest.fixtures.monitor',
    'redux_demos_pytest.fixtures.store',
)

from .monitor import StoreMonitor, store_monitor  # noqa: E402
from .store import store  # noqa: E402

__all__ = (
    'StoreMonitor',
    'store',
    'store_monitor',
)
