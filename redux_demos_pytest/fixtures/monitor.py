"""Monitor behavior of store for testing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

    from redux_demos.basic_types import BaseAction
    from redux_demos.main import Store


class StoreMonitor:
    """Monitor the actions reaching a store's reducer."""

    def __init__(self: StoreMonitor, mocker: MockerFixture) -> None:
        """Initialize the store monitor."""
        self.store = None
        self._mocker = mocker
        self.dispatched_actions = mocker.spy(self, '_action_middleware')

    def _action_middleware(self: StoreMonitor, action: BaseAction) -> BaseAction:
        return action

    def monitor(self: StoreMonitor, store: Store) -> None:
        """Set the store to monitor."""
        if self.store:
            self.store.unregister_action_middleware(self._action_middleware)
        self.store = store
        self.store.register_action_middleware(self._action_middleware)

    def dispatched_types(self: StoreMonitor) -> list[type[BaseAction]]:
        """Return the classes of the actions dispatched so far, in order."""
        return [type(call.args[0]) for call in self.dispatched_actions.call_args_list]


@pytest.fixture
def store_monitor(store: Store, mocker: MockerFixture) -> StoreMonitor:
    """Fixture to check which actions were dispatched."""
    monitor = StoreMonitor(mocker)

    if store:
        monitor.monitor(store)

    return monitor
