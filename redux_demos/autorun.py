"""Redux autorun module."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, cast

from redux_demos.basic_types import (
    NOT_SET,
    AutorunOptions,
    ComparatorOutput,
    ReturnType,
    SelectorOutput,
    State,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from redux_demos.main import Store


class Autorun(Generic[State, SelectorOutput, ComparatorOutput, ReturnType]):
    """Run a wrapped function in response to specific state changes in the store."""

    def __init__(
        self: Autorun,
        *,
        store: Store[State, Any],
        selector: Callable[[State], SelectorOutput],
        comparator: Callable[[State], Any] | None,
        func: Callable[[SelectorOutput], ReturnType],
        options: AutorunOptions,
    ) -> None:
        """Initialize the Autorun instance."""
        if hasattr(func, '__name__'):
            self.__name__ = f'Autorun:{func.__name__}'
        else:
            self.__name__ = f'Autorun:{func}'
        self.__module__ = func.__module__

        self._store = store
        self._selector = selector
        self._comparator = comparator
        self._func = func
        self._options = options
        self._should_be_called = False

        self._last_selector_result: SelectorOutput = cast('SelectorOutput', NOT_SET)
        self._last_comparator_result: ComparatorOutput = cast(
            'ComparatorOutput',
            object(),
        )
        self._latest_value: ReturnType = options.default_value
        self._subscriptions: dict[object, Callable[[ReturnType], Any]] = {}

        if self.check() and options.initial_call:
            self._should_be_called = False
            self.call()

        self._unsubscribe: Callable[[], None] | None = store.subscribe(self.react)

    def react(self: Autorun) -> None:
        """React to state changes in the store."""
        if self.check():
            self._should_be_called = False
            self.call()

    def unsubscribe(self: Autorun) -> None:
        """Unsubscribe the autorun from the store."""
        if self._unsubscribe:
            self._unsubscribe()
            self._unsubscribe = None

    def inform_subscribers(self: Autorun) -> None:
        """Inform all subscribers about the latest value."""
        for subscriber in list(self._subscriptions.values()):
            subscriber(self._latest_value)

    def check(self: Autorun) -> bool:
        """Check if the autorun should be called based on the current state."""
        state = self._store._state  # noqa: SLF001
        if state is None:
            return False
        selector_result = self._selector(state)
        if self._comparator is None:
            comparator_result = cast('ComparatorOutput', selector_result)
        else:
            comparator_result = self._comparator(state)
        self._should_be_called = (
            self._should_be_called or comparator_result != self._last_comparator_result
        )
        self._last_selector_result = selector_result
        self._last_comparator_result = comparator_result
        return self._should_be_called

    def call(self: Autorun) -> None:
        """Call the wrapped function with the latest selector result."""
        if self._last_selector_result is NOT_SET:
            return
        previous_value = self._latest_value
        self._latest_value = self._func(self._last_selector_result)
        if self._latest_value is not previous_value:
            self.inform_subscribers()

    def __call__(
        self: Autorun[State, SelectorOutput, ComparatorOutput, ReturnType],
    ) -> ReturnType:
        """Return the latest value, recomputing it if the selection changed."""
        self.check()
        if self._should_be_called or not self._options.memoization:
            self._should_be_called = False
            self.call()
        return self._latest_value

    def __repr__(self: Autorun) -> str:
        """Return a string representation of the Autorun instance."""
        return (
            super().__repr__()
            + f'(func: {self._func}, last_value: {self._latest_value})'
        )

    @property
    def value(
        self: Autorun[State, SelectorOutput, ComparatorOutput, ReturnType],
    ) -> ReturnType:
        """Get the latest value of the autorun function."""
        return self._latest_value

    def subscribe(
        self: Autorun[State, SelectorOutput, ComparatorOutput, ReturnType],
        callback: Callable[[ReturnType], Any],
        *,
        initial_run: bool = True,
    ) -> Callable[[], None]:
        """Subscribe to the autorun to be notified when its value changes."""
        token = object()
        self._subscriptions[token] = callback

        if initial_run:
            callback(self.value)

        def unsubscribe() -> None:
            self._subscriptions.pop(token, None)

        return unsubscribe
