"""Redux store holding the state of the demo applications."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Generic, cast

from redux_demos.autorun import Autorun
from redux_demos.basic_types import (
    Action,
    ActionMiddleware,
    AutorunOptions,
    BaseAction,
    ComparatorOutput,
    DispatchParameters,
    InitAction,
    Listener,
    ReducerType,
    ReentrantDispatchError,
    ReturnType,
    SelectorOutput,
    SnapshotAtom,
    State,
    StoreOptions,
)
from redux_demos.serialization_mixin import SerializationMixin

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class Store(SerializationMixin, Generic[State, Action]):
    """Redux store for managing state.

    The store owns a single immutable state value. `dispatch` is the only write
    path: it runs the reducer, swaps the state reference and notifies listeners.
    Dispatch calls are serialised, readers always observe a complete snapshot.
    """

    def __init__(
        self: Store[State, Action],
        reducer: ReducerType[State, Action | InitAction],
        options: StoreOptions | None = None,
    ) -> None:
        """Create a new store."""
        self.store_options = options or StoreOptions()
        self.reducer = reducer

        self._action_middlewares = list(self.store_options.action_middlewares)

        self._state: State | None = None
        self._listeners: dict[object, Listener] = {}

        self._lock = threading.Lock()
        self._reducing_thread: int | None = None

        if self.store_options.auto_init:
            self.dispatch(InitAction())

    @property
    def state(self: Store[State, Action]) -> State:
        """Return the current state of the store."""
        if self._state is None:
            msg = 'Store has not been initialized yet.'
            raise RuntimeError(msg)
        return self._state

    def get_state(self: Store[State, Action]) -> State:
        """Return the current state of the store."""
        return self.state

    def _call_listeners(self: Store[State, Action]) -> None:
        for listener in list(self._listeners.values()):
            listener()

    def _apply_middlewares(
        self: Store[State, Action],
        action: BaseAction,
    ) -> BaseAction | None:
        for action_middleware in self._action_middlewares:
            action_ = action_middleware(action)
            if action_ is None:
                logger.debug('Action %s dropped by %s', action, action_middleware)
                return None
            action = action_
        return action

    def _reduce(self: Store[State, Action], action: BaseAction) -> None:
        if self._reducing_thread == threading.get_ident():
            raise ReentrantDispatchError(action)
        with self._lock:
            self._reducing_thread = threading.get_ident()
            try:
                state = self.reducer(self._state, cast('Action', action))
            finally:
                self._reducing_thread = None
            self._state = state
        logger.debug('Reduced %s', action)

    def dispatch(
        self: Store[State, Action],
        *parameters: DispatchParameters,
    ) -> None:
        """Dispatch actions, one reducer pass and one notification per action.

        If the reducer raises, the state stays at its value before that action and
        the exception propagates, actions after it are not dispatched.
        """
        actions = [
            action
            for actions in parameters
            for action in (actions if isinstance(actions, Sequence) else [actions])
        ]
        for action_ in actions:
            action = self._apply_middlewares(action_)
            if action is None:
                continue
            self._reduce(action)
            self._call_listeners()

    def subscribe(
        self: Store[State, Action],
        listener: Listener,
    ) -> Callable[[], None]:
        """Subscribe to state changes, the listener is called without arguments."""
        token = object()
        self._listeners[token] = listener

        def unsubscribe() -> None:
            self._listeners.pop(token, None)

        return unsubscribe

    def autorun(
        self: Store[State, Action],
        selector: Callable[[State], SelectorOutput],
        comparator: Callable[[State], ComparatorOutput] | None = None,
        *,
        options: AutorunOptions | None = None,
    ) -> Callable[
        [Callable[[SelectorOutput], ReturnType]],
        Autorun[State, SelectorOutput, ComparatorOutput, ReturnType],
    ]:
        """Create a new autorun, reflecting on state changes."""

        def autorun_decorator(
            func: Callable[[SelectorOutput], ReturnType],
        ) -> Autorun[State, SelectorOutput, ComparatorOutput, ReturnType]:
            return Autorun(
                store=cast('Any', self),
                selector=selector,
                comparator=comparator,
                func=func,
                options=options or AutorunOptions(),
            )

        return autorun_decorator

    @property
    def snapshot(self: Store[State, Action]) -> SnapshotAtom:
        """Return a snapshot of the current state of the store."""
        return self.serialize_value(self._state)

    def register_action_middleware(
        self: Store[State, Action],
        action_middleware: ActionMiddleware,
    ) -> None:
        """Register an action dispatch middleware."""
        self._action_middlewares.append(action_middleware)

    def unregister_action_middleware(
        self: Store[State, Action],
        action_middleware: ActionMiddleware,
    ) -> None:
        """Unregister an action dispatch middleware."""
        self._action_middlewares.remove(action_middleware)
