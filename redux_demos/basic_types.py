# ruff: noqa: D100, D101, D102, D103, D107
from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import field
from types import NoneType
from typing import Any, Protocol, TypeAlias

from immutable import Immutable
from typing_extensions import TypeVar


class BaseAction(Immutable): ...


class InitAction(BaseAction): ...


# Type variables
State = TypeVar('State', bound=Immutable | None, infer_variance=True)
Action = TypeVar('Action', bound=BaseAction | None, infer_variance=True)
SelectorOutput = TypeVar('SelectorOutput', infer_variance=True)
ComparatorOutput = TypeVar('ComparatorOutput', infer_variance=True)
ReturnType = TypeVar('ReturnType', infer_variance=True)
ReducerType: TypeAlias = Callable[[State | None, Action], State]
Listener: TypeAlias = Callable[[], Any]


class InitializationActionError(Exception):
    def __init__(self: InitializationActionError, action: BaseAction) -> None:
        super().__init__(
            f"""The only accepted action type when state is None is "InitAction", \
action "{action}" is not allowed.""",
        )
        self.action = action


class ReentrantDispatchError(RuntimeError):
    def __init__(self: ReentrantDispatchError, action: BaseAction) -> None:
        super().__init__(
            f"""Reducers may not dispatch actions, action "{action}" was dispatched \
while another action was being reduced.""",
        )
        self.action = action


class InvalidPayloadError(ValueError):
    def __init__(
        self: InvalidPayloadError,
        action: BaseAction,
        field: str,
        reason: str,
    ) -> None:
        super().__init__(
            f'Invalid `{field}` in payload of "{type(action).__name__}": {reason}',
        )
        self.action = action
        self.field = field
        self.reason = reason


class ActionMiddleware(Protocol):
    def __call__(self: ActionMiddleware, action: BaseAction) -> BaseAction | None: ...


class StoreOptions(Immutable):
    auto_init: bool = True
    action_middlewares: Sequence[ActionMiddleware] = field(default_factory=tuple)


NOT_SET = object()


class AutorunOptions(Immutable):
    default_value: Any = None
    initial_call: bool = True
    memoization: bool = True


DispatchParameters: TypeAlias = BaseAction | Sequence[BaseAction]

SnapshotAtom = (
    int
    | float
    | str
    | bool
    | NoneType
    | dict[str, 'SnapshotAtom']
    | list['SnapshotAtom']
)
