"""Utility functions for the reducers."""

from __future__ import annotations

import uuid
from numbers import Real
from typing import TYPE_CHECKING, Any

from redux_demos.basic_types import InvalidPayloadError

if TYPE_CHECKING:
    from redux_demos.basic_types import BaseAction


def generate_id() -> str:
    """Return a random 128-bit identifier in its canonical uuid4 form."""
    return str(uuid.uuid4())


def require_str(action: BaseAction, field: str, value: Any) -> str:  # noqa: ANN401
    """Return `value` if it is a string, possibly empty, otherwise raise."""
    if not isinstance(value, str):
        raise InvalidPayloadError(action, field, f'expected text, got {value!r}')
    return value


def require_text(action: BaseAction, field: str, value: Any) -> str:  # noqa: ANN401
    """Return `value` if it is a non-blank string, otherwise raise."""
    require_str(action, field, value)
    if not value.strip():
        raise InvalidPayloadError(action, field, 'must not be blank')
    return value


def optional_number(
    action: BaseAction,
    field: str,
    value: Any,  # noqa: ANN401
) -> float | None:
    """Return `value` if it is `None` or a non-negative number, otherwise raise."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidPayloadError(action, field, f'expected a number, got {value!r}')
    if value < 0:
        raise InvalidPayloadError(action, field, 'must not be negative')
    return value
