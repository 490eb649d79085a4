"""Mixin for turning store state into JSON-compatible snapshots."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from types import NoneType
from typing import TYPE_CHECKING, Any

from immutable import Immutable, is_immutable

if TYPE_CHECKING:
    from redux_demos.basic_types import SnapshotAtom


class SerializationMixin:
    """Mixin for serialization."""

    @classmethod
    def serialize_value(
        cls: type[SerializationMixin],
        obj: object | type,
    ) -> SnapshotAtom:
        """Serialize a value to a snapshot atom."""
        if isinstance(obj, int | float | str | bool | NoneType):
            return obj
        if isinstance(obj, list | tuple):
            return [cls.serialize_value(i) for i in obj]
        if isinstance(obj, Mapping):
            return {str(key): cls.serialize_value(value) for key, value in obj.items()}
        if is_immutable(obj):
            return cls._serialize_dataclass_to_dict(obj)
        msg = f'Unable to serialize object with type `{type(obj)}`'
        raise TypeError(msg)

    @classmethod
    def _serialize_dataclass_to_dict(
        cls: type[SerializationMixin],
        obj: Immutable,
    ) -> dict[str, Any]:
        result: dict[str, object] = {'_type': obj.__class__.__name__}
        for field in dataclasses.fields(obj):
            value = cls.serialize_value(getattr(obj, field.name))
            result[field.name] = value
        return result
