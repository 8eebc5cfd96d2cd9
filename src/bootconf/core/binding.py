"""Structural binding of decoded JSON onto caller-owned destinations.

A destination is either a dataclass instance or a mutable mapping. Dataclass
fields are matched by name:

- ``field(metadata={"json": "name"})`` renames a field, ``"-"`` hides it,
- otherwise the field name is tried exactly, then case-insensitively,
- fields starting with ``_`` are private and never touched.

Keys with no matching field are ignored and fields missing from the document
keep whatever value the destination already held. Values are checked against
the field's type hint; a mismatch raises :class:`BindError`.
"""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping, MutableMapping, Sequence
from enum import Enum
from typing import Any, Union, get_args, get_origin, get_type_hints

from .errors import BindError

JSON_NAME = "json"
_SKIP = "-"


def bind(dest: Any, data: Any) -> None:
    """Populate ``dest`` in place from decoded JSON ``data``."""
    if _is_instance(dest):
        _bind_dataclass(dest, data, "")
    elif isinstance(dest, MutableMapping):
        if not isinstance(data, dict):
            raise BindError("", "object", json_type(data))
        dest.update(data)
    else:
        raise TypeError(
            f"unsupported destination {type(dest).__name__}: use a dataclass instance or a dict"
        )


def unbind(value: Any) -> Any:
    """Convert a destination back into JSON-ready data (inverse of :func:`bind`)."""
    if _is_instance(value):
        return {
            _json_name(f): unbind(getattr(value, f.name))
            for f in _bindable_fields(value)
        }
    if isinstance(value, Mapping):
        return {str(k): unbind(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [unbind(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    return value


def json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


# ----------------------------
# Dataclass helpers
# ----------------------------

def _is_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def _json_name(f: dataclasses.Field) -> str:
    return f.metadata.get(JSON_NAME, f.name)


def _bindable_fields(obj: Any) -> list[dataclasses.Field]:
    return [
        f
        for f in dataclasses.fields(obj)
        if not f.name.startswith("_") and f.metadata.get(JSON_NAME) != _SKIP
    ]


def _match_field(fields: list[dataclasses.Field], key: str) -> dataclasses.Field | None:
    for f in fields:
        if _json_name(f) == key:
            return f
    folded = key.casefold()
    for f in fields:
        if _json_name(f).casefold() == folded:
            return f
    return None


def _hints(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls)
    except NameError:
        # Annotations referring to names the module can't see (e.g. classes
        # local to a function) bind as Any.
        return {
            f.name: (Any if isinstance(f.type, str) else f.type)
            for f in dataclasses.fields(cls)
        }


def _bind_dataclass(dest: Any, data: Any, path: str) -> None:
    if not isinstance(data, dict):
        raise BindError(path, type(dest).__name__, json_type(data))
    if dest.__dataclass_params__.frozen:
        raise TypeError(f"{type(dest).__name__} is frozen and cannot be populated in place")

    fields = _bindable_fields(dest)
    hints = _hints(type(dest))
    for key, value in data.items():
        f = _match_field(fields, key)
        if f is None:
            continue
        sub = _join(path, f.name)
        hint = hints.get(f.name, Any)

        if value is None:
            if _accepts_none(hint):
                setattr(dest, f.name, None)
            continue

        current = getattr(dest, f.name, None)
        if _is_instance(current) and not current.__dataclass_params__.frozen:
            _bind_dataclass(current, value, sub)
            continue

        setattr(dest, f.name, _convert(hint, value, sub))


def _new_instance(cls: type, path: str) -> Any:
    try:
        return cls()
    except TypeError as e:
        raise BindError(path, f"{cls.__name__} (every field needs a default)", "object") from e


# ----------------------------
# Value conversion
# ----------------------------

def _join(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


def _type_name(hint: Any) -> str:
    if isinstance(hint, type):
        return hint.__name__
    return repr(hint).replace("typing.", "")


def _accepts_none(hint: Any) -> bool:
    if hint is Any or hint is object or hint is type(None):
        return True
    if _is_union(hint):
        return type(None) in get_args(hint)
    return False


def _is_union(hint: Any) -> bool:
    origin = get_origin(hint)
    return origin is Union or origin is types.UnionType


def _convert(hint: Any, value: Any, path: str) -> Any:
    if hint is Any or hint is object:
        return value

    if value is None:
        if _accepts_none(hint):
            return None
        raise BindError(path, _type_name(hint), "null")

    if _is_union(hint):
        for arg in get_args(hint):
            if arg is type(None):
                continue
            try:
                return _convert(arg, value, path)
            except BindError:
                continue
        raise BindError(path, _type_name(hint), json_type(value))

    origin = get_origin(hint)
    args = get_args(hint)

    if origin in (list, Sequence):
        if not isinstance(value, list):
            raise BindError(path, _type_name(hint), json_type(value))
        item = args[0] if args else Any
        return [_convert(item, v, f"{path}[{i}]") for i, v in enumerate(value)]

    if origin is tuple:
        if not isinstance(value, list):
            raise BindError(path, _type_name(hint), json_type(value))
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_convert(args[0], v, f"{path}[{i}]") for i, v in enumerate(value))
        if args and len(args) != len(value):
            raise BindError(path, _type_name(hint), f"array of length {len(value)}")
        return tuple(
            _convert(args[i] if args else Any, v, f"{path}[{i}]") for i, v in enumerate(value)
        )

    if origin in (dict, Mapping, MutableMapping):
        if not isinstance(value, dict):
            raise BindError(path, _type_name(hint), json_type(value))
        item = args[1] if len(args) == 2 else Any
        return {k: _convert(item, v, _join(path, k)) for k, v in value.items()}

    if hint is bool:
        if isinstance(value, bool):
            return value
    elif hint is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif hint is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return float(value)
            except OverflowError:
                raise BindError(path, "float", "number out of range") from None
    elif hint is str:
        if isinstance(value, str):
            return value
    elif hint in (list, tuple):
        if isinstance(value, list):
            return hint(value)
    elif hint is dict:
        if isinstance(value, dict):
            return value
    elif isinstance(hint, type) and issubclass(hint, Enum):
        try:
            return hint(value)
        except ValueError:
            pass
    elif isinstance(hint, type) and dataclasses.is_dataclass(hint):
        instance = _new_instance(hint, path)
        _bind_dataclass(instance, value, path)
        return instance
    elif isinstance(hint, type) and isinstance(value, hint):
        return value

    raise BindError(path, _type_name(hint), json_type(value))
