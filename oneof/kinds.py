from __future__ import annotations

import typing
from types import NoneType, UnionType
from typing import Annotated, Any, Union, get_args, get_origin

import typing_extensions
from typing_extensions import is_protocol

# A kind is anything usable as A or B in OneOf[A, B]: a class or one of the
# typing forms handled below.
type Kind = Any

_ANY = (typing.Any, typing_extensions.Any)
_ALIASES = (typing.TypeAliasType, typing_extensions.TypeAliasType)
_LITERALS = (typing.Literal, typing_extensions.Literal)
_UNIONS = (Union, UnionType)


def validate(kind: Kind) -> Kind:
    """Return `kind` unchanged if it can be tested at runtime, raise `TypeError` otherwise."""
    if kind is None:
        return NoneType

    if kind in _ANY:
        return kind

    if isinstance(kind, _ALIASES):
        validate(kind.__value__)
        return kind

    if (supertype := getattr(kind, "__supertype__", None)) is not None:
        validate(supertype)
        return kind

    origin = get_origin(kind)

    if origin is Annotated:
        validate(get_args(kind)[0])
        return kind

    if origin in _UNIONS:
        for arg in get_args(kind):
            validate(arg)
        return kind

    if origin in _LITERALS:
        return kind

    if origin is not None:
        if not isinstance(origin, type):
            msg = f"kind must be a class or a supported typing form, got {kind!r}"
            raise TypeError(msg)
        return kind

    if not isinstance(kind, type):
        msg = f"kind must be a class or a supported typing form, got {kind!r}"
        raise TypeError(msg)

    if is_protocol(kind) and not getattr(kind, "_is_runtime_protocol", False):
        msg = f"protocol kind must be @runtime_checkable, got {kind.__name__}"
        raise TypeError(msg)

    return kind


def conforms(value: Any, kind: Kind) -> bool:
    """Test whether `value` can be read as `kind`.

    The test looks at the live value only. An absent value (`None`) conforms
    to no kind at all, including `object`, `Any` and optional kinds.

    Args:
        value (Any): The value to test.
        kind (Kind): A kind accepted by `validate`.

    Returns:
        bool: True when `value` is present and belongs to `kind`.

    """
    if value is None:
        return False

    if kind in _ANY:
        return True

    if isinstance(kind, _ALIASES):
        return conforms(value, kind.__value__)

    if (supertype := getattr(kind, "__supertype__", None)) is not None:
        return conforms(value, supertype)

    origin = get_origin(kind)

    if origin is Annotated:
        return conforms(value, get_args(kind)[0])

    if origin in _UNIONS:
        return any(conforms(value, arg) for arg in get_args(kind))

    if origin in _LITERALS:
        return any(type(value) is type(arg) and value == arg for arg in get_args(kind))

    # element types of parameterized generics are not inspected
    if origin is not None:
        kind = origin

    return isinstance(value, kind)


def name(kind: Kind) -> str:
    if kind in _ANY:
        return "Any"

    if isinstance(kind, _ALIASES) or getattr(kind, "__supertype__", None) is not None:
        return kind.__name__

    origin = get_origin(kind)

    if origin in _UNIONS:
        return " | ".join(name(arg) for arg in get_args(kind))

    if origin is None and isinstance(kind, type):
        return "None" if kind is NoneType else kind.__name__

    return repr(kind).replace("typing.", "").replace("typing_extensions.", "")
