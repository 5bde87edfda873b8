from __future__ import annotations

import logging
import typing
from typing import TYPE_CHECKING, Annotated, Any, get_args, get_origin

import typing_extensions

from oneof.kinds import validate

if TYPE_CHECKING:
    from collections.abc import Callable

    from oneof.kinds import Kind

logger = logging.getLogger(__name__)

_ALIASES = (typing.TypeAliasType, typing_extensions.TypeAliasType)

_factories: dict[Any, Callable[[], Any]] = {
    bool: lambda: False,
    int: lambda: 0,
    float: lambda: 0.0,
    complex: lambda: 0j,
    str: lambda: "",
    bytes: lambda: b"",
    tuple: tuple,
    list: list,
    dict: dict,
    set: set,
    frozenset: frozenset,
}


def register_default(kind: Kind, factory: Callable[[], Any]) -> None:
    """Register the zero value handed out when extraction of `kind` fails.

    The factory is called once per failed extraction, so mutable defaults are
    never shared between callers. Registering a kind twice replaces the
    previous factory.

    Args:
        kind (Kind): The kind the factory produces values for.
        factory (Callable[[], Any]): A zero-argument callable returning the default.

    Example:
        Giving a user class an empty placeholder::

            register_default(User, lambda: User(id=0, name=""))

    """
    validate(kind)

    if not callable(factory):
        msg = f"factory must be `Callable`, got {type(factory).__name__}"
        raise TypeError(msg)

    logger.debug("registered default for %r", kind)
    _factories[kind] = factory


def default_of(kind: Kind) -> Any:
    """Return the zero value of `kind`, or `None` when it has none."""
    if (factory := _lookup(kind)) is not None:
        return factory()

    if isinstance(kind, _ALIASES):
        return default_of(kind.__value__)

    if (supertype := getattr(kind, "__supertype__", None)) is not None:
        return default_of(supertype)

    origin = get_origin(kind)

    if origin is Annotated:
        return default_of(get_args(kind)[0])

    if origin is not None and (factory := _lookup(origin)) is not None:
        return factory()

    return None


def _lookup(kind: Kind) -> Callable[[], Any] | None:
    try:
        return _factories.get(kind)
    except TypeError:
        # typing forms with unhashable arguments
        return None
