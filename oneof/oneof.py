from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar, NoReturn, Self, TypeVar, get_origin

from oneof.defaults import default_of
from oneof.errors import KindMismatchError
from oneof.kinds import conforms, name, validate

if TYPE_CHECKING:
    from oneof.kinds import Kind

logger = logging.getLogger(__name__)


class OneOf[A, B]:
    """A value that is either an `A` or a `B`.

    `OneOf` is specialized by subscription, the resulting class is cached and
    reused for the same pair of kinds::

        OneOf[int, str](100)
        OneOf[int, str].from_b("hello")

    A union holds exactly one value and never changes after construction.
    Extraction tests the live value against the requested kind, it does not
    remember which constructor was used. When the kinds overlap, for example
    `OneOf[object, str]`, both extractions may succeed for the same value.

    `None` is the absent value. An absent union reports `has_value()` as
    False and every extraction of it fails, whatever the kinds are.
    """

    __match_args__ = ("value",)
    __slots__ = ("_value",)

    kinds: ClassVar[tuple[Kind, Kind] | None] = None

    _specializations: ClassVar[dict[tuple[Any, ...], type[OneOf[Any, Any]]]] = {}

    def __class_getitem__(cls, params: Any) -> Any:
        if not isinstance(params, tuple) or len(params) != 2:
            msg = f"OneOf must be subscripted with exactly two kinds, got {params!r}"
            raise TypeError(msg)

        # generic usage such as OneOf[A, B] in annotations stays a typing alias
        if any(isinstance(p, TypeVar) or (get_origin(p) is not None and getattr(p, "__parameters__", ())) for p in params):
            return super().__class_getitem__(params)  # type: ignore[misc]

        if cls.kinds is not None:
            msg = f"{cls.__name__} is already specialized"
            raise TypeError(msg)

        a, b = (validate(p) for p in params)

        try:
            return cls._specializations[(cls, a, b)]
        except KeyError:
            specialization = cls._specialize(a, b)
            cls._specializations[(cls, a, b)] = specialization
            return specialization
        except TypeError:
            # kinds with unhashable arguments are not cached
            return cls._specialize(a, b)

    @classmethod
    def _specialize(cls, a: Kind, b: Kind) -> type[OneOf[Any, Any]]:
        qualname = f"{cls.__qualname__}[{name(a)}, {name(b)}]"
        logger.debug("specialized %s", qualname)
        return type(
            f"{cls.__name__}[{name(a)}, {name(b)}]",
            (cls,),
            {"__slots__": (), "__module__": cls.__module__, "__qualname__": qualname, "kinds": (a, b)},
        )

    def __init__(self, value: A | B) -> None:
        if self.kinds is None:
            msg = f"{type(self).__name__} must be specialized before use, e.g. {type(self).__name__}[int, str](value)"
            raise TypeError(msg)
        object.__setattr__(self, "_value", value)

    @classmethod
    def from_a(cls, value: A) -> Self:
        return cls(value)

    @classmethod
    def from_b(cls, value: B) -> Self:
        return cls(value)

    @classmethod
    def coerce(cls, value: A | B | OneOf[Any, Any]) -> Self:
        """Return `value` as this union.

        Unions of this exact class are returned as is, other unions are
        rewrapped around their stored value and bare values are wrapped.
        """
        if type(value) is cls:
            return value  # type: ignore[return-value]
        if isinstance(value, OneOf):
            return cls(value._value)  # noqa: SLF001
        return cls(value)

    @property
    def value(self) -> A | B | None:
        return self._value

    def has_value(self) -> bool:
        return self._value is not None

    def is_a(self) -> bool:
        return conforms(self._value, self._kinds()[0])

    def is_b(self) -> bool:
        return conforms(self._value, self._kinds()[1])

    def try_get_a(self) -> tuple[A, bool]:
        """Attempt to read the value as an `A`.

        Returns:
            tuple[A, bool]: The value and True when it conforms to `A`,
            otherwise the default of `A` and False.

        Example:
            Reading a number back::

                n, ok = OneOf[int, str](100).try_get_a()  # (100, True)

        """
        a, _ = self._kinds()
        if conforms(self._value, a):
            return self._value, True  # type: ignore[return-value]
        return default_of(a), False

    def try_get_b(self) -> tuple[B, bool]:
        """Attempt to read the value as a `B`, see `try_get_a`."""
        _, b = self._kinds()
        if conforms(self._value, b):
            return self._value, True  # type: ignore[return-value]
        return default_of(b), False

    def to_a(self) -> A:
        """Return the value as an `A`.

        Raises:
            KindMismatchError: If the value is absent or does not conform to `A`.

        """
        a, _ = self._kinds()
        if not conforms(self._value, a):
            self._mismatch(a)
        return self._value  # type: ignore[return-value]

    def to_b(self) -> B:
        """Return the value as a `B`.

        Raises:
            KindMismatchError: If the value is absent or does not conform to `B`.

        """
        _, b = self._kinds()
        if not conforms(self._value, b):
            self._mismatch(b)
        return self._value  # type: ignore[return-value]

    def _kinds(self) -> tuple[Kind, Kind]:
        assert self.kinds is not None, "kinds must be set on a specialized union"
        return self.kinds

    def _mismatch(self, kind: Kind) -> NoReturn:
        logger.debug("%r cannot be converted to %s", self, name(kind))
        raise KindMismatchError(self._value, kind)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OneOf):
            return self._value == other._value  # noqa: SLF001
        return self._value == other

    def __ne__(self, other: object) -> bool:
        return not (self == other)

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return "" if self._value is None else str(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._value,))

    def __setattr__(self, attr: str, value: Any) -> NoReturn:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, attr: str) -> NoReturn:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)
