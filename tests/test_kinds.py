from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Annotated, Any, ClassVar, Literal, NewType, Optional, Protocol, Union, runtime_checkable

import pytest

from oneof import OneOf
from oneof.kinds import conforms, name, validate

UserId = NewType("UserId", int)

type Number = int | float


@runtime_checkable
class Closeable(Protocol):
    def close(self) -> None: ...


class Sized(Protocol):
    def size(self) -> int: ...


class Resource:
    def close(self) -> None:
        pass


@pytest.mark.parametrize(
    ("value", "kind", "expected"),
    [
        (1, int, True),
        (True, int, True),
        (1, bool, False),
        ("a", int, False),
        ("a", object, True),
        ("a", Any, True),
        (1, int | None, True),
        ("a", int | None, False),
        ("a", Union[int, str], True),
        (1, Optional[int], True),
        ([1], list[int], True),
        (["a"], list[int], True),
        ((1, 2), list[int], False),
        ([1], Sequence[int], True),
        (len, Callable[[Any], int], True),
        ("ok", Literal["ok", "ko"], True),
        ("no", Literal["ok", "ko"], False),
        (True, Literal[1], False),
        (5, Annotated[int, "seconds"], True),
        (5, UserId, True),
        ("5", UserId, False),
        (1.5, Number, True),
        ("1.5", Number, False),
        (Resource(), Closeable, True),
        (object(), Closeable, False),
        (int, type[int], True),
    ],
)
def test_conforms(value: Any, kind: Any, expected: bool) -> None:
    assert conforms(value, kind) is expected


@pytest.mark.parametrize("kind", [object, Any, int | None, Optional[str], type(None), Closeable])
def test_absent_conforms_to_nothing(kind: Any) -> None:
    assert not conforms(None, kind)


@pytest.mark.parametrize(
    "kind",
    [int, Any, int | None, list[int], Literal[1], Annotated[int, "x"], UserId, Number, Closeable, type[int]],
)
def test_validate(kind: Any) -> None:
    assert validate(kind) is kind


def test_validate_none_is_none_type() -> None:
    assert validate(None) is type(None)


@pytest.mark.parametrize("kind", [5, "int", ClassVar[int], Sized])
def test_validate_rejects(kind: Any) -> None:
    with pytest.raises(TypeError):
        validate(kind)


def test_protocol_must_be_runtime_checkable() -> None:
    with pytest.raises(TypeError, match="runtime_checkable"):
        OneOf[Sized, str]


@pytest.mark.parametrize(
    ("kind", "expected"),
    [
        (int, "int"),
        (type(None), "None"),
        (Any, "Any"),
        (int | None, "int | None"),
        (Optional[int], "int | None"),
        (list[int], "list[int]"),
        (Literal["a"], "Literal['a']"),
        (UserId, "UserId"),
        (Number, "Number"),
        (Closeable, "Closeable"),
    ],
)
def test_name(kind: Any, expected: str) -> None:
    assert name(kind) == expected


def test_union_of_typing_forms() -> None:
    value = OneOf[UserId, Number](7)

    assert value.try_get_a() == (7, True)
    assert value.try_get_b() == (7, True)
    assert OneOf[UserId, Number](7.5).try_get_a() == (0, False)
