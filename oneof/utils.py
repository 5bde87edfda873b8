from __future__ import annotations

from functools import wraps
from typing import TYPE_CHECKING, Any

from oneof.oneof import OneOf

if TYPE_CHECKING:
    from collections.abc import Callable


def returns[**P, A, B](union: type[OneOf[A, B]]) -> Callable[[Callable[P, A | B | OneOf[Any, Any]]], Callable[P, OneOf[A, B]]]:
    """Wrap the return value of the decorated function in `union`.

    The decorated function may return a bare `A`, a bare `B` or a union, the
    caller always receives a `union`.

    Args:
        union (type[OneOf[A, B]]): A specialized union, e.g. `OneOf[int, str]`.

    Returns:
        Callable: The decorator.

    Example:
        Returning either a quotient or an error message::

            @returns(OneOf[int, str])
            def divide(a: int, b: int) -> int | str:
                if b == 0:
                    return "Cannot divide by zero"
                return a // b

    """
    if not (isinstance(union, type) and issubclass(union, OneOf) and union.kinds is not None):
        msg = f"union must be a specialized `OneOf`, got {union!r}"
        raise TypeError(msg)

    def decorator(func: Callable[P, A | B | OneOf[Any, Any]]) -> Callable[P, OneOf[A, B]]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> OneOf[A, B]:
            return union.coerce(func(*args, **kwargs))

        return wrapper

    return decorator
