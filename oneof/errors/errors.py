from __future__ import annotations

from typing import Any

from oneof.kinds import name


class OneOfError(Exception):
    def __init__(self, mesg: str, code: int) -> None:
        super().__init__(mesg)
        self.mesg = mesg
        self.code = code

    def __str__(self) -> str:
        return f"[{self.code:03d}] {self.mesg}"

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.mesg, self.code))


# Error codes 100-199


class KindMismatchError(OneOfError, TypeError):
    def __init__(self, value: Any, kind: Any) -> None:
        got = "no value" if value is None else f"{value!r} of type {type(value).__name__}"
        super().__init__(f"cannot convert {got} to {name(kind)}", 100)
        self.value = value
        self.kind = kind

    def __reduce__(self) -> str | tuple[Any, ...]:
        return (self.__class__, (self.value, self.kind))
