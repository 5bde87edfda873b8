from __future__ import annotations

from .defaults import default_of, register_default
from .errors import KindMismatchError, OneOfError
from .oneof import OneOf
from .utils import returns

__all__ = ["KindMismatchError", "OneOf", "OneOfError", "default_of", "register_default", "returns"]
