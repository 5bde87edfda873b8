from __future__ import annotations

from .errors import KindMismatchError, OneOfError

__all__ = ["KindMismatchError", "OneOfError"]
