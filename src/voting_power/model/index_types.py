from __future__ import annotations

from enum import Enum


class IndexKind(str, Enum):
    ABSOLUTE = "absolute"
    NORMALIZED = "normalized"

    @classmethod
    def from_flag(cls, absolute: bool) -> "IndexKind":
        return cls.ABSOLUTE if absolute else cls.NORMALIZED


class Method(str, Enum):
    EXACT = "exact"
    APPROX = "approx"
    ENUMERATE = "enumerate"
