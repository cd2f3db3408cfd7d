from enum import Enum
from typing import Any


class Role(str, Enum):
    UNKNOWN = "unknown"
    USER    = "user"
    ADMIN   = "admin"

    @classmethod
    def from_string(cls, value: Any) -> "Role":
        """Map a server supplied role onto a member. Anything unrecognised is UNKNOWN."""
        if isinstance(value, Role):
            return value

        if not isinstance(value, str):
            return cls.UNKNOWN

        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN
