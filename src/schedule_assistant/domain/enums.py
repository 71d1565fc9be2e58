from __future__ import annotations

from enum import Enum


class UpdateOperation(str, Enum):
    SET = "set"
    CLEAR = "clear"

    @classmethod
    def parse(cls, value: object) -> "UpdateOperation":
        # Anything other than "clear" is treated as an upsert.
        if isinstance(value, str) and value.strip().lower() == cls.CLEAR.value:
            return cls.CLEAR
        return cls.SET
