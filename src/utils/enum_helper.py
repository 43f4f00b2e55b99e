"""Enum conversion utilities"""

from enum import Enum
from typing import TypeVar, Type, Any, List

# Generic type for any Enum subclass
E = TypeVar("E", bound=Enum)

class EnumHelper:
    """
    Utility class for reading enums out of YAML:
    - Parse by member name (case-insensitive) or by member value
    - List accepted spellings for error messages
    """

    @staticmethod
    def parse(enum_class: Type[E], raw: Any) -> E:
        """
        Parse a YAML scalar into an Enum member.

        Accepts an existing member, a member value ("serpentine", 90) or a
        member name ("SERPENTINE", "deg_90").

        Raises:
            ValueError: no member matches
        """
        if not issubclass(enum_class, Enum):
            raise TypeError(f"{enum_class} is not an Enum class")

        if isinstance(raw, enum_class):
            return raw

        for member in enum_class:
            if member.value == raw:
                return member

        if isinstance(raw, str):
            key = raw.strip()
            for member in enum_class:
                if isinstance(member.value, str) and member.value.lower() == key.lower():
                    return member
                if member.name.upper() == key.upper():
                    return member

        raise ValueError(
            f"Invalid {enum_class.__name__}: {raw!r} "
            f"(expected one of {EnumHelper.list_values(enum_class)})"
        )

    @staticmethod
    def list_values(enum_class: Type[E]) -> List[Any]:
        return [member.value for member in enum_class]
