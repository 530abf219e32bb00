from enum import Enum
from dataclasses import dataclass
from typing import Union, List, Tuple, Any

class ValueType(Enum):
    NONE = "none"
    STRING = "string"
    BOOLEAN = "boolean"
    FLOAT = "float"
    INTEGER = "integer"

Scalar = Union[str, bool, float, int]

@dataclass(frozen=True)
class ConfigValue:
    """Represents a parsed configuration value.

    Scalars are stored as one-element tuples; arrays keep every element,
    all of the same ``type``.
    """
    raw: str
    type: ValueType
    values: Tuple[Scalar, ...] = ()
    is_array: bool = False

    @classmethod
    def none(cls, raw: str = "", is_array: bool = False) -> 'ConfigValue':
        return cls(raw, ValueType.NONE, (), is_array)

    @property
    def is_none(self) -> bool:
        return self.type is ValueType.NONE

    @property
    def value(self) -> Union[Scalar, List[Any], None]:
        """Plain Python value: the scalar, a list for arrays, None if untyped"""
        if self.is_none:
            return None
        if self.is_array:
            return list(self.values)
        return self.values[0]
