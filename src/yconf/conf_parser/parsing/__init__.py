from .raw_line import RawLine
from .value_parser import ValueParser
from .line_parser import LineParser
from .patterns import VALUE_PATTERNS

__all__ = ['RawLine', 'ValueParser', 'LineParser', 'VALUE_PATTERNS']
