from .core import ConfigValue, ValueType, ConfigEntry
from .parsing import RawLine, ValueParser, LineParser
from .hierarchy import ConfigRegistry, HierarchyBuilder, ParseFrame
from .diagnostics import DiagnosticReporter
from .conf_parser import ConfParser
from .errors import ParsingError

__all__ = [
    'ConfigValue', 'ValueType', 'ConfigEntry',
    'RawLine', 'ValueParser', 'LineParser',
    'ConfigRegistry', 'HierarchyBuilder', 'ParseFrame',
    'DiagnosticReporter', 'ConfParser', 'ParsingError'
]
