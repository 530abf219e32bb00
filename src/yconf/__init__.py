"""Parser for indentation-structured configuration files."""

from .conf_parser import ConfigValue, ValueType, ConfigEntry, ConfigRegistry, ConfParser
from .conf_parser.errors import ParsingError
from .api import ConfigAPI
from .config import ParserConfig

__all__ = [
    'ConfigValue',
    'ValueType',
    'ConfigEntry',
    'ConfigRegistry',
    'ConfParser',
    'ParsingError',
    'ConfigAPI',
    'ParserConfig'
]
