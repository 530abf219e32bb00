from dataclasses import dataclass

from yconf.conf_parser.core.config_value import ConfigValue

@dataclass(frozen=True)
class RawLine:
    """A single accepted line before it is placed in the hierarchy"""
    indent: int   # Leading tabs or spaces, one unit each
    name: str
    value: ConfigValue
    line_number: int = 0
