from .config_value import ConfigValue, ValueType
from .config_entry import ConfigEntry

__all__ = ['ConfigValue', 'ValueType', 'ConfigEntry']
