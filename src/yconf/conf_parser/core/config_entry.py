from dataclasses import dataclass

from .config_value import ConfigValue


@dataclass(frozen=True)
class ConfigEntry:
    """A typed value stored under its dotted parameter path"""
    path: str
    value: ConfigValue
    line_number: int = 0

    @property
    def name(self) -> str:
        """Last segment of the dotted path"""
        return self.path.rsplit('.', 1)[-1]
