import logging
from pathlib import Path
from typing import Any, List, Optional, Union

from .config import ParserConfig
from .conf_parser.conf_parser import ConfParser
from .conf_parser.errors import ParsingError
from .conf_parser.hierarchy.config_registry import ConfigRegistry


class ConfigAPI:
    """Main API for loading and querying configuration files"""

    def __init__(self, config: Optional[ParserConfig] = None):
        self._logger = logging.getLogger(__name__)
        self.config = config or ParserConfig()
        self._parser = ConfParser(self.config)

    @property
    def registry(self) -> ConfigRegistry:
        return self._parser.get_registry()

    @property
    def diagnostics(self) -> List[ParsingError]:
        return self._parser.diagnostics

    @property
    def has_errors(self) -> bool:
        return bool(self._parser.diagnostics)

    def load(self, path: Union[str, Path]) -> ConfigRegistry:
        """Load and parse a config file"""
        registry = self._parser.parse_file(path)
        self._logger.info(f"Loaded {len(registry)} parameters from {path}")
        return registry

    def loads(self, content: str) -> ConfigRegistry:
        """Parse config text"""
        return self._parser.parse(content)

    def get(self, path: str, default: Any = None) -> Any:
        """Get the plain Python value at a dotted path"""
        value = self.registry.get(path)
        if value is None:
            return default
        return value.value
