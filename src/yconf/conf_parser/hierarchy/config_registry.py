import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

from yconf.conf_parser.core.config_entry import ConfigEntry
from yconf.conf_parser.core.config_value import ConfigValue

logger = logging.getLogger(__name__)

@dataclass
class ConfigRegistry:
    """Flat storage for parsed entries keyed by dotted path"""
    entries: Dict[str, ConfigEntry] = field(default_factory=dict)
    sort_keys: bool = False

    def add_entry(self, entry: ConfigEntry) -> None:
        """Add an entry, replacing any earlier one at the same path"""
        previous = self.entries.get(entry.path)
        if previous is not None:
            logger.debug(
                f"Overwriting {entry.path} (line {previous.line_number}) "
                f"with value from line {entry.line_number}"
            )
        self.entries[entry.path] = entry

    def get(self, path: str) -> Optional[ConfigValue]:
        """Get the value stored at an exact dotted path"""
        entry = self.entries.get(path)
        return entry.value if entry else None

    def get_entry(self, path: str) -> Optional[ConfigEntry]:
        return self.entries.get(path)

    def paths(self) -> List[str]:
        if self.sort_keys:
            return sorted(self.entries)
        return list(self.entries)

    def items(self) -> Iterator[Tuple[str, ConfigValue]]:
        for path in self.paths():
            yield path, self.entries[path].value

    def children(self, prefix: str) -> Dict[str, ConfigValue]:
        """Get every value nested beneath a dotted prefix"""
        start = f"{prefix}."
        return {
            path: value for path, value in self.items()
            if path.startswith(start)
        }

    def __contains__(self, path: object) -> bool:
        return path in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.paths())

    def __len__(self) -> int:
        return len(self.entries)
