import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from yconf.config import ParserConfig

from .diagnostics import DiagnosticReporter
from .errors import ParsingError, SourceError
from .hierarchy.config_registry import ConfigRegistry
from .hierarchy.hierarchy_builder import HierarchyBuilder

logger = logging.getLogger(__name__)

class ConfParser:
    def __init__(self, config: Optional[ParserConfig] = None) -> None:
        self.config = config or ParserConfig()
        self.reporter = DiagnosticReporter(self.config.error_handler)
        self.hierarchy_builder = HierarchyBuilder(self.reporter, self.config.sort_keys)
        self.registry = ConfigRegistry(sort_keys=self.config.sort_keys)

    @property
    def diagnostics(self) -> List[ParsingError]:
        """Errors reported during the last parse"""
        return list(self.reporter.diagnostics)

    def parse(self, content: str) -> ConfigRegistry:
        """Parse config content into a registry"""
        return self._build(self._strip_terminators(content.split('\n')), "<string>")

    def parse_lines(self, lines: Iterable[str]) -> ConfigRegistry:
        """Parse lines from any line source, with or without terminators"""
        return self._build(self._strip_terminators(lines), "<lines>")

    def parse_file(self, file_path: Union[str, Path]) -> ConfigRegistry:
        """Parse config file, reporting instead of raising on I/O failures"""
        file_path = Path(file_path)
        logger.debug(f"Parsing file: {file_path}")
        try:
            with file_path.open('r', encoding=self.config.encoding, newline='\n') as handle:
                return self._build(self._strip_terminators(handle), str(file_path))
        except (OSError, LookupError) as e:
            logger.error(f"Failed to open file {file_path}: {e}")
            self.reporter.clear()
            self.reporter.report(SourceError(f"Error while opening file {file_path}: {e}"))
            self.registry = ConfigRegistry(sort_keys=self.config.sort_keys)
            return self.registry

    def get_registry(self) -> ConfigRegistry:
        return self.registry

    def _build(self, lines: Iterable[str], source: str) -> ConfigRegistry:
        self.reporter.clear()
        self.registry = self.hierarchy_builder.build(lines, source)
        if self.reporter.diagnostics:
            logger.info(f"{source}: {len(self.reporter)} line(s) reported")
        return self.registry

    @staticmethod
    def _strip_terminators(lines: Iterable[str]) -> Iterator[str]:
        for line in lines:
            yield line.rstrip('\r\n')
