import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from yconf.conf_parser.core.config_entry import ConfigEntry
from yconf.conf_parser.diagnostics import DiagnosticReporter
from yconf.conf_parser.errors import SourceError, StructuralError
from yconf.conf_parser.hierarchy.config_registry import ConfigRegistry
from yconf.conf_parser.parsing.line_parser import LineParser
from yconf.conf_parser.parsing.raw_line import RawLine
from yconf.conf_parser.parsing.value_parser import ValueParser

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ParseFrame:
    """One open ancestor: its indentation and the characters it added to the path"""
    indent: int
    segment_length: int

class HierarchyBuilder:
    """Turns indented lines into dotted paths.

    Lines form a depth-first preorder walk of the tree: a line indented
    deeper than the open frame on top of the stack is its child, anything
    else closes frames until a shallower ancestor is found.
    """

    def __init__(self, reporter: Optional[DiagnosticReporter] = None,
                 sort_keys: bool = False) -> None:
        self.reporter = reporter if reporter is not None else DiagnosticReporter()
        self.sort_keys = sort_keys
        self.line_parser = LineParser(ValueParser(self.reporter))

    def build(self, lines: Iterable[str], source: str = "<string>") -> ConfigRegistry:
        """Build a registry from lines delivered in document order"""
        registry = ConfigRegistry(sort_keys=self.sort_keys)
        stack: List[ParseFrame] = []
        path = ""
        line_number = 0

        logger.debug(f"Building hierarchy from {source}")
        try:
            for line_number, line in enumerate(lines, start=1):
                self.reporter.set_location(line_number, line)
                raw = self._parse_line(line, line_number)
                if raw is None:
                    continue
                path = self._descend(stack, path, raw)
                if not raw.value.is_none:
                    registry.add_entry(ConfigEntry(path, raw.value, raw.line_number))
        except (OSError, UnicodeDecodeError) as e:
            self.reporter.set_location(None)
            self.reporter.report(SourceError(
                f"Error while reading {source} after line {line_number}: {e}"
            ))
        finally:
            self.reporter.set_location(None)

        logger.debug(f"Parsed {len(registry)} entries from {source}")
        return registry

    def _parse_line(self, line: str, line_number: int) -> Optional[RawLine]:
        try:
            return self.line_parser.parse_line(line, line_number)
        except StructuralError as e:
            self.reporter.report(e)
            return None

    @staticmethod
    def _descend(stack: List[ParseFrame], path: str, raw: RawLine) -> str:
        """Rewind to the parent of ``raw`` and open a frame for it"""
        while stack and raw.indent <= stack[-1].indent:
            frame = stack.pop()
            path = path[:max(len(path) - frame.segment_length, 0)]

        stack.append(ParseFrame(raw.indent, 1 + len(raw.name)))
        return f"{path}.{raw.name}" if path else raw.name
