from typing import Optional

from ..errors import EmptyNameError, MixedIndentationError, SeparatorError
from .patterns import COMMENT_PREFIX, INDENT_CHARS, SEPARATOR
from .raw_line import RawLine
from .value_parser import ValueParser

class LineParser:
    def __init__(self, value_parser: Optional[ValueParser] = None) -> None:
        self.value_parser = value_parser or ValueParser()

    def parse_line(self, line: str, line_number: int = 0) -> Optional[RawLine]:
        """Parse one line into indentation, name and typed value.

        Returns None for blank and comment lines. Malformed lines raise a
        StructuralError subclass.
        """
        if not line.strip():
            return None

        indent = self.measure_indent(line, line_number)
        remainder = line[indent:]
        if remainder.startswith(COMMENT_PREFIX):
            return None

        pos = remainder.find(SEPARATOR)
        if pos <= 0:
            raise SeparatorError(f"Invalid line, expected 'name: value': {line!r}",
                                 line_number, line)

        name = remainder[:pos].strip()
        if not name:
            raise EmptyNameError(f"Invalid line, missing parameter name: {line!r}",
                                 line_number, line)

        token = remainder[pos + 1:].strip()
        return RawLine(
            indent=indent,
            name=name,
            value=self.value_parser.classify(token),
            line_number=line_number
        )

    @staticmethod
    def measure_indent(line: str, line_number: int = 0) -> int:
        """Width of the leading indentation run, rejecting tab/space mixes"""
        stripped = line.lstrip(INDENT_CHARS)
        indent = len(line) - len(stripped)
        run = line[:indent]
        if ' ' in run and '\t' in run:
            raise MixedIndentationError(
                "Mixing of TAB(s) and white space(s) is not allowed",
                indent, line_number, line
            )
        return indent
