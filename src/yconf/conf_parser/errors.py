from typing import Optional


class ParsingError(Exception):
    """Base error for parsing failures"""
    kind = "parsing"

    def __init__(self, message: str, line_number: Optional[int] = None,
                 line: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number
        self.line = line

    def __str__(self) -> str:
        if self.line_number:
            return f"line {self.line_number}: {self.message}"
        return self.message

class StructuralError(ParsingError):
    """Line rejected before its value is looked at"""
    kind = "structural"

class MixedIndentationError(StructuralError):
    """Error for indentation mixing tabs and spaces"""
    kind = "mixed_indentation"

    def __init__(self, message: str, indent: int, line_number: Optional[int] = None,
                 line: Optional[str] = None) -> None:
        super().__init__(message, line_number, line)
        self.indent = indent

class SeparatorError(StructuralError):
    """Error for a missing or leading name/value colon"""
    kind = "missing_separator"

class EmptyNameError(StructuralError):
    """Error for a blank parameter name"""
    kind = "empty_name"

class ValueParsingError(ParsingError):
    """Error when parsing values"""
    kind = "value"

class UnknownTypeError(ValueParsingError):
    """Token matches none of the known value types"""
    kind = "unknown_type"

class ArrayTypeError(ValueParsingError):
    """Array element type differs from the first element"""
    kind = "array_type_mismatch"

class SourceError(ParsingError):
    """Error opening or reading the line source"""
    kind = "source_unavailable"
