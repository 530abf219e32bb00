import pytest

from yconf.conf_parser.core.config_value import ValueType
from yconf.conf_parser.errors import EmptyNameError, MixedIndentationError, SeparatorError
from yconf.conf_parser.parsing.line_parser import LineParser


@pytest.fixture
def parser() -> LineParser:
    return LineParser()


def test_simple_line(parser: LineParser) -> None:
    raw = parser.parse_line("port: 8080", 3)
    assert raw is not None
    assert raw.indent == 0
    assert raw.name == "port"
    assert raw.value.type == ValueType.INTEGER
    assert raw.value.value == 8080
    assert raw.line_number == 3


@pytest.mark.parametrize("line,indent", [
    ("    name: 1", 4),
    ("\t\tname: 1", 2),
    ("\tname: 1", 1),
])
def test_indentation_width(parser: LineParser, line: str, indent: int) -> None:
    """Each space or tab counts as one unit"""
    raw = parser.parse_line(line)
    assert raw is not None
    assert raw.indent == indent


def test_name_may_contain_spaces(parser: LineParser) -> None:
    raw = parser.parse_line("  display name  :  \"Main\"  ")
    assert raw is not None
    assert raw.name == "display name"
    assert raw.value.value == "Main"


def test_first_colon_separates(parser: LineParser) -> None:
    raw = parser.parse_line('url: "http://localhost:8080"')
    assert raw is not None
    assert raw.name == "url"
    assert raw.value.value == "http://localhost:8080"


def test_missing_value_expects_children(parser: LineParser) -> None:
    raw = parser.parse_line("section:")
    assert raw is not None
    assert raw.name == "section"
    assert raw.value.is_none


@pytest.mark.parametrize("line", ["", "    ", "\t\t", "# comment", "   # indented comment", "\t#x: 1"])
def test_blank_and_comment_lines_skipped(parser: LineParser, line: str) -> None:
    assert parser.parse_line(line) is None


@pytest.mark.parametrize("line", [" \tfoo: 1", "\t foo: 1", "  \t  foo: 1"])
def test_mixed_indentation_rejected(parser: LineParser, line: str) -> None:
    with pytest.raises(MixedIndentationError) as exc_info:
        parser.parse_line(line, 7)
    assert exc_info.value.line_number == 7
    assert exc_info.value.indent == len(line) - len("foo: 1")


@pytest.mark.parametrize("line", ["no separator here", ": value", "   : value"])
def test_bad_separator_rejected(parser: LineParser, line: str) -> None:
    """A colon must exist and must not start the line"""
    with pytest.raises(SeparatorError):
        parser.parse_line(line)


def test_empty_name_rejected(parser: LineParser) -> None:
    with pytest.raises(EmptyNameError):
        parser.parse_line("　: 1")
