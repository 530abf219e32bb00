import pytest
from pathlib import Path
from unittest.mock import Mock

from yconf import ConfigAPI, ParserConfig, ParsingError

from tests.conftest import GLOSSARY_EXPECTED


@pytest.fixture
def api() -> ConfigAPI:
    return ConfigAPI()


def test_load(api: ConfigAPI, glossary_file: Path) -> None:
    """Test loading a file and querying plain values"""
    registry = api.load(glossary_file)

    assert len(registry) == len(GLOSSARY_EXPECTED)
    assert api.registry is registry
    for path, expected in GLOSSARY_EXPECTED.items():
        assert api.get(path) == expected
    assert not api.has_errors


def test_get_default(api: ConfigAPI) -> None:
    api.loads("a:\n  b: 1\n")
    assert api.get("a") is None
    assert api.get("a", "fallback") == "fallback"
    assert api.get("a.missing", 0) == 0


def test_loads_reports_problems(api: ConfigAPI) -> None:
    api.loads("good: 1\nbad\n")
    assert api.get("good") == 1
    assert api.has_errors
    assert all(isinstance(e, ParsingError) for e in api.diagnostics)


def test_error_handler_config(tmp_path: Path) -> None:
    """Test error handler configuration"""
    error_handler = Mock()
    api = ConfigAPI(config=ParserConfig(error_handler=error_handler))

    registry = api.load(tmp_path / "nonexistent.conf")

    assert len(registry) == 0
    assert error_handler.called
    assert isinstance(error_handler.call_args[0][0], Exception)
