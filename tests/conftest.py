import pytest
import logging
from pathlib import Path
from typing import Dict

from yconf.conf_parser.diagnostics import DiagnosticReporter

# Example document from the format description
GLOSSARY_CONFIG = """\
# Example configuration
glossary:
    title: "example glossary"
    GlossDiv:
        title: "S"
        sizes: [1, 2, 3]
        enabled: TRUE

    version: 1.5
server:
\thost: "localhost"
\tport: 8080
\tratios: [0.5, 1.25]
\tflags: [TRUE, FALSE, TRUE]
"""

GLOSSARY_EXPECTED: Dict[str, object] = {
    'glossary.title': "example glossary",
    'glossary.GlossDiv.title': "S",
    'glossary.GlossDiv.sizes': [1, 2, 3],
    'glossary.GlossDiv.enabled': True,
    'glossary.version': 1.5,
    'server.host': "localhost",
    'server.port': 8080,
    'server.ratios': [0.5, 1.25],
    'server.flags': [True, False, True],
}


@pytest.fixture(autouse=True)
def setup_logging(caplog: pytest.LogCaptureFixture) -> None:
    """Capture parser warnings for every test"""
    caplog.set_level(logging.DEBUG, logger="yconf")


@pytest.fixture
def reporter() -> DiagnosticReporter:
    return DiagnosticReporter()


@pytest.fixture
def glossary_file(tmp_path: Path) -> Path:
    """Write the example document to disk"""
    config_file = tmp_path / "glossary.conf"
    config_file.write_text(GLOSSARY_CONFIG, encoding='utf-8')
    return config_file
