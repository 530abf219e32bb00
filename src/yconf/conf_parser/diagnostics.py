import logging
from typing import List, Optional

from yconf.error_callback import ErrorCallbackType
from .errors import ParsingError

logger = logging.getLogger(__name__)

class DiagnosticReporter:
    """Collects parse diagnostics, logs them and forwards them to an optional handler"""

    def __init__(self, error_handler: Optional[ErrorCallbackType] = None) -> None:
        self.error_handler = error_handler
        self.diagnostics: List[ParsingError] = []
        self._line_number: Optional[int] = None
        self._line: Optional[str] = None

    def set_location(self, line_number: Optional[int], line: Optional[str] = None) -> None:
        """Set the line attached to errors reported without one"""
        self._line_number = line_number
        self._line = line

    def report(self, error: ParsingError) -> None:
        if error.line_number is None:
            error.line_number = self._line_number
        if error.line is None:
            error.line = self._line

        logger.warning(str(error))
        self.diagnostics.append(error)
        if self.error_handler:
            try:
                self.error_handler(error)
            except Exception as e:
                logger.error(f"Error handler failed: {e}")

    def clear(self) -> None:
        self.diagnostics = []
        self.set_location(None)

    def __len__(self) -> int:
        return len(self.diagnostics)
