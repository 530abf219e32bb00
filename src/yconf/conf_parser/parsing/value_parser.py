import logging
from typing import List, Optional, Tuple

from yconf.conf_parser.core.config_value import ConfigValue, Scalar, ValueType
from yconf.conf_parser.diagnostics import DiagnosticReporter
from yconf.conf_parser.errors import ArrayTypeError, ParsingError, UnknownTypeError
from yconf.conf_parser.parsing.patterns import (
    ARRAY_CLOSE, ARRAY_DELIMITER, ARRAY_OPEN, DECIMAL_POINT,
    FALSE_MARKER, QUOTE, TRUE_MARKER, VALUE_PATTERNS
)

logger = logging.getLogger(__name__)

Element = Tuple[ValueType, Scalar]

class ValueParser:
    """Infers the type of a value token.

    Rules are tried in order and the first match wins: empty, quoted string,
    bracketed array, boolean marker, float (only when a decimal point is
    present) and finally integer. Booleans match on the substring, so
    ``NOTTRUE`` is true.
    """

    def __init__(self, reporter: Optional[DiagnosticReporter] = None) -> None:
        self.reporter = reporter

    def classify(self, token: str) -> ConfigValue:
        """Parse a single value token with type detection"""
        token = token.strip()

        if not token:
            return ConfigValue.none()

        string_value = self.parse_string(token)
        if string_value is not None:
            return ConfigValue(token, ValueType.STRING, (string_value,))

        if token.startswith(ARRAY_OPEN) and token.endswith(ARRAY_CLOSE):
            return self.create_array_value(token)

        element = self._classify_element(token)
        if element is None:
            self._report(UnknownTypeError(f"Unknown type: {token}"))
            return ConfigValue.none(token)

        value_type, value = element
        return ConfigValue(token, value_type, (value,))

    def create_array_value(self, token: str) -> ConfigValue:
        """Create array type ConfigValue, keeping elements up to the first bad one"""
        content = token[1:-1]
        if not content:
            logger.debug(f"Empty array: {token}")
            return ConfigValue.none(token, is_array=True)

        items = content.split(ARRAY_DELIMITER)
        if len(items) > 1 and items[-1] == '':
            # nothing after a trailing comma
            items.pop()

        element_type: Optional[ValueType] = None
        values: List[Scalar] = []
        for item in items:
            item = item.strip()
            element = self._classify_element(item)
            if element is None:
                self._report(UnknownTypeError(f"Unknown type: {item}"))
                break

            item_type, value = element
            if element_type is None:
                element_type = item_type
            elif item_type is not element_type:
                self._report(ArrayTypeError(
                    f"Array entries should have the same type: expected "
                    f"{element_type.value}, got {item_type.value} ({item})"
                ))
                break
            values.append(value)

        if element_type is None:
            return ConfigValue.none(token, is_array=True)
        return ConfigValue(token, element_type, tuple(values), is_array=True)

    def _classify_element(self, token: str) -> Optional[Element]:
        """Scalar rules shared by plain values and array elements"""
        if not token:
            return None

        string_value = self.parse_string(token)
        if string_value is not None:
            return ValueType.STRING, string_value

        bool_value = self.parse_boolean(token)
        if bool_value is not None:
            return ValueType.BOOLEAN, bool_value

        float_value = self.parse_float(token)
        if float_value is not None:
            return ValueType.FLOAT, float_value

        int_value = self.parse_integer(token)
        if int_value is not None:
            return ValueType.INTEGER, int_value

        return None

    @staticmethod
    def parse_string(token: str) -> Optional[str]:
        if len(token) > 2 and token.startswith(QUOTE) and token.endswith(QUOTE):
            return token[1:-1]
        return None

    @staticmethod
    def parse_boolean(token: str) -> Optional[bool]:
        if TRUE_MARKER in token:
            return True
        if FALSE_MARKER in token:
            return False
        return None

    @staticmethod
    def parse_float(token: str) -> Optional[float]:
        if DECIMAL_POINT not in token or not VALUE_PATTERNS['float'].match(token):
            return None
        return float(token)

    @staticmethod
    def parse_integer(token: str) -> Optional[int]:
        if not VALUE_PATTERNS['integer'].match(token):
            return None
        return int(token)

    def _report(self, error: ParsingError) -> None:
        if self.reporter is not None:
            self.reporter.report(error)
        else:
            logger.warning(str(error))
