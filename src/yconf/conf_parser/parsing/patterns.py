import re

# Line structure
COMMENT_PREFIX = '#'
SEPARATOR = ':'
INDENT_CHARS = ' \t'

# Value delimiters
QUOTE = '"'
ARRAY_OPEN = '['
ARRAY_CLOSE = ']'
ARRAY_DELIMITER = ','

# Boolean markers are matched as substrings, not whole tokens
TRUE_MARKER = 'TRUE'
FALSE_MARKER = 'FALSE'
DECIMAL_POINT = '.'

# Whole-token numeric forms
VALUE_PATTERNS = {
    'float': re.compile(r'^[-+]?(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?$'),
    'integer': re.compile(r'^[-+]?[0-9]+$'),
}
