from typing import Optional

from yconf.error_callback import ErrorCallbackType

class ParserConfig:
    def __init__(
        self,
        sort_keys: bool = False,
        encoding: str = 'utf-8',
        error_handler: Optional[ErrorCallbackType] = None
    ):
        self.sort_keys = sort_keys
        self.encoding = encoding
        self.error_handler = error_handler
