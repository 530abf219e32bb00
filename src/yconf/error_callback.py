from typing import Callable

# Type alias used by ParserConfig
ErrorCallbackType = Callable[[Exception], None]
