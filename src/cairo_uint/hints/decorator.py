import textwrap
from typing import Callable, Dict

implementations: Dict[str, Callable] = {}


def normalize_hint_code(code: str) -> str:
    """Strip the indentation and surrounding blank lines of a hint's source."""
    return textwrap.dedent(code).strip()


def register_hint(code: str):
    """Register the decorated function as the native implementation of `code`."""

    def _register(wrapped_function):
        implementations[normalize_hint_code(code)] = wrapped_function
        return wrapped_function

    return _register
