# ruff: noqa: F403
from cairo_uint.hints.decorator import implementations, register_hint
from cairo_uint.hints.processor import execute_hint
from cairo_uint.hints.uint384_extension import *

__all__ = [
    "execute_hint",
    "register_hint",
    "implementations",
]
