# marklist/mark_io/__init__.py
# File & console I/O for Marklist

from .console import console
from .documents import read_buffer, write_buffer
from .generics import ensure_parent, read_json_safe, write_json_safe

__all__ = [
    "console",
    "read_buffer",
    "write_buffer",
    "ensure_parent",
    "read_json_safe",
    "write_json_safe",
]
