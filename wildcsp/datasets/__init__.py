"""
String-set sources: the line-oriented reader and the random generator.
"""

from .reader import (
    FILE_ERROR,
    load_string_set,
    parse_string_set,
    read_string_set,
    save_string_set,
    write_string_set,
)
from .synthetic import generate_string_set, generate_string_set_from_params

__all__ = [
    "FILE_ERROR",
    "parse_string_set",
    "read_string_set",
    "load_string_set",
    "write_string_set",
    "save_string_set",
    "generate_string_set",
    "generate_string_set_from_params",
]
