# fpvsetup/application/services/__init__.py
from .input_parser import InputParser, float_from_restricted_string, parse_aspect

__all__ = [
    "InputParser",
    "float_from_restricted_string",
    "parse_aspect",
]
