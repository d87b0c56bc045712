"""Properties syntax: parser, value tokenizer and node types.

Python 3.13+. Zero external dependencies.
"""

from .ast import Entry, Junk, Literal, MapEntry, Placeholder, Resource, Segment, TokenSequence
from .parser import parse_properties, parse_resource
from .tokenizer import BraceSpan, scan_braces, tokenize, unescape

__all__ = [
    "BraceSpan",
    "Entry",
    "Junk",
    "Literal",
    "MapEntry",
    "Placeholder",
    "Resource",
    "Segment",
    "TokenSequence",
    "parse_properties",
    "parse_resource",
    "scan_braces",
    "tokenize",
    "unescape",
]
