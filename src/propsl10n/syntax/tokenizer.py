"""Value tokenizer: raw property value -> token sequence.

Splits a raw value into Literal runs and ``{n}`` Placeholder references and
resolves backslash escapes inside the literal runs. Tokenization is pure,
deterministic and total: malformed braces degrade to literal text, they
never raise.

Scanning rules:
    - ``{`` opens a brace span; the next unescaped ``}`` closes it.
    - The span content is read as a base-10 integer prefix: leading
      whitespace and an optional sign are skipped, then ASCII digits are read
      up to the first other character (``{ 0 }``, ``{+1}`` and ``{1abc}`` are
      placeholders). Content with no leading digits or a negative value
      (``{name}``, ``{-1}``, ``{}``) stays literal.
    - An opening brace with no closing brace ends scanning; the rest of the
      value is literal.
    - A backslash escapes the character after it, so ``\\{0}`` and ``{\\0}``
      never form placeholders.

Escape rules (applied to literal runs only):
    - ``\\\\`` -> ``\\``
    - ``\\x`` -> ``x`` for any other character; a trailing lone ``\\`` is dropped.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from propsl10n.constants import ESCAPE_CHAR, PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from propsl10n.syntax.ast import Literal, Placeholder, Segment, TokenSequence

if TYPE_CHECKING:
    from collections.abc import Iterator

__all__ = ["BraceSpan", "scan_braces", "tokenize", "unescape"]


@dataclass(frozen=True, slots=True)
class BraceSpan:
    """A brace span found while scanning a raw value.

    Attributes:
        start: Offset of the opening brace
        end: Offset just past the closing brace, or None if unterminated
        content: Raw text between the braces (to end of value if unterminated)
        index: Placeholder index if content is a valid index, else None
    """

    start: int
    end: int | None
    content: str
    index: int | None

    @property
    def is_terminated(self) -> bool:
        """Check if the span has a closing brace."""
        return self.end is not None

    @property
    def is_placeholder(self) -> bool:
        """Check if the span is a valid placeholder reference."""
        return self.index is not None


_INDEX_PREFIX = re.compile(r"\s*([+-]?)([0-9]+)")


def _parse_index(content: str) -> int | None:
    match = _INDEX_PREFIX.match(content)
    if match is None:
        return None
    sign, digits = match.groups()
    index = int(digits)
    if sign == "-" and index != 0:
        return None
    return index


def _find_closing_brace(raw: str, pos: int) -> int:
    length = len(raw)
    while pos < length:
        char = raw[pos]
        if char == ESCAPE_CHAR:
            pos += 2
        elif char == PLACEHOLDER_CLOSE:
            return pos
        else:
            pos += 1
    return -1


def scan_braces(raw: str) -> Iterator[BraceSpan]:
    """Yield every brace span in a raw value, left to right.

    An unterminated span is always the last one yielded.

    Args:
        raw: Raw property value

    Yields:
        BraceSpan for each opening brace reached by the scan

    Example:
        >>> [span.index for span in scan_braces("{0} and {name} and {1}")]
        [0, None, 1]
    """
    pos = 0
    length = len(raw)
    while pos < length:
        char = raw[pos]
        if char == ESCAPE_CHAR:
            pos += 2
            continue
        if char != PLACEHOLDER_OPEN:
            pos += 1
            continue

        close = _find_closing_brace(raw, pos + 1)
        if close == -1:
            yield BraceSpan(start=pos, end=None, content=raw[pos + 1 :], index=None)
            return

        content = raw[pos + 1 : close]
        yield BraceSpan(start=pos, end=close + 1, content=content, index=_parse_index(content))
        pos = close + 1


def unescape(text: str) -> str:
    """Resolve backslash escapes in literal text.

    Args:
        text: Literal text possibly containing backslashes

    Returns:
        Text with ``\\\\`` collapsed to ``\\`` and other backslashes removed

    Example:
        >>> unescape(r"a \\\\ b")
        'a \\\\ b'
        >>> unescape(r"{\\0}")
        '{0}'
    """
    if ESCAPE_CHAR not in text:
        return text

    parts: list[str] = []
    pos = 0
    length = len(text)
    while True:
        found = text.find(ESCAPE_CHAR, pos)
        if found == -1:
            parts.append(text[pos:])
            break
        parts.append(text[pos:found])
        if found + 1 < length and text[found + 1] == ESCAPE_CHAR:
            parts.append(ESCAPE_CHAR)
            pos = found + 2
        else:
            # Drop the backslash; the escaped character stays literal
            pos = found + 1
    return "".join(parts)


def _append_literal(segments: list[Segment], raw: str) -> None:
    text = unescape(raw)
    if text:
        segments.append(Literal(text))


def tokenize(raw: str) -> TokenSequence:
    """Convert a raw property value into a token sequence.

    Args:
        raw: Raw property value as stored by the parser

    Returns:
        Tuple of Literal and Placeholder segments. Literal runs are never
        adjacent and never empty.

    Example:
        >>> tokenize("this is a value with {1}.")
        (Literal(text='this is a value with '), Placeholder(index=1), Literal(text='.'))
        >>> tokenize(r"this is a literal {\\0}.")
        (Literal(text='this is a literal {0}.'),)
    """
    segments: list[Segment] = []
    start = 0

    for span in scan_braces(raw):
        if span.index is None or span.end is None:
            # Invalid or unterminated: stays in the pending literal run
            continue
        if span.start > start:
            _append_literal(segments, raw[start : span.start])
        segments.append(Placeholder(span.index))
        start = span.end

    if start < len(raw):
        _append_literal(segments, raw[start:])

    return tuple(segments)
