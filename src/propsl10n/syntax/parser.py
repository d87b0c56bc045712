"""Properties source parser.

Line-oriented parser for the ``key=value`` translation format:

- Lines are split on LF; CRLF works because the CR is trimmed with the
  rest of the surrounding whitespace.
- Empty lines and lines starting with ``#`` are ignored.
- The first ``=`` at index >= 1 separates key from value; later ``=``
  characters belong to the value.
- Lines without a usable separator are skipped and reported as Junk.
- Values are stored raw. Backslash escapes are resolved by the tokenizer,
  not here.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from propsl10n.constants import COMMENT_CHAR, MAX_SOURCE_SIZE, SEPARATOR_CHAR
from propsl10n.syntax.ast import Entry, Junk, Resource

if TYPE_CHECKING:
    from collections.abc import MutableMapping

__all__ = ["parse_properties", "parse_resource"]

_BOM = "\ufeff"


def parse_resource(source: str, *, max_source_size: int = MAX_SOURCE_SIZE) -> Resource:
    """Parse properties source into entries and junk.

    Args:
        source: Raw properties text
        max_source_size: Maximum accepted source length in characters

    Returns:
        Resource with entries and junk in source order

    Raises:
        ValueError: If source exceeds max_source_size

    Example:
        >>> resource = parse_resource("# greeting\\nhello = Hello!\\nbroken")
        >>> resource.entries
        (Entry(key='hello', value='Hello!', line=2),)
        >>> resource.junk
        (Junk(content='broken', line=3, reason='missing-separator'),)
    """
    if len(source) > max_source_size:
        msg = (
            f"Properties source exceeds maximum size: {len(source)} > {max_source_size} "
            "characters"
        )
        raise ValueError(msg)

    entries: list[Entry] = []
    junk: list[Junk] = []

    for line_no, raw_line in enumerate(source.removeprefix(_BOM).split("\n"), start=1):
        line = raw_line.strip()

        if not line or line[0] == COMMENT_CHAR:
            continue

        first_eq = line.find(SEPARATOR_CHAR)
        if first_eq < 1:
            reason = "missing-separator" if first_eq == -1 else "empty-key"
            junk.append(Junk(content=line, line=line_no, reason=reason))
            continue

        entries.append(
            Entry(
                key=line[:first_eq].strip(),
                value=line[first_eq + 1 :].strip(),
                line=line_no,
            )
        )

    return Resource(entries=tuple(entries), junk=tuple(junk))


def parse_properties(
    source: str,
    into: MutableMapping[str, str] | None = None,
) -> MutableMapping[str, str]:
    """Parse properties source into a flat key/value mapping.

    Args:
        source: Raw properties text
        into: Existing mapping to merge into; colliding keys are overwritten.
            A new dict is created when omitted.

    Returns:
        The mapping that received the entries

    Example:
        >>> parse_properties("a = 1\\nb=x=y\\na=2")
        {'a': '2', 'b': 'x=y'}
    """
    target: MutableMapping[str, str] = {} if into is None else into
    for entry in parse_resource(source).entries:
        target[entry.key] = entry.value
    return target
