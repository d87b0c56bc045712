"""Node definitions for parsed properties sources and tokenized values.

Two families of nodes:
- Resource structure: Resource, Entry, Junk (output of the parser)
- Value tokens: Literal, Placeholder (output of the tokenizer)

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Resource structure
    "Resource",
    "Entry",
    "Junk",
    # Value tokens
    "Literal",
    "Placeholder",
    # Type aliases
    "Segment",
    "TokenSequence",
    "MapEntry",
]

# ============================================================================
# RESOURCE STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class Entry:
    """A single ``key=value`` line.

    Attributes:
        key: Trimmed text before the first ``=``
        value: Trimmed raw text after the first ``=`` (escapes unresolved)
        line: 1-indexed source line number
    """

    key: str
    value: str
    line: int

    @staticmethod
    def guard(node: object) -> TypeIs["Entry"]:
        """Type guard for Entry."""
        return isinstance(node, Entry)


@dataclass(frozen=True, slots=True)
class Junk:
    """A significant line the parser skipped.

    Malformed lines are not errors at load time; they are kept here so
    load summaries and validation can report them.

    Attributes:
        content: The trimmed source line
        line: 1-indexed source line number
        reason: Short machine-readable reason ("missing-separator",
            "empty-key")
    """

    content: str
    line: int
    reason: str

    @staticmethod
    def guard(node: object) -> TypeIs["Junk"]:
        """Type guard for Junk."""
        return isinstance(node, Junk)


@dataclass(frozen=True, slots=True)
class Resource:
    """Parsed properties source.

    Attributes:
        entries: Entries in source order (duplicates included)
        junk: Skipped malformed lines in source order
    """

    entries: tuple[Entry, ...]
    junk: tuple[Junk, ...] = ()

    def to_dict(self) -> dict[str, str]:
        """Collapse entries into a mapping, last duplicate winning."""
        return {entry.key: entry.value for entry in self.entries}


# ============================================================================
# VALUE TOKENS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Literal:
    """Escape-resolved literal text run."""

    text: str

    @staticmethod
    def guard(segment: object) -> TypeIs["Literal"]:
        """Type guard for Literal.

        Example:
            if Literal.guard(segment):
                segment.text  # narrowed
        """
        return isinstance(segment, Literal)


@dataclass(frozen=True, slots=True)
class Placeholder:
    """Positional placeholder reference: ``{index}``.

    Attributes:
        index: Non-negative position into the substitution sequence
    """

    index: int

    def __post_init__(self) -> None:
        """Reject negative indices.

        Raises:
            ValueError: If index is negative
        """
        if self.index < 0:
            msg = f"Placeholder index must be non-negative, got {self.index}"
            raise ValueError(msg)

    @staticmethod
    def guard(segment: object) -> TypeIs["Placeholder"]:
        """Type guard for Placeholder."""
        return isinstance(segment, Placeholder)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Segment = Literal | Placeholder
type TokenSequence = tuple[Segment, ...]

# A translation map entry: raw value until first lookup, then its tokens
type MapEntry = str | TokenSequence
