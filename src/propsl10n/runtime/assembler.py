"""Assembler: token sequence + substitutions -> final string.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from propsl10n.constants import FALLBACK_UNRESOLVED_PLACEHOLDER
from propsl10n.syntax.ast import Literal, Placeholder

if TYPE_CHECKING:
    from collections.abc import Sequence

    from propsl10n.syntax.ast import TokenSequence

__all__ = ["assemble"]


def assemble(tokens: TokenSequence, substitutions: Sequence[object] = ()) -> str:
    """Join a token sequence, substituting positional arguments.

    A placeholder whose index has no substitution is echoed back as ``{n}``.
    This is not an error; an empty substitution sequence echoes every
    placeholder.

    Args:
        tokens: Tokenized value
        substitutions: Positional values; each is converted with str()

    Returns:
        Assembled string

    Example:
        >>> from propsl10n.syntax import tokenize
        >>> assemble(tokenize("{0} of {1}"), ["3"])
        '3 of {1}'
    """
    count = len(substitutions)
    parts: list[str] = []
    for segment in tokens:
        match segment:
            case Literal(text=text):
                parts.append(text)
            case Placeholder(index=index) if index < count:
                parts.append(str(substitutions[index]))
            case Placeholder(index=index):
                parts.append(FALLBACK_UNRESOLVED_PLACEHOLDER.format(index=index))
    return "".join(parts)
