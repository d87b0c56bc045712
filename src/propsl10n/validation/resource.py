"""Static validation of properties sources.

Checks a source without loading it into a store:
- errors: malformed lines the parser would skip
- warnings: duplicate keys, unterminated placeholders, brace spans that
  look like placeholders but are not valid indices (spans holding a
  backslash escape are deliberate literals and do not warn)

None of these conditions stop a load; validation exists for tooling
(linters, CI checks on translation files).

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging

from propsl10n.constants import ESCAPE_CHAR
from propsl10n.diagnostics.validation import ValidationError, ValidationResult, ValidationWarning
from propsl10n.syntax.parser import parse_resource
from propsl10n.syntax.tokenizer import scan_braces

__all__ = ["validate_resource"]

logger = logging.getLogger(__name__)

_JUNK_MESSAGES: dict[str, str] = {
    "missing-separator": "Line has no '=' separator and is ignored",
    "empty-key": "Line starts with '=' (empty key) and is ignored",
}


def validate_resource(source: str) -> ValidationResult:
    """Validate a properties source.

    Args:
        source: Raw properties text

    Returns:
        ValidationResult with errors for malformed lines and warnings for
        duplicate keys and placeholder problems

    Raises:
        ValueError: If source exceeds the maximum source size

    Example:
        >>> result = validate_resource("a=1\\na=2\\nbroken")
        >>> result.is_valid
        False
        >>> [w.code for w in result.warnings]
        ['duplicate-key']
    """
    resource = parse_resource(source)

    errors = tuple(
        ValidationError(
            code="malformed-line",
            message=_JUNK_MESSAGES[junk.reason],
            content=junk.content,
            line=junk.line,
        )
        for junk in resource.junk
    )

    warnings: list[ValidationWarning] = []
    first_seen: dict[str, int] = {}

    for entry in resource.entries:
        if entry.key in first_seen:
            warnings.append(
                ValidationWarning(
                    code="duplicate-key",
                    message=(
                        f"Key '{entry.key}' already defined at line {first_seen[entry.key]}; "
                        "this value wins"
                    ),
                    context=entry.key,
                    line=entry.line,
                )
            )
        else:
            first_seen[entry.key] = entry.line

        for span in scan_braces(entry.value):
            if not span.is_terminated:
                warnings.append(
                    ValidationWarning(
                        code="unterminated-placeholder",
                        message=(
                            f"'{{' at offset {span.start} has no closing '}}'; "
                            "the rest of the value is literal text"
                        ),
                        context=entry.key,
                        line=entry.line,
                    )
                )
            elif not span.is_placeholder and ESCAPE_CHAR not in span.content:
                # Escaped content such as {\0} is a deliberate literal
                warnings.append(
                    ValidationWarning(
                        code="invalid-placeholder",
                        message=(
                            f"'{{{span.content}}}' is not a placeholder index and is "
                            "kept as literal text"
                        ),
                        context=entry.key,
                        line=entry.line,
                    )
                )

    logger.debug(
        "Validated properties source: %d error(s), %d warning(s)", len(errors), len(warnings)
    )
    return ValidationResult(errors=errors, warnings=tuple(warnings))
