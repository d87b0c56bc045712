"""Validation result types for properties resource validation.

Consolidates feedback from static checks of a properties source:
- Line-level: malformed lines skipped by the parser (errors)
- Value-level: placeholder problems and duplicate keys (warnings)

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = [
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]


# Maximum content length before truncation when sanitizing
_SANITIZE_MAX_CONTENT_LENGTH: int = 100


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Structured error for a line the parser cannot use.

    Attributes:
        code: Error code (e.g., "malformed-line")
        message: Human-readable error message
        content: The offending source line (trimmed)
        line: Line number where error occurred (1-indexed, optional)

    Security Note:
        The `content` field contains translation source. Use
        format(sanitize=True) to truncate it before logging in contexts
        where bundle content should not leak.
    """

    code: str
    message: str
    content: str
    line: int | None = None

    def format(self, *, sanitize: bool = False) -> str:
        """Format error as human-readable string.

        Args:
            sanitize: If True, truncate content to prevent information leakage.

        Returns:
            Formatted error string.
        """
        content_display = self.content
        if sanitize and len(self.content) > _SANITIZE_MAX_CONTENT_LENGTH:
            content_display = self.content[:_SANITIZE_MAX_CONTENT_LENGTH] + "..."

        location = f" at line {self.line}" if self.line is not None else ""
        return f"[{self.code}]{location}: {self.message} (content: {content_display!r})"


@dataclass(frozen=True, slots=True)
class ValidationWarning:
    """Structured warning from properties validation.

    Attributes:
        code: Warning code (e.g., "duplicate-key", "invalid-placeholder")
        message: Human-readable warning message
        context: Additional context (e.g., the affected key)
        line: Line number of the entry that triggered the warning (optional)
    """

    code: str
    message: str
    context: str | None = None
    line: int | None = None


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Unified validation result for a properties source.

    Immutable result object for thread-safe validation feedback.

    Attributes:
        errors: Malformed lines
        warnings: Duplicate keys and placeholder problems

    Example:
        >>> result = ValidationResult.valid()
        >>> result.is_valid
        True
        >>> result.error_count
        0
    """

    errors: tuple[ValidationError, ...]
    warnings: tuple[ValidationWarning, ...]

    @property
    def is_valid(self) -> bool:
        """Check if validation passed (no errors).

        Warnings do not affect validity - they're informational.
        """
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Get number of errors."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Get number of warnings."""
        return len(self.warnings)

    @staticmethod
    def valid() -> "ValidationResult":
        """Create a valid result with no errors or warnings."""
        return ValidationResult(errors=(), warnings=())

    def format(self, *, sanitize: bool = False, include_warnings: bool = True) -> str:
        """Format validation result as human-readable string.

        Args:
            sanitize: If True, truncate error content.
            include_warnings: If True (default), include warnings in output.

        Returns:
            Formatted string with errors and optionally warnings.
        """
        lines: list[str] = []

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}):")
            lines.extend(f"  {error.format(sanitize=sanitize)}" for error in self.errors)

        if include_warnings and self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}):")
            for warning in self.warnings:
                context = f" ({warning.context})" if warning.context else ""
                lines.append(f"  [{warning.code}]: {warning.message}{context}")

        if not lines:
            return "Validation passed: no errors or warnings"

        return "\n".join(lines)
