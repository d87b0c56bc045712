"""Error types and validation results for propsl10n.

Python 3.13+. Zero external dependencies.
"""

from .errors import PropertiesError, ResourceLoadError
from .validation import ValidationError, ValidationResult, ValidationWarning

__all__ = [
    "PropertiesError",
    "ResourceLoadError",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
