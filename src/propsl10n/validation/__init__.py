"""Static validation of properties sources.

Python 3.13+. Zero external dependencies.
"""

from .resource import validate_resource

__all__ = ["validate_resource"]
