"""Hypothesis strategies for propsl10n property-based testing.

Usage:
    from tests.strategies import property_keys, placeholder_values
    from tests.strategies.properties import plain_text, trimmed_values

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - property_keys, placeholder_values
"""

from .properties import placeholder_values, plain_text, property_keys, trimmed_values

__all__ = [
    "placeholder_values",
    "plain_text",
    "property_keys",
    "trimmed_values",
]
