"""Type aliases for the localization domain.

Provides semantic type aliases used throughout the localization package
and by user code when annotating PropertiesLocalization call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "LocaleCode",
    "MessageKey",
    "PropertiesSource",
]

type MessageKey = str
"""Key of a translation entry (e.g., 'menu_add', 'com.example.title')."""

type LocaleCode = str
"""POSIX locale code selecting a properties file (e.g., 'en', 'pt_PT')."""

type PropertiesSource = str
"""Raw properties file text as a Python string."""
