"""Runtime: translation maps and string assembly.

Python 3.13+. Zero external dependencies.
"""

from .assembler import assemble
from .store import TranslationStore

__all__ = ["TranslationStore", "assemble"]
