"""Quickstart example for propsl10n.

This example demonstrates basic usage of propsl10n: loading properties
bundles from disk, looking up keys, substituting positional placeholders
and validating a bundle before shipping it.

Note: Examples print missing keys as "[key]" to show the default behavior.
In production, attach an on_missing callback and report missing keys.
"""

import tempfile
from pathlib import Path

from propsl10n import PropertiesLocalization, Settings, tokenize, validate_resource
from propsl10n.runtime import assemble

with tempfile.TemporaryDirectory() as tmpdir:
    bundles = Path(tmpdir) / "bundles"
    bundles.mkdir()
    (bundles / "Messages_en.properties").write_text(
        """# English base bundle
hello = Hello, World!
greeting = Hello, {0}!
cart_summary = {0} items in your cart ({1} total)
colour = color
""",
        encoding="utf-8",
    )
    (bundles / "Messages_en_GB.properties").write_text(
        "colour = colour\n",
        encoding="utf-8",
    )

    # Example 1: Simple lookup
    print("=" * 50)
    print("Example 1: Simple Lookup")
    print("=" * 50)

    l10n = PropertiesLocalization(Settings(language="en-GB", path=f"{bundles}/"))
    print(l10n.prop("hello"))
    # Output: Hello, World!

    print(l10n.loaded_locales)
    # Output: ('en', 'en_GB')

    # Example 2: Country file overrides language file
    print("\n" + "=" * 50)
    print("Example 2: Country Overrides")
    print("=" * 50)

    print(l10n.prop("colour"))
    # Output: colour

    # Example 3: Positional placeholders
    print("\n" + "=" * 50)
    print("Example 3: Placeholders")
    print("=" * 50)

    print(l10n.prop("greeting", ["Alice"]))
    # Output: Hello, Alice!

    print(l10n.prop("cart_summary", [3, "42.50 EUR"]))
    # Output: 3 items in your cart (42.50 EUR total)

    print(l10n.prop("cart_summary", [3]))
    # Output: 3 items in your cart ({1} total)

    # Example 4: Missing keys
    print("\n" + "=" * 50)
    print("Example 4: Missing Keys")
    print("=" * 50)

    print(l10n.prop("not_translated"))
    # Output: [not_translated]

    print(l10n.prop("not_translated", allow_null=True))
    # Output: None

    # Example 5: Load summary
    print("\n" + "=" * 50)
    print("Example 5: Load Summary")
    print("=" * 50)

    print(l10n.get_load_summary())
    # Output: LoadSummary(total=2, ok=2, not_found=0, errors=0, junk=0)
    # The en fallback is already a primary locale, so it is never loaded twice

# Example 6: Tokenize and assemble without a bundle
print("\n" + "=" * 50)
print("Example 6: Tokenizer")
print("=" * 50)

tokens = tokenize(r"{0} of {1}, literal \{2}")
print(tokens)
print(assemble(tokens, ["3", "10"]))
# Output: 3 of 10, literal {2}

# Example 7: Validation
print("\n" + "=" * 50)
print("Example 7: Validation")
print("=" * 50)

result = validate_resource("""
title = Welcome
title = Welcome back
subtitle = Hello {name}
broken line without separator
""")
print(result.format())
# Output:
# Errors (1):
#   [malformed-line] at line 5: Line has no '=' separator and is ignored (content: ...)
# Warnings (2):
#   [duplicate-key]: Key 'title' already defined at line 2; this value wins (title)
#   [invalid-placeholder]: '{name}' is not a placeholder index ... (subtitle)
