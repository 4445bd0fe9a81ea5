#!/usr/bin/env python3
"""
Basic OCRRepair Usage Example

This example demonstrates the core workflow:
1. Repair a piece of OCR text with the bundled word lists
2. Inspect diagnostics and suggestions
3. Run the individual cleaning stages
4. Use custom word lists
5. Speak the JSON Lines protocol in-process
"""

import io
from pathlib import Path

from ocrrepair import (
    RepairConfig,
    clean,
    correct,
    create_pipeline,
    normalize,
    serve,
)
from ocrrepair.normalizers import rules_in_group


def main():
    # ─────────────────────────────────────────────────────────────────────────
    # 1. Basic Repair
    # ─────────────────────────────────────────────────────────────────────────

    # Loads corpus/en_words.txt and corpus/de_words.txt once
    pipeline = create_pipeline()

    result = pipeline.repair("Th1s is a smal1 tost.", ["en"])

    print(f"Original: {result.original}")
    print(f"Cleaned:  {result.cleaned}")
    print(f"Suggestions: {', '.join(result.suggestions) or '(none)'}")

    # ─────────────────────────────────────────────────────────────────────────
    # 2. Diagnostics
    # ─────────────────────────────────────────────────────────────────────────

    d = result.diagnostics
    print(f"  Similarity: {d.similarity:.2f}")
    print(f"  Edit distance: {d.edit_distance}")
    print(f"  Printable: {d.printable_ratio:.0%}  ASCII: {d.ascii_ratio:.0%}")
    if d.has_diversity:
        print(f"  Diversity: {d.diversity:.3f}")
    print(f"  Top characters: {d.top_characters}")

    # Language hints are free-form: "de-AT" selects the German word list
    german = pipeline.repair("Ein k1eines Hau5", ["de-AT"])
    print(f"German: {german.cleaned}")

    # Unknown languages fall back to English
    french = pipeline.repair("Le ch1en", ["fr"])
    print(f"French (English dictionary): {french.suggestions}")

    # ─────────────────────────────────────────────────────────────────────────
    # 3. Individual Stages
    # ─────────────────────────────────────────────────────────────────────────

    print(repr(normalize("Hello  World")))  # 'Hello World'
    print(repr(correct("he11o f00d")))  # 'hello food'
    print(repr(clean("  co-\n operate  ")))  # 'cooperate'

    # The correction chain is plain data
    for rule in rules_in_group("ligatures"):
        print(f"  {rule.name}: {rule.pattern!r} -> {rule.replacement!r}")


def custom_word_lists_example():
    """Use your own word lists instead of the bundled ones."""
    config = RepairConfig(
        languages={"en": "medical_en.txt"},
        resource_dirs=[Path("wordlists/")],  # searched after package/cwd
        max_suggestions=3,
    )
    pipeline = create_pipeline(config)

    result = pipeline.repair("paracetamo1 500mg")
    print(result.cleaned, result.suggestions)


def protocol_example():
    """Serve JSON Lines requests without a subprocess."""
    pipeline = create_pipeline()

    requests = io.StringIO(
        '{"text": "he11o wor1d", "meta": {"languages": ["en"]}}\n'
        "plain lines are treated as text\n"
    )
    responses = io.StringIO()

    served = serve(pipeline, requests, responses)
    print(f"Served {served} requests")
    print(responses.getvalue())


if __name__ == "__main__":
    print("OCRRepair Usage Examples")
    print("=" * 50)
    main()
    print()
    protocol_example()
