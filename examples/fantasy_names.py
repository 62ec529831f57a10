#!/usr/bin/env python3
"""
Example: Fantasy Names

Demonstrates:
- Compiling patterns once and rendering them many times
- Inspecting a pattern's output space
- Extending the symbol table with custom symbols

PATTERN -> GENERATOR -> NAMES
"""

import random

from namegen import DEFAULT_SYMBOLS, PatternCompiler


def main():
    print("=" * 60)
    print("Fantasy Names Example")
    print("=" * 60)
    print()

    rng = random.Random(2024)
    compiler = PatternCompiler()

    # =========================================================================
    # Step 1: Render names from built-in patterns
    # =========================================================================
    print("Step 1: Rendering Names")
    print("-" * 40)

    for pattern in ("!sV'i", "!BVC", "!s(dim)", "<!i|!m!M>", "~<sV>"):
        generator = compiler.compile(pattern)
        names = ", ".join(generator.render_many(5, rng))
        print(f"  {pattern:<12} {names}")
    print()

    # =========================================================================
    # Step 2: Inspect the output space
    # =========================================================================
    print("Step 2: Pattern Statistics")
    print("-" * 40)

    compiled = compiler.compile_pattern("<c|v|>(on)")
    print(f"  Pattern: {compiled.pattern}")
    print(f"    Combinations: {compiled.combinations}")
    print(f"    Length bounds: {compiled.min_length}..{compiled.max_length}")
    print(f"    First few: {compiled.enumerate()[:5]}")
    print()

    # =========================================================================
    # Step 3: Custom symbols
    # =========================================================================
    print("Step 3: Custom Symbols")
    print("-" * 40)

    elvish = PatternCompiler(DEFAULT_SYMBOLS.extend({"e": ["ael", "iel", "wen", "dor"]}))
    generator = elvish.compile("!Ve")
    print(f"  !Ve: {', '.join(generator.render_many(5, rng))}")

    print()
    print("=" * 60)
    print("Example Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
