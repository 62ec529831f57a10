"""
namegen

A fantasy name generator driven by a small pattern grammar.

A pattern such as ``"sV'i"`` compiles into an immutable generator tree.
The tree renders a fresh random name on every call and can report how many
names it can produce, their length bounds, and the full list of them.

    >>> generator = namegen.compile("!s(dim)")
    >>> generator.render()
    'Enthdim'
"""

__version__ = "0.1.0"

from namegen.compiler import CompiledPattern, PatternCompiler, compile
from namegen.core.errors import MismatchedClosing, PatternError, UnbalancedClosing, UnclosedGroup
from namegen.core.generators import (
    Choice,
    Decorator,
    Generator,
    GeneratorLike,
    Literal,
    Sequence,
    Transform,
    as_generator,
    count,
    enumerate_outputs,
    max_length,
    min_length,
    render,
)
from namegen.core.symbols import DEFAULT_SYMBOLS, SymbolCategory, SymbolTable

__all__ = [
    "__version__",
    "DEFAULT_SYMBOLS",
    "Choice",
    "CompiledPattern",
    "Decorator",
    "Generator",
    "GeneratorLike",
    "Literal",
    "MismatchedClosing",
    "PatternCompiler",
    "PatternError",
    "Sequence",
    "SymbolCategory",
    "SymbolTable",
    "Transform",
    "UnbalancedClosing",
    "UnclosedGroup",
    "as_generator",
    "compile",
    "count",
    "enumerate_outputs",
    "max_length",
    "min_length",
    "render",
]
