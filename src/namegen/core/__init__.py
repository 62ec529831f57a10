"""Core abstractions: generator algebra, symbol tables and errors."""

from namegen.core.errors import MismatchedClosing, PatternError, UnbalancedClosing, UnclosedGroup
from namegen.core.generators import (
    CAPITALIZE,
    EMPTY,
    REVERSE,
    Choice,
    Decorator,
    Generator,
    GeneratorLike,
    Literal,
    Sequence,
    Transform,
    as_generator,
    capitalize,
    choice,
    decorate,
    literal,
    reverse,
    sequence,
)
from namegen.core.symbols import DEFAULT_SYMBOLS, RESERVED_CHARACTERS, SymbolCategory, SymbolTable

__all__ = [
    "CAPITALIZE",
    "DEFAULT_SYMBOLS",
    "EMPTY",
    "RESERVED_CHARACTERS",
    "REVERSE",
    "Choice",
    "Decorator",
    "Generator",
    "GeneratorLike",
    "Literal",
    "MismatchedClosing",
    "PatternError",
    "Sequence",
    "SymbolCategory",
    "SymbolTable",
    "Transform",
    "UnbalancedClosing",
    "UnclosedGroup",
    "as_generator",
    "capitalize",
    "choice",
    "decorate",
    "literal",
    "reverse",
    "sequence",
]
