"""
PatternCompiler: Compiles name patterns into generator trees.

A pattern mixes symbol characters, literal text, grouping, alternation and
one-shot decorators:

    s(dim)      random syllable followed by "dim"
    <c|v|>      a consonant, a vowel, or nothing
    !~(foo)     "Oof"

The whole pattern behaves as if wrapped in ``< ... >``. Compilation is a
single forward pass over the characters with a stack of open groups. It is
pure and deterministic; only rendering the result consumes randomness.
"""

import random
from datetime import UTC, datetime

import structlog
from pydantic import BaseModel, ConfigDict, Field
from ulid import ULID

from namegen.compiler.groups import GroupBuilder, LiteralGroup, SymbolGroup
from namegen.core.errors import MismatchedClosing, PatternError, UnbalancedClosing, UnclosedGroup
from namegen.core.generators import CAPITALIZE, REVERSE, Generator, Transform
from namegen.core.symbols import DEFAULT_SYMBOLS, SymbolTable

logger = structlog.get_logger()

OPENERS: dict[str, type[GroupBuilder]] = {
    "<": SymbolGroup,
    "(": LiteralGroup,
}

DECORATORS: dict[str, Transform] = {
    "!": CAPITALIZE,
    "~": REVERSE,
}


class CompiledPattern(BaseModel):
    """A compiled pattern together with its generator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: str = Field(default_factory=lambda: str(ULID()))
    pattern: str
    generator: Generator
    compiled_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def combinations(self) -> int:
        return self.generator.count()

    @property
    def min_length(self) -> int:
        return self.generator.min_length()

    @property
    def max_length(self) -> int:
        return self.generator.max_length()

    def render(self, rng: random.Random | None = None) -> str:
        return self.generator.render(rng)

    def enumerate(self) -> list[str]:
        return self.generator.enumerate()


def _compile(pattern: str, symbols: SymbolTable) -> Generator:
    stack: list[GroupBuilder] = [SymbolGroup()]

    for position, char in enumerate(pattern):
        top = stack[-1]
        if char in OPENERS:
            stack.append(OPENERS[char]())
        elif char in (">", ")"):
            if len(stack) == 1:
                raise UnbalancedClosing(pattern, position)
            if char != top.closer:
                raise MismatchedClosing(pattern, position, expected=top.closer)
            stack.pop()
            stack[-1].add(top.finalize())
        elif char == "|":
            top.split()
        elif char in DECORATORS and isinstance(top, SymbolGroup):
            top.wrap(DECORATORS[char])
        else:
            top.add_char(char, symbols)

    if len(stack) != 1:
        raise UnclosedGroup(pattern, depth=len(stack) - 1)
    return stack[0].finalize()


def compile(pattern: str, symbols: SymbolTable | None = None) -> Generator:
    """
    Compile a pattern into a generator.

    Args:
        pattern: The pattern string
        symbols: Symbol table to resolve symbol characters against
            (defaults to DEFAULT_SYMBOLS)

    Returns:
        The root generator of the compiled tree

    Raises:
        UnbalancedClosing: A closing bracket with no open group
        MismatchedClosing: ``>`` closing a ``(`` group or ``)`` closing a ``<`` group
        UnclosedGroup: The pattern ended inside a group
    """
    return _compile(pattern, symbols if symbols is not None else DEFAULT_SYMBOLS)


class PatternCompiler:
    """
    Compiles patterns against a fixed symbol table and caches the results.

    Patterns are meant to be compiled once and rendered many times, so
    repeated requests for the same pattern return the same CompiledPattern.
    """

    def __init__(self, symbols: SymbolTable = DEFAULT_SYMBOLS) -> None:
        self._symbols = symbols
        self._compiled: dict[str, CompiledPattern] = {}
        self._log = logger.bind(component="pattern_compiler")

    @property
    def symbols(self) -> SymbolTable:
        return self._symbols

    @property
    def compiled_count(self) -> int:
        return len(self._compiled)

    def compile(self, pattern: str) -> Generator:
        """Compile a pattern and return its generator."""
        return self.compile_pattern(pattern).generator

    def compile_pattern(self, pattern: str) -> CompiledPattern:
        """Compile a pattern, reusing a cached result when available."""
        cached = self._compiled.get(pattern)
        if cached is not None:
            self._log.debug("compiled_pattern_cache_hit", pattern=pattern, compiled_id=cached.id)
            return cached

        try:
            generator = _compile(pattern, self._symbols)
        except PatternError as e:
            self._log.debug(
                "compile_failed",
                pattern=pattern,
                error=type(e).__name__,
                position=e.position,
            )
            raise

        compiled = CompiledPattern(pattern=pattern, generator=generator)
        self._compiled[pattern] = compiled

        self._log.debug(
            "pattern_compiled",
            pattern=pattern,
            compiled_id=compiled.id,
            node=type(generator).__name__,
        )

        return compiled

    def get_compiled(self, pattern: str) -> CompiledPattern | None:
        """Get a previously compiled pattern without compiling it."""
        return self._compiled.get(pattern)

    def clear_cache(self) -> int:
        """Forget every compiled pattern. Returns how many were cleared."""
        cleared = len(self._compiled)
        self._compiled.clear()
        return cleared
