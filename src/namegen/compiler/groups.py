"""
Group builders used by the pattern compiler.

A builder collects the alternatives of one bracketed group while the
compiler walks the pattern. Each alternative (branch) is an ordered list
of generators. When the group closes, every branch becomes a sequence and
the branches become one random choice.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import structlog

from namegen.core.generators import Generator, Transform, choice, decorate, literal, sequence
from namegen.core.symbols import SymbolTable

logger = structlog.get_logger()


@dataclass
class GroupBuilder(ABC):
    """Accumulates the branches of a single group."""

    closer: str = field(default="", init=False)
    branches: list[list[Generator]] = field(default_factory=lambda: [[]])
    pending: list[Transform] = field(default_factory=list)

    @abstractmethod
    def interpret(self, char: str, symbols: SymbolTable) -> Generator:
        """Turn a raw pattern character into a generator."""

    def add(self, generator: Generator) -> None:
        """Append a built generator to the current branch, applying pending decorators."""
        # Last registered decorator ends up innermost
        while self.pending:
            generator = decorate(generator, self.pending.pop())
        self.branches[-1].append(generator)

    def add_char(self, char: str, symbols: SymbolTable) -> None:
        self.add(self.interpret(char, symbols))

    def split(self) -> None:
        """Start a new alternative."""
        self.branches.append([])

    def wrap(self, transform: Transform) -> None:
        """Decorate the next generator added to this group."""
        self.pending.append(transform)

    def finalize(self) -> Generator:
        if self.pending:
            logger.debug(
                "dangling_decorators_dropped",
                decorators=[t.name for t in self.pending],
            )
        return choice(sequence(branch) for branch in self.branches)


@dataclass
class LiteralGroup(GroupBuilder):
    """A ``( ... )`` group: every character is emitted as itself."""

    closer: str = field(default=")", init=False)

    def interpret(self, char: str, symbols: SymbolTable) -> Generator:
        return literal(char)


@dataclass
class SymbolGroup(GroupBuilder):
    """A ``< ... >`` group: characters are looked up in the symbol table."""

    closer: str = field(default=">", init=False)

    def interpret(self, char: str, symbols: SymbolTable) -> Generator:
        candidates = symbols.lookup(char)
        if candidates is None:
            candidates = (char,)
        return choice(literal(candidate) for candidate in candidates)
