"""
Generator algebra for name patterns.

A generator is an immutable tree that renders random strings and can
describe its own output space without rendering: how many generation paths
it has, the shortest and longest strings it can emit, and every string it
can emit, in a fixed order.

There are four node kinds:

- Literal: a fixed string
- Choice: picks one child uniformly at random
- Sequence: concatenates its children
- Decorator: applies a string transform to its inner generator

Nodes should be built through the factory functions (``literal``,
``choice``, ``sequence``, ``decorate``), which collapse degenerate cases
instead of allocating wrappers. Plain strings are accepted anywhere a
generator is expected and are adapted into Literals by ``as_generator``.
"""

import itertools
import math
import random
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field


class Transform(BaseModel):
    """
    A named string transform applied by a Decorator.

    Transforms are assumed to preserve length and to be bijective on the
    output space of whatever they decorate. Decorators pass count and length
    bounds through unchanged, so a transform that breaks this assumption
    makes those answers wrong. This is not checked.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    func: Callable[[str], str]

    def __call__(self, text: str) -> str:
        return self.func(text)


def _capitalize(text: str) -> str:
    first = text[:1].upper()
    # Some characters expand when uppercased ("ß" -> "SS"); leave those alone
    if len(first) != len(text[:1]):
        return text
    return first + text[1:]


def _reverse(text: str) -> str:
    return text[::-1]


CAPITALIZE = Transform(name="capitalize", func=_capitalize)
REVERSE = Transform(name="reverse", func=_reverse)


class Generator(BaseModel, ABC):
    """Base class for every node in a generator tree."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    @abstractmethod
    def render(self, rng: random.Random | None = None) -> str:
        """Emit one random string. Uses the shared ``random`` module when rng is None."""

    @abstractmethod
    def count(self) -> int:
        """Number of distinct generation paths (not deduplicated outputs)."""

    @abstractmethod
    def min_length(self) -> int:
        """Shortest possible output length."""

    @abstractmethod
    def max_length(self) -> int:
        """Longest possible output length."""

    @abstractmethod
    def iter_outputs(self) -> Iterator[str]:
        """Lazily yield every possible output, in enumeration order."""

    def enumerate(self) -> list[str]:
        """
        List every possible output.

        The list has exactly count() entries and may contain duplicates.
        There is no cap: check count() first on large patterns.
        """
        return list(self.iter_outputs())

    def render_many(self, n: int, rng: random.Random | None = None) -> list[str]:
        """Render n independent outputs."""
        return [self.render(rng) for _ in range(n)]

    def __str__(self) -> str:
        return self.render()


class Literal(Generator):
    """A fixed string."""

    text: str = ""

    def render(self, rng: random.Random | None = None) -> str:
        return self.text

    def count(self) -> int:
        return 1

    def min_length(self) -> int:
        return len(self.text)

    def max_length(self) -> int:
        return len(self.text)

    def iter_outputs(self) -> Iterator[str]:
        yield self.text


class Choice(Generator):
    """Selects one child uniformly at random on each render."""

    children: tuple[Generator, ...] = Field(min_length=1)

    def render(self, rng: random.Random | None = None) -> str:
        source = rng if rng is not None else random
        return source.choice(self.children).render(rng)

    def count(self) -> int:
        return max(1, sum(child.count() for child in self.children))

    def min_length(self) -> int:
        return min(child.min_length() for child in self.children)

    def max_length(self) -> int:
        return max(child.max_length() for child in self.children)

    def iter_outputs(self) -> Iterator[str]:
        for child in self.children:
            yield from child.iter_outputs()


class Sequence(Generator):
    """Concatenates the output of each child, in order."""

    children: tuple[Generator, ...] = Field(min_length=1)

    def render(self, rng: random.Random | None = None) -> str:
        return "".join(child.render(rng) for child in self.children)

    def count(self) -> int:
        return math.prod(child.count() for child in self.children)

    def min_length(self) -> int:
        return sum(child.min_length() for child in self.children)

    def max_length(self) -> int:
        return sum(child.max_length() for child in self.children)

    def iter_outputs(self) -> Iterator[str]:
        # First child varies slowest
        for parts in itertools.product(*(child.enumerate() for child in self.children)):
            yield "".join(parts)


class Decorator(Generator):
    """Applies a transform to everything its inner generator emits."""

    inner: Generator
    transform: Transform

    def render(self, rng: random.Random | None = None) -> str:
        return self.transform(self.inner.render(rng))

    def count(self) -> int:
        return self.inner.count()

    def min_length(self) -> int:
        return self.inner.min_length()

    def max_length(self) -> int:
        return self.inner.max_length()

    def iter_outputs(self) -> Iterator[str]:
        return map(self.transform, self.inner.iter_outputs())


GeneratorLike = str | Generator

EMPTY = Literal()


# Factory functions


def as_generator(value: GeneratorLike) -> Generator:
    """Adapt a plain string into a Literal; pass generators through."""
    if isinstance(value, Generator):
        return value
    if isinstance(value, str):
        return Literal(text=value)
    raise TypeError(f"Expected str or Generator, got {type(value).__name__}")


def literal(text: str) -> Literal:
    """Create a literal generator."""
    return Literal(text=text)


def choice(children: Iterable[GeneratorLike]) -> Generator:
    """
    Create a random choice between children.

    No children yields the empty literal and a single child is returned
    as-is.
    """
    items = tuple(as_generator(child) for child in children)
    if not items:
        return EMPTY
    if len(items) == 1:
        return items[0]
    return Choice(children=items)


def _merge_literals(items: Iterable[Generator]) -> list[Generator]:
    """Combine runs of adjacent Literals into single Literals."""
    merged: list[Generator] = []
    run: list[str] = []
    for item in items:
        if isinstance(item, Literal):
            run.append(item.text)
            continue
        if run:
            merged.append(Literal(text="".join(run)))
            run = []
        merged.append(item)
    if run:
        merged.append(Literal(text="".join(run)))
    return merged


def sequence(children: Iterable[GeneratorLike]) -> Generator:
    """
    Create a concatenation of children.

    Adjacent literals are merged first. No children yields the empty
    literal and a single remaining child is returned as-is.
    """
    items = _merge_literals(as_generator(child) for child in children)
    if not items:
        return EMPTY
    if len(items) == 1:
        return items[0]
    return Sequence(children=tuple(items))


def decorate(inner: GeneratorLike, transform: Transform) -> Generator:
    """Wrap a generator with a transform, applying it eagerly to literals."""
    generator = as_generator(inner)
    if isinstance(generator, Literal):
        return Literal(text=transform(generator.text))
    return Decorator(inner=generator, transform=transform)


def capitalize(inner: GeneratorLike) -> Generator:
    """Uppercase the first character of every output."""
    return decorate(inner, CAPITALIZE)


def reverse(inner: GeneratorLike) -> Generator:
    """Reverse the characters of every output."""
    return decorate(inner, REVERSE)


# Capability functions accepting plain strings as well as generators


def render(generator: GeneratorLike, rng: random.Random | None = None) -> str:
    return as_generator(generator).render(rng)


def count(generator: GeneratorLike) -> int:
    return as_generator(generator).count()


def min_length(generator: GeneratorLike) -> int:
    return as_generator(generator).min_length()


def max_length(generator: GeneratorLike) -> int:
    return as_generator(generator).max_length()


def enumerate_outputs(generator: GeneratorLike) -> list[str]:
    return as_generator(generator).enumerate()
