"""
Error types raised while compiling name patterns.

Compilation is the only fallible operation in the library. Rendering and
introspection of a compiled generator never raise on their own.
"""


class PatternError(ValueError):
    """Base class for all pattern compilation errors."""

    def __init__(self, message: str, pattern: str, position: int) -> None:
        super().__init__(f"{message} (at position {position} in {pattern!r})")
        self.pattern = pattern
        self.position = position


class UnbalancedClosing(PatternError):
    """A closing bracket appeared with no open group to close."""

    def __init__(self, pattern: str, position: int) -> None:
        super().__init__(
            f"Unbalanced closing bracket {pattern[position]!r}",
            pattern,
            position,
        )


class MismatchedClosing(PatternError):
    """A closing bracket did not match the innermost open group."""

    def __init__(self, pattern: str, position: int, expected: str) -> None:
        self.expected = expected
        self.found = pattern[position]
        super().__init__(
            f"Unexpected {self.found!r}, expected {expected!r}",
            pattern,
            position,
        )


class UnclosedGroup(PatternError):
    """Input ended while one or more groups were still open."""

    def __init__(self, pattern: str, depth: int) -> None:
        self.depth = depth
        super().__init__(
            f"Missing closing bracket for {depth} open group(s)",
            pattern,
            len(pattern),
        )
