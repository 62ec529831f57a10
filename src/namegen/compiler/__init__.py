"""Pattern compilation: turns pattern strings into generator trees."""

from namegen.compiler.groups import GroupBuilder, LiteralGroup, SymbolGroup
from namegen.compiler.pattern_compiler import CompiledPattern, PatternCompiler, compile

__all__ = ["CompiledPattern", "GroupBuilder", "LiteralGroup", "PatternCompiler", "SymbolGroup", "compile"]
