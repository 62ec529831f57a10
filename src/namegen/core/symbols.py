"""
Symbol tables mapping pattern characters to candidate substrings.

A symbol table is immutable configuration: build it (or extend the default
one) before compiling, then hand it to the compiler. Characters that are not
in the table are emitted literally.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from types import MappingProxyType
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

# Characters with meaning in the pattern grammar; they can never be symbols.
RESERVED_CHARACTERS = frozenset("<>()|!~")


class SymbolCategory(Enum):
    """The built-in symbol categories, keyed by their pattern character."""

    SYLLABLE = "s"  # Generic syllable
    VOWEL = "v"  # Single vowel
    VOWEL_COMBINATION = "V"  # Vowel or vowel combination
    CONSONANT = "c"  # Single consonant
    INITIAL_CLUSTER = "B"  # Consonant(s) suitable for beginning a word
    MIDWORD_CLUSTER = "C"  # Consonant(s) suitable anywhere in a word
    INSULT = "i"  # Insult root
    MUSHY_NAME = "m"  # Mushy name root
    MUSHY_SUFFIX = "M"  # Mushy name ending
    STUPID_CONSONANT = "D"  # Consonant suited for a stupid person's name
    STUPID_SYLLABLE = "d"  # Syllable suited for a stupid person's name

    @property
    def symbol(self) -> str:
        return self.value


class SymbolTable(BaseModel):
    """
    Read-only mapping from a single pattern character to its candidates.

    Candidate order is significant: it fixes the order of enumeration.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    entries: Mapping[str, tuple[str, ...]] = Field(default_factory=dict, validate_default=True)

    @field_validator("entries")
    @classmethod
    def validate_symbols(cls, entries: Mapping[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
        for symbol in entries:
            if len(symbol) != 1:
                raise ValueError(f"Symbol must be a single character, got {symbol!r}")
            if symbol in RESERVED_CHARACTERS:
                raise ValueError(f"Symbol {symbol!r} is reserved by the pattern grammar")
        return MappingProxyType(dict(entries))

    def lookup(self, symbol: str) -> tuple[str, ...] | None:
        """Return the candidates for a symbol, or None if it is not defined."""
        return self.entries.get(symbol)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def symbols(self) -> frozenset[str]:
        return frozenset(self.entries)

    def extend(self, entries: Mapping[str, Sequence[str]]) -> Self:
        """
        Create a new table with additional or replaced symbols.

        This table is left unchanged.
        """
        return type(self)(entries={**self.entries, **entries})

    @classmethod
    def from_json(cls, data: str | bytes) -> Self:
        """Load a table from a JSON object of ``{"symbol": [candidates, ...]}``."""
        return cls(entries=_ENTRIES_ADAPTER.validate_json(data))


_ENTRIES_ADAPTER = TypeAdapter(dict[str, tuple[str, ...]])


DEFAULT_SYMBOLS = SymbolTable(
    entries={
        SymbolCategory.SYLLABLE.symbol: (
            "ach", "ack", "ad", "age", "ald", "ale", "an", "ang", "ar", "ard",
            "as", "ash", "at", "ath", "augh", "aw", "ban", "bel", "bur", "cer",
            "cha", "che", "dan", "dar", "del", "den", "dra", "dyn", "ech", "eld",
            "elm", "em", "en", "end", "eng", "enth", "er", "ess", "est", "et",
            "gar", "gha", "hat", "hin", "hon", "ia", "ight", "ild", "im", "ina",
            "ine", "ing", "ir", "is", "iss", "it", "kal", "kel", "kim", "kin",
            "ler", "lor", "lye", "mor", "mos", "nal", "ny", "nys", "old", "om",
            "on", "or", "orm", "os", "ough", "per", "pol", "qua", "que", "rad",
            "rak", "ran", "ray", "ril", "ris", "rod", "roth", "ryn", "sam",
            "say", "ser", "shy", "skel", "sul", "tai", "tan", "tas", "ther",
            "tia", "tin", "ton", "tor", "tur", "um", "und", "unt", "urn", "usk",
            "ust", "ver", "ves", "vor", "war", "wor", "yer",
        ),
        SymbolCategory.VOWEL.symbol: ("a", "e", "i", "o", "u", "y"),
        SymbolCategory.VOWEL_COMBINATION.symbol: (
            "a", "e", "i", "o", "u", "y", "ae", "ai", "au", "ay", "ea", "ee",
            "ei", "eu", "ey", "ia", "ie", "oe", "oi", "oo", "ou", "ui",
        ),
        SymbolCategory.CONSONANT.symbol: (
            "b", "c", "d", "f", "g", "h", "j", "k", "l", "m", "n", "p", "q", "r",
            "s", "t", "v", "w", "x", "y", "z",
        ),
        SymbolCategory.INITIAL_CLUSTER.symbol: (
            "b", "bl", "br", "c", "ch", "chr", "cl", "cr", "d", "dr", "f", "g",
            "h", "j", "k", "l", "ll", "m", "n", "p", "ph", "qu", "r", "rh", "s",
            "sch", "sh", "sl", "sm", "sn", "st", "str", "sw", "t", "th", "thr",
            "tr", "v", "w", "wh", "y", "z", "zh",
        ),
        SymbolCategory.MIDWORD_CLUSTER.symbol: (
            "b", "c", "ch", "ck", "d", "f", "g", "gh", "h", "k", "l", "ld", "ll",
            "lt", "m", "n", "nd", "nn", "nt", "p", "ph", "q", "r", "rd", "rr",
            "rt", "s", "sh", "ss", "st", "t", "th", "v", "w", "y", "z",
        ),
        SymbolCategory.INSULT.symbol: (
            "air", "ankle", "ball", "beef", "bone", "bum", "bumble", "bump",
            "cheese", "clod", "clot", "clown", "corn", "dip", "dolt", "doof",
            "dork", "dumb", "face", "finger", "foot", "fumble", "goof",
            "grumble", "head", "knock", "knocker", "knuckle", "loaf", "lump",
            "lunk", "meat", "muck", "munch", "nit", "numb", "pin", "puff",
            "skull", "snark", "sneeze", "thimble", "twerp", "twit", "wad",
            "wimp", "wipe",
        ),
        SymbolCategory.MUSHY_NAME.symbol: (
            "baby", "booble", "bunker", "cuddle", "cuddly", "cutie", "doodle",
            "foofie", "gooble", "honey", "kissie", "lover", "lovey", "moofie",
            "mooglie", "moopie", "moopsie", "nookum", "poochie", "poof",
            "poofie", "pookie", "schmoopie", "schnoogle", "schnookie",
            "schnookum", "smooch", "smoochie", "smoosh", "snoogle", "snoogy",
            "snookie", "snookum", "snuggy", "sweetie", "woogle", "woogy",
            "wookie", "wookum", "wuddle", "wuddly", "wuggy", "wunny",
        ),
        SymbolCategory.MUSHY_SUFFIX.symbol: (
            "boo", "bunch", "bunny", "cake", "cakes", "cute", "darling",
            "dumpling", "dumplings", "face", "foof", "goo", "head", "kin",
            "kins", "lips", "love", "mush", "pie", "poo", "pooh", "pook", "pums",
        ),
        SymbolCategory.STUPID_CONSONANT.symbol: (
            "b", "bl", "br", "cl", "d", "f", "fl", "fr", "g", "gh", "gl", "gr",
            "h", "j", "k", "kl", "m", "n", "p", "th", "w",
        ),
        SymbolCategory.STUPID_SYLLABLE.symbol: (
            "elch", "idiot", "ob", "og", "ok", "olph", "olt", "omph", "ong",
            "onk", "oo", "oob", "oof", "oog", "ook", "ooz", "org", "ork", "orm",
            "oron", "ub", "uck", "ug", "ulf", "ult", "um", "umb", "ump", "umph",
            "un", "unb", "ung", "unk", "unph", "unt", "uzz",
        ),
    }
)
