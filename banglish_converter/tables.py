from collections.abc import Mapping
from typing import Iterable, Iterator, Tuple


class TableError(ValueError):
    """Raised when a grapheme table or dictionary is built from bad data"""


class GraphemeTable(Mapping):
    """Read-only pattern -> glyph table with validated, fixed keys"""

    def __init__(self, name: str, pairs: Iterable[Tuple[str, str]]):
        self.name = name
        entries = {}
        for pattern, glyph in pairs:
            if not pattern:
                raise TableError(f"{name}: empty pattern")
            if not glyph:
                raise TableError(f"{name}: empty glyph for pattern {pattern!r}")
            if pattern in entries:
                raise TableError(f"{name}: duplicate pattern {pattern!r}")
            entries[pattern] = glyph
        self._entries = entries
        self.max_pattern_length = max((len(p) for p in entries), default=0)

    def __getitem__(self, pattern: str) -> str:
        return self._entries[pattern]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"GraphemeTable({self.name!r}, {len(self)} entries)"

    def patterns_of_length(self, length: int) -> frozenset:
        return frozenset(p for p in self._entries if len(p) == length)


# Consonants and consonant clusters (case-sensitive: Sh, R, T, D, N, Y)
CONSONANTS = GraphemeTable(
    "consonants",
    [
        ("chh", "ছ"),
        ("kh", "খ"),
        ("gh", "ঘ"),
        ("ng", "ং"),
        ("ch", "চ"),
        ("jh", "ঝ"),
        ("nh", "ঞ"),
        ("th", "থ"),
        ("dh", "ধ"),
        ("ph", "ফ"),
        ("bh", "ভ"),
        ("sh", "শ"),
        ("Sh", "ষ"),
        ("rh", "ঢ়"),
        ("Rh", "ঢ়"),
        ("k", "ক"),
        ("g", "গ"),
        ("c", "চ"),
        ("j", "জ"),
        ("t", "ত"),
        ("d", "দ"),
        ("n", "ন"),
        ("p", "প"),
        ("b", "ব"),
        ("m", "ম"),
        ("y", "য"),
        ("r", "র"),
        ("l", "ল"),
        ("w", "ও"),
        ("v", "ভ"),
        ("s", "স"),
        ("h", "হ"),
        ("R", "ড়"),
        ("Y", "য়"),
        ("q", "ক"),
        ("f", "ফ"),
        ("z", "য"),
        ("x", "ক্স"),
        ("T", "ট"),
        ("D", "ড"),
        ("N", "ণ"),
    ],
)

# Dependent vowel signs (kar)
VOWEL_SIGNS = GraphemeTable(
    "vowel signs",
    [
        ("a", "া"),
        ("aa", "া"),
        ("i", "ি"),
        ("ii", "ী"),
        ("u", "ু"),
        ("uu", "ূ"),
        ("e", "ে"),
        ("ee", "ী"),
        ("oi", "ৈ"),
        ("o", "ো"),
        ("oo", "ু"),
        ("ou", "ৌ"),
        ("A", "া"),
    ],
)

INDEPENDENT_VOWELS = GraphemeTable(
    "independent vowels",
    [
        ("a", "অ"),
        ("aa", "আ"),
        ("i", "ই"),
        ("ii", "ঈ"),
        ("u", "উ"),
        ("uu", "ঊ"),
        ("e", "এ"),
        ("oi", "ঐ"),
        ("o", "ও"),
        ("ou", "ঔ"),
        ("ri", "ঋ"),
        ("A", "আ"),
    ],
)

KARS = frozenset(VOWEL_SIGNS.values())

NUMERALS = GraphemeTable(
    "numerals",
    [
        ("0", "০"),
        ("1", "১"),
        ("2", "২"),
        ("3", "৩"),
        ("4", "৪"),
        ("5", "৫"),
        ("6", "৬"),
        ("7", "৭"),
        ("8", "৮"),
        ("9", "৯"),
    ],
)

# Irregular spellings no character rule gets right
COMMON_WORDS = GraphemeTable(
    "common words",
    [
        ("ami", "আমি"),
        ("tumi", "তুমি"),
        ("apni", "আপনি"),
        ("tini", "তিনি"),
        ("amra", "আমরা"),
        ("tomra", "তোমরা"),
        ("apnara", "আপনারা"),
        ("tara", "তারা"),
        ("ki", "কি"),
        ("keno", "কেন"),
        ("kothai", "কোথায়"),
        ("kokhon", "কখন"),
        ("kibhabe", "কিভাবে"),
        ("eto", "এত"),
        ("oto", "ওত"),
        ("ei", "এই"),
        ("oi", "ওই"),
        ("hae", "হ্যাঁ"),
        ("na", "না"),
        ("nai", "নাই"),
        ("ache", "আছে"),
        ("chhilo", "ছিল"),
        ("hobe", "হবে"),
        ("kora", "করা"),
        ("kore", "করে"),
        ("korechhi", "করেছি"),
        ("korbo", "করব"),
        ("ekta", "একটা"),
        ("ekti", "একটি"),
        ("khaoa", "খাওয়া"),
        ("ghum", "ঘুম"),
        ("bhat", "ভাত"),
        ("pani", "পানি"),
        ("jol", "জল"),
        ("dhonnobad", "ধন্যবাদ"),
        ("shukriya", "শুক্রিয়া"),
        ("valo", "ভালো"),
        ("bhalo", "ভালো"),
        ("kharap", "খারাপ"),
        ("sundor", "সুন্দর"),
        ("amar", "আমার"),
        ("tomar", "তোমার"),
        ("tar", "তার"),
        ("jodi", "যদি"),
        ("tahole", "তাহলে"),
        ("kintu", "কিন্তু"),
        ("ebong", "এবং"),
        ("ba", "বা"),
        ("theke", "থেকে"),
    ],
)


def validate_tables() -> None:
    """Check the cross-table invariants the scanner relies on"""
    for length in range(1, CONSONANTS.max_pattern_length + 1):
        overlap = CONSONANTS.patterns_of_length(length) & VOWEL_SIGNS.patterns_of_length(
            length
        )
        if overlap:
            raise TableError(
                f"patterns in both consonant and vowel tables: {sorted(overlap)}"
            )
    if VOWEL_SIGNS.max_pattern_length > 2 or INDEPENDENT_VOWELS.max_pattern_length > 2:
        raise TableError("vowel patterns are limited to 2 characters")
    if CONSONANTS.max_pattern_length > 3:
        raise TableError("consonant patterns are limited to 3 characters")
    for digit in NUMERALS:
        if len(digit) != 1 or digit not in "0123456789":
            raise TableError(f"numerals: {digit!r} is not a single ASCII digit")
    validate_dictionary(COMMON_WORDS)


def validate_dictionary(dictionary: Mapping) -> None:
    for word in dictionary:
        if word != word.lower():
            raise TableError(f"dictionary key {word!r} is not lower-case")


validate_tables()
