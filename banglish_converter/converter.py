import logging
from collections.abc import Mapping
from functools import lru_cache
from typing import Tuple

from .config import get_settings
from .dictionary import load_dictionary, merge_dictionaries
from .lexer import Lexer, is_separator, split_words
from .tables import (
    COMMON_WORDS,
    CONSONANTS,
    INDEPENDENT_VOWELS,
    KARS,
    NUMERALS,
    VOWEL_SIGNS,
)

logger = logging.getLogger(__name__)


class _BanglishTransliterator:
    """Phonetic Banglish -> Bengali converter using greedy longest match"""

    def __init__(self, dictionary: Mapping = COMMON_WORDS, convert_digits=True):
        self.dictionary = dictionary
        self.convert_digits = convert_digits

        self.consonant_map = CONSONANTS
        self.vowel_map = VOWEL_SIGNS
        self.independent_vowel_map = INDEPENDENT_VOWELS
        self.digit_map = NUMERALS if convert_digits else {}

    def __call__(self, text: str) -> str:
        """Transliterate Banglish text to Bengali"""
        if not text:
            return ""

        result = []
        for part in split_words(text):
            if is_separator(part):
                result.append(part)
            else:
                result.append(self.convert_token(part))
        return "".join(result)

    def convert_token(self, word: str) -> str:
        """Dictionary lookup first, character engine on a miss"""
        override = self.dictionary.get(word.lower())
        if override is not None:
            return override
        return self.convert_word(word)

    def convert_word(self, word: str) -> str:
        """Scan one word left to right, consuming 3, 2 or 1 characters per step"""
        if not word:
            return ""

        lexer = Lexer(word)
        result = []
        # Whether the last emitted glyph is a dependent vowel sign
        last_is_kar = False

        while not lexer.at_end():
            glyph, consumed = self._match(lexer, bool(result), last_is_kar)
            lexer.advance(consumed)
            result.append(glyph)
            last_is_kar = glyph in KARS

        return "".join(result)

    def _match(self, lexer: Lexer, emitted: bool, last_is_kar: bool) -> Tuple[str, int]:
        """Glyph for the longest pattern at the cursor and its length"""
        word_initial = lexer.at_start() or not emitted

        # Rule 1: three-character consonant clusters (chh)
        three = lexer.peek_chunk(3)
        if three is not None and three in self.consonant_map:
            return self.consonant_map[three], 3

        # Rule 2: two-character consonants, then two-character vowels
        two = lexer.peek_chunk(2)
        if two is not None:
            if two in self.consonant_map:
                return self.consonant_map[two], 2
            if two in self.vowel_map:
                if word_initial:
                    return self._independent_vowel(two), 2
                return self.vowel_map[two], 2

        # Rule 3: single characters
        single = lexer.peek()
        if single in self.digit_map:
            return self.digit_map[single], 1
        if single in self.consonant_map:
            return self.consonant_map[single], 1
        if single in self.vowel_map:
            if word_initial:
                return self.independent_vowel_map.get(single, single), 1
            if last_is_kar:
                # No second vowel sign on the same consonant
                return single, 1
            return self.vowel_map[single], 1

        # Unmapped characters pass through unchanged
        return single, 1

    def _independent_vowel(self, pattern: str) -> str:
        """Independent form of a two-character vowel, falling back to its first letter"""
        for candidate in (pattern, pattern[0]):
            if candidate in self.independent_vowel_map:
                return self.independent_vowel_map[candidate]
        return pattern


# Global instance
_transliterator = _BanglishTransliterator()


@lru_cache()
def get_transliterator() -> _BanglishTransliterator:
    """Transliterator configured from settings (extra dictionary, if any)"""
    settings = get_settings()
    if not settings.DICTIONARY_PATH:
        return _transliterator

    extra = load_dictionary(settings.DICTIONARY_PATH)
    logger.info(
        "Using %d extra dictionary words from %s", len(extra), settings.DICTIONARY_PATH
    )
    return _BanglishTransliterator(dictionary=merge_dictionaries(COMMON_WORDS, extra))


def convert(text: str) -> str:
    """
    Convert Banglish text to Bengali script.

    Args:
        text: Latin-script Bengali, may contain punctuation, digits and
            already-Bengali text

    Returns:
        Text with Banglish words rendered in Bengali; everything else kept

    Examples:
        >>> convert('ami tumi')
        'আমি তুমি'
        >>> convert('bangla')
        'বাংলা'
        >>> convert('2024')
        '২০২৪'
    """
    return get_transliterator()(text)


def convert_word(word: str) -> str:
    """Run the character engine on one word, skipping the dictionary"""
    return get_transliterator().convert_word(word)
