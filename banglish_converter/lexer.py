import re
from typing import List

_WHITESPACE_RUN = re.compile(r"(\s+)")


class Lexer:
    """Cursor over a single Banglish word with greedy lookahead helpers"""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def peek(self) -> str | None:
        """Look at the current character without consuming"""
        return self.text[self.pos] if self.pos < len(self.text) else None

    def peek_chunk(self, length: int) -> str | None:
        """Next `length` characters, or None if fewer remain"""
        if self.pos + length > len(self.text):
            return None
        return self.text[self.pos : self.pos + length]

    def advance(self, count: int = 1) -> None:
        """Move past the next count characters"""
        self.pos = min(self.pos + count, len(self.text))

    def at_start(self) -> bool:
        return self.pos == 0

    def at_end(self) -> bool:
        """Check if at end of text"""
        return self.pos >= len(self.text)


def split_words(text: str) -> List[str]:
    """Split text into alternating word and whitespace runs.

    Joining the result gives back the input unchanged, so whitespace
    (including newlines and repeated spaces) survives conversion verbatim.
    """
    return [part for part in _WHITESPACE_RUN.split(text) if part]


def is_separator(part: str) -> bool:
    """True for a whitespace run produced by split_words"""
    return part.isspace()
