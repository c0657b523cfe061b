"""Simplified code table — short codes for frequent characters.

Two coupled dense arrays:
  - code_to_char: code index → code point (0 = empty slot)
  - char_to_codes: (code point - CHAR_MIN) → up to 3 code indices, in
    insertion order (the inputs list short codes before long ones)

code_to_char[c] == x  <=>  c in char_to_codes[x]
"""

import numpy as np

from ..core.errors import CharacterOutOfRange, DuplicateCode, TooManyCodes
from ..core.wubi_code import CODE_SPACE, WubiCode

CHAR_MIN = 0x2EB3
CHAR_MAX = 0x9FFF
CHAR_COUNT = CHAR_MAX - CHAR_MIN + 1

# One code per shortcut tier (1, 2 and 3 letters)
MAX_CODES_PER_CHAR = 3


def char_in_range(ch) -> bool:
    return isinstance(ch, str) and len(ch) == 1 and CHAR_MIN <= ord(ch) <= CHAR_MAX


class SimplifiedTable:
    """Bijective partial map between simplified codes and characters."""

    def __init__(self):
        self.code_to_char = np.zeros(CODE_SPACE, dtype=np.uint32)
        self.char_to_codes = np.zeros((CHAR_COUNT, MAX_CODES_PER_CHAR), dtype=np.uint32)
        self.code_counts = np.zeros(CHAR_COUNT, dtype=np.uint8)

    def insert(self, code: WubiCode, ch: str):
        """Map ``code`` to ``ch``; all checks run before anything is written."""
        if not char_in_range(ch):
            raise CharacterOutOfRange(ch)
        existing = self.code_to_char[code.index]
        if existing:
            raise DuplicateCode(code, chr(int(existing)), ch)
        slot = ord(ch) - CHAR_MIN
        count = int(self.code_counts[slot])
        if count >= MAX_CODES_PER_CHAR:
            raise TooManyCodes(ch, MAX_CODES_PER_CHAR)

        self.code_to_char[code.index] = ord(ch)
        self.char_to_codes[slot, count] = code.index
        self.code_counts[slot] = count + 1

    def code_of(self, ch: str) -> list[WubiCode]:
        if not char_in_range(ch):
            return []
        slot = ord(ch) - CHAR_MIN
        count = int(self.code_counts[slot])
        return [WubiCode(int(i)) for i in self.char_to_codes[slot, :count]]

    def char_of(self, code: WubiCode) -> str | None:
        value = int(self.code_to_char[code.index])
        return chr(value) if value else None

    def by_code(self):
        """Yield (code, ch) for every populated code, ascending by index."""
        for index in np.flatnonzero(self.code_to_char):
            yield WubiCode(int(index)), chr(int(self.code_to_char[index]))

    def by_char(self):
        """Yield (ch, codes) for every character with codes, ascending by code point."""
        for slot in np.flatnonzero(self.code_counts):
            count = int(self.code_counts[slot])
            codes = [WubiCode(int(i)) for i in self.char_to_codes[slot, :count]]
            yield chr(CHAR_MIN + int(slot)), codes

    def __len__(self):
        return int(np.count_nonzero(self.code_to_char))
