"""Fixed-radix encoding of Wubi codes.

Alphabet: a-y (25 lowercase letters, z is not a Wubi key).
A code is 1-4 letters. It is stored as a base-26 integer of four digits,
leftmost letter in the most significant digit, a=1 .. y=25, and 0 for an
absent letter. A shorter code therefore sorts before every longer code
that shares its prefix, so index order is dictionary order.
"""

from dataclasses import dataclass

from .errors import CodeTooLong, EmptyCode, InvalidRecord, NotValidChar

ALPHABET = "abcdefghijklmnopqrstuvwxy"
BASE = 26
CODE_LENGTH = 4
CODE_SPACE = BASE ** CODE_LENGTH  # 456976

# Reverse lookup: letter -> digit value (1-25, 0 means "no letter")
LETTER_TO_DIGIT = {c: i + 1 for i, c in enumerate(ALPHABET)}


def parse_code(text) -> "WubiCode":
    """Parse 1-4 letters from a-y into a WubiCode."""
    if isinstance(text, (bytes, bytearray)):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError:
            raise NotValidChar(value=bytes(text)) from None
    if not text:
        raise EmptyCode()
    if len(text) > CODE_LENGTH:
        raise CodeTooLong(text)
    index = 0
    for position, letter in enumerate(text):
        digit = LETTER_TO_DIGIT.get(letter)
        if digit is None:
            raise NotValidChar(f"not a letter in a-y: {letter!r} in {text!r}", text)
        index += digit * BASE ** (CODE_LENGTH - 1 - position)
    return WubiCode(index)


def code_digits(index: int) -> tuple[int, ...]:
    """Split an index into its four base-26 digits, most significant first."""
    return tuple(
        index // BASE ** (CODE_LENGTH - 1 - position) % BASE
        for position in range(CODE_LENGTH)
    )


def render_code(index: int) -> str:
    """Render an index back to its letters.

    Letters are emitted from the most significant digit and rendering stops
    at the first zero digit.
    """
    if not 0 < index < CODE_SPACE:
        raise InvalidRecord(f"code index out of range: {index}", index)
    digits = code_digits(index)
    if digits[0] == 0:
        raise InvalidRecord(f"code index has no leading letter: {index}", index)
    length = digits.index(0) if 0 in digits else CODE_LENGTH
    if any(digits[length:]):
        raise InvalidRecord(f"code index has a gap between letters: {index}", index)
    return "".join(ALPHABET[d - 1] for d in digits[:length])


@dataclass(frozen=True, order=True)
class WubiCode:
    """A Wubi code, compared and hashed by its dense index."""
    index: int

    @classmethod
    def parse(cls, text) -> "WubiCode":
        return parse_code(text)

    @property
    def letters(self) -> str:
        return render_code(self.index)

    def prefix_value(self, k: int) -> int:
        """Index shifted right by k digits: the leading 4-k letters as an integer."""
        return self.index // BASE ** k

    def __len__(self):
        return len(self.letters)

    def __str__(self):
        return self.letters


MAX_INDEX = parse_code("yyyy").index
