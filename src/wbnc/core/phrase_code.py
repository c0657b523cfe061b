"""Phrase code derivation under the Wubi splicing rules.

A phrase takes a prefix of each character's full code:
  2 characters: 2 + 2 letters
  3 characters: 1 + 1 + 2 letters (first, second, third)
  4+ characters: 1 + 1 + 1 + 1 letters (first, second, third, last)

The caller supplies ``charcode(ch)``, returning the character's full
WubiCode or None.
"""

from .errors import InvalidRecord, MissingCharacterCode
from .wubi_code import BASE, WubiCode, code_digits


def encode_phrase(phrase: str, charcode) -> WubiCode:
    """Compute the 4-letter code of a phrase of 2 or more characters."""
    if len(phrase) < 2:
        raise InvalidRecord(f"phrase needs at least 2 characters: {phrase!r}", phrase)

    codes = []
    for ch in phrase:
        code = charcode(ch)
        if code is None:
            raise MissingCharacterCode(ch, phrase)
        codes.append(code)

    if len(codes) == 2:
        index = (codes[0].prefix_value(2) * BASE ** 2
                 + codes[1].prefix_value(2))
    elif len(codes) == 3:
        index = (codes[0].prefix_value(3) * BASE ** 3
                 + codes[1].prefix_value(3) * BASE ** 2
                 + codes[2].prefix_value(2))
    else:
        index = (codes[0].prefix_value(3) * BASE ** 3
                 + codes[1].prefix_value(3) * BASE ** 2
                 + codes[2].prefix_value(3) * BASE
                 + codes[-1].prefix_value(3))

    # Every spliced letter must be present; a too-short character code leaves a gap.
    if 0 in code_digits(index):
        raise InvalidRecord(
            f"character codes too short to splice phrase {phrase!r}", phrase
        )
    return WubiCode(index)
