"""Line parsers for the three input formats.

  simplified{1,2,3}.txt   CHAR<TAB>CODE
  CJK.txt                 U+XXXX<TAB>CHAR<TAB>CODE
  phrases.txt             PHRASE
"""

import re
from dataclasses import dataclass

from ..core.errors import (
    CodepointMismatch,
    InvalidRecord,
    MultipleCharacters,
    NoTab,
    ParseIntError,
)
from ..core.wubi_code import WubiCode, parse_code

HEX_RE = re.compile(r'[0-9A-Fa-f]+')


@dataclass(frozen=True)
class SimplifiedRecord:
    char: str
    code: WubiCode


@dataclass(frozen=True)
class CharacterRecord:
    codepoint: int
    char: str
    code: WubiCode


def strip_newline(line: str) -> str:
    """Drop the line terminator only; other whitespace is significant."""
    return line.rstrip("\r\n")


def _split_tab(line: str, text: str) -> tuple[str, str]:
    head, sep, rest = text.partition("\t")
    if not sep:
        raise NoTab(line)
    return head, rest


def _single_char(field: str) -> str:
    if len(field) != 1:
        raise MultipleCharacters(field)
    return field


def parse_simplified_line(line: str) -> SimplifiedRecord:
    line = strip_newline(line)
    chars, code = _split_tab(line, line)
    if not chars:
        raise InvalidRecord(f"missing character: {line!r}", line)
    return SimplifiedRecord(_single_char(chars), parse_code(code))


def parse_character_line(line: str) -> CharacterRecord:
    line = strip_newline(line)
    codepoint, rest = _split_tab(line, line)
    ch, code = _split_tab(line, rest)
    if not ch:
        raise InvalidRecord(f"missing character: {line!r}", line)
    ch = _single_char(ch)

    if not codepoint.startswith("U+"):
        raise CodepointMismatch(codepoint, ch)
    digits = codepoint[2:]
    if not HEX_RE.fullmatch(digits):
        raise ParseIntError(digits)
    value = int(digits, 16)
    if value != ord(ch):
        raise CodepointMismatch(codepoint, ch)

    return CharacterRecord(value, ch, parse_code(code))


def parse_phrase_line(line: str) -> str:
    phrase = strip_newline(line)
    if len(phrase) < 2:
        raise InvalidRecord(f"phrase needs at least 2 characters: {phrase!r}", phrase)
    return phrase
