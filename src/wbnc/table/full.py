"""Full code table — every character and phrase with its full code.

  - code_to_phrases: dense list indexed by code, each slot None or the
    phrases under that code in insertion order
  - phrase_to_code: phrase → code, one code per phrase
"""

from ..core.errors import DuplicatePhrase
from ..core.wubi_code import CODE_SPACE, WubiCode


class FullTable:
    """Code → phrases, with the phrase → code inverse."""

    def __init__(self):
        self.code_to_phrases = [None] * CODE_SPACE
        self.phrase_to_code = {}

    def insert(self, phrase: str, code: WubiCode):
        existing = self.phrase_to_code.get(phrase)
        if existing is not None:
            raise DuplicatePhrase(phrase, existing)
        self.phrase_to_code[phrase] = code
        phrases = self.code_to_phrases[code.index]
        if phrases is None:
            phrases = self.code_to_phrases[code.index] = []
        phrases.append(phrase)

    def code_of(self, phrase: str) -> WubiCode | None:
        return self.phrase_to_code.get(phrase)

    def phrases_of(self, code: WubiCode) -> list[str]:
        return self.code_to_phrases[code.index] or []

    def by_code(self):
        """Yield (code, phrases) ascending by index."""
        for index, phrases in enumerate(self.code_to_phrases):
            if phrases:
                yield WubiCode(index), phrases

    def by_phrase(self):
        """Yield (phrase, code) in insertion order (not sorted)."""
        yield from self.phrase_to_code.items()

    def __len__(self):
        return len(self.phrase_to_code)
