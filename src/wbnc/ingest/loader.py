"""Load the three input streams into a Table.

Order is fixed: simplified codes, then full character codes, then
phrases. Phrase codes are spliced from the full codes of their
characters, so every character of a phrase must already be loaded.
"""

from ..core.errors import InvalidRecord, WubiTableError
from ..core.phrase_code import encode_phrase
from ..table.table import Table
from .records import parse_character_line, parse_phrase_line, parse_simplified_line


def _apply(lines, source, handle) -> int:
    """Feed each line to ``handle``; stamp any error with ``source:lineno``."""
    lineno = 0
    try:
        for lineno, line in enumerate(lines, start=1):
            handle(line)
    except WubiTableError as e:
        if e.location is None:
            e.location = f"{source}:{lineno}"
        raise
    except UnicodeDecodeError as e:
        # Raised while reading the line after the last one handled.
        err = InvalidRecord(f"not valid UTF-8: {e.reason}", e.object[e.start:e.end])
        err.location = f"{source}:{lineno + 1}"
        raise err from e
    return lineno


def load_simplified(table: Table, lines, source="<simplified>") -> int:
    """Insert CHAR<TAB>CODE records into the simplified table."""
    def handle(line):
        record = parse_simplified_line(line)
        table.simplified.insert(record.code, record.char)

    return _apply(lines, source, handle)


def load_characters(table: Table, lines, source="<characters>") -> int:
    """Insert U+XXXX<TAB>CHAR<TAB>CODE records into the full table."""
    def handle(line):
        record = parse_character_line(line)
        table.full.insert(record.char, record.code)

    return _apply(lines, source, handle)


def load_phrases(table: Table, lines, source="<phrases>") -> int:
    """Compute each phrase's code from its characters and insert it into the full table."""
    full = table.full

    def handle(line):
        phrase = parse_phrase_line(line)
        full.insert(phrase, encode_phrase(phrase, full.code_of))

    return _apply(lines, source, handle)


class TableLoader:
    """Runs the three load stages in their mandatory order."""

    STAGES = ("simplified", "characters", "phrases")

    def __init__(self):
        self.table = Table()
        self.stage = 0

    def _enter(self, name):
        position = self.STAGES.index(name)
        if position < self.stage:
            raise InvalidRecord(
                f"cannot load {name} after {self.STAGES[self.stage]}", name
            )
        self.stage = position

    def simplified(self, lines, source="<simplified>") -> int:
        self._enter("simplified")
        return load_simplified(self.table, lines, source)

    def characters(self, lines, source="<characters>") -> int:
        self._enter("characters")
        return load_characters(self.table, lines, source)

    def phrases(self, lines, source="<phrases>") -> int:
        self._enter("phrases")
        return load_phrases(self.table, lines, source)

    def finish(self) -> Table:
        return self.table


def build_table(simplified_sources, character_lines, phrase_lines) -> Table:
    """Build a Table from in-memory line streams.

    ``simplified_sources`` is a sequence of line iterables, loaded in order.
    """
    loader = TableLoader()
    for i, lines in enumerate(simplified_sources, start=1):
        loader.simplified(lines, source=f"<simplified{i}>")
    loader.characters(character_lines)
    loader.phrases(phrase_lines)
    return loader.finish()
