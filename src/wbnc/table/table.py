"""Table aggregate owning the simplified and full code tables."""

from dataclasses import dataclass, field

from .full import FullTable
from .simplified import SimplifiedTable


@dataclass
class Table:
    simplified: SimplifiedTable = field(default_factory=SimplifiedTable)
    full: FullTable = field(default_factory=FullTable)

    def stats(self) -> dict:
        return {
            "simplified_codes": len(self.simplified),
            "full_phrases": len(self.full),
        }
