"""Tests for the simplified and full code tables."""

import pytest

from wbnc.core.errors import (
    CharacterOutOfRange,
    DuplicateCode,
    DuplicatePhrase,
    InvalidRecord,
    NotValidChar,
    TooManyCodes,
)
from wbnc.core.wubi_code import parse_code
from wbnc.table.full import FullTable
from wbnc.table.simplified import CHAR_COUNT, CHAR_MAX, CHAR_MIN, SimplifiedTable
from wbnc.table.table import Table


class TestSimplifiedTable:
    """Test SimplifiedTable."""

    def setup_method(self):
        self.t = SimplifiedTable()

    def test_char_range(self):
        assert CHAR_MIN == 0x2EB3
        assert CHAR_MAX == 0x9FFF
        assert CHAR_COUNT == 0x9FFF - 0x2EB3 + 1

    def test_insert_and_lookup(self):
        self.t.insert(parse_code("a"), "工")
        assert self.t.char_of(parse_code("a")) == "工"
        assert self.t.code_of("工") == [parse_code("a")]

    def test_empty_lookups(self):
        assert self.t.char_of(parse_code("a")) is None
        assert self.t.code_of("工") == []
        assert self.t.code_of("X") == []

    def test_codes_keep_insertion_order(self):
        for code in ("a", "aa", "aaa"):
            self.t.insert(parse_code(code), "工")
        assert [str(c) for c in self.t.code_of("工")] == ["a", "aa", "aaa"]

    def test_duplicate_code_raises(self):
        self.t.insert(parse_code("a"), "甲")
        with pytest.raises(DuplicateCode):
            self.t.insert(parse_code("a"), "乙")
        assert self.t.char_of(parse_code("a")) == "甲"
        assert self.t.code_of("乙") == []

    def test_same_pair_twice_is_duplicate(self):
        self.t.insert(parse_code("a"), "甲")
        with pytest.raises(DuplicateCode):
            self.t.insert(parse_code("a"), "甲")
        assert self.t.code_of("甲") == [parse_code("a")]

    def test_fourth_code_raises(self):
        for code in ("a", "aa", "aaa"):
            self.t.insert(parse_code(code), "工")
        with pytest.raises(TooManyCodes):
            self.t.insert(parse_code("aaaa"), "工")
        assert issubclass(TooManyCodes, InvalidRecord)
        assert self.t.char_of(parse_code("aaaa")) is None
        assert len(self.t.code_of("工")) == 3

    def test_out_of_range_raises(self):
        with pytest.raises(CharacterOutOfRange):
            self.t.insert(parse_code("a"), "X")
        with pytest.raises(NotValidChar):
            self.t.insert(parse_code("a"), chr(CHAR_MIN - 1))
        with pytest.raises(NotValidChar):
            self.t.insert(parse_code("a"), chr(CHAR_MAX + 1))
        with pytest.raises(NotValidChar):
            self.t.insert(parse_code("a"), "甲乙")
        assert len(self.t) == 0

    def test_range_bounds_accepted(self):
        self.t.insert(parse_code("a"), chr(CHAR_MIN))
        self.t.insert(parse_code("b"), chr(CHAR_MAX))
        assert self.t.char_of(parse_code("a")) == chr(CHAR_MIN)
        assert self.t.char_of(parse_code("b")) == chr(CHAR_MAX)

    def test_by_code_sorted(self):
        self.t.insert(parse_code("b"), "乙")
        self.t.insert(parse_code("a"), "甲")
        self.t.insert(parse_code("aa"), "丙")
        assert [(str(c), ch) for c, ch in self.t.by_code()] == [
            ("a", "甲"), ("aa", "丙"), ("b", "乙"),
        ]

    def test_by_char_sorted(self):
        self.t.insert(parse_code("a"), "甲")   # U+7532
        self.t.insert(parse_code("b"), "乙")   # U+4E59
        self.t.insert(parse_code("c"), "丙")   # U+4E19
        self.t.insert(parse_code("cc"), "丙")
        result = [(ch, [str(c) for c in codes]) for ch, codes in self.t.by_char()]
        assert result == [("丙", ["c", "cc"]), ("乙", ["b"]), ("甲", ["a"])]

    def test_len(self):
        self.t.insert(parse_code("a"), "甲")
        self.t.insert(parse_code("aa"), "甲")
        assert len(self.t) == 2


class TestFullTable:
    """Test FullTable."""

    def setup_method(self):
        self.t = FullTable()

    def test_insert_and_lookup(self):
        self.t.insert("工", parse_code("aaaa"))
        assert self.t.code_of("工") == parse_code("aaaa")
        assert self.t.phrases_of(parse_code("aaaa")) == ["工"]

    def test_missing_lookups(self):
        assert self.t.code_of("工") is None
        assert self.t.phrases_of(parse_code("aaaa")) == []

    def test_phrases_keep_insertion_order(self):
        self.t.insert("工人", parse_code("aaww"))
        self.t.insert("式工人", parse_code("aaww"))
        assert self.t.phrases_of(parse_code("aaww")) == ["工人", "式工人"]

    def test_duplicate_phrase_raises(self):
        self.t.insert("工", parse_code("aaaa"))
        with pytest.raises(DuplicatePhrase):
            self.t.insert("工", parse_code("aaaa"))
        with pytest.raises(DuplicatePhrase):
            self.t.insert("工", parse_code("a"))
        assert self.t.phrases_of(parse_code("aaaa")) == ["工"]
        assert self.t.phrases_of(parse_code("a")) == []

    def test_by_code_sorted(self):
        self.t.insert("人", parse_code("wwww"))
        self.t.insert("工", parse_code("aaaa"))
        self.t.insert("工人", parse_code("aaww"))
        assert [(str(c), p) for c, p in self.t.by_code()] == [
            ("aaaa", ["工"]), ("aaww", ["工人"]), ("wwww", ["人"]),
        ]

    def test_by_phrase(self):
        self.t.insert("人", parse_code("wwww"))
        self.t.insert("工", parse_code("aaaa"))
        assert dict(self.t.by_phrase()) == {
            "人": parse_code("wwww"),
            "工": parse_code("aaaa"),
        }

    def test_len(self):
        self.t.insert("人", parse_code("wwww"))
        self.t.insert("人工", parse_code("wwaa"))
        assert len(self.t) == 2


class TestTable:
    """Test the Table aggregate."""

    def test_owns_both_tables(self):
        table = Table()
        assert isinstance(table.simplified, SimplifiedTable)
        assert isinstance(table.full, FullTable)

    def test_tables_not_shared(self):
        assert Table().full is not Table().full

    def test_stats(self, build_table):
        table = build_table(
            simplified=[("工", "a")],
            full=[("工", "aaaa"), ("工人", "aaww")],
        )
        assert table.stats() == {"simplified_codes": 1, "full_phrases": 2}
