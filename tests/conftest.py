"""Shared fixtures for wbnc tests."""

import pytest

from wbnc.core.wubi_code import parse_code
from wbnc.table.table import Table


@pytest.fixture
def build_table():
    """Build a Table from (char, code) and (phrase, code) pairs."""
    def _build(simplified=(), full=()):
        table = Table()
        for ch, code in simplified:
            table.simplified.insert(parse_code(code), ch)
        for phrase, code in full:
            table.full.insert(phrase, parse_code(code))
        return table
    return _build


@pytest.fixture
def input_dir(tmp_path):
    """A directory holding a small, consistent set of input tables."""
    root = tmp_path / "input"
    root.mkdir()
    files = {
        "simplified1.txt": "工\ta\n",
        "simplified2.txt": "式\taa\n",
        "simplified3.txt": "工\taaa\n",
        "CJK.txt": (
            "U+5DE5\t工\taaaa\n"
            "U+5F0F\t式\taaad\n"
            "U+4EBA\t人\twwww\n"
        ),
        "phrases.txt": "工人\n人工\n式工人\n",
    }
    for name, content in files.items():
        (root / name).write_text(content, encoding="utf-8")
    return root
