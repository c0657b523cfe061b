"""Emit the forward, mobile and reverse tables from a built Table.

Forward views are merged by code index, reverse views by key string.
Python str ordering is code point ordering, which matches byte-wise
UTF-8 ordering, so the reverse table is sorted the way the engine
expects.
"""

from pathlib import Path

from ..table.table import Table


def merge_sorted(left, right, left_key, right_key):
    """Two-way merge of key-sorted streams.

    Yields (left_item, right_item); one side is None unless the keys are
    equal. Holds a single pending item per side.
    """
    left = iter(left)
    right = iter(right)
    l_item = next(left, None)
    r_item = next(right, None)
    while l_item is not None or r_item is not None:
        if r_item is None:
            yield l_item, None
            l_item = next(left, None)
        elif l_item is None:
            yield None, r_item
            r_item = next(right, None)
        else:
            l_key = left_key(l_item)
            r_key = right_key(r_item)
            if l_key < r_key:
                yield l_item, None
                l_item = next(left, None)
            elif l_key > r_key:
                yield None, r_item
                r_item = next(right, None)
            else:
                yield l_item, r_item
                l_item = next(left, None)
                r_item = next(right, None)


def _first(pair):
    return pair[0]


# ---- Forward views ----

def simplified_forward(table: Table):
    """Stream A: (code, ch) ascending by code."""
    return table.simplified.by_code()


def filtered_full_forward(table: Table):
    """Stream B: (code, phrases) ascending by code, overlap filter applied.

    A single-character phrase equal to the simplified character at the
    same code is dropped; codes left with no phrases are skipped.
    """
    simplified = table.simplified
    for code, phrases in table.full.by_code():
        ch = simplified.char_of(code)
        if ch is not None:
            phrases = [p for p in phrases if p != ch]
        if phrases:
            yield code, phrases


def forward_entries(table: Table):
    """Yield (code, payloads): the simplified character first, then full phrases."""
    merged = merge_sorted(
        simplified_forward(table), filtered_full_forward(table), _first, _first
    )
    for simple, full in merged:
        if full is None:
            yield simple[0], [simple[1]]
        elif simple is None:
            yield full[0], list(full[1])
        else:
            yield simple[0], [simple[1], *full[1]]


def forward_table_lines(table: Table):
    """Lines of wb_nc_table.txt: "<code> <payload> ..."."""
    for code, payloads in forward_entries(table):
        yield f"{code} {' '.join(payloads)}\n"


def mobile_table_lines(table: Table):
    """Lines of wb_nc_ios_table.txt: "<code>=<payload>", one per payload."""
    for code, payloads in forward_entries(table):
        for payload in payloads:
            yield f"{code}={payload}\n"


# ---- Reverse views ----

def reverse_simplified(table: Table):
    """(ch, codes) ascending by character, codes short to long."""
    return table.simplified.by_char()


def reverse_full(table: Table):
    """(phrase, code) for every full entry, sorted by phrase."""
    return sorted(table.full.by_phrase(), key=_first)


def reverse_entries(table: Table):
    """Yield (key, codes); a key in both views gets simplified codes then its full code."""
    merged = merge_sorted(
        reverse_simplified(table), reverse_full(table), _first, _first
    )
    for simple, full in merged:
        if full is None:
            yield simple[0], list(simple[1])
        elif simple is None:
            yield full[0], [full[1]]
        else:
            yield simple[0], [*simple[1], full[1]]


def reverse_table_lines(table: Table):
    """Lines of wb_nc_reverse_table.txt: "<key> <code> ..."."""
    for key, codes in reverse_entries(table):
        yield f"{key} {' '.join(str(c) for c in codes)}\n"


def write_lines(path, lines) -> int:
    """Write lines to a UTF-8 file with \\n endings; returns the line count."""
    count = 0
    with open(Path(path), "w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line)
            count += 1
    return count
