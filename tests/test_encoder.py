import math
from collections import Counter

import pytest

from huffpack.encoder import (
    build_codes,
    encode_bytes,
    encode_file,
    format_code_table,
    format_map,
    write_map,
)
from huffpack.tree import INTERNAL, HuffmanNode, build_tree

TEXT = b"this is an example of a huffman tree\nwith\ttabs and more text.\n"


def _codes_for(data):
    return build_codes(build_tree(Counter(data)))


def _decode(encoded, codes, symbol_count):
    lookup = {code: ch for ch, code in codes.items()}
    bits = "".join(f"{byte:08b}" for byte in encoded)
    out = bytearray()
    current = ""
    for bit in bits:
        current += bit
        if current in lookup:
            out.append(lookup[current])
            current = ""
            if len(out) == symbol_count:
                break
    return bytes(out)


def test_build_codes_empty_tree_raises():
    with pytest.raises(ValueError):
        build_codes(None)


def test_build_codes_single_symbol_gets_zero():
    assert build_codes(build_tree({65: 4})) == {65: "0"}


def test_build_codes_invalid_leaf_raises():
    with pytest.raises(ValueError):
        build_codes(HuffmanNode(200, 1))
    bad = HuffmanNode(INTERNAL, 2, HuffmanNode(65, 1), HuffmanNode(300, 1))
    with pytest.raises(ValueError):
        build_codes(bad)


def test_build_codes_two_symbols():
    assert build_codes(build_tree({97: 1, 98: 2})) == {97: "0", 98: "1"}


def test_codes_are_prefix_free_and_complete():
    codes = _codes_for(TEXT)
    assert set(codes) == set(TEXT)
    values = list(codes.values())
    for a in values:
        for b in values:
            if a is not b:
                assert not b.startswith(a)
    assert math.isclose(sum(2.0 ** -len(c) for c in values), 1.0)


def test_more_frequent_symbols_never_have_longer_codes():
    counts = Counter(TEXT)
    codes = _codes_for(TEXT)
    for a in counts:
        for b in counts:
            if counts[a] > counts[b]:
                assert len(codes[a]) <= len(codes[b])


def test_encode_bytes_two_symbols():
    assert encode_bytes(b"abb", {97: "0", 98: "1"}) == b"\x60"


def test_encode_bytes_empty():
    assert encode_bytes(b"", {97: "0"}) == b""


def test_encode_length_matches_bit_count():
    codes = _codes_for(TEXT)
    total_bits = sum(len(codes[b]) for b in TEXT)
    encoded = encode_bytes(TEXT, codes)
    assert len(encoded) == (total_bits + 7) // 8


def test_encode_round_trip():
    codes = _codes_for(TEXT)
    encoded = encode_bytes(TEXT, codes)
    assert _decode(encoded, codes, len(TEXT)) == TEXT


def test_encode_skips_non_ascii_with_warning():
    codes = {97: "1"}
    with pytest.warns(UserWarning):
        result = encode_bytes(bytes([97, 200, 97]), codes)
    assert result == encode_bytes(b"aa", codes)


def test_encode_skips_missing_code_with_warning():
    codes = {97: "1"}
    with pytest.warns(UserWarning):
        result = encode_bytes(b"aza", codes)
    assert result == encode_bytes(b"aa", codes)


def test_format_map_lines():
    assert format_map({98: "1", 97: "0"}) == "97 0\n98 1\n"


def test_format_map_parses_back():
    codes = _codes_for(TEXT)
    parsed = {}
    for line in format_map(codes).splitlines():
        ch, code = line.split()
        parsed[int(ch)] = code
    assert parsed == codes


def test_format_code_table_labels():
    table = format_code_table({0: "00", 9: "01", 10: "100", 1: "101", 97: "11"})
    lines = table.splitlines()
    assert lines[1] == "Char\tASCII\tCode"
    assert "'\\0'\t0\t00" in lines
    assert "'\\t'\t9\t01" in lines
    assert "'\\n'\t10\t100" in lines
    assert "0x01\t1\t101" in lines
    assert "'a'\t97\t11" in lines


def test_write_map_and_encode_file(tmp_path):
    source = tmp_path / "input.txt"
    source.write_bytes(TEXT)
    codes = _codes_for(TEXT)

    map_path = tmp_path / "codes.map"
    write_map(codes, map_path)
    assert map_path.read_text(encoding="ascii") == format_map(codes)

    out_path = tmp_path / "out.bin"
    written = encode_file(source, out_path, codes)
    data = out_path.read_bytes()
    assert written == len(data)
    assert data == encode_bytes(TEXT, codes)
    assert _decode(data, codes, len(TEXT)) == TEXT