"""Huffman code generation, code-map output and bit-packed encoding."""

from __future__ import annotations

import os
import warnings
from collections.abc import Mapping
from typing import Optional, Union

from huffpack.tree import HuffmanNode

ALPHABET_SIZE = 128

PathLike = Union[str, "os.PathLike[str]"]


def _check_symbol(ch: int) -> None:
    if not 0 <= ch < ALPHABET_SIZE:
        raise ValueError(f"invalid character value in leaf node: {ch}")


def build_codes(root: Optional[HuffmanNode]) -> dict[int, str]:
    """Return a mapping of symbol to its code string of '0' and '1' characters.

    A tree made of a single leaf gives that symbol the code "0".
    """
    if root is None:
        raise ValueError("Huffman tree is empty, cannot generate codes")

    if root.is_leaf():
        _check_symbol(root.ch)
        return {root.ch: "0"}

    codes: dict[int, str] = {}
    stack: list[tuple[HuffmanNode, str]] = [(root, "")]
    while stack:
        node, prefix = stack.pop()
        if node.is_leaf():
            _check_symbol(node.ch)
            codes[node.ch] = prefix
            continue
        # Right is pushed first so the left branch is visited first.
        if node.right is not None:
            stack.append((node.right, prefix + "1"))
        if node.left is not None:
            stack.append((node.left, prefix + "0"))
    return dict(sorted(codes.items()))


def _label(ch: int) -> str:
    if 32 <= ch <= 126:
        return f"'{chr(ch)}'"
    special = {10: "'\\n'", 9: "'\\t'", 0: "'\\0'"}
    return special.get(ch, f"0x{ch:02X}")


def format_code_table(codes: Mapping[int, str]) -> str:
    """Render the code table as a human-readable text block."""
    lines = [
        "--- Huffman Codes Generated ---",
        "Char\tASCII\tCode",
        "----\t-----\t----",
    ]
    lines.extend(
        f"{_label(ch)}\t{ch}\t{code}" for ch, code in sorted(codes.items()) if code
    )
    lines.append("-------------------------------")
    return "\n".join(lines) + "\n"


def format_map(codes: Mapping[int, str]) -> str:
    """Render the code map file content: one "<ascii> <code>" line per symbol."""
    return "".join(f"{ch} {code}\n" for ch, code in sorted(codes.items()) if code)


def write_map(codes: Mapping[int, str], path: PathLike) -> None:
    """Write the code map to a file."""
    with open(path, "w", encoding="ascii", newline="\n") as handle:
        handle.write(format_map(codes))


def encode_bytes(data: bytes, codes: Mapping[int, str]) -> bytes:
    """Encode data with the given codes, packing bits most significant first.

    The final byte is padded with zero bits. Bytes outside the 7-bit range
    and bytes without a code are skipped with a warning.
    """
    pieces: list[str] = []
    for value in data:
        if value >= ALPHABET_SIZE:
            warnings.warn(
                f"non-ASCII character (value {value}) encountered, skipping",
                stacklevel=2,
            )
            continue
        code = codes.get(value, "")
        if not code:
            warnings.warn(
                f"no Huffman code found for character {value}", stacklevel=2
            )
            continue
        pieces.append(code)

    bits = "".join(pieces)
    if not bits:
        return b""
    if set(bits) - {"0", "1"}:
        raise ValueError("codes may contain only '0' and '1'")
    padded = bits + "0" * (-len(bits) % 8)
    return int(padded, 2).to_bytes(len(padded) // 8, "big")


def encode_file(
    input_path: PathLike, output_path: PathLike, codes: Mapping[int, str]
) -> int:
    """Encode a file into another file and return the number of bytes written."""
    with open(input_path, "rb") as source:
        data = source.read()
    encoded = encode_bytes(data, codes)
    with open(output_path, "wb") as target:
        target.write(encoded)
    return len(encoded)