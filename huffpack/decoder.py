"""Rebuilding a decoding tree from a code map and decoding packed bits."""

from __future__ import annotations

import os
import re
import warnings
from collections.abc import Iterable
from typing import Union

from huffpack.tree import INTERNAL, HuffmanNode

PathLike = Union[str, "os.PathLike[str]"]

_INTEGER = re.compile(r"[+-]?\d+")


class MapError(ValueError):
    """Raised when a code map or the bits decoded against it are invalid."""


def parse_map(text: str) -> list[tuple[int, str]]:
    """Parse "<ascii> <code>" pairs separated by whitespace.

    Parsing stops at the first pair whose first token is not an integer,
    or when a value has no code after it.
    """
    tokens = text.split()
    entries: list[tuple[int, str]] = []
    for value, code in zip(tokens[::2], tokens[1::2]):
        if not _INTEGER.fullmatch(value):
            break
        entries.append((int(value), code))
    return entries


def build_decoding_tree(entries: Iterable[tuple[int, str]]) -> HuffmanNode:
    """Build a decoding tree in which each code's path ends at its symbol."""
    root = HuffmanNode(INTERNAL, 0)
    for ch, code in entries:
        node = root
        for bit in code:
            if bit == "0":
                if node.left is None:
                    node.left = HuffmanNode(INTERNAL, 0)
                node = node.left
            elif bit == "1":
                if node.right is None:
                    node.right = HuffmanNode(INTERNAL, 0)
                node = node.right
            else:
                raise MapError(f"invalid character in Huffman code string: {code}")
        if not node.is_leaf():
            warnings.warn(
                f"code for {ch} ({code}) overlaps with another code path; "
                "the map is not a valid prefix code",
                stacklevel=2,
            )
        node.ch = ch
        node.frequency = 0
    return root


def load_decoding_tree(map_path: PathLike) -> HuffmanNode:
    """Read a code map file and build its decoding tree."""
    with open(map_path, encoding="latin-1") as handle:
        text = handle.read()
    return build_decoding_tree(parse_map(text))


def decode_bytes(data: bytes, root: HuffmanNode) -> bytes:
    """Decode every bit of data, most significant bit first.

    Padding bits in the last byte are decoded like any others.
    """
    output = bytearray()
    node = root
    for byte in data:
        for shift in range(7, -1, -1):
            child = node.right if (byte >> shift) & 1 else node.left
            if child is None:
                raise MapError("bit sequence does not match any code in the map")
            node = child
            if node.is_leaf():
                output.append(node.ch % 256)
                node = root
    return bytes(output)


def decode_file(
    compressed_path: PathLike, output_path: PathLike, root: HuffmanNode
) -> int:
    """Decode a compressed file into another file; return the bytes written."""
    with open(compressed_path, "rb") as source:
        data = source.read()
    decoded = decode_bytes(data, root)
    with open(output_path, "wb") as target:
        target.write(decoded)
    return len(decoded)