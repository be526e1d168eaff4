"""Compressing a text file into a packed bit file and a code map."""

from __future__ import annotations

import os
import sys
from collections import Counter
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Optional, Union

from huffpack.encoder import (
    ALPHABET_SIZE,
    build_codes,
    encode_file,
    format_code_table,
    write_map,
)
from huffpack.tree import build_tree

PathLike = Union[str, "os.PathLike[str]"]


@dataclass(frozen=True)
class CompressionStats:
    """Sizes of the input and of the files produced from it."""

    original_size: int
    compressed_size: int
    map_size: int
    codes: dict[int, str] = field(default_factory=dict, compare=False)

    @property
    def total_size(self) -> int:
        """Size of the compressed data and the map together."""
        return self.compressed_size + self.map_size

    @property
    def ratio_percent(self) -> Optional[float]:
        """Total compressed size as a percentage of the original size."""
        if self.original_size <= 0:
            return None
        return self.total_size / self.original_size * 100.0

    @property
    def space_saved_percent(self) -> Optional[float]:
        """Percentage of the original size saved by compression."""
        ratio = self.ratio_percent
        return None if ratio is None else 100.0 - ratio


def count_frequencies(data: bytes) -> dict[int, int]:
    """Count each 7-bit character of data, ordered by character value."""
    counts = Counter(value for value in data if value < ALPHABET_SIZE)
    return dict(sorted(counts.items()))


def group_by_frequency(frequencies: Mapping[int, int]) -> dict[int, list[int]]:
    """Group characters by count, ascending by count.

    Within a group the most recently added (highest) character comes first.
    """
    groups: dict[int, list[int]] = {}
    for ch in sorted(frequencies):
        count = frequencies[ch]
        if count > 0:
            groups.setdefault(count, []).insert(0, ch)
    return dict(sorted(groups.items()))


def compress_file(
    input_path: PathLike, compressed_path: PathLike, map_path: PathLike
) -> Optional[CompressionStats]:
    """Compress a file, writing the packed data and the code map.

    Returns None, writing nothing, when the input holds no 7-bit characters.
    """
    with open(input_path, "rb") as source:
        data = source.read()
    root = build_tree(count_frequencies(data))
    if root is None:
        return None
    codes = build_codes(root)
    write_map(codes, map_path)
    encode_file(input_path, compressed_path, codes)
    return CompressionStats(
        original_size=os.path.getsize(input_path),
        compressed_size=os.path.getsize(compressed_path),
        map_size=os.path.getsize(map_path),
        codes=codes,
    )


def _print_frequencies(frequencies: Mapping[int, int]) -> None:
    print("\nCharacter Frequency Table:")
    for ch, count in frequencies.items():
        print(f"'{chr(ch)}'\t\t{ch}\t\t{count}")
    print(f"\nLargest frequency count: {max(frequencies.values(), default=0)}")
    print(f"\nTotal unique characters: {len(frequencies)}")
    print("\nCharacters grouped by frequency:")
    for count, chars in group_by_frequency(frequencies).items():
        listed = " ".join(f"'{chr(ch)}'" for ch in chars)
        print(f"Frequency {count}: {listed}")


def _print_stats(
    stats: CompressionStats,
    input_path: str,
    compressed_path: str,
    map_path: str,
) -> None:
    print("\n--- Compression Statistics ---")
    print(f"Original File: {input_path} (Size: {stats.original_size} bytes)")
    print(
        f"Compressed Data File: {compressed_path} "
        f"(Size: {stats.compressed_size} bytes)"
    )
    print(f"Map File: {map_path} (Size: {stats.map_size} bytes)")
    print(f"Total Compressed Size (Data + Map): {stats.total_size} bytes")
    if stats.ratio_percent is None:
        print("Cannot calculate percentage for an empty input file.")
    else:
        print(f"Compression Ratio: {stats.ratio_percent:.2f}%")
        print(f"Space Saved: {stats.space_saved_percent:.2f}%")
    print("------------------------------")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: compress <input> <compressed output> <map output>."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "compress"
        print(
            f"Usage: {prog} <input_text_file> <output_compressed_file> <output_map_file>",
            file=sys.stderr,
        )
        return 1

    input_path, compressed_path, map_path = args[:3]
    print(f"Input Filename: {input_path}")
    print(f"Compressed Output Filename: {compressed_path}")
    print(f"Map Output Filename: {map_path}")

    try:
        with open(input_path, "rb") as source:
            data = source.read()
    except OSError as error:
        print(f"Error opening file: {error}", file=sys.stderr)
        return 1

    frequencies = count_frequencies(data)
    _print_frequencies(frequencies)

    if not frequencies:
        print("No characters found in file. Huffman tree cannot be built.")
        return 0

    try:
        stats = compress_file(input_path, compressed_path, map_path)
    except (OSError, ValueError) as error:
        print(f"Compression failed: {error}", file=sys.stderr)
        return 1
    if stats is None:
        print("No characters found in file. Huffman tree cannot be built.")
        return 0

    print()
    print(format_code_table(stats.codes), end="")
    print(f"Huffman map written to {map_path}.")
    print(f"Compressed data written to {compressed_path}.")
    _print_stats(stats, input_path, compressed_path, map_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())