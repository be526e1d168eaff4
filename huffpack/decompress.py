"""Decompressing a packed bit file with its code map."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from typing import Optional, Union

from huffpack.decoder import MapError, decode_file, load_decoding_tree

PathLike = Union[str, "os.PathLike[str]"]


def decompress_file(
    compressed_path: PathLike, map_path: PathLike, output_path: PathLike
) -> int:
    """Decode a compressed file using its map; return the bytes written."""
    root = load_decoding_tree(map_path)
    return decode_file(compressed_path, output_path, root)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point: decompress <compressed input> <map> <output>."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "decompress"
        print(
            f"Usage: {prog} <compressed_input_file> <map_file> <decompressed_output_file>",
            file=sys.stderr,
        )
        return 1

    compressed_path, map_path, output_path = args[:3]
    print(f"Compressed Input: {compressed_path}")
    print(f"Map File: {map_path}")
    print(f"Decompressed Output: {output_path}")

    try:
        root = load_decoding_tree(map_path)
    except (OSError, MapError) as error:
        print(f"Error: Failed to build decoding tree from map file: {error}", file=sys.stderr)
        return 1

    try:
        decode_file(compressed_path, output_path, root)
    except (OSError, MapError) as error:
        print(f"Error: Decompression failed: {error}", file=sys.stderr)
        return 1

    print("Decompression complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())