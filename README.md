# huffpack

Huffman compression for ASCII text files. Compressing a file produces two
outputs: the packed bit stream and a plain-text map from characters to codes.
Both are needed to decompress.

## Install

    pip install .

## Command line

Compress a text file:

    huffpack-compress input.txt output.bin output.map

The command prints the frequency table, the characters grouped by frequency,
the generated codes and size statistics. These are the size of the original
file, of the data file and of the map, their total, the total as a percentage
of the original and the space saved. If the input holds no characters in the
range 0–127, it says so, writes nothing and exits with status 0.

Decompress it again:

    huffpack-decompress output.bin output.map restored.txt

Both commands print a usage line and exit with status 1 when given fewer than
three arguments, and exit with status 1 when a file cannot be read or written
or the map or data are invalid.

Only characters 0–127 are counted and encoded. Other bytes are left out of
the frequency count and skipped with a warning during encoding.

## Map format

One line per character that has a code. Each line holds the decimal character
value and its code as a string of `0` and `1`:

    97 0
    98 10
    99 11

When a map is read, parsing stops at the first entry whose value is not an
integer. A code holding anything other than `0` and `1` raises
`huffpack.decoder.MapError`; a code whose path overlaps another one gives a
warning.

A text with a single distinct character gives that character the code `0`.

## Limitations

The data file holds no header and no record of how many bits the last byte
really uses. The unused bits of that byte are zero, so on decoding they may
turn into extra trailing characters, namely those whose code is all zeros.
Decoding raises `MapError` if the bits lead off the tree built from the map.

## Library use

```python
from huffpack.compress import count_frequencies
from huffpack.tree import build_tree
from huffpack.encoder import build_codes, encode_bytes
from huffpack.decoder import build_decoding_tree, decode_bytes

data = b"abracadabra"
codes = build_codes(build_tree(count_frequencies(data)))
packed = encode_bytes(data, codes)
root = build_decoding_tree(codes.items())
restored = decode_bytes(packed, root)  # may end with padding characters
```

Modules:

- `huffpack.tree`: `HuffmanNode`, `MinPriorityQueue` (a min-heap ordered by
  frequency) and `build_tree`.
- `huffpack.encoder`: `build_codes`, `format_code_table`, `format_map`,
  `write_map`, `encode_bytes`, `encode_file`.
- `huffpack.decoder`: `MapError`, `parse_map`, `build_decoding_tree`,
  `load_decoding_tree`, `decode_bytes`, `decode_file`.
- `huffpack.compress`: `count_frequencies`, `group_by_frequency`,
  `compress_file`, `CompressionStats` and the `main` of `huffpack-compress`.
- `huffpack.decompress`: `decompress_file` and the `main` of
  `huffpack-decompress`.

`compress_file` returns a `CompressionStats` with the file sizes, the codes,
`total_size`, `ratio_percent` and `space_saved_percent`, or `None` when the
input has no characters to encode. `decompress_file` returns the number of
bytes written.

## Tests

    pip install .[test]
    pytest