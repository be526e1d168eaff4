"""Huffman compression of ASCII text with a separate character-to-code map."""

__version__ = "0.1.0"