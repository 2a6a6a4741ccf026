#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Segment cipher: rotates a fixed symbol alphabet by an amount that depends
on which block of the input a character falls in.

The input is broken up into segments of at most SEGMENT_LENGTH characters.
Every alphabet character in segment s is shifted s + 1 places forward
(encode) or backward (decode). Characters outside the alphabet are kept
as-is. The transform is lossless, deterministic and reversible.
"""
from enum import Enum

# Shuffled version of A-Z, a-z, 0-9 and @#%^&*
CHARS = "yF0%U2kBap4@KbzSh3imc5Or9EsVefdjGAIgxW#vtLM6R&X7Tw1oDC*PnZ8quYHlQNJ^"
SEGMENT_LENGTH = 10


class Alphabet:
    """Ordered, duplicate-free symbol table with O(1) index lookup."""

    def __init__(self, symbols: str):
        if not symbols:
            raise ValueError("Alphabet must contain at least one symbol")
        duplicates = sorted({ch for ch in symbols if symbols.count(ch) > 1})
        if duplicates:
            raise ValueError(f"Alphabet symbols must be unique, duplicated: {duplicates}")
        self._symbols = symbols
        self._index = {ch: i for i, ch in enumerate(symbols)}

    @property
    def symbols(self) -> str:
        return self._symbols

    def __len__(self):
        return len(self._symbols)

    def __contains__(self, symbol):
        return symbol in self._index

    def __iter__(self):
        return iter(self._symbols)

    def contains(self, symbol: str) -> bool:
        return symbol in self._index

    def index_of(self, symbol: str) -> int:
        """Position of symbol. Raises KeyError for non-members, check contains() first."""
        return self._index[symbol]

    def symbol_at(self, index: int) -> str:
        """Symbol at index, wrapping any integer into [0, N)."""
        return self._symbols[index % len(self._symbols)]


ALPHABET = Alphabet(CHARS)


class Direction(Enum):
    """Value is the sign of the rotation."""

    ENCODE = 1
    DECODE = -1

    @classmethod
    def from_flag(cls, decipher: bool) -> "Direction":
        return cls.DECODE if decipher else cls.ENCODE

    def shift_for(self, segment_index: int) -> int:
        # segment 0 still shifts by one
        return self.value * (segment_index + 1)


def _check_block_size(block_size: int):
    if block_size <= 0:
        raise ValueError(f"block_size must be positive, got {block_size}")


def segment_index_of(position: int, block_size: int = SEGMENT_LENGTH) -> int:
    _check_block_size(block_size)
    return position // block_size


def number_of_segments(length: int, block_size: int = SEGMENT_LENGTH) -> int:
    """Number of segments a text of `length` characters splits into (0 when empty)."""
    _check_block_size(block_size)
    return -(-length // block_size)


def split_segments(text: str, block_size: int = SEGMENT_LENGTH) -> list:
    """Split text into its ordered segments. Only used for display."""
    _check_block_size(block_size)
    return [text[i:i + block_size] for i in range(0, len(text), block_size)]


def substitute_char(char: str, position: int, direction: Direction,
                    alphabet: Alphabet = ALPHABET, block_size: int = SEGMENT_LENGTH) -> str:
    """
    Substitute one character at absolute `position`.

    Characters not in the alphabet are fixed points. Alphabet characters are
    rotated by direction.shift_for(segment index); decoding with the same
    position undoes encoding because the segment index ignores direction.
    """
    if char not in alphabet:
        return char
    segment = segment_index_of(position, block_size)
    return alphabet.symbol_at(alphabet.index_of(char) + direction.shift_for(segment))


def transform(text: str, direction: Direction,
              alphabet: Alphabet = ALPHABET, block_size: int = SEGMENT_LENGTH) -> str:
    """Apply the segment cipher to the whole text. Same length, same order."""
    return "".join(
        substitute_char(char, position, direction, alphabet, block_size)
        for position, char in enumerate(text)
    )


def cipher_text(text: str) -> str:
    return transform(text, Direction.ENCODE)


def decipher_text(text: str) -> str:
    return transform(text, Direction.DECODE)
