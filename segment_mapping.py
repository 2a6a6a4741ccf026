#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Per-segment substitution tables.

Within one segment every alphabet character is rotated by the same amount,
so the cipher for that segment is a single permutation of the alphabet.
These helpers materialize it as a dict for the mapping endpoint, the
inspection script and the tests.
"""
from segment_cipher import (
    ALPHABET,
    SEGMENT_LENGTH,
    Alphabet,
    Direction,
    split_segments,
)


def get_segment_mapping(segment_index: int, direction: Direction = Direction.ENCODE,
                        alphabet: Alphabet = ALPHABET) -> dict:
    """
    Get the {source: target} mapping applied to alphabet characters in
    segment `segment_index`.
    """
    shift = direction.shift_for(segment_index)
    return {
        char: alphabet.symbol_at(i + shift)
        for i, char in enumerate(alphabet.symbols)
    }


def invert_mapping(mapping: dict) -> dict:
    """Reverse a mapping: target -> source"""
    return {v: k for k, v in mapping.items()}


def find_mapping_problems(mapping: dict, alphabet: Alphabet = ALPHABET) -> dict:
    """
    Check that mapping is a permutation of the alphabet.

    Returns dict with:
        missing: alphabet characters that are not mapped (as source)
        duplicates: targets reached by more than one source
        unknown: sources or targets that are not alphabet characters
    All three lists are empty for a bijection.
    """
    missing = [ch for ch in alphabet if ch not in mapping]

    target_to_sources = {}
    for source, target in mapping.items():
        target_to_sources.setdefault(target, []).append(source)
    duplicates = sorted(t for t, sources in target_to_sources.items() if len(sources) > 1)

    unknown = sorted(
        {ch for ch in mapping.keys() if ch not in alphabet}
        | {ch for ch in mapping.values() if ch not in alphabet}
    )

    return {
        'missing': missing,
        'duplicates': duplicates,
        'unknown': unknown,
    }


def get_text_mappings(text: str, direction: Direction = Direction.ENCODE,
                      block_size: int = SEGMENT_LENGTH) -> list:
    """One entry per segment of text, with the mapping used for it."""
    return [
        {
            'segment': segment_index,
            'text': segment,
            'shift': direction.shift_for(segment_index),
            'mapping': get_segment_mapping(segment_index, direction),
        }
        for segment_index, segment in enumerate(split_segments(text, block_size))
    ]
