#!/usr/bin/env python3
"""
Print the substitution tables of the first few segments and verify them.

Usage:
    python show_segment_mapping.py [segments]
"""
import sys

from segment_cipher import ALPHABET, SEGMENT_LENGTH, Direction, cipher_text, decipher_text
from segment_mapping import find_mapping_problems, get_segment_mapping, invert_mapping

SAMPLE_TEXT = "Hello World! The quick brown fox"


def format_segment_mapping(segment_index: int) -> str:
    """Encode and decode tables for one segment, one line per symbol."""
    encode_map = get_segment_mapping(segment_index, Direction.ENCODE)
    decode_map = get_segment_mapping(segment_index, Direction.DECODE)

    lines = [f"Segment {segment_index} (shift {Direction.ENCODE.shift_for(segment_index):+d})"]
    for char in ALPHABET:
        lines.append(f"  {char!r} -> {encode_map[char]!r}    {char!r} <- {decode_map[char]!r}")
    return "\n".join(lines)


def verify_segments(segments: int) -> list:
    """Return a list of problem descriptions, empty when every table is a bijection."""
    problems = []
    for segment_index in range(segments):
        encode_map = get_segment_mapping(segment_index, Direction.ENCODE)
        found = find_mapping_problems(encode_map)
        for kind, chars in found.items():
            if chars:
                problems.append(f"segment {segment_index}: {kind} {chars}")
        if invert_mapping(encode_map) != get_segment_mapping(segment_index, Direction.DECODE):
            problems.append(f"segment {segment_index}: decode table is not the inverse of encode")
    return problems


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    try:
        segments = int(argv[0]) if argv else 3
    except ValueError:
        print(f"Usage: python show_segment_mapping.py [segments]  (got {argv[0]!r})", file=sys.stderr)
        return 1

    print(f"Alphabet: {ALPHABET.symbols} ({len(ALPHABET)} symbols)")
    print(f"Segment length: {SEGMENT_LENGTH}")

    print("\n" + "=" * 60)
    print("MAPPINGS (encode ->, decode <-)")
    print("=" * 60)
    for segment_index in range(segments):
        print(format_segment_mapping(segment_index))
        print()

    print("=" * 60)
    print("VERIFICATION")
    print("=" * 60)
    problems = verify_segments(segments)
    for problem in problems:
        print(f"❌ {problem}")
    if not problems:
        print(f"Duplicates/missing: None ✅ ({segments} segments checked)")

    ciphered = cipher_text(SAMPLE_TEXT)
    round_trip = decipher_text(ciphered) == SAMPLE_TEXT
    print(f"Sample:    {SAMPLE_TEXT!r}")
    print(f"Ciphered:  {ciphered!r}")
    print(f"Round trip: {'✅' if round_trip else '❌'}")

    return 0 if not problems and round_trip else 1


if __name__ == '__main__':
    sys.exit(main())
