#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Ciphers or deciphers a string.

Usage:
    To cipher:
        cipher -input "Input text"
    To decipher:
        cipher -input "Ciphered text" -decipher
    Text that starts with a dash:
        cipher -input=-abc
    To launch the web interface:
        cipher -web
"""
import argparse
import sys

from segment_cipher import Direction, transform


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='cipher',
        description='Segment cipher: cipher or decipher text, or launch the web interface.'
    )
    parser.add_argument('-input', '--input', dest='input_text', default='',
                        help='input text to cipher (use -input=TEXT when TEXT starts with a dash)')
    parser.add_argument('-decipher', '--decipher', action='store_true',
                        help='decipher input')
    parser.add_argument('-web', '--web', action='store_true',
                        help='launch web interface')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if args.web:
        # Flask is only needed for the web interface
        from cipher_api import run_server
        try:
            run_server()
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    print(transform(args.input_text, Direction.from_flag(args.decipher)))
    return 0


if __name__ == '__main__':
    sys.exit(main())
