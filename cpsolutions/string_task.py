"""Drop vowels, lowercase consonants and prefix each with a dot."""

import argparse
import sys

_VOWELS = frozenset("aeiouy")


def transform(word):
    """Return the word with vowels removed and '.' before each lowercased consonant."""
    return "".join(f".{ch}" for ch in word.lower() if ch not in _VOWELS)


def main(argv=None):
    """Read one word from stdin and print its transformation."""
    parser = argparse.ArgumentParser(
        description="Remove vowels and prefix consonants with dots."
    )
    parser.parse_args(argv)
    words = sys.stdin.read().split()
    if not words:
        raise ValueError("unexpected end of input")
    sys.stdout.write(transform(words[0]))
    return 0