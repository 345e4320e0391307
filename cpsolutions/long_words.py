"""Abbreviate words longer than ten characters."""

import argparse
import sys

_MAX_LENGTH = 10


def abbreviate(word):
    """Return the word, or first letter + inner length + last letter if too long."""
    if len(word) > _MAX_LENGTH:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word


def main(argv=None):
    """Read a count and that many words from stdin; print each abbreviated."""
    parser = argparse.ArgumentParser(description="Abbreviate overly long words.")
    parser.parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    try:
        count = int(next(tokens))
        words = [next(tokens) for _ in range(count)]
    except StopIteration:
        raise ValueError("unexpected end of input") from None
    for word in words:
        sys.stdout.write(abbreviate(word) + "\n")
    return 0