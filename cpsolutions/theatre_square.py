"""Number of square flagstones needed to cover a rectangle."""

import argparse
import sys


def flagstones(n, m, a):
    """Return how many a-by-a flagstones cover an n-by-m square."""
    if a <= 0:
        raise ValueError("flagstone size must be positive")
    return -(-n // a) * -(-m // a)


def main(argv=None):
    """Read n, m and a from stdin and print the flagstone count."""
    parser = argparse.ArgumentParser(
        description="Count flagstones needed to pave a rectangular square."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if len(tokens) < 3:
        raise ValueError("unexpected end of input")
    n, m, a = (int(t) for t in tokens[:3])
    sys.stdout.write(str(flagstones(n, m, a)))
    return 0