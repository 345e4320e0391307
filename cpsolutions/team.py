"""Count problems that at least two of three friends are sure about."""

import argparse
import sys


def is_confident(a, b, c):
    """Return True when at least two of the three opinions are non-zero."""
    return sum(1 for x in (a, b, c) if x) >= 2


def count_solvable(problems):
    """Count the (a, b, c) triples the team will implement."""
    return sum(1 for a, b, c in problems if is_confident(a, b, c))


def _tokens(stream):
    for line in stream:
        yield from line.split()


def _next_int(tokens):
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def main(argv=None):
    """Read the problem opinions from stdin and print the count."""
    parser = argparse.ArgumentParser(
        description="Count problems at least two team members are sure about."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    count = _next_int(tokens)
    problems = [tuple(_next_int(tokens) for _ in range(3)) for _ in range(count)]
    sys.stdout.write(str(count_solvable(problems)))
    return 0