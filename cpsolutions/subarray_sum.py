"""Sum over all subarrays of (maximum - minimum)."""

import argparse
import operator
import sys


def _weighted_sum(values, left_absorbs, right_absorbs):
    """Sum each element times the number of subarrays it is the chosen extremum of.

    ``left_absorbs(other, v)`` says whether a neighbour on the left lies inside
    the span of ``v``; ``right_absorbs`` does the same on the right.
    """
    values = list(values)
    n = len(values)
    left = [0] * n
    right = [n - 1] * n

    stack = []
    for i, v in enumerate(values):
        while stack and left_absorbs(values[stack[-1]], v):
            stack.pop()
        left[i] = stack[-1] + 1 if stack else 0
        stack.append(i)

    stack = []
    for i in reversed(range(n)):
        v = values[i]
        while stack and right_absorbs(values[stack[-1]], v):
            stack.pop()
        right[i] = stack[-1] - 1 if stack else n - 1
        stack.append(i)

    return sum(
        v * (i - lo + 1) * (hi - i + 1)
        for i, (v, lo, hi) in enumerate(zip(values, left, right))
    )


def sum_of_maxima(values):
    """Return the sum of the maxima of all contiguous subarrays."""
    return _weighted_sum(values, operator.le, operator.lt)


def sum_of_minima(values):
    """Return the sum of the minima of all contiguous subarrays."""
    return _weighted_sum(values, operator.ge, operator.gt)


def range_sum(values):
    """Return the sum over all subarrays of their maximum minus their minimum."""
    values = list(values)
    return sum_of_maxima(values) - sum_of_minima(values)


def _tokens(stream):
    for line in stream:
        yield from line.split()


def _next_int(tokens):
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def main(argv=None):
    """Read test cases from stdin and print each range sum."""
    parser = argparse.ArgumentParser(
        description="For each array, print the sum of max - min over all subarrays."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)
    for _ in range(_next_int(tokens)):
        n = _next_int(tokens)
        values = [_next_int(tokens) for _ in range(n)]
        sys.stdout.write(f"{range_sum(values)}\n")
    return 0