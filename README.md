# cpsolutions

Solutions to a handful of classic competitive programming problems, together
with a small modular arithmetic toolkit (modulus 10^9 + 7).

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

Each command reads the problem input from standard input, writes the answer to
standard output and takes no options besides `--help`. Input that ends too
early raises `ValueError`.

| Command          | Input                                   | Output                                                        |
|------------------|-----------------------------------------|---------------------------------------------------------------|
| `subarray-sum`   | `t`, then per case `n` and `n` integers | For each case, the sum over all subarrays of (max − min), one per line |
| `string-task`    | one word                                | The word lowercased, vowels (`a e i o u y`) removed, each remaining letter prefixed with `.` |
| `team`           | `n`, then `n` triples of 0/1            | How many triples have at least two non-zero entries           |
| `theatre-square` | `n m a`                                 | Number of `a × a` flagstones needed to cover an `n × m` area   |
| `long-words`     | `n`, then `n` words                     | Each word on its own line; words longer than 10 characters become first letter + inner length + last letter |

Example:

```
$ printf '1\n3\n1 2 3\n' | subarray-sum
4
$ echo 6 6 4 | theatre-square
4
$ printf '2\nword\nlocalization\n' | long-words
word
l10n
```

## Library use

```python
from cpsolutions.modmath import mod_pow, mod_inv
from cpsolutions.subarray_sum import range_sum, sum_of_maxima, sum_of_minima
from cpsolutions.long_words import abbreviate
from cpsolutions.string_task import transform
from cpsolutions.team import count_solvable, is_confident
from cpsolutions.theatre_square import flagstones

mod_pow(2, 10)                      # 1024
mod_inv(2)                          # 500000004
range_sum([1, 2, 3])                # 4
abbreviate("internationalization")  # "i18n"
transform("Tour")                   # ".t.r"
count_solvable([(1, 1, 0), (1, 1, 1), (1, 0, 0)])  # 2
flagstones(6, 6, 4)                 # 4
```

Notes on behaviour:

- `sum_of_maxima` and `sum_of_minima` use monotonic stacks and run in linear
  time; `range_sum` is their difference.
- `flagstones` raises `ValueError` when the flagstone size is not positive.
- `cpsolutions.modmath` also provides `mod_add`, `mod_sub` (always
  non-negative) and `mod_mul`, plus the constants `MOD` and `INF`.
  `mod_pow` returns 1 for a non-positive exponent.
- `debug_format` renders integers, floats, strings, pairs (2-tuples) and lists
  in a compact notation such as `{1, 2}` and `[ 1 2 3 ]`; any other type, or a
  tuple that is not a pair, raises `TypeError`.