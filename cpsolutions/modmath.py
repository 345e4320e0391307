"""Modular arithmetic helpers and a compact debug formatter."""

MOD = 10**9 + 7
INF = 10**18


def mod_add(a, b):
    """Return (a + b) reduced modulo MOD."""
    return (a + b) % MOD


def mod_sub(a, b):
    """Return (a - b) reduced modulo MOD, always non-negative."""
    return (a - b) % MOD


def mod_mul(a, b):
    """Return (a * b) reduced modulo MOD."""
    return (a * b) % MOD


def mod_pow(a, b):
    """Return a ** b modulo MOD; a non-positive exponent yields 1."""
    if b <= 0:
        return 1
    return pow(a % MOD, b, MOD)


def mod_inv(a):
    """Return the modular inverse of a via Fermat's little theorem."""
    return mod_pow(a, MOD - 2)


def debug_format(value):
    """Render a value the way the debug printer shows it.

    Pairs (2-tuples) become ``{a, b}``, lists become ``[ x y ]``;
    scalars are shown plainly.
    """
    if isinstance(value, tuple):
        if len(value) != 2:
            raise TypeError("only pairs can be formatted as tuples")
        first, second = value
        return "{" + debug_format(first) + ", " + debug_format(second) + "}"
    if isinstance(value, list):
        return "[ " + "".join(debug_format(item) + " " for item in value) + "]"
    if isinstance(value, float):
        return format(value, "g")
    if isinstance(value, (int, str)):
        return str(value)
    raise TypeError(f"cannot format value of type {type(value).__name__}")