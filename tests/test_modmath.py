import pytest

from cpsolutions.modmath import (
    MOD,
    debug_format,
    mod_add,
    mod_inv,
    mod_mul,
    mod_pow,
    mod_sub,
)


def test_mod_add_wraps_around():
    assert mod_add(MOD - 1, 1) == 0


def test_mod_sub_is_non_negative():
    assert mod_sub(0, 1) == MOD - 1


def test_mod_add_and_sub_round_trip():
    a, b = 123456789, 987654321
    assert mod_sub(mod_add(a, b), b) == a % MOD


def test_mod_mul_reduces():
    assert mod_mul(MOD, 12345) == 0


@pytest.mark.parametrize("a", [1, 2, 3, 10, 123456789, MOD - 1])
def test_inverse_multiplies_to_one(a):
    assert mod_mul(a, mod_inv(a)) == 1


def test_mod_pow_small_power():
    assert mod_pow(2, 10) == 1024


def test_mod_pow_zero_and_negative_exponent():
    assert mod_pow(5, 0) == 1
    assert mod_pow(5, -3) == 1


def test_mod_pow_fermat():
    assert mod_pow(7, MOD - 1) == 1


def test_mod_pow_splits_over_exponent_sum():
    assert mod_pow(3, 50) == mod_mul(mod_pow(3, 20), mod_pow(3, 30))


def test_debug_format_list():
    assert debug_format([1, 2, 3]) == "[ 1 2 3 ]"


def test_debug_format_empty_list():
    assert debug_format([]) == "[ ]"


def test_debug_format_pair():
    assert debug_format((1, "a")) == "{1, a}"


def test_debug_format_list_of_pairs():
    assert debug_format([(1, 2)]) == "[ {1, 2} ]"


def test_debug_format_rejects_long_tuple():
    with pytest.raises(TypeError):
        debug_format((1, 2, 3))


def test_debug_format_rejects_unknown_type():
    with pytest.raises(TypeError):
        debug_format({1: 2})