import io

import pytest

from cpsolutions.theatre_square import flagstones, main


def test_sample():
    assert flagstones(6, 6, 4) == 4


def test_exact_fit_is_area_ratio():
    assert flagstones(8, 12, 4) == (8 // 4) * (12 // 4)


@pytest.mark.parametrize("n, m, a", [(1, 1, 1), (7, 3, 2), (10, 1, 3), (5, 9, 10)])
def test_coverage_is_tight(n, m, a):
    count = flagstones(n, m, a)
    assert count * a * a >= n * m
    assert flagstones(n, m, a) == flagstones(m, n, a)


def test_large_values_do_not_overflow():
    big = 10**9
    assert flagstones(big, big, 1) == big * big


def test_non_positive_size_rejected():
    with pytest.raises(ValueError):
        flagstones(6, 6, 0)


def test_main_sample(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("6 6 4\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "4"


def test_main_truncated(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("6 6\n"))
    with pytest.raises(ValueError):
        main([])