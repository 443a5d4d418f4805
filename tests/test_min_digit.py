import pytest

from roundsolve.min_digit import main, min_digit


def test_zero():
    assert min_digit(0) == 0


@pytest.mark.parametrize("n", [1, 9, 10, 47, 305, 98765, 111, 10**18 + 7])
def test_result_is_a_digit_and_minimal(n):
    result = min_digit(n)
    digits = [int(c) for c in str(n)]
    assert result in digits
    assert all(result <= d for d in digits)


def test_single_digit_is_itself():
    for n in range(10):
        assert min_digit(n) == n


def test_negative_rejected():
    with pytest.raises(ValueError):
        min_digit(-5)


def test_main_reads_cases(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("3\n123\n905\n7\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.split() == ["1", "0", "7"]