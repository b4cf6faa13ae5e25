import random

import pytest

from pushswap.cli import InputError, main, parse_arguments


def _replay(numbers, operations):
    a, b = list(numbers), []
    for op in operations:
        if op in ("ra", "rr") and a:
            a.append(a.pop(0))
        if op in ("rb", "rr") and b:
            b.append(b.pop(0))
        if op in ("rra", "rrr") and a:
            a.insert(0, a.pop())
        if op in ("rrb", "rrr") and b:
            b.insert(0, b.pop())
        if op == "sa" and len(a) > 1:
            a[0], a[1] = a[1], a[0]
        if op == "sb" and len(b) > 1:
            b[0], b[1] = b[1], b[0]
        if op == "pa" and b:
            a.insert(0, b.pop(0))
        if op == "pb" and a:
            b.insert(0, a.pop(0))
    return a, b


def test_parse_arguments_reads_signed_numbers():
    assert parse_arguments(["-5", " +7", "42"]) == [-5, 7, 42]


def test_parse_arguments_takes_leading_digits():
    assert parse_arguments(["12abc"]) == [12]


def test_parse_arguments_accepts_int_limits():
    assert parse_arguments(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


@pytest.mark.parametrize(
    "args",
    [[], ["0"], ["abc"], ["2147483648"], ["-2147483649"], ["3", "+-4"]],
)
def test_parse_arguments_rejects(args):
    with pytest.raises(InputError):
        parse_arguments(args)


def test_main_without_arguments_reports_error(capsys):
    assert main([]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_with_invalid_number_fails(capsys):
    assert main(["4", "0", "2"]) == 1
    assert capsys.readouterr().out == ""


def test_main_prints_sorting_operations(capsys):
    numbers = [3, 2, 5, 1, 4]
    assert main([str(n) for n in numbers]) == 0
    lines = capsys.readouterr().out.splitlines()
    a, b = _replay(numbers, lines)
    assert a == [1, 2, 3, 4, 5]
    assert b == []


@pytest.mark.parametrize("size", [5, 50, 100])
def test_main_sorts_tester_permutation(capsys, size):
    rng = random.Random(size)
    numbers = list(range(1, size + 1))
    rng.shuffle(numbers)
    assert main([str(n) for n in numbers]) == 0
    lines = capsys.readouterr().out.splitlines()
    a, b = _replay(numbers, lines)
    assert a == sorted(numbers)
    assert b == []