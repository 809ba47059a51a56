import pytest

from kata.numbers import (
    armstrong_main,
    greeting,
    hello_main,
    is_armstrong,
    is_number,
    odd_even_main,
    parity,
    show_arguments_main,
)


def test_greeting_wraps_name():
    assert greeting("Ana") == "Hello from [Ana]"


def test_hello_main_uses_argument(capsys):
    assert hello_main(["Ana"]) == 0
    assert capsys.readouterr().out == greeting("Ana") + "\n"


@pytest.mark.parametrize("text", ["1", "-13", "+4", "007"])
def test_is_number_accepts(text):
    assert is_number(text) is True


@pytest.mark.parametrize("text", ["", "ABC", "1a", "--1", "4.5"])
def test_is_number_rejects(text):
    assert is_number(text) is False


def test_is_number_plus_not_allowed():
    assert is_number("+4", allow_plus=False) is False
    assert is_number("-4", allow_plus=False) is True


def test_parity():
    assert parity(1) == "ODD"
    assert parity(2) == "EVEN"
    assert parity(-13) == "ODD"
    assert parity(0) == "EVEN"


@pytest.mark.parametrize("number", [0, 1, 153, 370, 371, 407])
def test_armstrong_numbers(number):
    assert is_armstrong(number) is True


@pytest.mark.parametrize("number", [2, 154, 10, 100])
def test_not_armstrong_numbers(number):
    assert is_armstrong(number) is False


def test_armstrong_sign_does_not_matter():
    for n in range(1000):
        assert is_armstrong(n) == is_armstrong(-n)


def test_odd_even_main_no_args(capsys):
    assert odd_even_main([]) == 0
    assert capsys.readouterr().out == "No program arguments found.\n"


@pytest.mark.parametrize("arg,expected", [("1", "ODD"), ("2", "EVEN"), ("-13", "ODD")])
def test_odd_even_main(capsys, arg, expected):
    odd_even_main([arg])
    assert capsys.readouterr().out.strip() == expected


def test_odd_even_main_nan(capsys):
    odd_even_main(["ABC"])
    assert capsys.readouterr().out.strip() == "NAN"


def test_armstrong_main_no_args(capsys):
    assert armstrong_main([]) == 1
    assert capsys.readouterr().out == "No program arguments found.\n"


@pytest.mark.parametrize(
    "arg,expected",
    [("1", "Armstrong"), ("2", "NOT Armstrong"), ("153", "Armstrong"), ("154", "NOT Armstrong")],
)
def test_armstrong_main(capsys, arg, expected):
    assert armstrong_main([arg]) == 0
    assert capsys.readouterr().out.strip() == expected


@pytest.mark.parametrize("arg", ["ABC", "-", "+153"])
def test_armstrong_main_not_number(capsys, arg):
    armstrong_main([arg])
    assert capsys.readouterr().out.strip() == "Argument is not a number"


def test_show_arguments(capsys):
    assert show_arguments_main(["one", "two words", "3"]) == 0
    assert capsys.readouterr().out.splitlines() == ["one", "two words", "3"]


def test_show_arguments_empty(capsys):
    show_arguments_main([])
    assert capsys.readouterr().out == ""