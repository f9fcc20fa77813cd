import pytest

from wordcheck.board import format_board, parse_board
from wordcheck.solver import InvalidGridError, check

EXPECTED = [
    ["E", "A", "R", "A"],
    ["N", "L", "E", "C"],
    ["I", "A", "I", "S"],
    ["B", "Y", "O", "R"],
]


@pytest.mark.parametrize("value", [
    "EARA/NLEC/IAIS/BYOR",
    "EARA,NLEC,IAIS,BYOR",
    "EARA NLEC IAIS BYOR",
    "EARA\nNLEC\nIAIS\nBYOR\n",
    " EARA / NLEC / IAIS / BYOR ",
    ["EARA", "NLEC", "IAIS", "BYOR"],
    EXPECTED,
])
def test_parse_board_formats(value):
    assert parse_board(value) == EXPECTED


def test_parse_board_normalizes_case():
    assert parse_board("eara/nlec/iais/byor") == EXPECTED
    assert parse_board([["e", "a"], ["r", "a"]]) == [["E", "A"], ["R", "A"]]


def test_parse_board_keeps_case():
    assert parse_board("ab/Cd", normalize_case=False) == [["a", "b"], ["C", "d"]]


def test_parse_board_does_not_alias_input():
    rows = [["e", "a"], ["r", "a"]]
    parse_board(rows)
    assert rows == [["e", "a"], ["r", "a"]]


@pytest.mark.parametrize("value", [
    "",
    "   ",
    [],
    [[]],
    "EARA/NLE",
    ["AB", "C"],
    [["QU", "I"], ["T", "E"]],
    [["A", 1]],
    [["A", ""]],
    ["AB", 12],
    42,
])
def test_parse_board_rejects(value):
    with pytest.raises(InvalidGridError):
        parse_board(value)


def test_invalid_grid_is_value_error():
    with pytest.raises(ValueError):
        parse_board("AB/C")


def test_format_board():
    assert format_board(EXPECTED) == "E A R A / N L E C / I A I S / B Y O R"
    assert format_board([["X"]]) == "X"


def test_parsed_board_checks():
    board = parse_board("eara/nlec/iais/byor")
    assert check(board, "BAILER") is True
    assert check(board, "CEREAL") is False
