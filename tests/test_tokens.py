import pytest
from wordle_solve.engine import parse_row, format_row
from wordle_solve.errors import FeedbackSyntaxError, LengthMismatch


@pytest.mark.parametrize("row,expected", [
    ("-r -a ~i -s -e", ("raise", "--Y--")),
    ("-h -o ~t -l y", ("hotly", "--Y-G")),
    ("c r a n e", ("crane", "GGGGG")),
    ("  ~S   -P e  e -D ", ("speed", "Y-GG-")),
])
def test_parse_row(row, expected):
    assert parse_row(row, 5) == expected


def test_parse_row_unicode_is_normalized():
    # 'e' + combining acute -> single code point
    guess, patt = parse_row("~e\u0301 c -o l e", 5)
    assert guess == "école"
    assert patt == "YG-GG"


def test_format_row_inverse():
    assert format_row("raise", "--Y--") == "-r -a ~i -s -e"


def test_parse_row_wrong_token_count():
    with pytest.raises(LengthMismatch):
        parse_row("-r -a ~i -s", 5)


@pytest.mark.parametrize("row", ["-r -a ~ii -s -e", "-r -a ~ -s -e", "-r -a ~1 -s -e", "-r -a +i -s -e"])
def test_parse_row_bad_tokens(row):
    with pytest.raises(FeedbackSyntaxError):
        parse_row(row, 5)
