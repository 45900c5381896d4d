import pytest

from coomat.errors import DuplicateEntry, OutOfBounds, ParseError
from coomat.io import format, load, parse, save
from coomat.sparse import COO

SAMPLE = "rows=3\ncols=3\n(0, 0, 1)\n(1, 1, 2)\n(2, 2, 3)"


def test_parse_sample():
    A = parse(SAMPLE)
    assert A.shape == (3, 3)
    assert A.entries == ((0, 0, 1), (1, 1, 2), (2, 2, 3))


def test_parse_header_only():
    A = parse("rows=4\ncols=0\n")
    assert A.shape == (4, 0)
    assert A.nnz == 0


def test_parse_tolerates_whitespace_and_blank_lines():
    text = "\r\n  rows = 2\r\ncols=5\r\n\r\n(1,4,-7)\n   ( 0 , 3 , +2 )  \n\n"
    A = parse(text)
    assert A.shape == (2, 5)
    # order is kept as read
    assert A.entries == ((1, 4, -7), (0, 3, 2))


def test_parse_drops_zero_entries():
    A = parse("rows=2\ncols=2\n(0, 0, 0)\n(1, 1, 5)")
    assert A.entries == ((1, 1, 5),)


@pytest.mark.parametrize(
    "text,lineno",
    [
        ("", None),
        ("rows=3", None),
        ("cols=3\nrows=3", 1),
        ("rows=3\ncolumns=3", 2),
        ("rows=x\ncols=3", 1),
        ("rows=-1\ncols=3", 1),
        ("rows=3\ncols=3\n(0, 0, 1)\n0, 1, 2", 4),
        ("rows=3\ncols=3\n(0, 0)", 3),
        ("rows=3\ncols=3\n(0, 0, 1.5)", 3),
        ("rows=3\ncols=3\n(a, 0, 1)", 3),
    ],
)
def test_parse_errors(text, lineno):
    with pytest.raises(ParseError) as ei:
        parse(text)
    assert ei.value.lineno == lineno


def test_parse_check_mode():
    bad = "rows=2\ncols=2\n(2, 0, 1)"
    assert parse(bad, check=False).nnz == 1
    with pytest.raises(OutOfBounds):
        parse(bad, check=True)
    with pytest.raises(DuplicateEntry):
        parse("rows=2\ncols=2\n(0, 0, 1)\n(0, 0, 2)", check=True)


def test_format():
    A = COO(2, 3, [(1, 2, -4), (0, 0, 1)])
    assert format(A) == "rows=2\ncols=3\n(1, 2, -4)\n(0, 0, 1)\n"
    assert format(COO(0, 0)) == "rows=0\ncols=0\n"


def test_round_trip():
    A = COO(4, 5, [(0, 1, 3), (0, 4, -1), (2, 2, 7), (3, 0, 12)])
    assert parse(format(A)) == A
    assert format(parse(SAMPLE)) == SAMPLE + "\n"


def test_load_and_save(tmp_path):
    path = tmp_path / "matrix.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    A = load(path)
    assert A == parse(SAMPLE)
    out = tmp_path / "out.txt"
    save(A + A, out)
    assert out.read_text(encoding="utf-8") == "rows=3\ncols=3\n(0, 0, 2)\n(1, 1, 4)\n(2, 2, 6)\n"


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load(tmp_path / "missing.txt")
