import io

import pytest

from catescape.errors import ErrorKind, MapError
from catescape.textio import read_lines, split_rows, write_moves


def test_read_lines_keeps_newlines(tmp_path):
    path = tmp_path / "map.ber"
    path.write_text("111\n1P1\n111")
    lines = read_lines(path)
    assert lines == ["111\n", "1P1\n", "111"]


@pytest.mark.parametrize(
    "content",
    ["", "1\n", "11111\n1PCE1\n11111\n", "abc", "a\n\nb\n\n"],
)
def test_read_lines_round_trip(tmp_path, content):
    path = tmp_path / "map.ber"
    path.write_bytes(content.encode())
    lines = read_lines(path)
    assert "".join(lines) == content
    assert all(line.count("\n") <= 1 for line in lines)
    assert all(line.endswith("\n") for line in lines[:-1])


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    assert read_lines(path) == []


def test_read_lines_keeps_carriage_return(tmp_path):
    path = tmp_path / "crlf.ber"
    path.write_bytes(b"11\r\n11\r\n")
    assert read_lines(path) == ["11\r\n", "11\r\n"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(MapError) as info:
        read_lines(tmp_path / "missing.ber")
    assert info.value.kind is ErrorKind.OP_FAIL


def test_split_rows_strips_newlines():
    assert split_rows("111\n1P1\n111\n") == ["111", "1P1", "111"]
    assert split_rows("111\n1P1\n111") == ["111", "1P1", "111"]


def test_split_rows_empty_and_blank_lines():
    assert split_rows("") == []
    assert split_rows("a\n\nb") == ["a", "", "b"]


@pytest.mark.parametrize("text", ["x\ny\n", "x\ny", "\n\n", "abc"])
def test_split_rows_joins_back(text):
    rows = split_rows(text)
    assert all("\n" not in row for row in rows)
    assert "\n".join(rows) == text.removesuffix("\n")


def test_write_moves_to_stream():
    stream = io.StringIO()
    line = write_moves(5, stream)
    assert stream.getvalue() == "[+] Moves ==> 5.\n"
    assert line == stream.getvalue()


def test_write_moves_defaults_to_stdout(capsys):
    write_moves(12)
    assert capsys.readouterr().out == "[+] Moves ==> 12.\n"


def test_write_moves_negative_number():
    stream = io.StringIO()
    write_moves(-2147483648, stream)
    assert stream.getvalue() == "[+] Moves ==> -2147483648.\n"