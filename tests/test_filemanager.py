import io

import pytest

from wordsearch.filemanager import (
    find_line_by_position,
    get_lines,
    open_book,
    print_lines,
)

CONTENT = b"one\ntwo\nthree\nfour\n"


@pytest.fixture
def book(tmp_path):
    (tmp_path / "book.txt").write_bytes(CONTENT)
    with open_book("book.txt", tmp_path) as f:
        yield f


def test_open_book_reads_content(book):
    assert book.read() == CONTENT


def test_open_book_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_book("absent.txt", tmp_path)


def test_get_lines_range(book):
    assert get_lines(book, 2, 3) == ["two\n", "three\n"]


def test_get_lines_past_end(book):
    assert get_lines(book, 3, 50) == ["three\n", "four\n"]


def test_get_lines_invalid_range(book):
    with pytest.raises(ValueError):
        get_lines(book, 3, 2)
    with pytest.raises(ValueError):
        get_lines(book, -1, 2)


def test_print_lines_writes_range(book):
    out = io.StringIO()
    print_lines(book, 1, 2, out)
    assert out.getvalue() == "one\ntwo\n"


def test_print_lines_reports_short_file(book):
    out = io.StringIO()
    print_lines(book, 10, 12, out)
    assert out.getvalue() == "File has fewer than 10 lines.\n"


def test_print_lines_invalid_range(book):
    with pytest.raises(ValueError):
        print_lines(book, 5, 1, io.StringIO())


@pytest.mark.parametrize(
    "position, line",
    [(0, 1), (CONTENT.index(b"\n"), 1), (CONTENT.index(b"two"), 2), (CONTENT.index(b"four"), 4)],
)
def test_find_line_by_position(book, position, line):
    assert find_line_by_position(book, position) == line


def test_find_line_matches_get_lines(book):
    position = CONTENT.index(b"three")
    line = find_line_by_position(book, position)
    book.seek(0)
    assert get_lines(book, line, line) == ["three\n"]


def test_find_line_position_out_of_range(book):
    with pytest.raises(ValueError):
        find_line_by_position(book, len(CONTENT))


def test_find_line_negative_position(book):
    with pytest.raises(ValueError):
        find_line_by_position(book, -1)


def test_find_line_text_stream():
    stream = io.StringIO("ab\ncd\n")
    assert find_line_by_position(stream, 3) == 2