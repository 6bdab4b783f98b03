from pathlib import Path

from expando.core.errors import OutputError, SourceLoadError
from expando.core.io.lines import read_lines, read_many, write_lines


def test_read_lines_strips_newlines_only(tmp_path: Path):
    p = tmp_path / "in.txt"
    p.write_bytes(b"  (a|b)  \r\nplain\n# c\n")
    assert read_lines(str(p)) == ["  (a|b)  ", "plain", "# c"]


def test_read_many_keeps_file_order(tmp_path: Path):
    a = tmp_path / "a.txt"
    b = tmp_path / "b.txt"
    a.write_text("one\n", encoding="utf-8")
    b.write_text("two\nthree\n", encoding="utf-8")
    assert read_many([str(b), str(a)]) == ["two", "three", "one"]


def test_read_missing_file(tmp_path: Path):
    try:
        read_lines(str(tmp_path / "missing.txt"))
        assert False, "expected SourceLoadError"
    except SourceLoadError as e:
        assert e.code == "E_FILE_NOT_FOUND"


def test_read_undecodable_file(tmp_path: Path):
    p = tmp_path / "bad.txt"
    p.write_bytes(b"\xff\xfe\xfa")
    try:
        read_lines(str(p), encoding="utf-8")
        assert False, "expected SourceLoadError"
    except SourceLoadError as e:
        assert e.code == "E_FILE_DECODE"


def test_write_lines_creates_parent_dirs(tmp_path: Path):
    out = tmp_path / "nested" / "dir" / "out.txt"
    count = write_lines(str(out), iter(["a", " b ", ""]))
    assert count == 3
    assert out.read_text(encoding="utf-8") == "a\n b \n\n"


def test_write_to_directory_raises_output_error(tmp_path: Path):
    try:
        write_lines(str(tmp_path), ["a"])
        assert False, "expected OutputError"
    except OutputError as e:
        assert e.code == "E_FILE_WRITE"
        assert e.file == str(tmp_path)


def test_write_under_file_parent_raises_output_error(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    try:
        write_lines(str(blocker / "out.txt"), ["a"])
        assert False, "expected OutputError"
    except OutputError as e:
        assert e.code == "E_FILE_WRITE"
