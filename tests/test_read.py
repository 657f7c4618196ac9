import io

import pytest

import tcldata


def test_read_stream():
    assert tcldata.read(io.StringIO('a "b c" {d {e}}')) == ["a", "b c", "d {e}"]


def test_read_path(tmp_path):
    path = tmp_path / "data.tcl"
    path.write_text('set x "1\\t2"\nputs {$x}\n', encoding="utf-8")

    assert tcldata.read(path) == ["set", "x", "1\t2", "puts", "$x"]
    assert tcldata.read(str(path)) == ["set", "x", "1\t2", "puts", "$x"]


def test_read_path_with_line_continuation(tmp_path):
    path = tmp_path / "data.tcl"
    path.write_bytes(b"{a\\\r\n   b} c")

    assert tcldata.read(path) == ["a b", "c"]


def test_lazy_read_does_not_close_stream():
    stream = io.StringIO("a b")
    with tcldata.lazy_read(stream) as words:
        assert next(words).value == "a"
    assert not stream.closed
    assert stream.read() == " b"


def test_lazy_read_words(tmp_path):
    path = tmp_path / "data.tcl"
    path.write_text('{a} "b" c', encoding="utf-8")

    with tcldata.lazy_read(path) as words:
        assert [w.kind for w in words] == [
            tcldata.WordKind.BRACED,
            tcldata.WordKind.QUOTED,
            tcldata.WordKind.BARE,
        ]


def test_split():
    assert tcldata.split('This "is a" word test.') == ["This", "is a", "word", "test."]
    assert tcldata.split("") == []


def test_split_strict():
    assert tcldata.split("\\q") == ["q"]
    with pytest.raises(tcldata.MalformedEscapeError):
        tcldata.split("\\q", strict=True)


def test_read_binary_stream():
    with pytest.raises(tcldata.WrongFileModeError):
        tcldata.read(io.BytesIO(b"a b"))


def test_read_unterminated():
    with pytest.raises(tcldata.UnterminatedQuoteError):
        tcldata.read(io.StringIO('a "b'))
    with pytest.raises(tcldata.TclReadError):
        tcldata.read(io.StringIO("a {b"))


def test_version():
    assert isinstance(tcldata.__version__, str)
