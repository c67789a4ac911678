import pytest

from data_loader.document_loader import DocumentLoader, normalize, read_document
from matching.errors import DocumentError


@pytest.mark.parametrize(
    "raw,expected",
    [
        (b"Hello World", b"hello world"),
        (b"  leading and trailing  \n", b"leading and trailing"),
        (b"tabs\t\tand\r\nnewlines\n\n\nhere", b"tabs and newlines here"),
        (b"MiXeD 123 !?", b"mixed 123 !?"),
        (b"", b""),
        (b" \t\n ", b""),
    ],
)
def test_normalize(raw, expected):
    assert normalize(raw) == expected


def test_normalize_keeps_non_ascii_bytes():
    assert normalize(b"Caf\xc3\xa9  AU LAIT") == b"caf\xc3\xa9 au lait"


def test_read_document(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"raw\x00bytes")
    assert read_document(str(path)) == b"raw\x00bytes"


def test_read_missing_document(tmp_path):
    with pytest.raises(DocumentError):
        read_document(str(tmp_path / "missing.txt"))


def test_loader_normalizes(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"  Some   TEXT\n")
    doc = DocumentLoader().load(str(path))
    assert doc.data == b"some text"
    assert doc.raw_length == 14
    assert len(doc) == 9


def test_loader_can_skip_normalization(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"  Some   TEXT\n")
    assert DocumentLoader(normalize_text=False).load(str(path)).data == b"  Some   TEXT\n"
