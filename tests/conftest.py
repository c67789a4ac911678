import matplotlib
import pytest

matplotlib.use("Agg")

CHUNK_A = b"abcdefghijklmnopqrst"
CHUNK_B = b"uvwxyz0123456789!@#$"


@pytest.fixture
def query_doc() -> bytes:
    # two 20-byte chunks
    return CHUNK_A + CHUNK_B


@pytest.fixture
def target_doc() -> bytes:
    # contains the first chunk only
    return b"zzzz " + CHUNK_A + b" yyyy"


@pytest.fixture
def doc_files(tmp_path):
    query = tmp_path / "query.txt"
    target = tmp_path / "target.txt"
    query.write_bytes(b"  " + CHUNK_A.upper() + CHUNK_B + b"\n")
    target.write_bytes(b"ZZZZ\t\t" + CHUNK_A + b"\n\nyyyy\n")
    return str(query), str(target)
