import logging
import os
from dataclasses import dataclass

from matching.errors import DocumentError

logger = logging.getLogger(__name__)


def read_document(path: str) -> bytes:
    """Read the entire content of the file at path."""
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        raise DocumentError(f"cannot read {path}: {e.strerror or e}") from e


def normalize(raw: bytes) -> bytes:
    """
    Normalize a document:
      1) turn upper case ASCII letters into lower case
      2) collapse every run of whitespace into a single space
      3) drop whitespace at the beginning and end
    """
    return b" ".join(raw.lower().split())


@dataclass(frozen=True)
class Document:
    path: str
    raw_length: int
    data: bytes

    def __len__(self) -> int:
        return len(self.data)


class DocumentLoader:
    def __init__(self, normalize_text: bool = True):
        """
        Initialize the document loader.
        """
        self.normalize_text = normalize_text

    def load(self, path: str) -> Document:
        """Read a document and normalize it unless disabled."""
        raw = read_document(path)
        data = normalize(raw) if self.normalize_text else raw
        logger.info("Loaded %s: %d bytes raw, %d bytes normalized", os.path.basename(path), len(raw), len(data))
        return Document(path=path, raw_length=len(raw), data=data)
