"""
tfidf_engine/parser.py

Tokenizer and corpus loader.

The tokenizer is deliberately minimal: whitespace split + lowercase, no
stemming, no stopwords, order and multiplicity preserved.

The loader reads a directory of numbered text files (file1.txt .. fileN.txt
by default) and yields (docid, tokens) pairs in ascending docid order. A file
that cannot be read is yielded as (docid, None) so the indexer can count it
as an empty, unavailable document.
"""

import logging
import os
import re

from ftfy import fix_text

from tfidf_engine.paths import DOC_PATTERN

logger = logging.getLogger(__name__)


def tokenize(text: str | None) -> list[str]:
    """
    Split raw text on whitespace and lower-case every token.
    Returns [] for None or blank text.
    """
    if not text:
        return []
    return [tok.lower() for tok in text.split()]


class Parser:
    """
    Loader for numbered plain-text document collections.

    Methods:
        read_document(path) -> list[str] | None
        discover(data_dir) -> int
        iter_docs(data_dir, num_docs=None) -> yields (docid, tokens | None)
    """

    def __init__(self, pattern: str = DOC_PATTERN):
        if pattern.count("{}") != 1:
            raise ValueError(f"pattern must contain exactly one '{{}}', got {pattern!r}")
        self.pattern = pattern
        head, tail = pattern.split("{}")
        self._name_re = re.compile(rf"^{re.escape(head)}(\d+){re.escape(tail)}$")

    def filename(self, docid: int) -> str:
        return self.pattern.format(docid)

    def read_document(self, path: str) -> list[str] | None:
        """
        Read and tokenize one document.
        - Undecodable bytes are dropped, mojibake is repaired (ftfy)
        - Returns None if the file could not be read
        """
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                text = f.read()
        except OSError as e:
            logger.warning("[Parser] Could not read %s: %s", path, e)
            return None
        return tokenize(fix_text(text))

    def discover(self, data_dir: str) -> int:
        """Highest docid among files in data_dir matching the pattern (0 if none)."""
        highest = 0
        for name in os.listdir(data_dir):
            m = self._name_re.match(name)
            if m:
                highest = max(highest, int(m.group(1)))
        return highest

    def iter_docs(self, data_dir: str, num_docs: int | None = None):
        """
        Stream (docid, tokens) for docids 1..num_docs.
        If num_docs is None the collection size is discovered from data_dir.

        Yields:
            (docid:int, tokens:list[str] | None)
        """
        if num_docs is None:
            num_docs = self.discover(data_dir)
        logger.info("[Parser] Loading %d docs from %s", num_docs, data_dir)
        for docid in range(1, num_docs + 1):
            yield docid, self.read_document(os.path.join(data_dir, self.filename(docid)))
