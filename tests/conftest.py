import pytest

from tfidf_engine.indexer import Indexer
from tfidf_engine.parser import tokenize

TOY_DOCS = {
    1: "the cat sat",
    2: "the dog sat",
    3: "cat dog cat",
}


@pytest.fixture
def toy_tokens():
    return {docid: tokenize(text) for docid, text in TOY_DOCS.items()}


@pytest.fixture
def toy_index(toy_tokens):
    return Indexer().build_inverted_index(toy_tokens)


@pytest.fixture
def toy_dir(tmp_path):
    """file1.txt .. file3.txt holding the toy corpus."""
    for docid, text in TOY_DOCS.items():
        (tmp_path / f"file{docid}.txt").write_text(text + "\n", encoding="utf-8")
    return tmp_path
