# tests/test_build_mp.py
import random

from tfidf_engine.build_mp import build_inverted_index_mp
from tfidf_engine.indexer import Indexer

RANDOM_SEED = 11


def test_parallel_equals_sequential():
    random.seed(RANDOM_SEED)
    vocab = [f"t{i}" for i in range(20)]
    docs = {d: random.choices(vocab, k=random.randint(1, 30)) for d in range(1, 41)}
    docs[17] = None
    items = list(docs.items())
    random.shuffle(items)

    seq = Indexer().build_inverted_index(items)
    par = build_inverted_index_mp(items, max_workers=2, chunksize=4)

    assert par == seq
    for term in seq.terms():
        assert par.entry(term) == seq.entry(term)
    assert [u.docid for u in par.unavailable] == [17]


def test_parallel_accepts_mapping(toy_tokens, toy_index):
    assert build_inverted_index_mp(toy_tokens, max_workers=2) == toy_index


def test_parallel_empty_input():
    index = build_inverted_index_mp([])
    assert index.collection_size() == 0
    assert len(index) == 0
