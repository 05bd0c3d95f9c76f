# tests/test_ranker.py
import pytest

from tfidf_engine.ranker import RankedDocument, rank


def test_sorted_by_score_desc():
    res = rank({1: 0.2, 2: 0.9, 3: 0.5})
    assert [r.docid for r in res] == [2, 3, 1]


def test_ties_broken_by_ascending_docid():
    res = rank({5: 0.5, 2: 0.5, 9: 0.7, 1: 0.5})
    assert res == [RankedDocument(9, 0.7), RankedDocument(1, 0.5),
                   RankedDocument(2, 0.5), RankedDocument(5, 0.5)]


def test_zero_scores_filtered():
    assert rank({1: 0.0, 2: 0.3, 3: 0.0}) == [RankedDocument(2, 0.3)]


def test_all_zero_is_empty():
    assert rank({1: 0.0, 2: 0.0}) == []
    assert rank({}) == []


def test_topk():
    scores = {1: 0.1, 2: 0.2, 3: 0.3}
    assert [r.docid for r in rank(scores, topk=2)] == [3, 2]
    assert rank(scores, topk=0) == []
    assert len(rank(scores, topk=10)) == 3


def test_negative_topk_rejected():
    with pytest.raises(ValueError):
        rank({1: 0.5}, topk=-1)


def test_result_unpacks_as_pair():
    docid, score = rank({4: 0.25})[0]
    assert (docid, score) == (4, 0.25)
