# tfidf_engine/ranker.py
"""
Turns per-document scores into an ordered result list.

Order: score descending, ties broken by ascending docid so equal scores
always come out in the same order. Only documents with score > 0 are kept;
an empty list means "no matches" and is left to the caller to present.
"""

from typing import List, Mapping, NamedTuple, Optional


class RankedDocument(NamedTuple):
    docid: int
    score: float


def rank(scores: Mapping[int, float], topk: Optional[int] = None) -> List[RankedDocument]:
    """
    Args:
        scores: mapping docid -> score
        topk: keep only the first topk results (None = all)

    Returns:
        list[RankedDocument] sorted by score desc, docid asc
    """
    if topk is not None and topk < 0:
        raise ValueError(f"topk must be >= 0, got {topk}")
    hits = [RankedDocument(d, s) for d, s in scores.items() if s > 0]
    hits.sort(key=lambda r: (-r.score, r.docid))
    return hits[:topk] if topk is not None else hits
