# tfidf_engine/scorer.py
import logging
import math

from tfidf_engine.index import InvertedIndex

logger = logging.getLogger(__name__)


def normalize_query(query_terms) -> list[str]:
    """Lower-case every query term, keeping order and duplicates."""
    if isinstance(query_terms, str):
        raise TypeError("query_terms must be a sequence of terms, not a str; tokenize it first")
    return [t.lower() for t in query_terms]


def cosine(query_weights: dict, doc_weights: dict) -> float:
    """
    Cosine similarity restricted to the query's terms.
    Returns 0.0 when either vector has zero magnitude.
    """
    dot = 0.0
    q_sq = 0.0
    d_sq = 0.0
    for term, qw in query_weights.items():
        dw = doc_weights.get(term, 0.0)
        dot += qw * dw
        q_sq += qw * qw
        d_sq += dw * dw
    if q_sq == 0.0 or d_sq == 0.0:
        return 0.0
    return dot / (math.sqrt(q_sq) * math.sqrt(d_sq))


class Scorer:
    """
    TF-IDF cosine scorer over an InvertedIndex.

    Weighting (same for query and documents):
    - tf(t, tokens) = raw count, no log dampening, no length normalization
    - idf(t)        = log10(N / df(t)), and 0 when df(t) == 0
    - weight        = tf * idf

    Only the query's distinct terms take part in the dot product and in both
    magnitudes. A zero-magnitude vector scores 0, never NaN.
    """

    def __init__(self, index: InvertedIndex):
        self.index = index
        self.N = index.collection_size()

    @staticmethod
    def tf(term: str, tokens) -> int:
        return sum(1 for t in tokens if t == term)

    def idf(self, term: str) -> float:
        df = self.index.document_frequency(term)
        if df == 0 or self.N == 0:
            return 0.0
        return math.log10(self.N / df)

    def query_weights(self, query_terms) -> dict[str, float]:
        """One weight per distinct query term, in first-seen order."""
        terms = normalize_query(query_terms)
        return {t: self.tf(t, terms) * self.idf(t) for t in dict.fromkeys(terms)}

    def document_weights(self, docid: int, terms, postings=None, idfs=None) -> dict[str, float]:
        """
        tf(t, d) * idf(t) for each given term, tf read from the postings.

        Args:
            docid: document to weigh
            terms: the query's distinct terms
            postings: optional precomputed {term: {docid: tf}}
            idfs: optional precomputed {term: idf}
        """
        weights = {}
        for t in terms:
            plist = postings[t] if postings is not None else self.index.postings_dict(t)
            idf = idfs[t] if idfs is not None else self.idf(t)
            weights[t] = plist.get(docid, 0) * idf
        return weights

    def score(self, query_terms) -> dict[int, float]:
        """
        Cosine similarity of every document in the collection to the query.

        Returns:
            dict docid -> score, zero-scored documents included
        """
        q_weights = self.query_weights(query_terms)
        # {term: {docid: tf}} once per query term, not once per document
        postings = {t: self.index.postings_dict(t) for t in q_weights}
        idfs = {t: self.idf(t) for t in q_weights}

        scores = {}
        for docid in self.index.doc_ids:
            d_weights = self.document_weights(docid, q_weights, postings, idfs)
            scores[docid] = cosine(q_weights, d_weights)
        logger.debug("[Scorer] query=%s weights=%s", list(q_weights), q_weights)
        return scores
