# tfidf_engine/searcher.py
import logging

from tfidf_engine.build_mp import build_inverted_index_mp
from tfidf_engine.index import InvertedIndex
from tfidf_engine.indexer import Indexer
from tfidf_engine.parser import Parser, tokenize
from tfidf_engine.paths import DATA_DIR, DOC_PATTERN
from tfidf_engine.ranker import RankedDocument, rank
from tfidf_engine.scorer import Scorer

logger = logging.getLogger(__name__)


class Searcher:
    """
    Query entry points over a built InvertedIndex.

    - search(query): Tokenizer -> Scorer -> Ranker, returns list[(docid, score)]
    - documents_containing(term): plain term lookup, no scoring
    """

    def __init__(self, index: InvertedIndex):
        self.index = index
        self.scorer = Scorer(index)

    @classmethod
    def from_directory(cls, data_dir: str = DATA_DIR, num_docs: int | None = None,
                       pattern: str = DOC_PATTERN, workers: int | None = None):
        """
        Load file1.txt .. fileN.txt (or `pattern`) from data_dir and build the index.
        workers > 1 switches to the multiprocessing builder.
        """
        parser = Parser(pattern)
        docs = parser.iter_docs(data_dir, num_docs)
        if workers and workers > 1:
            index = build_inverted_index_mp(docs, max_workers=workers)
        else:
            index = Indexer().build_inverted_index(docs)
        return cls(index)

    @staticmethod
    def _query_terms(query) -> list[str]:
        if query is None:
            return []
        if isinstance(query, str):
            return tokenize(query)
        if isinstance(query, (list, tuple)):
            return [t.lower() for t in query]
        raise TypeError(f"query must be str | list[str] | tuple[str], got {type(query)}")

    def search(self, query, topk: int | None = None) -> list[RankedDocument]:
        """
        Rank documents against a query.
        - query: raw string (whitespace-tokenized) or ordered sequence of terms
        - Returns list[(docid, score)] with score > 0, sorted by score desc, docid asc
        """
        terms = self._query_terms(query)
        if not terms:
            return []
        results = rank(self.scorer.score(terms), topk=topk)
        logger.debug("[Searcher] %r -> %d results", terms, len(results))
        return results

    def documents_containing(self, term: str) -> list[int]:
        return self.index.documents_containing(term.lower())
