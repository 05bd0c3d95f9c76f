from tfidf_engine.index import DictEntry, InvertedIndex, Posting, SourceUnavailable
from tfidf_engine.indexer import Indexer
from tfidf_engine.parser import Parser, tokenize
from tfidf_engine.ranker import RankedDocument, rank
from tfidf_engine.scorer import Scorer
from tfidf_engine.searcher import Searcher

__all__ = [
    "DictEntry",
    "Indexer",
    "InvertedIndex",
    "Parser",
    "Posting",
    "RankedDocument",
    "Scorer",
    "Searcher",
    "SourceUnavailable",
    "rank",
    "tokenize",
]
