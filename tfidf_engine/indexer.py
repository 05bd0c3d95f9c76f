"""
tfidf_engine/indexer.py

Builds an in-memory InvertedIndex from tokenized documents.

While building, each term owns a mutable _Accumulator:
    term_freq, doc_freq, {docid: freq}

so locating a document's posting is a dict lookup rather than a scan of the
posting list. finish() freezes every accumulator into an immutable DictEntry,
sorting postings by docid on the way out, so the ascending-docid invariant
holds no matter what order documents were submitted in.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from typing import Dict, List, Optional, Tuple

from tfidf_engine.index import DictEntry, InvertedIndex, Posting, SourceUnavailable

logger = logging.getLogger(__name__)


class _Accumulator:
    """Mutable per-term statistics, only alive during the build phase."""

    __slots__ = ("term_freq", "doc_freq", "docs")

    def __init__(self):
        self.term_freq = 0
        self.doc_freq = 0
        self.docs: Dict[int, int] = {}

    def add(self, docid: int, n: int = 1) -> None:
        self.term_freq += n
        if docid in self.docs:
            self.docs[docid] += n
        else:
            self.docs[docid] = n
            self.doc_freq += 1

    def freeze(self) -> DictEntry:
        postings = tuple(Posting(d, f) for d, f in sorted(self.docs.items()))
        return DictEntry(self.term_freq, self.doc_freq, postings)


def _check_document(docid, tokens) -> None:
    if isinstance(docid, bool) or not isinstance(docid, int):
        raise TypeError(f"docid must be int, got {type(docid).__name__}")
    if tokens is not None and (isinstance(tokens, str) or not isinstance(tokens, Sequence)):
        raise TypeError(f"tokens for doc {docid} must be a sequence of terms or None")


def count_document(docid: int, tokens: Optional[Sequence[str]]) -> Tuple[int, Optional[Counter]]:
    """
    Local term counts for one document (the map step of a parallel build).
    Returns (docid, None) when the document's source was unavailable.
    """
    _check_document(docid, tokens)
    if tokens is None:
        return docid, None
    return docid, Counter(tokens)


class Indexer:
    """
    In-memory inverted index builder.

    Typical usage:
        index = Indexer().build_inverted_index({1: ["the", "cat"], 2: ["cat"]})

    or incrementally during the build phase:
        indexer = Indexer()
        for docid, tokens in parser.iter_docs(data_dir):
            indexer.add_document(docid, tokens)
        index = indexer.finish()

    Documents whose tokens are None are recorded as SourceUnavailable: they add
    no terms but still count toward the collection size.
    """

    def __init__(self):
        self._entries: Dict[str, _Accumulator] = {}
        self._doc_ids: set[int] = set()
        self.unavailable: List[SourceUnavailable] = []

    def _entry(self, term: str) -> _Accumulator:
        """Get-or-insert accessor for a term's accumulator."""
        acc = self._entries.get(term)
        if acc is None:
            acc = self._entries[term] = _Accumulator()
        return acc

    def _mark_unavailable(self, docid: int, reason: str) -> None:
        self.unavailable.append(SourceUnavailable(docid, reason))
        logger.warning("[Indexer] doc %d unavailable (%s); indexed as empty", docid, reason)

    def add_document(self, docid: int, tokens: Optional[Sequence[str]]) -> None:
        """
        Account every term occurrence of one document.

        tokens=None marks an unreadable source: logged, recorded in
        self.unavailable, counted toward N. An empty list is a real empty
        document (a blank file): counted toward N but not reported, since the
        loader signals read failures with None only.
        """
        _check_document(docid, tokens)
        self._doc_ids.add(docid)
        if tokens is None:
            self._mark_unavailable(docid, "source could not be read")
            return
        for term in tokens:
            self._entry(term).add(docid)

    def add_counts(self, docid: int, counts: Optional[Mapping[str, int]]) -> None:
        """Merge one document's pre-computed term counts (reduce step)."""
        _check_document(docid, None)
        self._doc_ids.add(docid)
        if counts is None:
            self._mark_unavailable(docid, "source could not be read")
            return
        for term, n in counts.items():
            if n > 0:
                self._entry(term).add(docid, n)

    def build_inverted_index(self, docs) -> InvertedIndex:
        """
        Construct an inverted index from tokenized documents.

        Args:
            docs: mapping docid -> tokens, or iterable of (docid, tokens)

        Returns:
            InvertedIndex
        """
        items: Iterable = docs.items() if isinstance(docs, Mapping) else docs
        for docid, tokens in items:
            self.add_document(docid, tokens)
        return self.finish()

    def finish(self) -> InvertedIndex:
        """Freeze the accumulated statistics into an immutable index."""
        entries = {term: acc.freeze() for term, acc in self._entries.items()}
        index = InvertedIndex(entries, self._doc_ids, self.unavailable)
        logger.info(
            "[Indexer] Built index: N=%d terms=%d unavailable=%d",
            index.collection_size(), len(index), len(self.unavailable),
        )
        return index
