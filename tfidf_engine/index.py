"""
tfidf_engine/index.py

Read-only inverted index produced by Indexer.

Layout:
    term -> DictEntry(term_freq, doc_freq, postings)

where postings is a tuple of Posting(docid, freq), strictly ascending by
docid, one Posting per (term, docid). Every term has at least one posting.

The index also remembers the collection size N (documents submitted,
including unavailable ones) and the documents whose source could not be read.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple


class Posting(NamedTuple):
    docid: int
    freq: int


class DictEntry(NamedTuple):
    term_freq: int  # occurrences across the whole collection
    doc_freq: int  # distinct documents containing the term
    postings: Tuple[Posting, ...]


class SourceUnavailable(NamedTuple):
    """A document whose raw content could not be obtained. Indexed as empty."""
    docid: int
    reason: str


class InvertedIndex:
    """
    Immutable term -> DictEntry mapping plus collection statistics.

    Typical usage:
        index = Indexer().build_inverted_index(docs)
        index.postings("cat")            # (Posting(1, 1), Posting(3, 2))
        index.document_frequency("cat")  # 2
        index.documents_containing("cat")  # [1, 3]

    Unknown terms are not errors: they have no postings and df 0.
    """

    __slots__ = ("_entries", "_doc_ids", "_unavailable")

    def __init__(
        self,
        entries: Dict[str, DictEntry],
        doc_ids: Iterable[int],
        unavailable: Iterable[SourceUnavailable] = (),
    ):
        self._entries: Mapping[str, DictEntry] = MappingProxyType(dict(entries))
        self._doc_ids: Tuple[int, ...] = tuple(sorted(set(doc_ids)))
        self._unavailable: Tuple[SourceUnavailable, ...] = tuple(
            sorted(unavailable, key=lambda u: u.docid)
        )

    # --- query surface ---

    def entry(self, term: str) -> Optional[DictEntry]:
        return self._entries.get(term)

    def postings(self, term: str) -> Tuple[Posting, ...]:
        entry = self._entries.get(term)
        return entry.postings if entry else ()

    def document_frequency(self, term: str) -> int:
        entry = self._entries.get(term)
        return entry.doc_freq if entry else 0

    def term_frequency(self, term: str) -> int:
        entry = self._entries.get(term)
        return entry.term_freq if entry else 0

    def collection_size(self) -> int:
        return len(self._doc_ids)

    def documents_containing(self, term: str) -> List[int]:
        return [p.docid for p in self.postings(term)]

    def postings_dict(self, term: str) -> Dict[int, int]:
        """Postings of a term as {docid: freq}. Empty dict if term not found."""
        return {p.docid: p.freq for p in self.postings(term)}

    def terms(self) -> List[str]:
        return sorted(self._entries)

    @property
    def doc_ids(self) -> Tuple[int, ...]:
        return self._doc_ids

    @property
    def unavailable(self) -> Tuple[SourceUnavailable, ...]:
        return self._unavailable

    # --- container protocol ---

    def __contains__(self, term: object) -> bool:
        return term in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, InvertedIndex):
            return NotImplemented
        return dict(self._entries) == dict(other._entries) and self._doc_ids == other._doc_ids

    __hash__ = None

    def __repr__(self) -> str:
        return f"InvertedIndex(terms={len(self)}, N={self.collection_size()})"
