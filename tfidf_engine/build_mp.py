# tfidf_engine/build_mp.py
"""
Build the inverted index in parallel (multiprocessing, map-reduce).

Why processes, not threads?
- Counting terms is CPU-bound; the GIL prevents real parallelism with threads.

Design:
- Map: each worker counts one document's terms on its own
      count_document(docid, tokens) -> (docid, Counter | None)
- Reduce: the main process merges the partial counts into a single Indexer
  sequentially, in ascending docid order, then freezes it.

The result is identical to Indexer().build_inverted_index(docs).

How to use:
    index = build_inverted_index_mp(parser.iter_docs("data"), max_workers=4)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Sequence, Tuple

from tfidf_engine.index import InvertedIndex
from tfidf_engine.indexer import Indexer, count_document

logger = logging.getLogger(__name__)


def build_inverted_index_mp(
    docs,
    max_workers: int | None = None,
    chunksize: int = 16,
) -> InvertedIndex:
    """
    Parallel index builder.

    Args:
        docs: mapping docid -> tokens, or iterable of (docid, tokens)
        max_workers: #processes; default os.cpu_count()
        chunksize: documents handed to a worker per task

    Returns:
        InvertedIndex
    """
    items = docs.items() if isinstance(docs, Mapping) else docs
    pairs: List[Tuple[int, Optional[Sequence[str]]]] = list(items)
    if not pairs:
        return Indexer().finish()

    docids = [d for d, _ in pairs]
    token_lists = [t for _, t in pairs]

    with ProcessPoolExecutor(max_workers=max_workers) as ex:
        partials = list(ex.map(count_document, docids, token_lists, chunksize=chunksize))

    # Reduce in docid order so every posting list is appended in ascending order
    partials.sort(key=lambda p: p[0])
    indexer = Indexer()
    for docid, counts in partials:
        indexer.add_counts(docid, counts)

    logger.info("[BuildMP] Merged %d partial counts (workers=%s)", len(partials), max_workers or "auto")
    return indexer.finish()
