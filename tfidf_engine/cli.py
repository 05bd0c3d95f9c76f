"""
tfidf_engine/cli.py

Command-line front end: build the index from a directory of numbered text
files, then run one query (or a single-term lookup) and print the ranking.

Run examples:
  python -m tfidf_engine.cli --data-dir data --query "cat dog"
  python -m tfidf_engine.cli --data-dir data            # prompts for the query
  python -m tfidf_engine.cli --data-dir data --lookup cat
"""

import argparse
import logging
import os
import sys

from tfidf_engine.paths import DATA_DIR, DEFAULT_TOPK, DOC_PATTERN, SCORE_DECIMALS
from tfidf_engine.searcher import Searcher

logger = logging.getLogger(__name__)


def format_score(score: float, decimals: int = SCORE_DECIMALS) -> str:
    """Round to `decimals` places and drop trailing zeros (0.50000 -> 0.5)."""
    text = f"{score:.{decimals}f}".rstrip("0").rstrip(".")
    return text or "0"


def format_results(query: str, results, pattern: str = DOC_PATTERN) -> list[str]:
    if not results:
        return [f"No files contain the query: {query}"]
    lines = [f"Files that contain the query: {query}"]
    for rank, (docid, score) in enumerate(results, start=1):
        lines.append(f"Rank {rank}: {pattern.format(docid)} (Cosine Similarity: {format_score(score)})")
    return lines


def format_lookup(term: str, docids, pattern: str = DOC_PATTERN) -> list[str]:
    if not docids:
        return [f"No files contain the term: {term}"]
    return [f"Files that contain the term: {term}"] + [pattern.format(d) for d in docids]


def non_negative_int(value: str) -> int:
    n = int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Rank numbered text files against a query (TF-IDF cosine).")
    ap.add_argument("--data-dir", default=DATA_DIR, help="Directory holding file1.txt .. fileN.txt")
    ap.add_argument("--num-docs", type=int, default=None, help="Collection size N; default: discovered")
    ap.add_argument("--pattern", default=DOC_PATTERN, help="File name pattern with one '{}' for the docid")
    ap.add_argument("--query", default=None, help="Space-separated query; prompts on stdin if omitted")
    ap.add_argument("--lookup", default=None, metavar="TERM", help="List files containing TERM, no scoring")
    ap.add_argument("--topk", type=non_negative_int, default=DEFAULT_TOPK, help="Show at most this many results")
    ap.add_argument("--workers", type=int, default=None, help="#processes for building; default: sequential")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(message)s",
    )

    if not os.path.isdir(args.data_dir):
        print(f"Data directory not found: {args.data_dir}", file=sys.stderr)
        return 1

    # unreadable files are logged as warnings by the parser and indexer; the run continues
    searcher = Searcher.from_directory(args.data_dir, args.num_docs, args.pattern, args.workers)
    logger.info("Indexed %d files, %d unreadable", searcher.index.collection_size(),
                len(searcher.index.unavailable))

    if args.lookup is not None:
        term = args.lookup.lower()
        lines = format_lookup(term, searcher.documents_containing(term), args.pattern)
    else:
        query = args.query
        if query is None:
            try:
                query = input("Enter a query (space-separated words): ")
            except EOFError:
                query = ""  # closed stdin reads as an empty query
        query = query.lower()
        lines = format_results(query, searcher.search(query, topk=args.topk), args.pattern)

    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
