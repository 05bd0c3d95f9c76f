#!/usr/bin/env python3
"""
Flask web application for the search engine frontend.
"""

import logging
import time

from flask import Flask, jsonify, request

from tfidf_engine.paths import APP_DEBUG, APP_HOST, APP_PORT, DATA_DIR, SCORE_DECIMALS
from tfidf_engine.searcher import Searcher

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Global searcher instance
searcher = None


def initialize_searcher(data_dir=DATA_DIR, num_docs=None):
    """Initialize the search engine."""
    global searcher
    try:
        logger.info("Initializing search engine from %s ...", data_dir)
        searcher = Searcher.from_directory(data_dir, num_docs)
        logger.info("Search engine initialized: N=%d", searcher.index.collection_size())
    except OSError as e:
        logger.error("Error initializing search engine: %s", e)
        searcher = None
    return searcher


@app.route('/search', methods=['POST'])
def search():
    """Handle search requests."""
    if searcher is None:
        return jsonify({'error': 'Search engine not initialized'}), 500

    data = request.get_json(silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400
    query = str(data.get('query', '')).strip()
    topk = data.get('topk')

    if not query:
        return jsonify({'error': 'Empty query'}), 400
    if topk is not None and (isinstance(topk, bool) or not isinstance(topk, int) or topk < 0):
        return jsonify({'error': 'topk must be a non-negative integer'}), 400

    # Perform search with timing
    start_time = time.perf_counter()
    results = searcher.search(query, topk=topk)
    search_time = (time.perf_counter() - start_time) * 1000  # ms

    formatted_results = [
        {'rank': rank, 'docid': docid, 'score': round(score, SCORE_DECIMALS)}
        for rank, (docid, score) in enumerate(results, start=1)
    ]
    return jsonify({
        'results': formatted_results,
        'searchTime': search_time,
        'totalResults': len(formatted_results),
        'query': query,
    })


@app.route('/documents/<term>')
def documents(term):
    """Documents containing a single term, no scoring."""
    if searcher is None:
        return jsonify({'error': 'Search engine not initialized'}), 500
    return jsonify({'term': term.lower(), 'docids': searcher.documents_containing(term)})


@app.route('/health')
def health():
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'searcher_initialized': searcher is not None
    })


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    initialize_searcher()
    app.run(debug=APP_DEBUG, host=APP_HOST, port=APP_PORT)
