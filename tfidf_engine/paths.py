# tfidf_engine/paths.py

import os

# --- Base data paths ---
DATA_DIR = os.getenv("TFIDF_DATA_DIR", "data")

# --- Source corpus files: file1.txt .. fileN.txt ---
DOC_PATTERN = os.getenv("TFIDF_DOC_PATTERN", "file{}.txt")

# --- Ranking ---
DEFAULT_TOPK = None  # None = return every document with a positive score
SCORE_DECIMALS = 5

# --- Web front end ---
APP_HOST = os.getenv("TFIDF_APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("TFIDF_APP_PORT", "5001"))
APP_DEBUG = os.getenv("TFIDF_APP_DEBUG", "0") == "1"  # TFIDF_APP_DEBUG=1 turns on the Werkzeug debugger
