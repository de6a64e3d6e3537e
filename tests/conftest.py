"""Root conftest — shared test configuration."""

import os

# Tests never reach the network or download corpora
os.environ.setdefault("RELATION_BASE_URL", "http://relations.test/words")
os.environ.setdefault("WORDNET_AUTO_DOWNLOAD", "false")
os.environ.setdefault("LOG_FORMAT", "text")
