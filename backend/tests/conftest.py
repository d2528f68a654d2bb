"""Root conftest — shared test configuration."""

import os

# Tests build their own store contents; never load sample records implicitly
os.environ.setdefault("SEED_DATA", "false")
os.environ.setdefault("LOG_FORMAT", "text")
