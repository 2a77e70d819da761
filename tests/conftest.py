"""Root conftest — shared test configuration."""

import os

# Human-readable logs in test output; no .env from the developer's machine leaks in
os.environ.setdefault("STOREFRONT_LOG_FORMAT", "text")
os.environ.setdefault("STOREFRONT_LOG_LEVEL", "DEBUG")
