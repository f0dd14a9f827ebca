"""Root conftest — shared test configuration."""

import os

# Keep test logs readable and settings independent of a developer's .env
os.environ.setdefault("STOREFRONT_LOG_FORMAT", "text")
os.environ.setdefault("STOREFRONT_CURRENCY_SYMBOL", "$")
