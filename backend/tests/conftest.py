"""Root conftest: shared test configuration."""

import os

# Keep test logs readable and never point at a real data file
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("DATA_FILE", "/nonexistent/funds_data.json")
