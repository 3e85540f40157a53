"""Root conftest — shared test configuration."""

import os

# Settings require API_KEY; tests never talk to a real MongoDB
os.environ.setdefault("API_KEY", "test-api-key")
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")
