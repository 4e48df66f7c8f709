"""Root conftest — shared test configuration."""

import os

# Pin settings so a developer's .env or shell cannot change test expectations
os.environ.setdefault("WELCOME_MESSAGE", "Welcome to the Users API")
os.environ.setdefault("CORS_ORIGINS", "http://localhost:3000")
os.environ.setdefault("LOG_FORMAT", "text")
