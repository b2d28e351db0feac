"""Root conftest: pin settings for tests before the app modules read them."""

import os

os.environ.setdefault("APP_ENV", "dev")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("REGISTRATION_RATE_LIMIT", "10")
os.environ.setdefault("REGISTRATION_RATE_WINDOW_SEC", "180")

import app.core.security as security  # noqa: E402

# Minimum bcrypt cost keeps the suite fast; hashing behavior is otherwise unchanged.
security.BCRYPT_ROUNDS = 4
