"""Tests for app.services.sessions: session creation and lookup by token."""

import unittest

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.security import hash_password
from app.models import Base, User, UserSession
from app.services.sessions import find_session_by_token, start_new_session


class TestStartNewSession(unittest.TestCase):
    """start_new_session adds exactly one row per call with a fresh token."""

    def setUp(self) -> None:
        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(engine)
        self.db = sessionmaker(bind=engine, autoflush=False)()
        self.user = User(
            email_address="owner@example.com",
            password_hash=hash_password("SecurePassword123!"),
        )
        self.db.add(self.user)
        self.db.commit()

    def tearDown(self) -> None:
        self.db.close()

    def test_creates_row_owned_by_user(self) -> None:
        row, token = start_new_session(self.db, self.user)
        self.db.commit()
        self.assertIsNotNone(row.id)
        self.assertEqual(row.user_id, self.user.id)
        self.assertEqual(row.token, token)
        self.assertEqual(self.db.query(UserSession).count(), 1)

    def test_tokens_are_never_reused(self) -> None:
        tokens = {start_new_session(self.db, self.user)[1] for _ in range(5)}
        self.db.commit()
        self.assertEqual(len(tokens), 5)
        self.assertEqual(self.db.query(UserSession).count(), 5)

    def test_does_not_commit(self) -> None:
        start_new_session(self.db, self.user)
        self.db.rollback()
        self.assertEqual(self.db.query(UserSession).count(), 0)

    def test_long_user_agent_is_truncated(self) -> None:
        row, _ = start_new_session(self.db, self.user, user_agent="x" * 5000)
        self.assertEqual(len(row.user_agent), 1024)

    def test_blank_metadata_stored_as_null(self) -> None:
        row, _ = start_new_session(self.db, self.user, user_agent="", ip_address="")
        self.assertIsNone(row.user_agent)
        self.assertIsNone(row.ip_address)

    def test_find_by_token(self) -> None:
        row, token = start_new_session(self.db, self.user)
        self.db.commit()
        found = find_session_by_token(self.db, token)
        self.assertIsNotNone(found)
        self.assertEqual(found.id, row.id)
        self.assertEqual(found.user.email_address, "owner@example.com")

    def test_find_unknown_or_missing_token(self) -> None:
        self.assertIsNone(find_session_by_token(self.db, "no-such-token"))
        self.assertIsNone(find_session_by_token(self.db, ""))
        self.assertIsNone(find_session_by_token(self.db, None))


if __name__ == "__main__":
    unittest.main()
