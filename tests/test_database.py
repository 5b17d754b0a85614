"""Tests for the startup connection check and the create_user CLI."""

import unittest
from unittest.mock import MagicMock, patch

from sqlalchemy import create_engine, inspect
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from app.core.database import connect_db
from app.scripts import create_user
from tests.support import make_session_factory


class TestConnectDb(unittest.TestCase):
    def test_success_creates_users_table(self) -> None:
        engine = create_engine("sqlite://", poolclass=StaticPool)
        with self.assertLogs("app.core.database", level="INFO") as logs:
            self.assertTrue(connect_db(engine))
        self.assertIn("users", inspect(engine).get_table_names())
        self.assertIn("Database connected successfully", logs.output[0])

    def test_failure_is_logged_not_raised(self) -> None:
        engine = MagicMock()
        engine.connect.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
        with self.assertLogs("app.core.database", level="ERROR") as logs:
            self.assertFalse(connect_db(engine))
        self.assertIn("Error connecting to the database", logs.output[0])


class TestCreateUserCli(unittest.TestCase):
    def setUp(self) -> None:
        self.session_factory = make_session_factory()
        patcher_session = patch.object(create_user, "SessionLocal", self.session_factory)
        patcher_connect = patch.object(create_user, "connect_db", return_value=True)
        patcher_session.start()
        patcher_connect.start()
        self.addCleanup(patcher_session.stop)
        self.addCleanup(patcher_connect.stop)

    def test_creates_user_then_rejects_duplicate(self) -> None:
        self.assertEqual(create_user.main(["Ada", "ada@x.com", "secret", "admin"]), 0)
        self.assertEqual(create_user.main(["Ada", "ada@x.com", "secret"]), 1)

    def test_blank_email_rejected(self) -> None:
        self.assertEqual(create_user.main(["Ada", "  ", "secret"]), 1)

    def test_unreachable_database(self) -> None:
        with patch.object(create_user, "connect_db", return_value=False):
            self.assertEqual(create_user.main(["Ada", "ada@x.com", "secret"]), 1)


if __name__ == "__main__":
    unittest.main()
