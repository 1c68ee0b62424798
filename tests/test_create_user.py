"""Tests for the create_user script: admin bootstrap, duplicates and input validation."""

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from hotelbook.core.security import verify_password
from hotelbook.models import Account
from hotelbook.scripts import create_user
from support import make_session_factory


class TestCreateUser(unittest.TestCase):
    def setUp(self) -> None:
        self.engine, self.SessionLocal = make_session_factory()
        patcher = patch.object(create_user, "SessionLocal", self.SessionLocal)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.addCleanup(self.engine.dispose)

    def _run(self, *argv: str) -> tuple[int, str, str]:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = create_user.main(list(argv))
        return code, out.getvalue(), err.getvalue()

    def _account(self, username: str) -> Account | None:
        db = self.SessionLocal()
        try:
            return db.query(Account).filter(Account.username == username).first()
        finally:
            db.close()

    def test_creates_admin(self) -> None:
        code, out, _ = self._run("root", "root@example.com", "123456789", "--admin")
        self.assertEqual(code, 0)
        self.assertIn("Created admin 'root'", out)
        account = self._account("root")
        self.assertTrue(account.is_admin)
        self.assertTrue(verify_password("123456789", account.password_hash))

    def test_creates_regular_user_with_profile(self) -> None:
        code, _, _ = self._run(
            "alice", "alice@example.com", "123456789", "--country", "vietnam", "--city", "hue"
        )
        self.assertEqual(code, 0)
        account = self._account("alice")
        self.assertFalse(account.is_admin)
        self.assertEqual(account.city, "hue")

    def test_duplicate_username_fails(self) -> None:
        self._run("root", "root@example.com", "123456789")
        code, _, err = self._run("root", "other@example.com", "123456789")
        self.assertEqual(code, 1)
        self.assertIn("root", err)

    def test_invalid_email_fails_without_writing(self) -> None:
        code, _, err = self._run("root", "not-an-email", "123456789")
        self.assertEqual(code, 1)
        self.assertIn("email", err)
        self.assertIsNone(self._account("root"))


if __name__ == "__main__":
    unittest.main()
