"""API tests for /api/users: Self-or-Admin and Admin-only access, updates and deletes."""

import unittest

from hotelbook.core.security import verify_password
from hotelbook.models import Account
from support import ApiTestCase


class TestGetUser(ApiTestCase):
    def test_owner_can_read_own_account(self) -> None:
        token = self.user_token("alice")
        alice_id = self.account_id("alice")
        response = self.client.get(f"/api/users/{alice_id}", headers=self.auth(token))
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["username"], "alice")
        self.assertNotIn("password_hash", body)

    def test_token_for_a_fails_on_b(self) -> None:
        token_a = self.user_token("alice")
        self.user_token("bob")
        bob_id = self.account_id("bob")
        response = self.client.get(f"/api/users/{bob_id}", headers=self.auth(token_a))
        self.assertEqual(response.status_code, 403)

    def test_admin_can_read_any_account(self) -> None:
        admin = self.admin_token()
        self.user_token("bob")
        bob_id = self.account_id("bob")
        response = self.client.get(f"/api/users/{bob_id}", headers=self.auth(admin))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["username"], "bob")

    def test_admin_reading_missing_account_is_404(self) -> None:
        admin = self.admin_token()
        response = self.client.get("/api/users/9999", headers=self.auth(admin))
        self.assertEqual(response.status_code, 404)

    def test_non_numeric_id_is_400(self) -> None:
        admin = self.admin_token()
        response = self.client.get("/api/users/abc", headers=self.auth(admin))
        self.assertEqual(response.status_code, 400)


class TestListUsers(ApiTestCase):
    def test_admin_lists_all_accounts_in_id_order(self) -> None:
        admin = self.admin_token()
        self.user_token("alice")
        self.user_token("bob")
        response = self.client.get("/api/users", headers=self.auth(admin))
        self.assertEqual(response.status_code, 200)
        self.assertEqual([u["username"] for u in response.json()], ["admin", "alice", "bob"])

    def test_regular_user_cannot_list(self) -> None:
        token = self.user_token("alice")
        self.assertEqual(self.client.get("/api/users", headers=self.auth(token)).status_code, 403)


class TestUpdateUser(ApiTestCase):
    def test_owner_updates_profile_fields(self) -> None:
        token = self.user_token("alice")
        alice_id = self.account_id("alice")
        response = self.client.put(
            f"/api/users/{alice_id}",
            json={"city": "danang", "phone": "0909"},
            headers=self.auth(token),
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["city"], "danang")
        self.assertEqual(body["phone"], "0909")
        self.assertEqual(body["country"], "vietnam")

    def test_password_change_is_rehashed(self) -> None:
        token = self.user_token("alice")
        alice_id = self.account_id("alice")
        response = self.client.put(
            f"/api/users/{alice_id}",
            json={"password": "new-password-1"},
            headers=self.auth(token),
        )
        self.assertEqual(response.status_code, 200)
        db = self.SessionLocal()
        try:
            stored = db.get(Account, alice_id).password_hash
        finally:
            db.close()
        self.assertTrue(verify_password("new-password-1", stored))
        self.assertEqual(self.login("alice", "new-password-1").status_code, 200)
        self.assertEqual(self.login("alice").status_code, 401)

    def test_username_taken_by_other_account_conflicts(self) -> None:
        token = self.user_token("alice")
        self.user_token("bob")
        alice_id = self.account_id("alice")
        response = self.client.put(
            f"/api/users/{alice_id}", json={"username": "bob"}, headers=self.auth(token)
        )
        self.assertEqual(response.status_code, 409)

    def test_email_taken_by_other_account_conflicts(self) -> None:
        token = self.user_token("alice")
        self.user_token("bob")
        alice_id = self.account_id("alice")
        response = self.client.put(
            f"/api/users/{alice_id}",
            json={"email": "bob@example.com"},
            headers=self.auth(token),
        )
        self.assertEqual(response.status_code, 409)

    def test_resubmitting_own_username_is_allowed(self) -> None:
        token = self.user_token("alice")
        alice_id = self.account_id("alice")
        response = self.client.put(
            f"/api/users/{alice_id}",
            json={"username": "alice", "email": "alice@example.com"},
            headers=self.auth(token),
        )
        self.assertEqual(response.status_code, 200)

    def test_user_cannot_promote_self(self) -> None:
        token = self.user_token("alice")
        alice_id = self.account_id("alice")
        response = self.client.put(
            f"/api/users/{alice_id}", json={"is_admin": True}, headers=self.auth(token)
        )
        self.assertEqual(response.status_code, 403)

    def test_admin_can_promote(self) -> None:
        admin = self.admin_token()
        self.user_token("alice")
        alice_id = self.account_id("alice")
        response = self.client.put(
            f"/api/users/{alice_id}", json={"is_admin": True}, headers=self.auth(admin)
        )
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["is_admin"])

    def test_other_user_cannot_update(self) -> None:
        token_a = self.user_token("alice")
        self.user_token("bob")
        bob_id = self.account_id("bob")
        response = self.client.put(
            f"/api/users/{bob_id}", json={"city": "hue"}, headers=self.auth(token_a)
        )
        self.assertEqual(response.status_code, 403)


class TestDeleteUser(ApiTestCase):
    def test_owner_deletes_own_account(self) -> None:
        token = self.user_token("alice")
        alice_id = self.account_id("alice")
        response = self.client.delete(f"/api/users/{alice_id}", headers=self.auth(token))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "User has been deleted."})
        self.assertEqual(self.login("alice").status_code, 404)

    def test_other_user_cannot_delete(self) -> None:
        token_a = self.user_token("alice")
        self.user_token("bob")
        bob_id = self.account_id("bob")
        response = self.client.delete(f"/api/users/{bob_id}", headers=self.auth(token_a))
        self.assertEqual(response.status_code, 403)

    def test_admin_deletes_missing_account_is_404(self) -> None:
        admin = self.admin_token()
        response = self.client.delete("/api/users/9999", headers=self.auth(admin))
        self.assertEqual(response.status_code, 404)


if __name__ == "__main__":
    unittest.main()
