"""HTTP-level tests: auth gate, error envelope and the protected routes (SQLite, no network)."""

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from journalup.core.database import get_db
from journalup.main import app
from journalup.models import Base, Journal, User
from journalup.services.memory import get_memory_client
from journalup.services.narrative import get_narrative_client

PASSWORD = "password123"


class ApiTestCase(unittest.TestCase):
    """Fresh in-memory database per test; LLM and memory graph disabled."""

    def setUp(self) -> None:
        rounds = patch("journalup.core.security.BCRYPT_ROUNDS", 4)
        rounds.start()
        self.addCleanup(rounds.stop)

        engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(engine)
        testing_session = sessionmaker(bind=engine, autoflush=False)
        self.testing_session = testing_session

        def override_get_db():
            db = testing_session()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_narrative_client] = lambda: None
        app.dependency_overrides[get_memory_client] = lambda: None
        self.addCleanup(app.dependency_overrides.clear)
        self.client = TestClient(app)

    def signup(self, email: str = "user@example.com") -> dict:
        resp = self.client.post("/api/v1/auth/signup", json={"email": email, "password": PASSWORD})
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()

    @staticmethod
    def auth_headers(body: dict) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {body['token']}",
            "x-session-token": body["sessionToken"],
        }

    def count(self, model: type) -> int:
        db = self.testing_session()
        try:
            return db.query(model).count()
        finally:
            db.close()

    def assertError(self, resp, status_code: int, code: str, message: str | None = None) -> None:
        self.assertEqual(resp.status_code, status_code, resp.text)
        error = resp.json()["error"]
        self.assertEqual(error["code"], code)
        if message is not None:
            self.assertEqual(error["message"], message)


class TestAuthRoutes(ApiTestCase):
    def test_signup_returns_credentials(self) -> None:
        body = self.signup()
        self.assertTrue(body["success"])
        self.assertEqual(body["user"]["email"], "user@example.com")
        self.assertTrue(body["token"])
        self.assertTrue(body["sessionToken"])
        self.assertNotIn("passwordHash", body["user"])

    def test_duplicate_signup_is_conflict(self) -> None:
        self.signup()
        resp = self.client.post(
            "/api/v1/auth/signup", json={"email": "user@example.com", "password": PASSWORD}
        )
        self.assertError(resp, 409, "CONFLICT")

    def test_short_password_fails_validation(self) -> None:
        resp = self.client.post(
            "/api/v1/auth/signup", json={"email": "user@example.com", "password": "short"}
        )
        self.assertError(resp, 422, "VALIDATION_ERROR")
        self.assertEqual(self.count(User), 0)

    def test_login_errors(self) -> None:
        self.signup()
        resp = self.client.post(
            "/api/v1/auth/login", json={"email": "nobody@example.com", "password": PASSWORD}
        )
        self.assertError(resp, 404, "NOT_FOUND")
        resp = self.client.post(
            "/api/v1/auth/login", json={"email": "user@example.com", "password": "wrong-password"}
        )
        self.assertError(resp, 401, "AUTHENTICATION_ERROR")

    def test_logout_without_session_header_succeeds(self) -> None:
        resp = self.client.post("/api/v1/auth/logout")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"success": True})


class TestAuthGate(ApiTestCase):
    def test_missing_headers(self) -> None:
        resp = self.client.get("/api/v1/journals")
        self.assertError(resp, 401, "AUTHENTICATION_ERROR", "Missing authentication")
        self.assertEqual(resp.headers.get("WWW-Authenticate"), "Bearer")

    def test_missing_session_header(self) -> None:
        body = self.signup()
        resp = self.client.get(
            "/api/v1/journals", headers={"Authorization": f"Bearer {body['token']}"}
        )
        self.assertError(resp, 401, "AUTHENTICATION_ERROR", "Missing authentication")

    def test_non_bearer_scheme(self) -> None:
        body = self.signup()
        headers = self.auth_headers(body)
        headers["Authorization"] = f"Token {body['token']}"
        resp = self.client.get("/api/v1/journals", headers=headers)
        self.assertError(resp, 401, "AUTHENTICATION_ERROR", "Invalid token format")

    def test_invalid_jwt_with_live_session(self) -> None:
        body = self.signup()
        headers = self.auth_headers(body)
        headers["Authorization"] = "Bearer not.a.jwt"
        resp = self.client.get("/api/v1/journals", headers=headers)
        self.assertError(resp, 401, "AUTHENTICATION_ERROR", "Invalid token")

    def test_logout_revokes_session(self) -> None:
        body = self.signup()
        headers = self.auth_headers(body)
        self.assertEqual(self.client.get("/api/v1/journals", headers=headers).status_code, 200)

        self.client.post("/api/v1/auth/logout", headers={"x-session-token": body["sessionToken"]})

        resp = self.client.get("/api/v1/journals", headers=headers)
        self.assertError(resp, 401, "AUTHENTICATION_ERROR", "Invalid or expired session")

    def test_new_login_invalidates_previous_session(self) -> None:
        first = self.signup()
        resp = self.client.post(
            "/api/v1/auth/login", json={"email": "user@example.com", "password": PASSWORD}
        )
        second = resp.json()

        stale = self.client.get("/api/v1/journals", headers=self.auth_headers(first))
        self.assertError(stale, 401, "AUTHENTICATION_ERROR", "Invalid or expired session")
        fresh = self.client.get("/api/v1/journals", headers=self.auth_headers(second))
        self.assertEqual(fresh.status_code, 200)

    def test_jwt_paired_with_another_users_session_is_rejected(self) -> None:
        owner = self.signup("owner@example.com")
        other = self.signup("other@example.com")
        self.client.post("/api/v1/auth/logout", headers={"x-session-token": owner["sessionToken"]})

        headers = {
            "Authorization": f"Bearer {owner['token']}",
            "x-session-token": other["sessionToken"],
        }
        resp = self.client.post("/api/v1/journals", json={"title": "Daily"}, headers=headers)

        self.assertError(resp, 401, "AUTHENTICATION_ERROR", "Session does not match token")
        self.assertEqual(self.count(Journal), 0)
        self.assertEqual(
            self.client.get("/api/v1/journals", headers=self.auth_headers(other)).status_code, 200
        )

    def test_public_routes_need_no_credentials(self) -> None:
        self.assertEqual(self.client.get("/").status_code, 200)
        resp = self.client.get("/api/v1/health/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")
        self.assertEqual(resp.json()["database"], "connected")
        self.assertIn("aiEnabled", resp.json())


class TestMetricsRoutes(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.auth_headers(self.signup())

    def test_out_of_range_value_is_bad_request(self) -> None:
        for value in (0, 11):
            resp = self.client.post(
                "/api/v1/metrics", json={"type": "effort", "value": value}, headers=self.headers
            )
            self.assertError(resp, 400, "VALIDATION_ERROR")

    def test_unknown_type_fails_validation(self) -> None:
        resp = self.client.post(
            "/api/v1/metrics", json={"type": "sleep", "value": 5}, headers=self.headers
        )
        self.assertError(resp, 422, "VALIDATION_ERROR")

    def test_record_list_and_analyze(self) -> None:
        for value in (5, 7):
            resp = self.client.post(
                "/api/v1/metrics",
                json={"type": "effort", "value": value, "notes": "steady"},
                headers=self.headers,
            )
            self.assertEqual(resp.status_code, 200, resp.text)
        self.assertIn("createdAt", resp.json())
        self.assertIn("userId", resp.json())

        listed = self.client.get("/api/v1/metrics", headers=self.headers).json()
        self.assertEqual([m["value"] for m in listed], [5, 7])

        analysis = self.client.get("/api/v1/metrics/analysis", headers=self.headers)
        self.assertEqual(analysis.status_code, 200, analysis.text)
        effort = analysis.json()["metrics"]["effort"]
        self.assertEqual(effort["change"], 0)
        self.assertEqual(effort["trend"], "stable")
        self.assertEqual(effort["averageValue"], 6)
        self.assertEqual(len(analysis.json()["topGrowthAreas"]), 1)

    def test_date_range_requires_both_bounds(self) -> None:
        resp = self.client.get(
            "/api/v1/metrics",
            params={"startDate": "2025-01-01T00:00:00Z"},
            headers=self.headers,
        )
        self.assertError(resp, 400, "VALIDATION_ERROR")


class TestJournalRoutes(ApiTestCase):
    def test_entries_are_scoped_to_journal_owner(self) -> None:
        owner = self.auth_headers(self.signup("owner@example.com"))
        other = self.auth_headers(self.signup("other@example.com"))
        journal = self.client.post("/api/v1/journals", json={"title": "Daily"}, headers=owner).json()

        resp = self.client.post(
            f"/api/v1/journals/{journal['id']}/entries",
            json={"content": "A good day."},
            headers=owner,
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["sentimentScore"], 1.0)

        forbidden = self.client.get(f"/api/v1/journals/{journal['id']}/entries", headers=other)
        self.assertError(forbidden, 403, "AUTHORIZATION_ERROR")
        self.assertEqual(self.client.get("/api/v1/journals", headers=other).json(), [])


class TestSettingsAndProfileRoutes(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.auth_headers(self.signup())

    def test_settings_patch_round_trip(self) -> None:
        defaults = self.client.get("/api/v1/settings", headers=self.headers).json()
        self.assertEqual(defaults["themePreferences"], {"mode": "light"})

        resp = self.client.patch(
            "/api/v1/settings",
            json={"themePreferences": {"mode": "dark"}},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["themePreferences"], {"mode": "dark"})
        self.assertEqual(resp.json()["notificationPreferences"], defaults["notificationPreferences"])

    def test_user_info_lifecycle(self) -> None:
        self.assertError(
            self.client.get("/api/v1/user-info", headers=self.headers), 404, "NOT_FOUND"
        )
        body = {"firstName": "Ada", "lastName": "Lovelace", "timezone": "UTC"}
        created = self.client.post("/api/v1/user-info", json=body, headers=self.headers)
        self.assertEqual(created.status_code, 200, created.text)
        self.assertEqual(created.json()["growthGoals"], {"shortTerm": [], "longTerm": []})
        self.assertError(
            self.client.post("/api/v1/user-info", json=body, headers=self.headers), 409, "CONFLICT"
        )
        deleted = self.client.delete("/api/v1/user-info", headers=self.headers)
        self.assertEqual(deleted.json(), {"success": True})


class TestAiRoutes(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.headers = self.auth_headers(self.signup())

    def test_analyze_entry(self) -> None:
        resp = self.client.post(
            "/api/v1/ai/analyze",
            json={"content": "I learned a lot and feel proud."},
            headers=self.headers,
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["sentiment"]["label"], "positive")
        self.assertIn("growthIndicators", resp.json())

    def test_chat_without_llm_is_service_error(self) -> None:
        resp = self.client.post("/api/v1/ai/chat", json={"message": "Hi"}, headers=self.headers)
        self.assertError(resp, 500, "AI_SERVICE_ERROR")

    def test_graph_without_memory_is_service_error(self) -> None:
        resp = self.client.post("/api/v1/ai/graph", json={"data": {"a": 1}}, headers=self.headers)
        self.assertError(resp, 500, "AI_SERVICE_ERROR")
