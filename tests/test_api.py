"""HTTP-level tests through FastAPI's TestClient: routing, gates, error envelopes, end-to-end flow."""

import unittest

from fastapi.testclient import TestClient

from coursehub.container import build_container
from coursehub.core.config import FALLBACK_JWT_SECRET, Settings
from coursehub.main import create_app

ADMIN_EMAIL = "admin@no.com"
ADMIN_PASSWORD = "admin123"


def _settings(**overrides: object) -> Settings:
    """Settings independent of the environment, with cheap bcrypt."""
    values: dict = {"BCRYPT_ROUNDS": 4, "JWT_SECRET": "test-secret"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def _bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class ApiTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.container = build_container(_settings())
        self.client = TestClient(create_app(container=self.container))

    def register(self, name: str, email: str, password: str = "secret1") -> dict:
        resp = self.client.post(
            "/auth/register", json={"name": name, "email": email, "password": password}
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["data"]

    def login(self, email: str, password: str) -> str:
        resp = self.client.post("/auth/login", json={"email": email, "password": password})
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["data"]["token"]


class TestHealthAndRouting(ApiTestCase):
    def test_health(self) -> None:
        resp = self.client.get("/health")
        self.assertEqual(resp.status_code, 200)
        body = resp.json()
        self.assertTrue(body["success"])
        self.assertEqual(body["status"], "ok")

    def test_unknown_route_envelope(self) -> None:
        resp = self.client.get("/nope")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"success": False, "message": "Route /nope not found"})


class TestAuthEndpoints(ApiTestCase):
    def test_register_response_has_no_password(self) -> None:
        data = self.register("Alice", "alice@x.com")
        self.assertEqual(data["user"]["role"], "STUDENT")
        self.assertNotIn("password", data["user"])
        self.assertNotIn("password_hash", data["user"])
        self.assertTrue(data["token"])

    def test_register_duplicate_is_400(self) -> None:
        self.register("Alice", "alice@x.com")
        resp = self.client.post(
            "/auth/register",
            json={"name": "Alice", "email": "alice@x.com", "password": "secret1"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["message"], "Email already registered")

    def test_register_validation_is_400(self) -> None:
        resp = self.client.post(
            "/auth/register", json={"name": "A", "email": "not-an-email", "password": "1"}
        )
        self.assertEqual(resp.status_code, 400)
        self.assertFalse(resp.json()["success"])

    def test_login_failures_identical(self) -> None:
        self.register("Alice", "alice@x.com")
        wrong_pw = self.client.post(
            "/auth/login", json={"email": "alice@x.com", "password": "wrong"}
        )
        unknown = self.client.post(
            "/auth/login", json={"email": "ghost@x.com", "password": "secret1"}
        )
        self.assertEqual(wrong_pw.status_code, 401)
        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(wrong_pw.json(), unknown.json())

    def test_seeded_admin_can_log_in(self) -> None:
        token = self.login(ADMIN_EMAIL, ADMIN_PASSWORD)
        me = self.client.get("/users/me", headers=_bearer(token))
        self.assertEqual(me.json()["data"]["role"], "ADMIN")


class TestGates(ApiTestCase):
    def test_missing_and_invalid_token_identical(self) -> None:
        missing = self.client.get("/users/me")
        invalid = self.client.get("/users/me", headers=_bearer("garbage"))
        self.assertEqual(missing.status_code, 401)
        self.assertEqual(invalid.status_code, 401)
        self.assertEqual(missing.json(), invalid.json())

    def test_student_cannot_create_coach(self) -> None:
        token = self.register("Alice", "alice@x.com")["token"]
        resp = self.client.post(
            "/users/coach",
            json={"name": "Carol", "email": "carol@x.com", "password": "secret1"},
            headers=_bearer(token),
        )
        self.assertEqual(resp.status_code, 403)

    def test_courses_are_public_to_read(self) -> None:
        resp = self.client.get("/courses")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"], [])
        self.assertEqual(self.client.get("/courses/missing").status_code, 404)


class TestProfile(ApiTestCase):
    def test_update_me_duplicate_email(self) -> None:
        token = self.register("Alice", "alice@x.com")["token"]
        self.register("Bob", "bob@x.com")
        resp = self.client.put("/users/me", json={"email": "bob@x.com"}, headers=_bearer(token))
        self.assertEqual(resp.status_code, 400)
        me = self.client.get("/users/me", headers=_bearer(token)).json()["data"]
        self.assertEqual(me["email"], "alice@x.com")

    def test_update_me_name(self) -> None:
        token = self.register("Alice", "alice@x.com")["token"]
        resp = self.client.put("/users/me", json={"name": "Alicia"}, headers=_bearer(token))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["data"]["name"], "Alicia")


class TestEndToEnd(ApiTestCase):
    """Register a student, promote via a coach account, create and manage courses."""

    def test_student_to_coach_course_flow(self) -> None:
        registered = self.register("Alice", "alice@x.com", "secret1")
        token = self.login("alice@x.com", "secret1")
        claim = self.container.tokens.verify(token)
        self.assertEqual(claim.role.value, "STUDENT")

        course_body = {"title": "Python 101", "description": "Intro to Python"}
        resp = self.client.post("/courses", json=course_body, headers=_bearer(token))
        self.assertEqual(resp.status_code, 403)

        # Emails are unique, so the coach account for Alice uses a second address.
        admin_token = self.login(ADMIN_EMAIL, ADMIN_PASSWORD)
        resp = self.client.post(
            "/users/coach",
            json={"name": "Alice", "email": "alice.coach@x.com", "password": "secret1"},
            headers=_bearer(admin_token),
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        coach = resp.json()["data"]
        self.assertEqual(coach["role"], "COACH")
        self.assertNotEqual(coach["id"], registered["user"]["id"])

        coach_token = self.login("alice.coach@x.com", "secret1")
        resp = self.client.post("/courses", json=course_body, headers=_bearer(coach_token))
        self.assertEqual(resp.status_code, 201, resp.text)
        course = resp.json()["data"]
        self.assertEqual(course["created_by"], coach["id"])

        other_coach = self.client.post(
            "/users/coach",
            json={"name": "Dan", "email": "dan@x.com", "password": "secret1"},
            headers=_bearer(admin_token),
        )
        self.assertEqual(other_coach.status_code, 201)
        dan_token = self.login("dan@x.com", "secret1")
        resp = self.client.put(
            f"/courses/{course['id']}", json={"title": "Mine now"}, headers=_bearer(dan_token)
        )
        self.assertEqual(resp.status_code, 403)

        resp = self.client.put(
            f"/courses/{course['id']}",
            json={"title": "Python 102", "image": "https://img.example/py.png"},
            headers=_bearer(coach_token),
        )
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json()["data"]["title"], "Python 102")
        self.assertEqual(resp.json()["data"]["image"], "https://img.example/py.png")

        resp = self.client.delete(f"/courses/{course['id']}", headers=_bearer(admin_token))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(self.client.get(f"/courses/{course['id']}").status_code, 404)


class TestFallbackSecret(unittest.TestCase):
    def test_unset_secret_uses_fallback(self) -> None:
        settings = _settings(JWT_SECRET=None)
        self.assertTrue(settings.uses_fallback_secret)
        self.assertEqual(settings.jwt_secret_value, FALLBACK_JWT_SECRET)
        container = build_container(settings)
        token = container.accounts.login(ADMIN_EMAIL, ADMIN_PASSWORD).token
        self.assertEqual(container.tokens.verify(token).email, ADMIN_EMAIL)

    def test_blank_secret_treated_as_unset(self) -> None:
        self.assertTrue(_settings(JWT_SECRET="   ").uses_fallback_secret)

    def test_bad_bcrypt_rounds_rejected(self) -> None:
        with self.assertRaises(ValueError):
            _settings(BCRYPT_ROUNDS=2)


if __name__ == "__main__":
    unittest.main()
