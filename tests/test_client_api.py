"""Tests for acadtrack.client.api: response normalization and end-to-end calls through the ASGI app."""

import asyncio
import tempfile
import unittest
from pathlib import Path

import httpx

from acadtrack.client.api import (
    CONNECTION_ERROR_MESSAGE,
    ApiClient,
    ApiFailure,
    ApiSuccess,
    normalize_response,
)
from acadtrack.client.config import ClientSettings
from acadtrack.client.context import AuthContext
from acadtrack.client.session import SessionStore
from acadtrack.main import app
from tests.support import ADMIN_CODE, DatabaseTestCase


def _settings(session_file: Path) -> ClientSettings:
    return ClientSettings(API_URL="http://testserver", API_PREFIX="/api", SESSION_FILE=session_file)


class TestNormalizeResponse(unittest.TestCase):
    """normalize_response unwraps envelopes and converts errors into ApiFailure."""

    def test_envelope_unwrapped(self) -> None:
        resp = httpx.Response(200, json={"success": True, "message": "ok", "data": [1, 2]})
        result = normalize_response(resp)
        self.assertIsInstance(result, ApiSuccess)
        self.assertEqual(result.data, [1, 2])
        self.assertEqual(result.message, "ok")
        self.assertEqual(result.status, 200)

    def test_plain_body_passed_through(self) -> None:
        result = normalize_response(httpx.Response(200, json=[{"id": 1}]))
        self.assertTrue(result.success)
        self.assertEqual(result.data, [{"id": 1}])

    def test_dict_without_envelope_passed_through(self) -> None:
        result = normalize_response(httpx.Response(200, json={"status": "ok"}))
        self.assertEqual(result.data, {"status": "ok"})

    def test_error_message_from_body(self) -> None:
        resp = httpx.Response(403, json={"success": False, "message": "Admin access required"})
        result = normalize_response(resp)
        self.assertIsInstance(result, ApiFailure)
        self.assertEqual(result.error, "Admin access required")
        self.assertEqual(result.status, 403)

    def test_error_without_json(self) -> None:
        result = normalize_response(httpx.Response(502, text="Bad Gateway"))
        self.assertFalse(result.success)
        self.assertEqual(result.error, "HTTP Error: 502")

    def test_success_false_in_2xx_is_failure(self) -> None:
        result = normalize_response(httpx.Response(200, json={"success": False, "message": "nope"}))
        self.assertFalse(result.success)
        self.assertEqual(result.error, "nope")

    def test_non_string_error_message_falls_back_to_status(self) -> None:
        result = normalize_response(
            httpx.Response(400, json={"success": False, "message": [{"loc": "body"}]})
        )
        self.assertFalse(result.success)
        self.assertEqual(result.error, "HTTP Error: 400")
        self.assertEqual(result.status, 400)

    def test_list_of_strings_message_is_joined(self) -> None:
        result = normalize_response(httpx.Response(422, json={"message": ["a", "b"]}))
        self.assertEqual(result.error, "a; b")

    def test_non_string_message_in_2xx_is_dropped(self) -> None:
        result = normalize_response(
            httpx.Response(200, json={"success": True, "message": 5, "data": [1]})
        )
        self.assertTrue(result.success)
        self.assertEqual(result.data, [1])
        self.assertIsNone(result.message)

    def test_success_false_with_object_message_uses_default_error(self) -> None:
        result = normalize_response(
            httpx.Response(200, json={"success": False, "message": {"detail": "x"}})
        )
        self.assertFalse(result.success)
        self.assertEqual(result.error, "Request failed")


class TestNetworkFailure(unittest.TestCase):
    """Transport errors come back as ApiFailure, never as exceptions."""

    def test_connect_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async def run() -> object:
            with tempfile.TemporaryDirectory() as tmp:
                settings = _settings(Path(tmp) / "session.json")
                async with ApiClient(settings=settings, transport=httpx.MockTransport(handler)) as client:
                    return await client.list_activities()

        result = asyncio.run(run())
        self.assertIsInstance(result, ApiFailure)
        self.assertEqual(result.error, CONNECTION_ERROR_MESSAGE)
        self.assertIsNone(result.status)

    def test_bearer_header_attached_from_session(self) -> None:
        seen: dict[str, str | None] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["authorization"] = request.headers.get("authorization")
            seen["path"] = request.url.path
            return httpx.Response(200, json={"success": True, "data": []})

        async def run() -> None:
            with tempfile.TemporaryDirectory() as tmp:
                settings = _settings(Path(tmp) / "session.json")
                store = SessionStore(settings.SESSION_FILE)
                store.save("tok-123", {"id": 1, "role": "user"})
                async with ApiClient(
                    session=store, settings=settings, transport=httpx.MockTransport(handler)
                ) as client:
                    await client.list_activities()

        asyncio.run(run())
        self.assertEqual(seen["authorization"], "Bearer tok-123")
        self.assertEqual(seen["path"], "/api/activities")


class TestClientAgainstApp(DatabaseTestCase):
    """ApiClient + AuthContext driving the real app over httpx.ASGITransport."""

    def setUp(self) -> None:
        super().setUp()
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.settings = _settings(Path(self._tmp.name) / "session.json")
        self.store = SessionStore(self.settings.SESSION_FILE)

    def _client(self) -> ApiClient:
        return ApiClient(
            session=self.store,
            settings=self.settings,
            transport=httpx.ASGITransport(app=app),
        )

    def test_register_login_and_list(self) -> None:
        async def run() -> None:
            async with self._client() as client:
                registered = await client.register("A", "B", "a@b.com", "secret1")
                self.assertTrue(registered.success, registered)
                self.assertEqual(registered.status, 201)

                again = await client.register("A", "B", "a@b.com", "secret1")
                self.assertFalse(again.success)
                self.assertEqual(again.error, "Email already exists")

                context = AuthContext(self.store)
                context.initialize()
                self.assertFalse(context.logged_in)

                login = await client.login("a@b.com", "secret1")
                self.assertTrue(context.login_with(login))
                self.assertTrue(context.logged_in)
                self.assertTrue(client.is_authenticated())
                self.assertEqual(client.current_user()["email"], "a@b.com")
                self.assertFalse(client.is_admin())

                activities = await client.list_activities()
                self.assertTrue(activities.success)
                self.assertEqual(activities.data, [])

                forbidden = await client.create_activity(
                    {"title": "Quiz", "course": "MATH 1", "date": "2026-02-02"}
                )
                self.assertFalse(forbidden.success)
                self.assertEqual(forbidden.status, 403)

                client.logout()
                self.assertFalse(client.is_authenticated())
                unauthenticated = await client.list_activities()
                self.assertEqual(unauthenticated.status, 401)
                self.assertEqual(unauthenticated.error, "Not authorized, token missing")

        asyncio.run(run())

    def test_admin_crud(self) -> None:
        async def run() -> None:
            async with self._client() as client:
                await client.register("Ad", "Min", "admin@b.com", "secret1", admin_code=ADMIN_CODE)
                context = AuthContext(self.store)
                context.initialize()
                self.assertTrue(context.login_with(await client.login("admin@b.com", "secret1")))
                self.assertTrue(context.is_admin)

                created = await client.create_activity(
                    {"title": "Essay", "course": "ENG 2", "date": "2026-04-04"}
                )
                self.assertTrue(created.success, created)
                activity_id = created.data["id"]

                updated = await client.update_activity(activity_id, {"status": "Completed"})
                self.assertEqual(updated.data["status"], "Completed")
                self.assertEqual(updated.data["title"], "Essay")

                fetched = await client.get_activity(activity_id)
                self.assertEqual(fetched.data["status"], "Completed")

                users = await client.get_all_users()
                self.assertEqual(users.data["count"], 1)

                profile = await client.get_profile()
                self.assertEqual(profile.data["role"], "admin")

                deleted = await client.delete_activity(activity_id)
                self.assertTrue(deleted.success)
                self.assertEqual(deleted.message, "Activity deleted")
                missing = await client.delete_activity(activity_id)
                self.assertFalse(missing.success)
                self.assertEqual(missing.status, 404)

        asyncio.run(run())
