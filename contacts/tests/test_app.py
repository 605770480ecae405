import unittest
from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from contacts.app import create_app
from contacts.config import Settings
from contacts.db import InMemoryCollection


class ContactApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.collection = InMemoryCollection()
        cls.client = TestClient(create_app(collection=cls.collection))

    def setUp(self):
        self.collection.reset()

    def test_create_list_delete_flow(self):
        response = self.client.post("/contact", json={"name": "John Doe"})
        self.assertEqual(response.status_code, 200)
        created = response.json()
        self.assertEqual(created["name"], "John Doe")
        self.assertTrue(created["contactId"])
        self.assertTrue(created["created"].endswith("Z"))
        self.assertNotIn("deleted", created)

        list_resp = self.client.get("/contact")
        self.assertEqual(list_resp.status_code, 200)
        self.assertEqual(list_resp.json(), [created])

        delete_resp = self.client.delete(f"/contact/{created['contactId']}")
        self.assertEqual(delete_resp.status_code, 204)
        self.assertEqual(delete_resp.content, b"")

        get_resp = self.client.get(f"/contact/{created['contactId']}")
        self.assertEqual(get_resp.status_code, 200)
        self.assertEqual(get_resp.json(), {**created, "deleted": True})

    def test_update_forces_path_id(self):
        response = self.client.put(
            "/contact/abc",
            json={"contactId": "other", "name": "Jane", "email": "jane@example.com"},
        )
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["contactId"], "abc")
        self.assertEqual(payload["email"], "jane@example.com")
        self.assertIn("abc", self.collection.documents)
        self.assertNotIn("other", self.collection.documents)

    def test_camel_case_fields_are_stored(self):
        self.client.post(
            "/contact",
            json={
                "contactId": "c1",
                "lastName": "Doe",
                "phoneNumber": "555",
                "description": "friend",
                "unknownField": "ignored",
            },
        )
        stored = self.collection.documents["c1"]
        self.assertEqual(stored["lastName"], "Doe")
        self.assertEqual(stored["phoneNumber"], "555")
        self.assertNotIn("unknownField", stored)

    def test_get_missing_contact_returns_empty_body(self):
        response = self.client.get("/contact/missing")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b"")

    def test_delete_missing_contact(self):
        response = self.client.delete("/contact/missing")
        self.assertEqual(response.status_code, 204)
        self.assertEqual(self.client.get("/contact").json(), [])


class ContactApiStoreFailureTests(unittest.TestCase):
    def setUp(self):
        collection = MagicMock()
        error = RuntimeError("store unavailable")
        collection.get.side_effect = error
        collection.set.side_effect = error
        collection.update.side_effect = error
        collection.stream.side_effect = error
        self.client = TestClient(create_app(collection=collection))

    def test_list_returns_empty_array(self):
        response = self.client.get("/contact")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])

    def test_get_returns_empty_body(self):
        response = self.client.get("/contact/c1")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b"")

    def test_create_returns_empty_body(self):
        response = self.client.post("/contact", json={"name": "A"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b"")

    def test_update_returns_empty_body(self):
        response = self.client.put("/contact/c1", json={"name": "A"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content, b"")

    def test_delete_still_returns_no_content(self):
        response = self.client.delete("/contact/c1")
        self.assertEqual(response.status_code, 204)


class ContactApiPrefixTests(unittest.TestCase):
    @patch("contacts.app.get_settings")
    def test_routes_mount_under_api_prefix(self, mock_settings):
        mock_settings.return_value = Settings(api_prefix="/api")
        client = TestClient(create_app(collection=InMemoryCollection()))

        created = client.post("/api/contact", json={"contactId": "c1", "name": "A"})
        self.assertEqual(created.status_code, 200)
        self.assertEqual(created.json()["contactId"], "c1")
        self.assertEqual(client.get("/api/contact/c1").json()["name"], "A")
        self.assertEqual(client.get("/contact").status_code, 404)


if __name__ == "__main__":
    unittest.main()
