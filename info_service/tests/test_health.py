import unittest

from fastapi import FastAPI
from fastapi.testclient import TestClient

from info_service.api.health import health_api


class TestHealthApi(unittest.TestCase):
    def setUp(self) -> None:
        self.app = FastAPI()
        self.app.include_router(health_api)
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        self.client.close()

    def test_health_returns_healthy(self):
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_health_is_hidden_from_public_schema(self):
        schema = self.client.get("/openapi.json").json()
        self.assertNotIn("/api/health", schema["paths"])
