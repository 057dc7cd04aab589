import unittest
from unittest.mock import patch
from wsgiref.util import setup_testing_defaults

import wsgi


class StartResponse:
    def __init__(self) -> None:
        self.status = ""
        self.headers: list[tuple[str, str]] = []

    def __call__(self, status, headers, exc_info=None):
        self.status = status
        self.headers = headers


def call_app(path: str, method: str = "GET") -> tuple[StartResponse, bytes]:
    environ = {"PATH_INFO": path, "REQUEST_METHOD": method}
    setup_testing_defaults(environ)
    start_response = StartResponse()
    body = b"".join(wsgi.app(environ, start_response))
    return start_response, body


class TestWsgiApp(unittest.TestCase):
    def test_routes_are_served_through_bridge(self):
        start_response, body = call_app("/api/v1/hello-world")
        self.assertTrue(start_response.status.startswith("200"))
        self.assertEqual(body, b'{"message":"Hello, World!"}')

    def test_root_and_get_api_info_match(self):
        _, root = call_app("/")
        _, info = call_app("/get-api-info")
        self.assertEqual(root, info)

    def test_unmatched_paths_return_framework_404(self):
        for path in ("/nonexistent", "/etc/passwd"):
            with self.subTest(path=path):
                start_response, body = call_app(path)
                self.assertTrue(start_response.status.startswith("404"))
                self.assertEqual(body, b'{"detail":"Not Found"}')

    def test_unexpected_error_returns_500(self):
        with patch.object(wsgi, "asgi_middleware", side_effect=RuntimeError("boom")):
            with self.assertLogs("info_service", level="ERROR"):
                start_response, body = call_app("/get-api-info")
        self.assertEqual(start_response.status, "500 Internal Server Error")
        self.assertEqual(body, b"Internal Server Error")
