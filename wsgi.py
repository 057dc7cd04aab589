"""
WSGI entry point: serves the FastAPI application through the a2wsgi bridge
"""
import logging

from a2wsgi import ASGIMiddleware

from info_service.app import create_app

log = logging.getLogger("info_service")

asgi_app = create_app()
asgi_middleware = ASGIMiddleware(asgi_app)  # type: ignore[arg-type]


def app(environ, start_response):
    try:
        return asgi_middleware(environ, start_response)
    except Exception:
        # one failing request must not take the worker down
        log.exception("unhandled error while serving %s %s",
                      environ.get("REQUEST_METHOD", ""), environ.get("PATH_INFO", ""))
        start_response("500 Internal Server Error", [("Content-Type", "text/plain")])
        return [b"Internal Server Error"]
