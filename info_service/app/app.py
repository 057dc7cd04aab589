from fastapi import FastAPI
from fastapi.responses import ORJSONResponse
from fastapi.routing import APIRoute

from info_service.api.api import api
from info_service.settings import settings
from info_service.utils.utils import setup_logging


def create_app() -> FastAPI:
    """
        :description: Creates FastAPI application with the info, hello and health routers
        :return: FastAPI application instance
    """

    log = setup_logging("info_service", settings.LOG_LEVEL)

    app = FastAPI(title=settings.INFO_SERVICE_NAME,
                  description=settings.INFO_SERVICE_DESCRIPTION,
                  version=settings.INFO_SERVICE_VERSION,
                  default_response_class=ORJSONResponse,
                  debug=settings.DEBUG_MODE)
    app.include_router(api)

    for route in app.routes:
        if isinstance(route, APIRoute):
            log.info("ROUTE REGISTERED: %s %s", ",".join(sorted(route.methods)), route.path)

    log.info("STARTED %s VERSION: %s", settings.INFO_SERVICE_NAME, settings.INFO_SERVICE_VERSION)

    return app
