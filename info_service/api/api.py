from fastapi import APIRouter

from info_service.api.health import health_api
from info_service.api.hello import hello_api
from info_service.api.info import info_api

api = APIRouter()

api.include_router(info_api)
api.include_router(hello_api)
api.include_router(health_api)
