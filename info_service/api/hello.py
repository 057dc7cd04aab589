import logging

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from info_service.dto.hello_world import HelloWorld
from info_service.settings import settings
from info_service.utils.utils import get_hello_world

log = logging.getLogger("info_service")

hello_api = APIRouter(prefix=settings.VERSIONED_API_PREFIX, tags=["hello"])


@hello_api.get("/hello-world", response_model=HelloWorld, response_class=ORJSONResponse)
def hello_world() -> HelloWorld:
    log.debug("serving hello world")
    return get_hello_world()
