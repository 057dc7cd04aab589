import logging

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse

from info_service.dto.api_info import ApiInfo
from info_service.utils.utils import get_api_info

log = logging.getLogger("info_service")

info_api = APIRouter(tags=["info"])


@info_api.get("/", response_model=ApiInfo, response_class=ORJSONResponse)
def api_root() -> ApiInfo:
    log.debug("serving api info on /")
    return get_api_info()


@info_api.get("/get-api-info", response_model=ApiInfo, response_class=ORJSONResponse)
def api_info() -> ApiInfo:
    log.debug("serving api info on /get-api-info")
    return get_api_info()
