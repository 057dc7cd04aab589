"""Utility helpers for the info service.

Builds the static response entities from the loaded settings and sets up
the stdout logger shared by the app and its entry points.
"""

import logging
import sys

from info_service.dto.api_info import ApiInfo
from info_service.dto.hello_world import HelloWorld
from info_service.settings import settings


def get_api_info() -> ApiInfo:
    """Return general information about the API.

    Used by the `/` and `/get-api-info` endpoints.

    Returns:
        ApiInfo: Service name, version and description.
    """
    return ApiInfo(name=settings.INFO_SERVICE_NAME,
                   version=settings.INFO_SERVICE_VERSION,
                   description=settings.INFO_SERVICE_DESCRIPTION)


def get_hello_world() -> HelloWorld:
    """Return the greeting served by the versioned `/hello-world` endpoint."""
    return HelloWorld(message=settings.INFO_SERVICE_GREETING)


def setup_logging(component_name: str = "info_service", log_level: int = 20) -> logging.Logger:
    """Configure a logger that writes to stdout with a consistent format.

    Args:
        component_name: Logger name to configure.
        log_level: Logging level to set on the logger and handler.

    Returns:
        logging.Logger: Configured logger instance.
    """
    root_logger = logging.getLogger(component_name)
    root_logger.setLevel(level=log_level)
    root_logger.propagate = False

    # reuse an existing stdout handler, only its level may change between calls
    for h in root_logger.handlers:
        if isinstance(h, logging.StreamHandler):
            h.setLevel(level=log_level)
            return root_logger

    log_format = '[%(asctime)s] [%(levelname)s] %(name)s: %(message)s'
    log_handler = logging.StreamHandler(sys.stdout)
    log_handler.setFormatter(logging.Formatter(fmt=log_format))
    log_handler.setLevel(level=log_level)
    root_logger.addHandler(log_handler)

    return root_logger
