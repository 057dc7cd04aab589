"""
This file is used to create a FastAPI application that will be served by a ASGI server
"""
import uvicorn

from info_service.app import create_app
from info_service.settings import settings

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host=settings.INFO_SERVICE_HOST, port=settings.INFO_SERVICE_PORT, reload=False)
