from pydantic import BaseModel, ConfigDict, Field


class ApiInfo(BaseModel):
    """Response payload for the / and /get-api-info endpoints."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Service name.")
    version: str = Field(..., description="Service version string.")
    description: str = Field(..., description="Short description of the API.")
