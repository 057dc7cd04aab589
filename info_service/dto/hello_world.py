from pydantic import BaseModel, ConfigDict, Field


class HelloWorld(BaseModel):
    """Response payload for the versioned /hello-world endpoint."""

    model_config = ConfigDict(frozen=True)

    message: str = Field(..., description="Fixed greeting.")
