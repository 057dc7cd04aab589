from pydantic import AliasChoices, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=None, extra="ignore", validate_assignment=True)

    INFO_SERVICE_NAME: str = Field("info-service", min_length=1)
    INFO_SERVICE_VERSION: str = Field(
        "0.1.0",
        min_length=1,
        validation_alias=AliasChoices("INFO_SERVICE_VERSION", "INFO_SERVICE_IMAGE_RELEASE_VERSION"),
    )
    INFO_SERVICE_DESCRIPTION: str = Field("Static API information and hello world service")
    INFO_SERVICE_GREETING: str = Field("Hello, World!", min_length=1)

    INFO_SERVICE_API_PREFIX: str = Field("/api")
    INFO_SERVICE_API_VERSION: str = Field("v1", min_length=1)

    INFO_SERVICE_HOST: str = Field("0.0.0.0", min_length=1)
    INFO_SERVICE_PORT: int = Field(8080, ge=1, le=65535)

    INFO_SERVICE_LOG_LEVEL: int = Field(20, ge=0, le=50)
    INFO_SERVICE_DEBUG_MODE: bool = Field(False)

    @field_validator("INFO_SERVICE_API_PREFIX", mode="before")
    @classmethod
    def normalize_api_prefix(cls, value: str) -> str:
        value = "/" + str(value).strip().strip("/")
        return value if value != "/" else ""

    @field_validator("INFO_SERVICE_API_VERSION")
    @classmethod
    def validate_api_version(cls, value: str) -> str:
        value = value.strip()
        if not value or "/" in value:
            raise ValueError(f"Invalid INFO_SERVICE_API_VERSION: {value!r}")
        return value

    @computed_field  # type: ignore[prop-decorator]
    @property
    def LOG_LEVEL(self) -> int:
        # 50 - CRITICAL, 40 - ERROR, 30 - WARNING, 20 - INFO, 10 - DEBUG, 0 - NOTSET
        return self.INFO_SERVICE_LOG_LEVEL

    @computed_field  # type: ignore[prop-decorator]
    @property
    def DEBUG_MODE(self) -> bool:
        return self.INFO_SERVICE_DEBUG_MODE

    @computed_field  # type: ignore[prop-decorator]
    @property
    def VERSIONED_API_PREFIX(self) -> str:
        # e.g. /api/v1
        return f"{self.INFO_SERVICE_API_PREFIX}/{self.INFO_SERVICE_API_VERSION}"

settings = Settings() # type: ignore[call-arg]
