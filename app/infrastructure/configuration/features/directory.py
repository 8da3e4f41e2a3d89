"""Directory membership feature settings."""

from pydantic import Field, field_validator
import structlog

from infrastructure.configuration.base import FeatureSettings

logger = structlog.stdlib.get_logger().bind(component="config.directory")

SUPPORTED_PROVIDERS = ("google", "graph")


class DirectoryFeatureSettings(FeatureSettings):
    """Configuration for directory lookups and membership checks.

    Environment Variables:
        DIRECTORY_PROVIDER: Directory backend to use ("google" or "graph")
        DIRECTORY_PAGE_SIZE: Page size requested from the directory (1-999)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        if settings.directory.provider == "graph":
            ...
        ```
    """

    provider: str = Field(default="google", alias="DIRECTORY_PROVIDER")
    page_size: int = Field(default=100, alias="DIRECTORY_PAGE_SIZE", ge=1, le=999)

    @field_validator("provider", mode="before")
    @classmethod
    def _validate_provider(cls, v: str) -> str:
        value = (v or "").strip().lower()
        if value not in SUPPORTED_PROVIDERS:
            logger.error("unsupported_directory_provider", provider=v)
            raise ValueError(
                f"DIRECTORY_PROVIDER must be one of {', '.join(SUPPORTED_PROVIDERS)}"
            )
        return value
