from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from r2_operator.config.client_config import DEFAULT_REGION


class R2Settings(BaseSettings):
    """R2 connection settings read from the environment and an optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    bucket_name: Optional[str] = Field(default=None, validation_alias=AliasChoices("R2_BUCKET_NAME", "BUCKET_NAME"))
    access_key_id: Optional[str] = Field(default=None, validation_alias=AliasChoices("R2_ACCESS_KEY_ID", "ACCESS_KEY_ID"))
    secret_access_key: Optional[str] = Field(
        default=None,
        repr=False,
        validation_alias=AliasChoices("R2_SECRET_ACCESS_KEY", "SECRET_ACCESS_KEY"),
    )
    endpoint_url: Optional[str] = Field(default=None, validation_alias=AliasChoices("R2_ENDPOINT_URL", "ENDPOINT_URL"))
    region: str = Field(default=DEFAULT_REGION, validation_alias=AliasChoices("R2_REGION", "REGION"))

    @property
    def is_complete(self) -> bool:
        return all([self.bucket_name, self.access_key_id, self.secret_access_key, self.endpoint_url])
