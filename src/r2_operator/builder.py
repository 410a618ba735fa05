from __future__ import annotations
from typing import TYPE_CHECKING

from r2_operator.config.client_config import DEFAULT_REGION, ClientConfig
from r2_operator.storage.operator import R2Operator

if TYPE_CHECKING:
    from r2_operator.config.settings import R2Settings


class Builder:
    """
    Fluent builder for an R2Operator.

        operator = (
            Builder()
            .set_bucket_name("bucket")
            .set_access_key_id("access_key_id")
            .set_secret_access_key("secret_access_key")
            .set_endpoint("https://<account_id>.r2.cloudflarestorage.com")
            .create_client()
        )

    Setters store values as given; nothing is checked until the builder is
    finalized with build_config() or create_client().
    """

    def __init__(self):
        self.bucket_name: str | None = None
        self.access_key_id: str | None = None
        self.secret_access_key: str | None = None
        self.endpoint: str | None = None
        self.region: str | None = None

    @classmethod
    def from_settings(cls, settings: R2Settings) -> Builder:
        builder = cls()
        builder.bucket_name = settings.bucket_name
        builder.access_key_id = settings.access_key_id
        builder.secret_access_key = settings.secret_access_key
        builder.endpoint = settings.endpoint_url
        builder.region = settings.region
        return builder

    def set_bucket_name(self, value: str) -> Builder:
        self.bucket_name = value
        return self

    def set_access_key_id(self, value: str) -> Builder:
        self.access_key_id = value
        return self

    def set_secret_access_key(self, value: str) -> Builder:
        self.secret_access_key = value
        return self

    def set_endpoint(self, value: str) -> Builder:
        self.endpoint = value
        return self

    def set_region(self, value: str) -> Builder:
        self.region = value
        return self

    def build_config(self) -> ClientConfig:
        return ClientConfig(
            bucket_name=self.bucket_name,
            access_key_id=self.access_key_id,
            secret_access_key=self.secret_access_key,
            endpoint=self.endpoint,
            region=self.region or DEFAULT_REGION,
        )

    def create_client(self) -> R2Operator:
        return R2Operator(self.build_config())
