"""
Shared fixtures.

Unit tests never touch the network: request shapes are checked with
botocore's Stubber and behavioural properties (round trips, overwrite,
delete) run against a small in-memory stand-in for the S3 client.
"""
import io
import logging

import pytest
from botocore.exceptions import ClientError
from botocore.response import StreamingBody
from botocore.stub import Stubber

from r2_operator.config.client_config import ClientConfig
from r2_operator.storage.operator import R2Operator

BUCKET = "test-bucket"
ENDPOINT = "https://0123456789abcdef.r2.cloudflarestorage.com"


def streaming_body(data: bytes) -> StreamingBody:
    return StreamingBody(io.BytesIO(data), len(data))


class InMemoryS3Client:
    """Keeps objects per bucket and answers put/get/delete like R2 does."""

    def __init__(self):
        self.objects: dict[tuple[str, str], tuple[bytes, str]] = {}
        self.calls: list[str] = []

    def put_object(self, Bucket, Key, Body, ContentType):
        self.calls.append("put_object")
        self.objects[(Bucket, Key)] = (bytes(Body), ContentType)
        return {"ETag": '"etag"'}

    def get_object(self, Bucket, Key):
        self.calls.append("get_object")
        try:
            body, content_type = self.objects[(Bucket, Key)]
        except KeyError:
            raise ClientError(
                {
                    "Error": {"Code": "NoSuchKey", "Message": "The specified key does not exist."},
                    "ResponseMetadata": {"HTTPStatusCode": 404},
                },
                "GetObject",
            ) from None
        return {"Body": streaming_body(body), "ContentType": content_type, "ContentLength": len(body)}

    def delete_object(self, Bucket, Key):
        self.calls.append("delete_object")
        self.objects.pop((Bucket, Key), None)
        return {}


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(
        bucket_name=BUCKET,
        access_key_id="test-access-key",
        secret_access_key="test-secret-key",
        endpoint=ENDPOINT,
    )


@pytest.fixture
def operator(client_config) -> R2Operator:
    return R2Operator(client_config)


@pytest.fixture
def stubber(operator):
    with Stubber(operator.client) as stub:
        yield stub
        stub.assert_no_pending_responses()


@pytest.fixture
def memory_client() -> InMemoryS3Client:
    return InMemoryS3Client()


@pytest.fixture
def memory_operator(client_config, memory_client) -> R2Operator:
    return R2Operator(client_config, client=memory_client)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


R2_ENV_VARS = (
    "R2_BUCKET_NAME", "BUCKET_NAME",
    "R2_ACCESS_KEY_ID", "ACCESS_KEY_ID",
    "R2_SECRET_ACCESS_KEY", "SECRET_ACCESS_KEY",
    "R2_ENDPOINT_URL", "ENDPOINT_URL",
    "R2_REGION", "REGION",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in R2_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
