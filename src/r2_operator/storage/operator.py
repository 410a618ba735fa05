from pathlib import Path

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError
from r2_operator.config.client_config import ClientConfig
from r2_operator.errors import DeleteError, DownloadError, ErrorKind, LocalFileError, UploadError, classify
from r2_operator.logging_config import get_logger, with_context


logger = get_logger(__name__)


def create_s3_client(config: ClientConfig):
    return boto3.client(
        "s3",
        endpoint_url=config.endpoint,
        aws_access_key_id=config.access_key_id,
        aws_secret_access_key=config.secret_access_key,
        region_name=config.region,
        config=Config(signature_version="s3v4"),
    )


class R2Operator:
    """
    Upload, download and delete objects in one R2 bucket.

    Every method is a single request through the boto3 client; retries and
    connection pooling are whatever botocore does on its own.
    """

    def __init__(self, config: ClientConfig, client=None):
        self.config = config
        self.client = client or create_s3_client(config)
        self.log = with_context(logger, bucket=config.bucket_name)

    @property
    def bucket_name(self) -> str:
        return self.config.bucket_name

    def upload_binary(self, key: str, content_type: str, data: bytes) -> None:
        try:
            self.client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            self.log.exception("Failed to upload object", extra={"key": key, "content_type": content_type})
            raise UploadError(key, e) from e
        self.log.info("Uploaded object", extra={"key": key, "size": len(data), "content_type": content_type})

    def upload_file(self, key: str, content_type: str, path: str) -> None:
        """
        Read the whole file at `path` into memory and upload it under `key`.

        The file is not streamed, so its size is bounded by available memory.
        Raises LocalFileError when the file cannot be read and UploadError
        when the store rejects the request.
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            self.log.exception("Failed to read file for upload", extra={"key": key, "path": str(path)})
            raise LocalFileError(key, str(path), e) from e
        self.upload_binary(key, content_type, data)

    def download(self, key: str) -> bytes:
        try:
            response = self.client.get_object(Bucket=self.bucket_name, Key=key)
            data = response["Body"].read()
        except (ClientError, BotoCoreError) as e:
            if classify(e) is ErrorKind.NOT_FOUND:
                self.log.warning("Object not found", extra={"key": key})
            else:
                self.log.exception("Failed to download object", extra={"key": key})
            raise DownloadError(key, e) from e
        self.log.info("Downloaded object", extra={"key": key, "size": len(data)})
        return data

    def delete(self, key: str) -> None:
        try:
            self.client.delete_object(Bucket=self.bucket_name, Key=key)
        except (ClientError, BotoCoreError) as e:
            if classify(e) is ErrorKind.NOT_FOUND:
                self.log.info("Object already absent", extra={"key": key})
                return
            self.log.exception("Failed to delete object", extra={"key": key})
            raise DeleteError(key, e) from e
        self.log.info("Deleted object", extra={"key": key})
