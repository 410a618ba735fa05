from __future__ import annotations
from enum import Enum

from botocore.exceptions import BotoCoreError, ClientError, ParamValidationError

NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})
ACCESS_DENIED_CODES = frozenset({"403", "AccessDenied", "InvalidAccessKeyId", "SignatureDoesNotMatch"})


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    ACCESS_DENIED = "access_denied"
    SERVICE = "service"
    INVALID_REQUEST = "invalid_request"
    TRANSPORT = "transport"
    IO = "io"


class ConfigField(str, Enum):
    BUCKET_NAME = "bucket_name"
    ACCESS_KEY_ID = "access_key_id"
    SECRET_ACCESS_KEY = "secret_access_key"
    ENDPOINT = "endpoint"


class ConfigurationError(ValueError):
    """Raised when a client is finalized without every required field."""

    def __init__(self, missing_fields: tuple[ConfigField, ...]):
        self.missing_fields = missing_fields
        names = ", ".join(field.value for field in missing_fields)
        super().__init__(f"R2 client configuration is incomplete, missing: {names}")


def error_code(exc: BaseException | None) -> str | None:
    if isinstance(exc, ClientError):
        return exc.response.get("Error", {}).get("Code")
    return None


def classify(exc: BaseException) -> ErrorKind:
    if isinstance(exc, ClientError):
        code = error_code(exc)
        if code in NOT_FOUND_CODES:
            return ErrorKind.NOT_FOUND
        if code in ACCESS_DENIED_CODES:
            return ErrorKind.ACCESS_DENIED
        return ErrorKind.SERVICE
    # Raised by botocore before anything is sent.
    if isinstance(exc, ParamValidationError):
        return ErrorKind.INVALID_REQUEST
    if isinstance(exc, BotoCoreError):
        return ErrorKind.TRANSPORT
    if isinstance(exc, OSError):
        return ErrorKind.IO
    return ErrorKind.SERVICE


class R2OperationError(Exception):
    """
    Base class for failed object operations.

    `kind` tells callers which category the failure falls into so they can
    branch without matching on message text. `cause` is the exception raised
    by botocore (or the filesystem) and is also chained as `__cause__`.
    """

    operation = "operation"

    def __init__(self, key: str, cause: BaseException, kind: ErrorKind | None = None):
        self.key = key
        self.cause = cause
        self.kind = kind or classify(cause)
        super().__init__(f"R2 {self.operation} failed for key {key!r} ({self.kind.value}): {cause}")

    @property
    def code(self) -> str | None:
        return error_code(self.cause)


class UploadError(R2OperationError):
    operation = "upload"


class LocalFileError(UploadError):
    """The local file handed to `upload_file` could not be read."""

    def __init__(self, key: str, path: str, cause: OSError):
        self.path = path
        super().__init__(key, cause, kind=ErrorKind.IO)


class DownloadError(R2OperationError):
    operation = "download"


class DeleteError(R2OperationError):
    operation = "delete"
