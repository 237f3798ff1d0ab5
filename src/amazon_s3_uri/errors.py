"""
Errors raised while parsing S3 URIs.

Every error derives from S3UriError (a ValueError), so callers can catch the
whole family in one place. They signal caller input defects and are not retryable.
"""


class S3UriError(ValueError):
    """Base class for all S3 URI parsing errors."""

    def __init__(self, message: str, uri: object = None) -> None:
        super().__init__(message)
        self.uri = uri


class InvalidArgumentTypeError(S3UriError, TypeError):
    """The value passed as the URI is not a string."""


class MalformedUriError(S3UriError):
    """The string is not a valid generic URI (bad syntax, port or percent-encoding)."""


class MissingBucketError(S3UriError):
    """An s3:// URI has no bucket (empty host)."""


class MissingHostError(S3UriError):
    """An http(s) URI has no host."""


class NotAnS3EndpointError(S3UriError):
    """The host does not look like an S3 endpoint."""
