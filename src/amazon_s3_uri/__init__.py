"""Parse Amazon S3 URIs (s3:// and http(s) endpoints) into region, bucket and key."""

from .config import S3UriSettings, get_settings
from .errors import (
    InvalidArgumentTypeError,
    MalformedUriError,
    MissingBucketError,
    MissingHostError,
    NotAnS3EndpointError,
    S3UriError,
)
from .logging_config import configure_logging
from .models import DEFAULT_REGION, ParsedS3Location, ParsedUri
from .parser import ENDPOINT_PATTERN, parse, try_parse

__version__ = "0.1.0"
__all__ = [
    "DEFAULT_REGION",
    "ENDPOINT_PATTERN",
    "InvalidArgumentTypeError",
    "MalformedUriError",
    "MissingBucketError",
    "MissingHostError",
    "NotAnS3EndpointError",
    "ParsedS3Location",
    "ParsedUri",
    "S3UriError",
    "S3UriSettings",
    "configure_logging",
    "get_settings",
    "parse",
    "try_parse",
]
