"""
S3 URI parsing. Single place for s3:// and http(s) endpoint handling.

Supported forms:
    s3://bucket/key
    https://bucket.s3.amazonaws.com/key              (virtual-hosted)
    https://bucket.s3-eu-west-1.amazonaws.com/key    (virtual-hosted, regional)
    https://s3.amazonaws.com/bucket/key              (path-style)
    https://s3.eu-west-1.amazonaws.com/bucket/key    (path-style, regional)

Dual-stack and accelerate endpoints and versionId are not recognised; such URIs
go through the same rules and no version information is returned.
"""

import logging
import re
from urllib.parse import parse_qs, unquote, urlsplit

from .errors import (
    InvalidArgumentTypeError,
    MalformedUriError,
    MissingBucketError,
    MissingHostError,
    NotAnS3EndpointError,
    S3UriError,
)
from .models import DEFAULT_REGION, ParsedS3Location, ParsedUri, QueryPairs

logger = logging.getLogger(__name__)

# Group 1: optional bucket label with its trailing dot. Group 2: token after "s3".
ENDPOINT_PATTERN = re.compile(r"^(.+\.)?s3[.-]([a-z0-9-]+)\.")
_GLOBAL_ENDPOINT_TOKEN = "amazonaws"
_INVALID_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _split_uri(uri: str, decode_query: bool) -> ParsedUri:
    """Decompose uri into generic components; raise MalformedUriError if invalid."""
    try:
        parts = urlsplit(uri)
        port = parts.port
    except ValueError as e:
        raise MalformedUriError(f"Invalid URI: {e}: {uri}", uri) from e
    hostname = parts.hostname or None
    host = hostname
    if hostname is not None and ":" in hostname:
        # IPv6 literal
        host = f"[{hostname}]"
    if host is not None and port is not None:
        host = f"{host}:{port}"
    query: str | QueryPairs = parts.query
    if decode_query:
        query = tuple(
            (name, tuple(values))
            for name, values in parse_qs(parts.query, keep_blank_values=True).items()
        )
    return ParsedUri(
        href=uri,
        scheme=parts.scheme,
        host=host,
        hostname=hostname,
        port=port,
        path=parts.path,
        query=query,
        fragment=parts.fragment,
    )


def _decode_key(key: str | None, uri: str) -> str | None:
    if key is None:
        return None
    if _INVALID_PERCENT_RE.search(key):
        raise MalformedUriError(
            f"Invalid S3 URI: malformed percent-encoding in key: {uri}", uri
        )
    try:
        return unquote(key, errors="strict")
    except UnicodeDecodeError as e:
        raise MalformedUriError(
            f"Invalid S3 URI: key is not valid UTF-8 once decoded: {uri}", uri
        ) from e


def _split_path_style(path: str) -> tuple[str | None, str | None]:
    """Split /bucket/key into (bucket, key); either may be None."""
    if path in ("", "/"):
        # https://s3.amazonaws.com/
        return None, None
    index = path.find("/", 1)
    if index == -1:
        # https://s3.amazonaws.com/bucket
        return path[1:], None
    if index == len(path) - 1:
        # https://s3.amazonaws.com/bucket/
        return path[1:index], None
    # https://s3.amazonaws.com/bucket/key
    return path[1:index], path[index + 1 :]


def parse(uri: str, decode_query: bool = False) -> ParsedS3Location:
    """
    Parse an S3 URI into region, bucket and key.

    Args:
        uri: s3://bucket/key, or an http(s) S3 endpoint URL in virtual-hosted
            or path-style form.
        decode_query: If True, uri.query on the result is a tuple of decoded
            (name, values) pairs instead of the raw query string.

    Returns:
        ParsedS3Location. The key is percent-decoded; bucket and key are None
        when the URI does not name them. Region defaults to DEFAULT_REGION.

    Raises:
        InvalidArgumentTypeError: uri is not a str.
        MalformedUriError: uri is not a valid URI.
        MissingBucketError: s3:// URI without a bucket.
        MissingHostError: non-s3 URI without a host.
        NotAnS3EndpointError: host is not an S3 endpoint.
    """
    if not isinstance(uri, str):
        raise InvalidArgumentTypeError(
            f"Invalid S3 URI: expected str, got {type(uri).__name__}", uri
        )
    parsed = _split_uri(uri, decode_query)

    if parsed.scheme == "s3":
        if not parsed.host:
            logger.debug("Rejected %s: no bucket", uri)
            raise MissingBucketError(f"Invalid S3 URI: no bucket: {uri}", uri)
        # s3://bucket and s3://bucket/ have no key
        key = parsed.path[1:] if len(parsed.path) > 1 else None
        logger.debug("Parsed %s as s3 scheme", uri)
        return ParsedS3Location(
            region=DEFAULT_REGION,
            bucket=parsed.host,
            key=_decode_key(key, uri),
            is_path_style=False,
            uri=parsed,
        )

    if not parsed.host:
        logger.debug("Rejected %s: no hostname", uri)
        raise MissingHostError(f"Invalid S3 URI: no hostname: {uri}", uri)

    match = ENDPOINT_PATTERN.match(parsed.host)
    if match is None:
        logger.debug("Rejected %s: host %s is not an S3 endpoint", uri, parsed.host)
        raise NotAnS3EndpointError(
            f"Invalid S3 URI: hostname does not appear to be a valid S3 endpoint: {uri}",
            uri,
        )

    prefix, token = match.group(1), match.group(2)
    if prefix is None:
        is_path_style = True
        bucket, key = _split_path_style(parsed.path)
    else:
        is_path_style = False
        bucket = prefix[:-1]
        key = parsed.path[1:] if parsed.path not in ("", "/") else None

    region = DEFAULT_REGION if token == _GLOBAL_ENDPOINT_TOKEN else token
    logger.debug(
        "Parsed %s as %s (region=%s)",
        uri,
        "path-style" if is_path_style else "virtual-hosted",
        region,
    )
    return ParsedS3Location(
        region=region,
        bucket=bucket,
        key=_decode_key(key, uri),
        is_path_style=is_path_style,
        uri=parsed,
    )


def try_parse(uri: str, decode_query: bool = False) -> ParsedS3Location | None:
    """Like parse but returns None instead of raising for invalid URIs."""
    try:
        return parse(uri, decode_query=decode_query)
    except S3UriError:
        return None
