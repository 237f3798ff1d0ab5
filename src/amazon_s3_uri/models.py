"""Pydantic models for parsed URIs and S3 locations."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_REGION = "us-east-1"

# Decoded query: (name, values) pairs in order of first appearance
QueryPairs = tuple[tuple[str, tuple[str, ...]], ...]


class ParsedUri(BaseModel):
    """Generic (not S3-specific) decomposition of a URI string."""

    model_config = ConfigDict(frozen=True)

    href: str = Field(..., description="The input string, as given")
    scheme: str = Field("", description="Lower-cased scheme, empty if none")
    host: str | None = Field(
        None,
        description="Lower-cased hostname plus :port when present; IPv6 kept in brackets",
    )
    hostname: str | None = None
    port: int | None = None
    path: str = Field("", description="Raw (still percent-encoded) path")
    query: str | QueryPairs = Field(
        "",
        description="Raw query string, or decoded (name, values) pairs when decode_query=True",
    )
    fragment: str = ""

    @property
    def query_params(self) -> dict[str, tuple[str, ...]]:
        """Decoded query as a new dict; empty when the query was kept raw."""
        if isinstance(self.query, str):
            return {}
        return dict(self.query)


class ParsedS3Location(BaseModel):
    """Region, bucket and key extracted from an S3 URI."""

    model_config = ConfigDict(frozen=True)

    DEFAULT_REGION: ClassVar[str] = DEFAULT_REGION

    region: str = Field(DEFAULT_REGION, description="AWS region of the endpoint")
    bucket: str | None = Field(None, description="Bucket name, None if not specified")
    key: str | None = Field(None, description="Decoded object key, None if not specified")
    is_path_style: bool = Field(
        False, description="True if the bucket is in the path, False if in the host"
    )
    uri: ParsedUri

    @property
    def s3_uri(self) -> str | None:
        """Canonical s3://bucket/key form, or None when no bucket was parsed."""
        if self.bucket is None:
            return None
        if self.key is None:
            return f"s3://{self.bucket}"
        return f"s3://{self.bucket}/{self.key}"
