"""Unit tests for the config-aware resource id factory."""

from __future__ import annotations

import re

import pytest

from core.config import ResourceIdConfig
from core.errors import IllegalArgumentError, InvalidBucketNameError, InvalidUriError
from core.resource_factory import S3ResourceIdFactory
from core.resource_id import S3ResourceId


def test_from_uri_without_validation_accepts_underscore() -> None:
    """Default config should leave bucket names alone."""
    factory = S3ResourceIdFactory(ResourceIdConfig())

    assert factory.from_uri("s3://my_bucket/a").bucket == "my_bucket"


def test_from_uri_with_validation_rejects_underscore() -> None:
    """Enabled validation should reject underscores."""
    factory = S3ResourceIdFactory(ResourceIdConfig(validate_bucket_names=True))

    with pytest.raises(InvalidBucketNameError):
        factory.from_uri("s3://my_bucket/a")


def test_from_components_with_validation_rejects_separator() -> None:
    """Enabled validation should reject '/' in bucket names."""
    factory = S3ResourceIdFactory(ResourceIdConfig(validate_bucket_names=True))

    with pytest.raises(InvalidBucketNameError):
        factory.from_components("invalid/", "")


def test_from_uri_propagates_parse_errors() -> None:
    """Malformed URIs should surface unchanged."""
    factory = S3ResourceIdFactory(ResourceIdConfig())

    with pytest.raises(InvalidUriError):
        factory.from_uri("gs://bucket/a")


def test_match_new_resource_directory_appends_separator() -> None:
    """Directory requests should end in '/'."""
    factory = S3ResourceIdFactory(ResourceIdConfig())

    resource = factory.match_new_resource("s3://bucket/out", is_directory=True)

    assert resource == S3ResourceId.from_components("bucket", "out/")
    assert factory.match_new_resource("s3://bucket/out/", is_directory=True) == resource


def test_match_new_resource_file_with_directory_path_raises() -> None:
    """File requests cannot end in '/'."""
    factory = S3ResourceIdFactory(ResourceIdConfig())

    with pytest.raises(IllegalArgumentError, match=re.escape("[s3://bucket/out/]")):
        factory.match_new_resource("s3://bucket/out/", is_directory=False)


def test_match_new_resource_file_returns_file() -> None:
    """File requests should parse as given."""
    factory = S3ResourceIdFactory(ResourceIdConfig())

    resource = factory.match_new_resource("s3://bucket/out/part-0.csv", is_directory=False)

    assert not resource.is_directory()
    assert resource.get_filename() == "part-0.csv"


def test_factories_honour_their_own_log_levels(capsys: pytest.CaptureFixture[str]) -> None:
    """Each factory should log at the level of its own config."""
    debug_factory = S3ResourceIdFactory(ResourceIdConfig(log_level="debug"))
    error_factory = S3ResourceIdFactory(ResourceIdConfig(log_level="error"))

    error_factory.from_uri("s3://bucket/quiet")
    debug_factory.from_uri("s3://bucket/a")

    output = capsys.readouterr().out
    assert "resource_id_created" in output
    assert "s3://bucket/a" in output
    assert "s3://bucket/quiet" not in output
