"""Unit tests for opt-in bucket-name validation."""

from __future__ import annotations

import pytest

from core.bucket_names import validate_bucket_name
from core.errors import IllegalArgumentError, InvalidBucketNameError
from core.resource_id import S3ResourceId


def test_validate_bucket_name_accepts_plain_name() -> None:
    """Dashes and dots are allowed."""
    assert validate_bucket_name("my-bucket.logs") == "my-bucket.logs"


def test_validate_bucket_name_rejects_separator() -> None:
    """Bucket names cannot contain '/'."""
    with pytest.raises(InvalidBucketNameError, match="must not contain '/'"):
        validate_bucket_name("invalid/")


def test_validate_bucket_name_rejects_underscore() -> None:
    """Bucket names cannot contain '_'."""
    with pytest.raises(InvalidBucketNameError, match="must not contain '_'"):
        validate_bucket_name("invalid_bucket")


def test_from_components_validates_when_requested() -> None:
    """Validation should only run when the caller opts in."""
    with pytest.raises(IllegalArgumentError):
        S3ResourceId.from_components("invalid_bucket", "", validate_bucket=True)

    assert S3ResourceId.from_components("invalid_bucket", "").bucket == "invalid_bucket"


def test_from_uri_validates_when_requested() -> None:
    """URI parsing should forward the validation flag."""
    with pytest.raises(InvalidBucketNameError):
        S3ResourceId.from_uri("s3://my_bucket/key", validate_bucket=True)
