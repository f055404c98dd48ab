"""Opt-in bucket-name validation.

Bucket names are accepted verbatim unless a caller asks for validation.
Only the rules below are enforced; the full S3 naming rules are not.
"""

from __future__ import annotations

from core.constants import INVALID_BUCKET_CHARACTERS
from core.errors import IllegalArgumentError, InvalidBucketNameError


def require_bucket(bucket: str | None) -> str:
    """Return a non-empty bucket name or fail.

    Raises:
        IllegalArgumentError: If the bucket is missing or empty.
    """
    if not bucket:
        raise IllegalArgumentError(f"Bucket must be a non-empty string, got [{bucket}]")
    return bucket


def validate_bucket_name(bucket: str) -> str:
    """Validate a bucket name against the supported naming rules.

    Args:
        bucket: Candidate bucket name.

    Returns:
        The unchanged bucket name.

    Raises:
        InvalidBucketNameError: If the name contains a forbidden character.
    """
    require_bucket(bucket)
    for character in INVALID_BUCKET_CHARACTERS:
        if character in bucket:
            raise InvalidBucketNameError(
                f"Invalid S3 bucket name: [{bucket}] must not contain '{character}'"
            )
    return bucket
