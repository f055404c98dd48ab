"""S3 resource identifiers.

An ``S3ResourceId`` names an object or a key prefix as ``s3://bucket/key``.
A key that is empty or ends with ``/`` denotes a directory. All derived
identifiers are new instances; nothing here performs I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import ClassVar

from core.bucket_names import require_bucket, validate_bucket_name
from core.constants import PARENT_DIRECTORY, PATH_SEPARATOR, S3_SCHEME, S3_URI_PREFIX
from core.errors import IllegalArgumentError, IllegalStateError, InvalidUriError
from core.types import RESOLVE_FILE, SUPPORTED_RESOLVE_OPTIONS, ResolveOption
from core.wildcards import is_wildcard, matches_glob, non_wildcard_prefix


@dataclass(frozen=True, order=True)
class S3ResourceId:
    """Immutable S3 bucket and key pair.

    Attributes:
        bucket: Bucket name, never empty.
        key: Object key, possibly empty, never starting with ``/``.
        size: Optional object size in bytes; ignored by equality.
        last_modified: Optional modification time; ignored by equality.
    """

    SCHEME: ClassVar[str] = S3_SCHEME

    bucket: str
    key: str
    size: int | None = field(default=None, compare=False)
    last_modified: datetime | None = field(default=None, compare=False)

    @classmethod
    def from_uri(cls, uri: str, *, validate_bucket: bool = False) -> "S3ResourceId":
        """Parse an ``s3://bucket/key`` URI.

        Args:
            uri: URI string.
            validate_bucket: Apply bucket-name validation.

        Returns:
            Parsed resource id. The key keeps every character of the input.

        Raises:
            InvalidUriError: If the scheme is wrong or the bucket is missing.
        """
        if not uri.startswith(S3_URI_PREFIX):
            raise InvalidUriError(f"Invalid S3 URI: [{uri}]")
        remainder = uri[len(S3_URI_PREFIX) :]
        if not remainder or remainder.startswith(PATH_SEPARATOR):
            raise InvalidUriError(f"Invalid S3 URI: [{uri}]")
        bucket, _, key = remainder.partition(PATH_SEPARATOR)
        if key.startswith(PATH_SEPARATOR):
            raise InvalidUriError(
                f"Invalid S3 URI: [{uri}] has an empty path segment after the bucket"
            )
        return cls.from_components(bucket, key, validate_bucket=validate_bucket)

    @classmethod
    def from_components(
        cls, bucket: str, key: str, *, validate_bucket: bool = False
    ) -> "S3ResourceId":
        """Build a resource id from a bucket and a key.

        Bucket names are accepted as given unless ``validate_bucket`` is set.

        Raises:
            IllegalArgumentError: If the bucket is empty or the key is invalid.
            InvalidBucketNameError: If validation is requested and fails.
        """
        if validate_bucket:
            validate_bucket_name(bucket)
        else:
            require_bucket(bucket)
        if key is None:
            raise IllegalArgumentError(f"Key must be a string, got [{key}] for bucket [{bucket}]")
        if key.startswith(PATH_SEPARATOR):
            raise IllegalArgumentError(f"Key must not start with '/': [{key}]")
        return cls(bucket=bucket, key=key)

    @property
    def scheme(self) -> str:
        return self.SCHEME

    def is_directory(self) -> bool:
        """Return whether this id names a bucket root or a key prefix."""
        return not self.key or self.key.endswith(PATH_SEPARATOR)

    def resolve(self, other: str, option: ResolveOption) -> "S3ResourceId":
        """Resolve a path against this directory.

        Args:
            other: Relative path, ``..``, or an absolute ``s3://`` URI.
            option: ``RESOLVE_FILE`` or ``RESOLVE_DIRECTORY``.

        Returns:
            New resource id. Absolute URIs are returned as parsed, without
            bucket-name validation; callers that validate should parse them
            through a factory.

        Raises:
            IllegalStateError: If this id is a file and ``other`` is non-empty.
            IllegalArgumentError: If ``other`` is a directory path or ``..``
                resolved as a file, or ``option`` is unsupported.
        """
        if option not in SUPPORTED_RESOLVE_OPTIONS:
            raise IllegalArgumentError(f"Unsupported resolve option: [{option}]")
        if other and not self.is_directory():
            raise IllegalStateError(
                f"Expected this resource to be a directory, but was [{self}]"
            )
        if other.startswith(S3_URI_PREFIX):
            return type(self).from_uri(other)
        if option == RESOLVE_FILE:
            if other.endswith(PATH_SEPARATOR):
                raise IllegalArgumentError(
                    f"Cannot resolve a file with a directory path: [{other}]"
                )
            if other == PARENT_DIRECTORY:
                raise IllegalArgumentError(f"Cannot resolve parent as file: [{other}]")
            return self._with_key(self.key + other)
        if not other:
            return self._with_key(self.key)
        if other == PARENT_DIRECTORY:
            return self.get_parent()
        if not other.endswith(PATH_SEPARATOR):
            other += PATH_SEPARATOR
        return self._with_key(self.key + other)

    def get_parent(self) -> "S3ResourceId":
        """Return the enclosing directory.

        The parent of the bucket root is the bucket root.
        """
        trimmed = self.key[:-1] if self.key.endswith(PATH_SEPARATOR) else self.key
        return self._with_key(_directory_part(trimmed))

    def get_current_directory(self) -> "S3ResourceId":
        if self.is_directory():
            return self
        return self._with_key(_directory_part(self.key))

    def get_filename(self) -> str | None:
        """Return the last key segment, or ``None`` for the bucket root."""
        if not self.key:
            return None
        trimmed = self.key[:-1] if self.key.endswith(PATH_SEPARATOR) else self.key
        return trimmed.rsplit(PATH_SEPARATOR, 1)[-1]

    def with_size(self, size: int) -> "S3ResourceId":
        if size < 0:
            raise IllegalArgumentError(f"Size must be non-negative, got [{size}] for [{self}]")
        return replace(self, size=size)

    def with_last_modified(self, last_modified: datetime) -> "S3ResourceId":
        return replace(self, last_modified=last_modified)

    def is_wildcard(self) -> bool:
        return is_wildcard(self.key)

    def get_key_non_wildcard_prefix(self) -> str:
        """Return the key up to its first glob character."""
        return non_wildcard_prefix(self.key)

    def matches_key(self, candidate_key: str) -> bool:
        """Return whether a listed key matches this id's key glob.

        Args:
            candidate_key: Key of an object in the same bucket.

        Returns:
            True on a full match; a non-wildcard key matches only itself.
        """
        if not self.is_wildcard():
            return candidate_key == self.key
        return matches_glob(self.key, candidate_key)

    def _with_key(self, key: str) -> "S3ResourceId":
        return type(self)(bucket=self.bucket, key=key)

    def __str__(self) -> str:
        return f"{S3_URI_PREFIX}{self.bucket}{PATH_SEPARATOR}{self.key}"


def _directory_part(key: str) -> str:
    """Return the key truncated after its last separator."""
    index = key.rfind(PATH_SEPARATOR)
    return key[: index + 1]
