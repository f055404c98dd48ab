"""Config-aware construction of S3 resource ids.

The factory applies runtime configuration, such as bucket-name
validation, and logs every identifier it creates.
"""

from __future__ import annotations

from core.config import ResourceIdConfig
from core.constants import PATH_SEPARATOR
from core.errors import IllegalArgumentError, ResourceIdError
from core.logging_config import get_logger
from core.resource_id import S3ResourceId


class S3ResourceIdFactory:
    """Create resource ids under one runtime configuration."""

    def __init__(self, config: ResourceIdConfig) -> None:
        self._config = config
        self._logger = get_logger(__name__, config)

    @property
    def config(self) -> ResourceIdConfig:
        return self._config

    def from_uri(self, uri: str) -> S3ResourceId:
        """Parse a URI with the configured bucket validation.

        Raises:
            InvalidUriError: If the URI is malformed.
            InvalidBucketNameError: If validation is enabled and fails.
        """
        try:
            resource = S3ResourceId.from_uri(
                uri, validate_bucket=self._config.validate_bucket_names
            )
        except ResourceIdError as error:
            self._logger.warning("resource_id_rejected", uri=uri, reason=str(error))
            raise
        return self._created(resource)

    def from_components(self, bucket: str, key: str) -> S3ResourceId:
        """Build a resource id with the configured bucket validation."""
        try:
            resource = S3ResourceId.from_components(
                bucket, key, validate_bucket=self._config.validate_bucket_names
            )
        except ResourceIdError as error:
            self._logger.warning(
                "resource_id_rejected", bucket=bucket, key=key, reason=str(error)
            )
            raise
        return self._created(resource)

    def match_new_resource(self, spec: str, is_directory: bool) -> S3ResourceId:
        """Create an id for a resource that may not exist yet.

        Args:
            spec: Absolute ``s3://`` URI.
            is_directory: Whether the caller wants a directory id.

        Returns:
            Resource id; directory specs gain a trailing ``/`` when missing.

        Raises:
            IllegalArgumentError: If a file is requested with a directory path.
            InvalidUriError: If the spec is malformed.
        """
        if is_directory:
            if not spec.endswith(PATH_SEPARATOR):
                spec += PATH_SEPARATOR
        elif spec.endswith(PATH_SEPARATOR):
            raise IllegalArgumentError(
                f"Expected a file path, but [{spec}] ends with '{PATH_SEPARATOR}'"
            )
        return self.from_uri(spec)

    def _created(self, resource: S3ResourceId) -> S3ResourceId:
        self._logger.debug(
            "resource_id_created",
            uri=str(resource),
            is_directory=resource.is_directory(),
        )
        return resource
