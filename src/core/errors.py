"""Resource-id exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure kind raises a specific error type for debuggability.
"""

from __future__ import annotations


class ResourceIdError(Exception):
    """Base exception for all resource-id failures."""


class InvalidUriError(ResourceIdError):
    """Raised when a URI has the wrong scheme or no bucket."""


class IllegalArgumentError(ResourceIdError):
    """Raised for inconsistent arguments such as a directory path resolved as a file."""


class InvalidBucketNameError(IllegalArgumentError):
    """Raised when opt-in bucket-name validation rejects a name."""


class IllegalStateError(ResourceIdError):
    """Raised when a non-directory resource is used as a resolution base."""


class ResourceIdConfigError(ResourceIdError):
    """Raised for invalid runtime configuration."""


class ResourceIdConformanceError(ResourceIdError):
    """Raised when a resource-id implementation breaks the conformance battery."""
