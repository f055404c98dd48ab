"""Core constants used across resource-id modules.

This module centralizes scheme tokens and path markers.
Keeping values here avoids magic literals in path algebra.
"""

from __future__ import annotations

S3_SCHEME = "s3"
SCHEME_SEPARATOR = "://"
S3_URI_PREFIX = f"{S3_SCHEME}{SCHEME_SEPARATOR}"
PATH_SEPARATOR = "/"
PARENT_DIRECTORY = ".."
WILDCARD_CHARACTERS = ("*", "?", "[")
RECURSIVE_WILDCARD = "**"
INVALID_BUCKET_CHARACTERS = ("/", "_")
VALIDATE_BUCKET_NAMES_ENV = "S3RESOURCE_VALIDATE_BUCKET_NAMES"
LOG_LEVEL_ENV = "S3RESOURCE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "info"
SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")
TRUE_VALUES = ("1", "true", "yes")
FALSE_VALUES = ("0", "false", "no", "")
