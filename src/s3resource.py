"""Public SDK surface for S3 resource ids.

This module provides a stable import path for callers.
It re-exports the value type, its factory, and typed options.
"""

from __future__ import annotations

from core.config import ResourceIdConfig
from core.errors import (
    IllegalArgumentError,
    IllegalStateError,
    InvalidBucketNameError,
    InvalidUriError,
    ResourceIdConfigError,
    ResourceIdConformanceError,
    ResourceIdError,
)
from core.resource_factory import S3ResourceIdFactory
from core.resource_id import S3ResourceId
from core.resource_id_tester import BatteryReport, run_resource_id_battery
from core.types import RESOLVE_DIRECTORY, RESOLVE_FILE, ResolveOption

__all__ = [
    "BatteryReport",
    "IllegalArgumentError",
    "IllegalStateError",
    "InvalidBucketNameError",
    "InvalidUriError",
    "RESOLVE_DIRECTORY",
    "RESOLVE_FILE",
    "ResolveOption",
    "ResourceIdConfig",
    "ResourceIdConfigError",
    "ResourceIdConformanceError",
    "ResourceIdError",
    "S3ResourceId",
    "S3ResourceIdFactory",
    "run_resource_id_battery",
]
