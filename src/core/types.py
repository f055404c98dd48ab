"""Shared typed values for resolve requests."""

from __future__ import annotations

from typing import Literal

ResolveOption = Literal["resolve_file", "resolve_directory"]

RESOLVE_FILE: ResolveOption = "resolve_file"
RESOLVE_DIRECTORY: ResolveOption = "resolve_directory"
SUPPORTED_RESOLVE_OPTIONS: tuple[ResolveOption, ...] = (RESOLVE_FILE, RESOLVE_DIRECTORY)
