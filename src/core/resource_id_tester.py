"""Conformance battery for resource identifiers.

This module checks the path-algebra laws every resource id must obey,
starting from one directory base. It collects all failures before
raising so a broken implementation reports every violated law at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from core.constants import PARENT_DIRECTORY, PATH_SEPARATOR
from core.errors import (
    IllegalArgumentError,
    IllegalStateError,
    ResourceIdConformanceError,
)
from core.logging_config import get_logger
from core.resource_id import S3ResourceId
from core.types import RESOLVE_DIRECTORY, RESOLVE_FILE

DEFAULT_CHILD_NAMES = ("child", "child.txt", "输出 文件01.txt", "with space")


@dataclass
class BatteryReport:
    """Outcome of one battery run.

    Attributes:
        base: Directory the battery started from.
        checks_run: Number of checks executed.
        failures: Human-readable description of each failed check.
    """

    base: S3ResourceId
    checks_run: int = 0
    failures: list[str] = field(default_factory=list)

    def check(self, passed: bool, description: str) -> None:
        self.checks_run += 1
        if not passed:
            self.failures.append(description)

    def expect_error(
        self,
        error_type: type[Exception],
        action: Callable[[], object],
        description: str,
    ) -> None:
        self.checks_run += 1
        try:
            action()
        except error_type:
            return
        except Exception as error:
            self.failures.append(f"{description}: raised {type(error).__name__}: {error}")
            return
        self.failures.append(f"{description}: no {error_type.__name__} raised")


def run_resource_id_battery(
    base_directory: S3ResourceId,
    child_names: tuple[str, ...] = DEFAULT_CHILD_NAMES,
) -> BatteryReport:
    """Run every conformance check against a directory base.

    Args:
        base_directory: Directory resource to resolve children against.
        child_names: Single-segment names used as relative paths.

    Returns:
        Report with the number of checks run and no failures.

    Raises:
        ResourceIdConformanceError: If the base is not a directory, a child
            name is not a single segment, or any check fails.
    """
    if not base_directory.is_directory():
        raise ResourceIdConformanceError(
            f"Battery requires a directory base, got [{base_directory}]"
        )
    invalid_names = [
        name
        for name in child_names
        if not name or PATH_SEPARATOR in name or name == PARENT_DIRECTORY
    ]
    if invalid_names:
        raise ResourceIdConformanceError(
            f"Battery child names must be single non-empty segments, got {invalid_names}"
        )
    logger = get_logger(__name__)
    report = BatteryReport(base=base_directory)
    _check_round_trip(report, base_directory)
    report.check(
        base_directory.resolve("", RESOLVE_DIRECTORY) == base_directory,
        f"Resolving '' against [{base_directory}] should be a no-op",
    )
    report.check(
        base_directory.get_current_directory() == base_directory,
        f"Current directory of [{base_directory}] should be itself",
    )
    for name in child_names:
        _check_child(report, base_directory, name)
    report.expect_error(
        IllegalArgumentError,
        lambda: base_directory.resolve(PARENT_DIRECTORY, RESOLVE_FILE),
        "Resolving '..' as a file should fail",
    )
    logger.info(
        "resource_id_battery_finished",
        base=str(base_directory),
        checks_run=report.checks_run,
        failures=len(report.failures),
    )
    if report.failures:
        raise ResourceIdConformanceError(
            f"Resource id battery failed for [{base_directory}]: " + "; ".join(report.failures)
        )
    return report


def _check_round_trip(report: BatteryReport, resource: S3ResourceId) -> None:
    reparsed = S3ResourceId.from_uri(str(resource))
    report.check(reparsed == resource, f"[{resource}] should round-trip through its URI")
    report.check(
        hash(reparsed) == hash(resource),
        f"[{resource}] should hash equal to its reparsed copy",
    )


def _check_child(report: BatteryReport, base: S3ResourceId, name: str) -> None:
    as_file = base.resolve(name, RESOLVE_FILE)
    as_directory = base.resolve(name, RESOLVE_DIRECTORY)
    _check_round_trip(report, as_file)
    _check_round_trip(report, as_directory)
    report.check(not as_file.is_directory(), f"[{as_file}] should be a file")
    report.check(as_directory.is_directory(), f"[{as_directory}] should be a directory")
    report.check(
        as_file != as_directory,
        f"File and directory forms of [{name}] should differ",
    )
    report.check(
        str(as_directory) == str(as_file) + PATH_SEPARATOR,
        f"Directory form of [{name}] should only add a trailing separator",
    )
    report.check(as_file.get_filename() == name, f"Filename of [{as_file}] should be [{name}]")
    report.check(
        as_directory.get_filename() == name,
        f"Filename of [{as_directory}] should be [{name}]",
    )
    report.check(
        as_file.get_current_directory() == base,
        f"Current directory of [{as_file}] should be [{base}]",
    )
    report.check(
        as_directory.resolve(PARENT_DIRECTORY, RESOLVE_DIRECTORY) == base,
        f"'..' from [{as_directory}] should return to [{base}]",
    )
    report.check(
        base.resolve(str(as_file), RESOLVE_DIRECTORY) == as_file,
        f"Absolute [{as_file}] should override the base",
    )
    report.expect_error(
        IllegalStateError,
        lambda: as_file.resolve(name, RESOLVE_FILE),
        f"Resolving against file [{as_file}] should fail",
    )
    report.expect_error(
        IllegalArgumentError,
        lambda: base.resolve(name + PATH_SEPARATOR, RESOLVE_FILE),
        f"Resolving [{name}/] as a file should fail",
    )
