"""JSON exporter for dependency reports (machine-friendly format)."""

import json
from typing import Any, Dict, List

from report.model import DependencyReport


def to_json(
    report: DependencyReport,
    indent: int = 2,
    include_depfiles: bool = True,
) -> str:
    """
    Convert a dependency report to JSON format.

    Args:
        report: The dependency report to export.
        indent: JSON indentation level.
        include_depfiles: If True, include the per-.d-file breakdown.

    Returns:
        JSON string with a sorted "dependencies" list and, optionally, a
        "depfiles" mapping of each scanned .d file to its dependencies.
    """
    data: Dict[str, Any] = {
        "dependencies": sorted(report.dependencies),
    }

    if include_depfiles:
        # Empty .d files are kept with an empty list
        depfiles: Dict[str, List[str]] = {depfile: [] for depfile in sorted(report.depfiles)}
        for depfile, dependency in report.iter_pairs():
            depfiles[depfile].append(dependency)
        data["depfiles"] = depfiles

    return json.dumps(data, indent=indent)
