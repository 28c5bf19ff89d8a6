"""Build profiler adapters - filesystem scans, build execution, reports.

Contents:
    * :mod:`.scanner` - Snapshot file modification times below a directory
    * :mod:`.build` - Run the build command through the shell
    * :mod:`.report` - Write the CSV report and render the results table
"""

from __future__ import annotations

from .build import normalize_returncode, run_build_command
from .report import CSV_HEADER, render_profile_table, write_profile_csv
from .scanner import scan_directory

__all__ = [
    "CSV_HEADER",
    "normalize_returncode",
    "render_profile_table",
    "run_build_command",
    "scan_directory",
    "write_profile_csv",
]
