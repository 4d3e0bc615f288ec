"""
Baseline comparison utilities for generated spreadsheet packages.

Compares generated output against stored baselines by text, after
stripping parts that legitimately differ between runs.

Philosophy:
- Compare TEXT, not a parsed document model
- Normalize variable elements (column widths, GUIDs)
- Human-readable locator of the first difference on failure

Safety Features:
- Conflicting rewrites fail loudly instead of overwriting
- Contract violations (None stream, stream not at 0) fail immediately
- Baselines are read only, never updated
"""

from .compare import (
    ComparisonResult,
    StreamComparer,
    assert_streams_match,
    compare,
    decode_stream,
)
from .diff import DiffReport, find_divergence_index, locate_and_report, locate_divergence
from .normalize import (
    NormalizationResult,
    NormalizationStats,
    TextNormalizer,
    normalize_text,
)
from .package import (
    PackageComparer,
    PackageComparison,
    PartDiff,
    assert_packages_match,
    compare_packages,
    format_package_report,
)
from .runner import BaselineRunner, BaselineScenario, discover_scenarios

__all__ = [
    # Normalization
    "TextNormalizer",
    "NormalizationResult",
    "NormalizationStats",
    "normalize_text",
    # Diff
    "DiffReport",
    "find_divergence_index",
    "locate_divergence",
    "locate_and_report",
    # Comparison
    "ComparisonResult",
    "StreamComparer",
    "assert_streams_match",
    "compare",
    "decode_stream",
    # Packages
    "PackageComparer",
    "PackageComparison",
    "PartDiff",
    "assert_packages_match",
    "compare_packages",
    "format_package_report",
    # Runner
    "BaselineRunner",
    "BaselineScenario",
    "discover_scenarios",
]
