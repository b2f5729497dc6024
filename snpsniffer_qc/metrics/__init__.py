"""Enrichment and classification subpackage."""

from .pair_metrics import (  # noqa: F401
    classify_match,
    enrich_pair,
    compute_pair_summary,
    possible_match_errors,
    filter_shared_calls,
)
from .het_metrics import (  # noqa: F401
    classify_het,
    enrich_het,
    compute_het_summary,
    possible_cross_contamination,
)

__all__ = [
    "classify_match",
    "enrich_pair",
    "compute_pair_summary",
    "possible_match_errors",
    "filter_shared_calls",
    "classify_het",
    "enrich_het",
    "compute_het_summary",
    "possible_cross_contamination",
]
