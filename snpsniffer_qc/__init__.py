"""snpsniffer_qc – Summaries and plots for snpSniffer genotype-match QC.

Subpackages:
	core      – sample name parsing, categorical labels, records, errors
	io        – reading snpSniffer tables / writing summary tables
	metrics   – pair and heterozygosity enrichment and classification
	plot      – box / jitter visualisations of the summary tables

Typical use::

	from snpsniffer_qc import SummaryConfig
	from snpsniffer_qc.io import read_comparison_file
	from snpsniffer_qc.metrics import compute_pair_summary

	pairs = compute_pair_summary(read_comparison_file("comparisons.txt"), SummaryConfig())
"""

from .config import SummaryConfig  # noqa: F401
from .core import ConfigurationError, ParseError, parse_sample_identifier  # noqa: F401

__version__ = "0.1.0"
__all__ = [
	"SummaryConfig",
	"ConfigurationError",
	"ParseError",
	"parse_sample_identifier",
	"__version__",
]
