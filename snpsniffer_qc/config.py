"""Threshold configuration for the summary pipeline.

A single immutable value carries every threshold; it is built once (usually
from command line arguments) and passed explicitly into each enrichment
function.
"""

from __future__ import annotations

from dataclasses import dataclass

from .core.errors import ConfigurationError

__all__ = [
	"DEFAULT_HIGH_MATCH_THRESHOLD",
	"DEFAULT_LOW_MATCH_THRESHOLD",
	"DEFAULT_HET_THRESHOLD",
	"DEFAULT_GENOTYPES_TESTED",
	"SHARED_CALL_PLOT_SETS",
	"SummaryConfig",
]

DEFAULT_HIGH_MATCH_THRESHOLD = 0.8
DEFAULT_LOW_MATCH_THRESHOLD = 0.6
DEFAULT_HET_THRESHOLD = 0.6
# Size of the snpSniffer SNP panel; only drawn as a reference line
DEFAULT_GENOTYPES_TESTED = 387
# Minimum shared calls for each match-ratio plot set (0 = all pairs)
SHARED_CALL_PLOT_SETS = (0, 100, 50, 20)


@dataclass(frozen=True)
class SummaryConfig:
	"""Thresholds used to classify comparisons and heterozygosity rates.

	Attributes
	----------
	high_match_threshold : float
		Match ratio at or above which two samples are considered the same individual.
	low_match_threshold : float
		Match ratio below which two samples are considered different individuals.
	het_threshold : float
		Heterozygosity rate at or above which a sample is flagged as possibly cross-contaminated.
	genotypes_tested : float
		Number of genotypes in the panel (plot reference line only).
	"""

	high_match_threshold: float = DEFAULT_HIGH_MATCH_THRESHOLD
	low_match_threshold: float = DEFAULT_LOW_MATCH_THRESHOLD
	het_threshold: float = DEFAULT_HET_THRESHOLD
	genotypes_tested: float = DEFAULT_GENOTYPES_TESTED

	def validate(self) -> "SummaryConfig":
		"""Check ``0 <= low <= high <= 1``; returns self so calls can be chained."""
		high, low = self.high_match_threshold, self.low_match_threshold
		if not (0.0 <= low <= high <= 1.0):
			raise ConfigurationError(
				f"Match thresholds must satisfy 0 <= low ({low}) <= high ({high}) <= 1"
			)
		if not (0.0 <= self.het_threshold <= 1.0):
			raise ConfigurationError(f"Het threshold must be within [0, 1], got {self.het_threshold}")
		if self.genotypes_tested <= 0:
			raise ConfigurationError(f"Genotypes tested must be positive, got {self.genotypes_tested}")
		return self
