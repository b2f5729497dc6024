"""Pairwise comparison QC plots.

Implements:
 Match ratio by expected relationship (Same / Different patient)
 Match ratio by assay pair

Both colour points by the number of shared calls: pairs with few shared
genotypes give unreliable ratios and stand out at the cold end of the scale.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import matplotlib.pyplot as plt

from ..config import DEFAULT_HIGH_MATCH_THRESHOLD, DEFAULT_LOW_MATCH_THRESHOLD
from .base import threshold_boxplot, RATIO_TICKS

__all__ = [
	"plot_match_ratio_by_patient_pair",
	"plot_match_ratio_by_assay_pair",
]


def _match_ratio_plot(
	data: pd.DataFrame,
	group_col: str,
	xlabel: str,
	*,
	high_threshold: float,
	low_threshold: float,
	output_path: Optional[str],
	title: str,
) -> Optional[plt.Figure]:
	return threshold_boxplot(
		data,
		x=group_col,
		y="MatchRatio",
		color_col="SharedCalls",
		thresholds=(high_threshold, low_threshold),
		output_path=output_path,
		title=title,
		xlabel=xlabel,
		ylabel="Percent Matching Calls",
		yticks=RATIO_TICKS,
		color_label="Shared Calls",
	)


def plot_match_ratio_by_patient_pair(
	data: pd.DataFrame,
	*,
	high_threshold: float = DEFAULT_HIGH_MATCH_THRESHOLD,
	low_threshold: float = DEFAULT_LOW_MATCH_THRESHOLD,
	output_path: Optional[str] = None,
	title: str = "",
) -> Optional[plt.Figure]:
	"""Box + jitter of MatchRatio per PatientPair with both thresholds marked."""
	return _match_ratio_plot(
		data,
		"PatientPair",
		"Expected Genotype Comparison",
		high_threshold=high_threshold,
		low_threshold=low_threshold,
		output_path=output_path,
		title=title,
	)


def plot_match_ratio_by_assay_pair(
	data: pd.DataFrame,
	*,
	high_threshold: float = DEFAULT_HIGH_MATCH_THRESHOLD,
	low_threshold: float = DEFAULT_LOW_MATCH_THRESHOLD,
	output_path: Optional[str] = None,
	title: str = "",
) -> Optional[plt.Figure]:
	"""Box + jitter of MatchRatio per AssayPair with both thresholds marked."""
	return _match_ratio_plot(
		data,
		"AssayPair",
		"Assay Pair",
		high_threshold=high_threshold,
		low_threshold=low_threshold,
		output_path=output_path,
		title=title,
	)
