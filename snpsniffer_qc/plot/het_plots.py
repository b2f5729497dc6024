"""Per-sample heterozygosity QC plots."""

from __future__ import annotations

from typing import Optional

import pandas as pd
import matplotlib.pyplot as plt

from ..config import DEFAULT_GENOTYPES_TESTED, DEFAULT_HET_THRESHOLD
from .base import threshold_boxplot, RATIO_TICKS

__all__ = [
	"plot_het_rate_by_assay",
	"plot_genotypes_by_assay",
]


def plot_het_rate_by_assay(
	data: pd.DataFrame,
	*,
	het_threshold: float = DEFAULT_HET_THRESHOLD,
	output_path: Optional[str] = None,
	title: str = "",
) -> Optional[plt.Figure]:
	"""HetRatio per Assay, points coloured by genotype count (Total)."""
	return threshold_boxplot(
		data,
		x="Assay",
		y="HetRatio",
		color_col="Total",
		thresholds=(het_threshold,),
		output_path=output_path,
		title=title,
		xlabel="Assay",
		ylabel="Heterozygous Rate",
		yticks=RATIO_TICKS,
		color_label="Genotypes",
	)


def plot_genotypes_by_assay(
	data: pd.DataFrame,
	*,
	genotypes_tested: float = DEFAULT_GENOTYPES_TESTED,
	output_path: Optional[str] = None,
	title: str = "",
) -> Optional[plt.Figure]:
	"""Total genotype calls per Assay against the size of the tested panel."""
	return threshold_boxplot(
		data,
		x="Assay",
		y="Total",
		thresholds=(genotypes_tested,),
		output_path=output_path,
		title=title,
		xlabel="Assay",
		ylabel="Total Genotypes",
		yticks=range(0, 401, 25),
		point_color="black",
	)
