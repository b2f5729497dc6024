"""High-level plotting API for the snpsniffer_qc package.

The submodules are separated by input table:
	pair_plots – pairwise comparison (match ratio) visualisations
	het_plots  – per-sample heterozygosity visualisations

Import convenience: ``from snpsniffer_qc.plot import plot_het_rate_by_assay``.
"""

from .pair_plots import *  # noqa: F401,F403
from .het_plots import *  # noqa: F401,F403
from . import pair_plots as _pair_plots, het_plots as _het_plots

__all__ = list(_pair_plots.__all__) + list(_het_plots.__all__)
