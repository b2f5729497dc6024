"""Writers for the four summary tables."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import pandas as pd

from ..metrics import possible_cross_contamination, possible_match_errors

__all__ = [
	"ALL_PAIRS_FILENAME",
	"MATCH_ERRORS_FILENAME",
	"HET_RATE_FILENAME",
	"CROSS_CONTAMINATION_FILENAME",
	"write_pair_tables",
	"write_het_tables",
	"write_summary_tables",
]

ALL_PAIRS_FILENAME = "SnpSniffer_AllPairs_Summary.tsv"
MATCH_ERRORS_FILENAME = "SnpSniffer_PossibleMatchErrors_Summary.tsv"
HET_RATE_FILENAME = "SnpSniffer_HetRate_Summary.tsv"
CROSS_CONTAMINATION_FILENAME = "SnpSniffer_PossibleCrossContamination_Summary.tsv"


def _write_tsv(df: pd.DataFrame, path: Path) -> Path:
	df.to_csv(path, sep="\t", index=False)
	return path


def write_pair_tables(outdir, pairs_df: pd.DataFrame) -> Dict[str, Path]:
	"""Write all pairs plus the non-Pass subset; returns ``{filename: path}``."""
	outdir = Path(outdir)
	outdir.mkdir(parents=True, exist_ok=True)
	errors_df = possible_match_errors(pairs_df)
	return {
		ALL_PAIRS_FILENAME: _write_tsv(pairs_df, outdir / ALL_PAIRS_FILENAME),
		MATCH_ERRORS_FILENAME: _write_tsv(errors_df, outdir / MATCH_ERRORS_FILENAME),
	}


def write_het_tables(outdir, het_df: pd.DataFrame) -> Dict[str, Path]:
	"""Write all het records plus the Fail subset; returns ``{filename: path}``."""
	outdir = Path(outdir)
	outdir.mkdir(parents=True, exist_ok=True)
	fail_df = possible_cross_contamination(het_df)
	return {
		HET_RATE_FILENAME: _write_tsv(het_df, outdir / HET_RATE_FILENAME),
		CROSS_CONTAMINATION_FILENAME: _write_tsv(fail_df, outdir / CROSS_CONTAMINATION_FILENAME),
	}


def write_summary_tables(
	outdir,
	pairs_df: Optional[pd.DataFrame] = None,
	het_df: Optional[pd.DataFrame] = None,
) -> Dict[str, Path]:
	"""Write whichever of the pair / het table groups are provided."""
	written: Dict[str, Path] = {}
	if pairs_df is not None:
		written.update(write_pair_tables(outdir, pairs_df))
	if het_df is not None:
		written.update(write_het_tables(outdir, het_df))
	return written
