"""Readers for the two headerless tables written by snpSniffer.

Both files are tab separated, have no header row and a fixed column order:

	comparison file : BAM1, BAM2, SharedCalls, MatchingCalls, MatchRatio, OrderedPair
	het file        : Sample, Homozygous, Heterozygous, Total, HetRatio

Tables are small (a few thousand rows), so each reader loads the whole file
with pandas and then yields typed records.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

import numpy as np
import pandas as pd

from ..core import (
	COMPARISON_INPUT_COLUMNS,
	HET_INPUT_COLUMNS,
	ComparisonRecord,
	HetRecord,
	InputFormatError,
)


def _as_int(value, column: str = "count"):
	"""Cast to int unless missing; NaN is passed through unchanged.

	Non-integral counts raise InputFormatError rather than being truncated.
	"""
	if value is None or (isinstance(value, float) and np.isnan(value)):
		return value
	if value != int(value):
		raise InputFormatError(f"{column} must be a whole number, got {value!r}")
	return int(value)


class _SnpSnifferTable:
	"""Shared loading logic.

	Parameters
	----------
	path : str
		Path to the (optionally gzipped) table.
	max_records : int | None
		Optional limit for testing / faster prototyping.
	"""

	columns: List[str] = []
	text_columns: List[str] = []
	label = "snpSniffer"

	def __init__(self, path: str, max_records: Optional[int] = None):
		self.path = str(path)
		self.max_records = max_records

	def to_frame(self) -> pd.DataFrame:
		"""Load the table with named columns and numeric fields coerced."""
		try:
			df = pd.read_csv(
				self.path,
				sep="\t",
				header=None,
				dtype=str,
				nrows=self.max_records,
				compression="infer",
				keep_default_na=False,
			)
		except pd.errors.EmptyDataError:
			return pd.DataFrame(columns=self.columns)
		except pd.errors.ParserError as exc:
			raise InputFormatError(f"{self.label} file {self.path}: {exc}") from exc
		if df.shape[1] != len(self.columns):
			raise InputFormatError(
				f"{self.label} file {self.path} has {df.shape[1]} columns, expected {len(self.columns)} "
				f"({', '.join(self.columns)})"
			)
		df.columns = self.columns
		for col in self.columns:
			if col not in self.text_columns:
				df[col] = pd.to_numeric(df[col], errors="coerce")
		return df

	def parse(self) -> Iterator:
		raise NotImplementedError

	def __iter__(self):
		return self.parse()


class ComparisonReader(_SnpSnifferTable):
	"""Pairwise comparison table -> ComparisonRecord."""

	columns = COMPARISON_INPUT_COLUMNS
	text_columns = ["BAM1", "BAM2", "OrderedPair"]
	label = "Comparison"

	def parse(self) -> Iterator[ComparisonRecord]:
		for row in self.to_frame().itertuples(index=False):
			yield ComparisonRecord(
				bam1=row.BAM1,
				bam2=row.BAM2,
				shared_calls=_as_int(row.SharedCalls, "SharedCalls"),
				matching_calls=_as_int(row.MatchingCalls, "MatchingCalls"),
				match_ratio=float(row.MatchRatio),
				ordered_pair=row.OrderedPair,
			)


class HetReader(_SnpSnifferTable):
	"""Heterozygosity summary table -> HetRecord."""

	columns = HET_INPUT_COLUMNS
	text_columns = ["Sample"]
	label = "Heterozygosity"

	def parse(self) -> Iterator[HetRecord]:
		for row in self.to_frame().itertuples(index=False):
			yield HetRecord(
				sample=row.Sample,
				homozygous=_as_int(row.Homozygous, "Homozygous"),
				heterozygous=_as_int(row.Heterozygous, "Heterozygous"),
				total=_as_int(row.Total, "Total"),
				het_ratio=float(row.HetRatio),
			)


def read_comparison_file(path: str, max_records: Optional[int] = None) -> List[ComparisonRecord]:
	return list(ComparisonReader(path, max_records=max_records).parse())


def read_het_file(path: str, max_records: Optional[int] = None) -> List[HetRecord]:
	return list(HetReader(path, max_records=max_records).parse())
