"""Heterozygosity rate enrichment.

An unusually high fraction of heterozygous calls across the fingerprint
panel suggests DNA from more than one individual, i.e. cross-contamination.
"""
from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from ..config import SummaryConfig
from ..core import (
    HET_SUMMARY_COLUMNS,
    EnrichedHetRecord,
    HetFlag,
    HetRecord,
    ParseError,
    parse_sample_identifier,
)

__all__ = [
    "classify_het",
    "enrich_het",
    "compute_het_summary",
    "possible_cross_contamination",
]


def classify_het(het_ratio: float, threshold: float) -> HetFlag:
    """Fail at or above ``threshold``, Pass below it, Error for NaN."""
    if het_ratio >= threshold:
        return HetFlag.FAIL
    if het_ratio < threshold:
        return HetFlag.PASS
    return HetFlag.ERROR


def enrich_het(record: HetRecord, config: SummaryConfig) -> EnrichedHetRecord:
    sample = parse_sample_identifier(record.sample)
    return EnrichedHetRecord(
        record=record,
        assay=sample.assay,
        subgroup=sample.subgroup,
        het_flag=classify_het(record.het_ratio, config.het_threshold),
    )


def compute_het_summary(
    records: Iterable[HetRecord],
    config: SummaryConfig,
    *,
    skip_malformed: bool = False,
) -> pd.DataFrame:
    """Return the enriched heterozygosity table in input order.

    Columns: Sample, Homozygous, Heterozygous, Total, HetRatio, Assay, Subgroup, HetFlag
    """
    rows: List[dict] = []
    skipped = 0
    for i, rec in enumerate(records, start=1):
        try:
            rows.append(enrich_het(rec, config).to_row())
        except ParseError as exc:
            if not skip_malformed:
                raise ParseError(f"Heterozygosity row {i}: {exc}", token=exc.token) from exc
            skipped += 1
            print(f"[WARNING] Skipping heterozygosity row {i}: {exc}")
    if skipped:
        print(f"[WARNING] {skipped} heterozygosity row(s) skipped due to malformed sample names")
    return pd.DataFrame(rows, columns=HET_SUMMARY_COLUMNS)


def possible_cross_contamination(df: pd.DataFrame) -> pd.DataFrame:
    """Rows flagged Fail by the heterozygosity threshold."""
    if "HetFlag" not in df.columns:
        raise ValueError("DataFrame must contain 'HetFlag' column")
    return df[df["HetFlag"] == HetFlag.FAIL.value].reset_index(drop=True)
