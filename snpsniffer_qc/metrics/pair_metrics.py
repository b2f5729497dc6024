"""Pairwise comparison enrichment and classification.

Each snpSniffer comparison row is decorated with the identity of both
samples (patient, visit, assay, tissue subgroup) and flagged according to
whether its match ratio agrees with the expected relationship:
same-patient pairs should match, different-patient pairs should not.
"""
from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from ..config import SummaryConfig
from ..core import (
    PAIR_SUMMARY_COLUMNS,
    ComparisonRecord,
    EnrichedPair,
    MatchFlag,
    ParseError,
    PatientPair,
    parse_sample_identifier,
    subgroup_pair,
)
from ..utils import sorted_pair_label, split_ordered_pair

__all__ = [
    "classify_match",
    "enrich_pair",
    "compute_pair_summary",
    "possible_match_errors",
    "filter_shared_calls",
]


def classify_match(patient_pair: PatientPair, match_ratio: float, high: float, low: float) -> MatchFlag:
    """Apply the match decision table; first matching rule wins.

    ============  ===================  =======
    PatientPair   MatchRatio           Flag
    ============  ===================  =======
    Same          >= high              Pass
    Same          < low                Fail
    Same          in [low, high)       Warning
    Different     >= high              Fail
    Different     < low                Pass
    Different     in [low, high)       Warning
    (otherwise)                        Error
    ============  ===================  =======

    NaN ratios fail every comparison and therefore end up as Error.
    """
    if patient_pair is PatientPair.SAME:
        if match_ratio >= high:
            return MatchFlag.PASS
        if match_ratio < low:
            return MatchFlag.FAIL
        if low <= match_ratio < high:
            return MatchFlag.WARNING
    elif patient_pair is PatientPair.DIFFERENT:
        if match_ratio >= high:
            return MatchFlag.FAIL
        if match_ratio < low:
            return MatchFlag.PASS
        if low <= match_ratio < high:
            return MatchFlag.WARNING
    return MatchFlag.ERROR


def enrich_pair(record: ComparisonRecord, config: SummaryConfig) -> EnrichedPair:
    """Parse both samples of ``record.ordered_pair`` and classify the pair.

    Raises ParseError if the ordered pair or either sample token is malformed.
    """
    file1, file2 = split_ordered_pair(record.ordered_pair)
    s1 = parse_sample_identifier(file1)
    s2 = parse_sample_identifier(file2)
    patient_pair = PatientPair.SAME if s1.patient_id == s2.patient_id else PatientPair.DIFFERENT
    return EnrichedPair(
        record=record,
        file1=file1,
        file2=file2,
        patient_id1=s1.patient_id,
        patient_id2=s2.patient_id,
        visit_id1=s1.visit_id,
        visit_id2=s2.visit_id,
        assay_pair=sorted_pair_label(s1.assay, s2.assay),
        subgroup1=s1.subgroup,
        subgroup2=s2.subgroup,
        subgroup_pair=subgroup_pair(s1.subgroup, s2.subgroup),
        patient_pair=patient_pair,
        match_flag=classify_match(
            patient_pair,
            record.match_ratio,
            config.high_match_threshold,
            config.low_match_threshold,
        ),
    )


def compute_pair_summary(
    records: Iterable[ComparisonRecord],
    config: SummaryConfig,
    *,
    skip_malformed: bool = False,
) -> pd.DataFrame:
    """Return the enriched pair table, one row per input record in input order.

    Columns: see ``PAIR_SUMMARY_COLUMNS``.

    A malformed sample name aborts with ParseError unless ``skip_malformed``
    is set, in which case the row is reported and left out.
    """
    rows: List[dict] = []
    skipped = 0
    for i, rec in enumerate(records, start=1):
        try:
            rows.append(enrich_pair(rec, config).to_row())
        except ParseError as exc:
            if not skip_malformed:
                raise ParseError(f"Comparison row {i}: {exc}", token=exc.token) from exc
            skipped += 1
            print(f"[WARNING] Skipping comparison row {i}: {exc}")
    if skipped:
        print(f"[WARNING] {skipped} comparison row(s) skipped due to malformed sample names")
    return pd.DataFrame(rows, columns=PAIR_SUMMARY_COLUMNS)


def possible_match_errors(df: pd.DataFrame) -> pd.DataFrame:
    """Rows whose MatchFlag is anything other than Pass (possible sample mixups)."""
    if "MatchFlag" not in df.columns:
        raise ValueError("DataFrame must contain 'MatchFlag' column")
    return df[df["MatchFlag"] != MatchFlag.PASS.value].reset_index(drop=True)


def filter_shared_calls(df: pd.DataFrame, min_shared_calls: int) -> pd.DataFrame:
    """Keep comparisons with at least ``min_shared_calls`` shared genotype calls."""
    if min_shared_calls <= 0:
        return df.reset_index(drop=True)
    return df[df["SharedCalls"] >= min_shared_calls].reset_index(drop=True)
