"""Row containers for snpSniffer inputs and their enriched counterparts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from .identifiers import HetFlag, MatchFlag, PatientPair, Subgroup, SubgroupPair

__all__ = [
	"COMPARISON_INPUT_COLUMNS",
	"HET_INPUT_COLUMNS",
	"PAIR_SUMMARY_COLUMNS",
	"HET_SUMMARY_COLUMNS",
	"ComparisonRecord",
	"HetRecord",
	"EnrichedPair",
	"EnrichedHetRecord",
]

# Fixed column order of the headerless snpSniffer outputs
COMPARISON_INPUT_COLUMNS = ["BAM1", "BAM2", "SharedCalls", "MatchingCalls", "MatchRatio", "OrderedPair"]
HET_INPUT_COLUMNS = ["Sample", "Homozygous", "Heterozygous", "Total", "HetRatio"]

PAIR_SUMMARY_COLUMNS = [
	"BAM1", "BAM2", "File1", "File2",
	"SharedCalls", "MatchingCalls", "MatchRatio", "OrderedPair",
	"PatientID1", "PatientID2", "VisitID1", "VisitID2",
	"AssayPair", "Subgroup1", "Subgroup2", "SubgroupPair",
	"PatientPair", "MatchFlag",
]
HET_SUMMARY_COLUMNS = HET_INPUT_COLUMNS + ["Assay", "Subgroup", "HetFlag"]


@dataclass(frozen=True)
class ComparisonRecord:
	"""One line of the snpSniffer pairwise comparison file."""

	bam1: str
	bam2: str
	shared_calls: int
	matching_calls: int
	match_ratio: float
	ordered_pair: str


@dataclass(frozen=True)
class HetRecord:
	"""One line of the snpSniffer heterozygosity summary file."""

	sample: str
	homozygous: int
	heterozygous: int
	total: int
	het_ratio: float


@dataclass(frozen=True)
class EnrichedPair:
	record: ComparisonRecord
	file1: str
	file2: str
	patient_id1: str
	patient_id2: str
	visit_id1: str
	visit_id2: str
	assay_pair: str
	subgroup1: Subgroup
	subgroup2: Subgroup
	subgroup_pair: SubgroupPair
	patient_pair: PatientPair
	match_flag: MatchFlag

	def to_row(self) -> Dict[str, Any]:
		r = self.record
		return {
			"BAM1": r.bam1,
			"BAM2": r.bam2,
			"File1": self.file1,
			"File2": self.file2,
			"SharedCalls": r.shared_calls,
			"MatchingCalls": r.matching_calls,
			"MatchRatio": r.match_ratio,
			"OrderedPair": r.ordered_pair,
			"PatientID1": self.patient_id1,
			"PatientID2": self.patient_id2,
			"VisitID1": self.visit_id1,
			"VisitID2": self.visit_id2,
			"AssayPair": self.assay_pair,
			"Subgroup1": self.subgroup1.value,
			"Subgroup2": self.subgroup2.value,
			"SubgroupPair": self.subgroup_pair.value,
			"PatientPair": self.patient_pair.value,
			"MatchFlag": self.match_flag.value,
		}


@dataclass(frozen=True)
class EnrichedHetRecord:
	record: HetRecord
	assay: str
	subgroup: Subgroup
	het_flag: HetFlag

	def to_row(self) -> Dict[str, Any]:
		r = self.record
		return {
			"Sample": r.sample,
			"Homozygous": r.homozygous,
			"Heterozygous": r.heterozygous,
			"Total": r.total,
			"HetRatio": r.het_ratio,
			"Assay": self.assay,
			"Subgroup": self.subgroup.value,
			"HetFlag": self.het_flag.value,
		}
