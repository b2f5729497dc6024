"""Structured sample name parsing.

snpSniffer sample names carry seven underscore-separated fields::

	Study_Patient_Visit_Source_Fraction_Increment_Assay

e.g. ``STUDY1_P01_V1_Blood_F1_C_AssayA``. Patient and visit identifiers are
prefixes of the token; the tissue subgroup is read from the Increment field.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .errors import ParseError

__all__ = [
	"FIELD_NAMES",
	"Subgroup",
	"SubgroupPair",
	"PatientPair",
	"MatchFlag",
	"HetFlag",
	"SampleIdentifier",
	"parse_sample_identifier",
	"subgroup_from_increment",
	"subgroup_pair",
]

FIELD_NAMES = ("Study", "Patient", "Visit", "Source", "Fraction", "Increment", "Assay")
_SEP = "_"


class Subgroup(Enum):
	CONSTITUTIONAL = "Constitutional"
	TUMOR = "Tumor"
	OTHER = "Other"


class SubgroupPair(Enum):
	CONSTITUTIONAL_CONSTITUTIONAL = "Constitutional-Constitutional"
	CONSTITUTIONAL_TUMOR = "Constitutional-Tumor"
	TUMOR_TUMOR = "Tumor-Tumor"
	OTHER = "Other"


class PatientPair(Enum):
	SAME = "Same"
	DIFFERENT = "Different"


class MatchFlag(Enum):
	"""Outcome of a pairwise comparison. ``ERROR`` is only reached for non-finite ratios."""

	PASS = "Pass"
	FAIL = "Fail"
	WARNING = "Warning"
	ERROR = "Error"


class HetFlag(Enum):
	PASS = "Pass"
	FAIL = "Fail"
	ERROR = "Error"


def subgroup_from_increment(increment: str) -> Subgroup:
	"""Constitutional if Increment contains "C", else Tumor if it contains "T"."""
	if "C" in increment:
		return Subgroup.CONSTITUTIONAL
	if "T" in increment:
		return Subgroup.TUMOR
	return Subgroup.OTHER


_PAIR_LOOKUP = {
	frozenset([Subgroup.CONSTITUTIONAL]): SubgroupPair.CONSTITUTIONAL_CONSTITUTIONAL,
	frozenset([Subgroup.CONSTITUTIONAL, Subgroup.TUMOR]): SubgroupPair.CONSTITUTIONAL_TUMOR,
	frozenset([Subgroup.TUMOR]): SubgroupPair.TUMOR_TUMOR,
}


def subgroup_pair(first: Subgroup, second: Subgroup) -> SubgroupPair:
	"""Order-independent label for two subgroups; any Other member gives Other."""
	return _PAIR_LOOKUP.get(frozenset([first, second]), SubgroupPair.OTHER)


@dataclass(frozen=True)
class SampleIdentifier:
	"""The seven positional fields of a sample token.

	Derived attributes
	------------------
	patient_id : ``Study_Patient``
	visit_id   : ``Study_Patient_Visit``
	subgroup   : tissue subgroup from ``increment``
	"""

	study: str
	patient: str
	visit: str
	source: str
	fraction: str
	increment: str
	assay: str

	@property
	def fields(self) -> Tuple[str, ...]:
		return (self.study, self.patient, self.visit, self.source, self.fraction, self.increment, self.assay)

	@property
	def token(self) -> str:
		return _SEP.join(self.fields)

	@property
	def patient_id(self) -> str:
		return _SEP.join((self.study, self.patient))

	@property
	def visit_id(self) -> str:
		return _SEP.join((self.study, self.patient, self.visit))

	@property
	def subgroup(self) -> Subgroup:
		return subgroup_from_increment(self.increment)


def parse_sample_identifier(token: str) -> SampleIdentifier:
	"""Split ``token`` into a :class:`SampleIdentifier`.

	Raises
	------
	ParseError
		If the token does not have exactly seven underscore-separated fields.
		Field contents are not otherwise checked.
	"""
	parts = str(token).split(_SEP)
	if len(parts) != len(FIELD_NAMES):
		raise ParseError(
			f"Sample name {token!r} has {len(parts)} '_'-separated fields, expected {len(FIELD_NAMES)} "
			f"({_SEP.join(FIELD_NAMES)})",
			token=str(token),
		)
	return SampleIdentifier(*parts)
