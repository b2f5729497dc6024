"""Core data model: sample identifiers, categorical labels, records and errors."""

from .errors import ConfigurationError, InputFormatError, ParseError, SnpSnifferQCError  # noqa: F401
from .identifiers import (  # noqa: F401
	FIELD_NAMES,
	HetFlag,
	MatchFlag,
	PatientPair,
	SampleIdentifier,
	Subgroup,
	SubgroupPair,
	parse_sample_identifier,
	subgroup_from_increment,
	subgroup_pair,
)
from .records import (  # noqa: F401
	COMPARISON_INPUT_COLUMNS,
	HET_INPUT_COLUMNS,
	HET_SUMMARY_COLUMNS,
	PAIR_SUMMARY_COLUMNS,
	ComparisonRecord,
	EnrichedHetRecord,
	EnrichedPair,
	HetRecord,
)

__all__ = [
	"SnpSnifferQCError",
	"ConfigurationError",
	"ParseError",
	"InputFormatError",
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
	"COMPARISON_INPUT_COLUMNS",
	"HET_INPUT_COLUMNS",
	"PAIR_SUMMARY_COLUMNS",
	"HET_SUMMARY_COLUMNS",
	"ComparisonRecord",
	"HetRecord",
	"EnrichedPair",
	"EnrichedHetRecord",
]
