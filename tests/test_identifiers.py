import pytest

from snpsniffer_qc.core import (
	ParseError,
	Subgroup,
	SubgroupPair,
	parse_sample_identifier,
	subgroup_from_increment,
	subgroup_pair,
)


def test_parse_example_token():
	s = parse_sample_identifier("STUDY1_P01_V1_Blood_F1_C_AssayA")
	assert s.study == "STUDY1"
	assert s.patient == "P01"
	assert s.visit == "V1"
	assert s.source == "Blood"
	assert s.fraction == "F1"
	assert s.increment == "C"
	assert s.assay == "AssayA"
	assert s.patient_id == "STUDY1_P01"
	assert s.visit_id == "STUDY1_P01_V1"
	assert s.subgroup is Subgroup.CONSTITUTIONAL


@pytest.mark.parametrize("token", [
	"STUDY1_P01_V1_Blood_F1_C_AssayA",
	"A_B_C_D_E_F_G",
	"x_x_x_x_x_x_x",
	"S_P_V___T_",
])
def test_fields_round_trip(token):
	s = parse_sample_identifier(token)
	assert s.fields == tuple(token.split("_"))
	assert s.token == token
	assert s.patient_id == "_".join(token.split("_")[:2])
	assert s.visit_id == "_".join(token.split("_")[:3])


@pytest.mark.parametrize("token", ["STUDY1_P01_V1", "", "A_B_C_D_E_F_G_H"])
def test_malformed_token_raises(token):
	with pytest.raises(ParseError):
		parse_sample_identifier(token)


def test_parse_error_is_value_error():
	with pytest.raises(ValueError) as excinfo:
		parse_sample_identifier("STUDY1_P01_V1")
	assert excinfo.value.token == "STUDY1_P01_V1"
	assert "3" in str(excinfo.value)


@pytest.mark.parametrize("increment,expected", [
	("C", Subgroup.CONSTITUTIONAL),
	("C1", Subgroup.CONSTITUTIONAL),
	("T2", Subgroup.TUMOR),
	("CT", Subgroup.CONSTITUTIONAL),  # C is checked first
	("TC", Subgroup.CONSTITUTIONAL),
	("X", Subgroup.OTHER),
	("c", Subgroup.OTHER),  # case sensitive
	("", Subgroup.OTHER),
])
def test_subgroup_from_increment(increment, expected):
	assert subgroup_from_increment(increment) is expected


def test_subgroup_pair_symmetric():
	for a in Subgroup:
		for b in Subgroup:
			assert subgroup_pair(a, b) is subgroup_pair(b, a)
	assert subgroup_pair(Subgroup.CONSTITUTIONAL, Subgroup.CONSTITUTIONAL) is SubgroupPair.CONSTITUTIONAL_CONSTITUTIONAL
	assert subgroup_pair(Subgroup.TUMOR, Subgroup.CONSTITUTIONAL) is SubgroupPair.CONSTITUTIONAL_TUMOR
	assert subgroup_pair(Subgroup.TUMOR, Subgroup.TUMOR) is SubgroupPair.TUMOR_TUMOR
	assert subgroup_pair(Subgroup.OTHER, Subgroup.TUMOR) is SubgroupPair.OTHER
	assert subgroup_pair(Subgroup.OTHER, Subgroup.OTHER) is SubgroupPair.OTHER
