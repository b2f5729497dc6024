import pytest

from snpsniffer_qc import ConfigurationError, SummaryConfig
from snpsniffer_qc.core import ParseError
from snpsniffer_qc.utils import shared_calls_set_name, sorted_pair_label, split_ordered_pair


def test_split_ordered_pair():
    assert split_ordered_pair("A_1-B_2") == ("A_1", "B_2")


@pytest.mark.parametrize("value", ["A_1", "A-B-C", ""])
def test_split_ordered_pair_rejects_ambiguous(value):
    with pytest.raises(ParseError):
        split_ordered_pair(value)


def test_sorted_pair_label():
    assert sorted_pair_label("WGS", "Exome") == "Exome-WGS"
    assert sorted_pair_label("Exome", "WGS") == "Exome-WGS"
    assert sorted_pair_label("RNA", "RNA") == "RNA-RNA"
    # ordinal comparison: upper case sorts before lower case
    assert sorted_pair_label("abc", "XYZ") == "XYZ-abc"


def test_shared_calls_set_name():
    assert shared_calls_set_name(0) == "All"
    assert shared_calls_set_name(100) == "SharedCalls100plus"


def test_config_defaults():
    cfg = SummaryConfig()
    assert cfg.high_match_threshold == 0.8
    assert cfg.low_match_threshold == 0.6
    assert cfg.het_threshold == 0.6
    assert cfg.genotypes_tested == 387
    assert cfg.validate() is cfg


@pytest.mark.parametrize("kwargs", [
    {"high_match_threshold": 0.5, "low_match_threshold": 0.6},
    {"high_match_threshold": 1.2},
    {"low_match_threshold": -0.1},
    {"het_threshold": 1.5},
    {"genotypes_tested": 0},
])
def test_config_validate_rejects(kwargs):
    with pytest.raises(ConfigurationError):
        SummaryConfig(**kwargs).validate()
