import matplotlib

matplotlib.use("Agg")

import pytest

from snpsniffer_qc import SummaryConfig


COMPARISON_LINES = [
	# same patient, high match
	"a.bam\tb.bam\t350\t340\t0.971\tST1_P01_V1_Blood_F1_C_WGS-ST1_P01_V2_Tissue_F1_T1_Exome",
	# different patients, low match
	"a.bam\tc.bam\t300\t120\t0.400\tST1_P01_V1_Blood_F1_C_WGS-ST1_P02_V1_Blood_F1_C_WGS",
	# same patient, ambiguous ratio
	"b.bam\td.bam\t80\t60\t0.750\tST1_P01_V2_Tissue_F1_T1_Exome-ST1_P01_V3_Tissue_F2_X_RNA",
	# different patients, high match -> possible mixup
	"c.bam\td.bam\t40\t38\t0.950\tST1_P02_V1_Blood_F1_C_WGS-ST1_P01_V3_Tissue_F2_X_RNA",
]

HET_LINES = [
	"ST1_P01_V1_Blood_F1_C_WGS\t250\t120\t370\t0.324",
	"ST1_P01_V2_Tissue_F1_T1_Exome\t100\t260\t360\t0.722",
	"ST1_P02_V1_Blood_F1_C_WGS\t200\t150\t350\t0.600",
]


@pytest.fixture
def config() -> SummaryConfig:
	return SummaryConfig()


@pytest.fixture
def comparison_file(tmp_path):
	path = tmp_path / "comparisons.txt"
	path.write_text("\n".join(COMPARISON_LINES) + "\n")
	return path


@pytest.fixture
def het_file(tmp_path):
	path = tmp_path / "het_summary.txt"
	path.write_text("\n".join(HET_LINES) + "\n")
	return path
