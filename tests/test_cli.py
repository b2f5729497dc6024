import pandas as pd
import pytest

from snpsniffer_qc.cli import build_parser, main
from snpsniffer_qc.io import (
	ALL_PAIRS_FILENAME,
	CROSS_CONTAMINATION_FILENAME,
	HET_RATE_FILENAME,
	MATCH_ERRORS_FILENAME,
)


def test_parser_defaults():
	args = build_parser().parse_args(["summarize", "-c", "a.txt", "-e", "b.txt"])
	assert args.high_match_threshold == 0.8
	assert args.low_match_threshold == 0.6
	assert args.het_threshold == 0.6
	assert args.genotypes_tested == 387
	assert args.out == "."
	assert not args.no_plots


def test_no_subcommand_prints_help(capsys):
	assert main([]) == 1
	assert "usage" in capsys.readouterr().out


def test_missing_comp_file(tmp_path, het_file, capsys):
	code = main(["summarize", "-e", str(het_file), "--out", str(tmp_path / "out")])
	assert code != 0
	err = capsys.readouterr().err
	assert "-c/--comp_file" in err
	assert not (tmp_path / "out").exists()


def test_missing_het_file(tmp_path, comparison_file, capsys):
	code = main(["summarize", "-c", str(comparison_file), "--out", str(tmp_path / "out")])
	assert code != 0
	assert "-e/--het_file" in capsys.readouterr().err


def test_nonexistent_input(tmp_path, het_file, capsys):
	code = main(["summarize", "-c", str(tmp_path / "nope.txt"), "-e", str(het_file)])
	assert code == 1
	assert "does not exist" in capsys.readouterr().err


def test_invalid_thresholds(tmp_path, comparison_file, het_file, capsys):
	code = main([
		"summarize", "-c", str(comparison_file), "-e", str(het_file),
		"-i", "0.5", "-l", "0.7", "--out", str(tmp_path),
	])
	assert code == 1
	assert "thresholds" in capsys.readouterr().err


def test_summarize_tables_only(tmp_path, comparison_file, het_file, capsys):
	outdir = tmp_path / "out"
	code = main([
		"summarize", "-c", str(comparison_file), "-e", str(het_file),
		"--out", str(outdir), "--no-plots",
	])
	assert code == 0
	for name in (ALL_PAIRS_FILENAME, MATCH_ERRORS_FILENAME, HET_RATE_FILENAME, CROSS_CONTAMINATION_FILENAME):
		assert (outdir / name).exists()
	assert not list(outdir.glob("*.png"))
	out = capsys.readouterr().out
	assert "Read 4 pairwise comparisons" in out


def test_summarize_with_plots(tmp_path, comparison_file, het_file):
	outdir = tmp_path / "out"
	assert main(["summarize", "-c", str(comparison_file), "-e", str(het_file), "--out", str(outdir)]) == 0
	pngs = {p.name for p in outdir.glob("*.png")}
	# shared calls in the fixture are 350, 300, 80 and 40: four pair plot sets, two het plots
	assert "SnpSniffer_MatchRatio_ByPatientPairType_All.png" in pngs
	assert "SnpSniffer_MatchRatio_ByAssayPairType_SharedCalls100plus.png" in pngs
	assert "SnpSniffer_MatchRatio_ByPatientPairType_SharedCalls20plus.png" in pngs
	assert "SnpSniffer_HetRate_ByAssayType_All.png" in pngs
	assert "SnpSniffer_Genotypes_ByAssayType_All.png" in pngs
	assert len(pngs) == 10


def test_malformed_row_aborts_unless_skipped(tmp_path, het_file, capsys):
	comp = tmp_path / "comp.txt"
	comp.write_text(
		"a.bam\tb.bam\t300\t290\t0.97\tST1_P01_V1_Blood_F1_C_WGS-ST1_P01_V2_Tissue_F1_T1_Exome\n"
		"a.bam\tc.bam\t300\t100\t0.33\tST1_P01_V1-ST1_P02_V1_Blood_F1_C_WGS\n"
	)
	outdir = tmp_path / "out"
	args = ["summarize", "-c", str(comp), "-e", str(het_file), "--out", str(outdir), "--no-plots"]
	assert main(args) == 1
	assert "Comparison row 2" in capsys.readouterr().err

	assert main(args + ["--skip-malformed"]) == 0
	all_pairs = pd.read_csv(outdir / ALL_PAIRS_FILENAME, sep="\t")
	assert len(all_pairs) == 1


def test_het_subcommand(tmp_path, het_file):
	outdir = tmp_path / "het"
	assert main(["het", "-e", str(het_file), "--out", str(outdir), "-t", "0.7"]) == 0
	fails = pd.read_csv(outdir / CROSS_CONTAMINATION_FILENAME, sep="\t")
	assert fails["Sample"].tolist() == ["ST1_P01_V2_Tissue_F1_T1_Exome"]
	assert not (outdir / ALL_PAIRS_FILENAME).exists()
	assert (outdir / "SnpSniffer_HetRate_ByAssayType_All.png").exists()


def test_pairs_subcommand_requires_comp_file(capsys):
	assert main(["pairs"]) == 1
	assert "-c/--comp_file" in capsys.readouterr().err


def test_ragged_input_exits_with_message(tmp_path, het_file, capsys):
	comp = tmp_path / "comp.txt"
	comp.write_text(
		"a.bam\tb.bam\t300\t290\t0.97\tST1_P01_V1_Blood_F1_C_WGS-ST1_P01_V2_Tissue_F1_T1_Exome\n"
		"a.bam\tc.bam\t300\t100\t0.33\tST1_P01_V1_Blood_F1_C_WGS-ST1_P02_V1_Blood_F1_C_WGS\textra\n"
	)
	code = main(["summarize", "-c", str(comp), "-e", str(het_file), "--out", str(tmp_path / "out"), "--no-plots"])
	assert code == 1
	assert "Error: Comparison file" in capsys.readouterr().err


def test_summarize_parallel_plots(tmp_path, comparison_file, het_file):
	outdir = tmp_path / "out"
	args = ["summarize", "-c", str(comparison_file), "-e", str(het_file), "--out", str(outdir), "--threads", "2"]
	assert main(args) == 0
	assert len(list(outdir.glob("*.png"))) == 10
