"""Command line interface for snpsniffer_qc.

Current subcommands:
	summarize – enrich both snpSniffer tables, write the four summary TSVs and plots
	pairs     – pairwise comparison table only (match ratio tables and plots)
	het       – heterozygosity table only (het rate tables and plots)

Example:
	python -m snpsniffer_qc summarize -c comparisons.txt -e het_summary.txt --out qc_summary
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from concurrent.futures import ProcessPoolExecutor, as_completed

import pandas as pd

from .config import (
	DEFAULT_GENOTYPES_TESTED,
	DEFAULT_HET_THRESHOLD,
	DEFAULT_HIGH_MATCH_THRESHOLD,
	DEFAULT_LOW_MATCH_THRESHOLD,
	SHARED_CALL_PLOT_SETS,
	SummaryConfig,
)
from .core import ConfigurationError, SnpSnifferQCError
from .io import read_comparison_file, read_het_file, write_het_tables, write_pair_tables
from .metrics import (
	compute_het_summary,
	compute_pair_summary,
	filter_shared_calls,
	possible_cross_contamination,
	possible_match_errors,
)
from .plot import (
	plot_match_ratio_by_patient_pair,
	plot_match_ratio_by_assay_pair,
	plot_het_rate_by_assay,
	plot_genotypes_by_assay,
)
from .utils import shared_calls_set_name


def _exec_plot(func, kwargs):
	func(**kwargs)


def _run_plot_tasks(tasks, threads: int):
	if threads <= 1:
		for f, kw in tasks:
			f(**kw)
		return
	# macOS / spawn safe
	with ProcessPoolExecutor(max_workers=threads) as ex:
		futs = [ex.submit(_exec_plot, f, kw) for f, kw in tasks]
		for fut in as_completed(futs):
			_ = fut.result()


def _require_file(path, option: str) -> Path:
	if not path:
		raise ConfigurationError(f"You must provide an input file to {option}")
	p = Path(path)
	if not p.is_file():
		raise ConfigurationError(f"Input file for {option} does not exist: {p}")
	return p


def _config_from_args(args: argparse.Namespace) -> SummaryConfig:
	return SummaryConfig(
		high_match_threshold=getattr(args, "high_match_threshold", DEFAULT_HIGH_MATCH_THRESHOLD),
		low_match_threshold=getattr(args, "low_match_threshold", DEFAULT_LOW_MATCH_THRESHOLD),
		het_threshold=getattr(args, "het_threshold", DEFAULT_HET_THRESHOLD),
		genotypes_tested=getattr(args, "genotypes_tested", DEFAULT_GENOTYPES_TESTED),
	).validate()


def _print_flag_counts(df: pd.DataFrame, flag_col: str) -> None:
	counts = df[flag_col].value_counts()
	for flag, n in counts.items():
		print(f"   {flag}: {n:,}")


def _pair_plot_tasks(pairs_df: pd.DataFrame, config: SummaryConfig, outdir: Path):
	tasks = []
	for min_shared in SHARED_CALL_PLOT_SETS:
		subset = filter_shared_calls(pairs_df, min_shared)
		set_name = shared_calls_set_name(min_shared)
		if subset.empty:
			print(f"No comparisons for plot set {set_name}; skipping")
			continue
		thresholds = {
			'high_threshold': config.high_match_threshold,
			'low_threshold': config.low_match_threshold,
		}
		tasks.append((plot_match_ratio_by_patient_pair, {
			'data': subset,
			'output_path': str(outdir / f'SnpSniffer_MatchRatio_ByPatientPairType_{set_name}.png'),
			**thresholds,
		}))
		tasks.append((plot_match_ratio_by_assay_pair, {
			'data': subset,
			'output_path': str(outdir / f'SnpSniffer_MatchRatio_ByAssayPairType_{set_name}.png'),
			**thresholds,
		}))
	return tasks


def _het_plot_tasks(het_df: pd.DataFrame, config: SummaryConfig, outdir: Path):
	if het_df.empty:
		print("No heterozygosity records; skipping het plots")
		return []
	return [
		(plot_het_rate_by_assay, {
			'data': het_df,
			'het_threshold': config.het_threshold,
			'output_path': str(outdir / 'SnpSniffer_HetRate_ByAssayType_All.png'),
		}),
		(plot_genotypes_by_assay, {
			'data': het_df,
			'genotypes_tested': config.genotypes_tested,
			'output_path': str(outdir / 'SnpSniffer_Genotypes_ByAssayType_All.png'),
		}),
	]


def _summarize_pairs(comp_file: Path, config: SummaryConfig, outdir: Path, skip_malformed: bool) -> pd.DataFrame:
	records = read_comparison_file(str(comp_file))
	print(f"Read {len(records):,} pairwise comparisons from {comp_file}")
	pairs_df = compute_pair_summary(records, config, skip_malformed=skip_malformed)
	written = write_pair_tables(outdir, pairs_df)
	n_flagged = len(possible_match_errors(pairs_df))
	print(f"MatchFlag summary ({n_flagged:,} possible match errors):")
	_print_flag_counts(pairs_df, "MatchFlag")
	for path in written.values():
		print(f"Table written to: {path}")
	return pairs_df


def _summarize_het(het_file: Path, config: SummaryConfig, outdir: Path, skip_malformed: bool) -> pd.DataFrame:
	records = read_het_file(str(het_file))
	print(f"Read {len(records):,} heterozygosity records from {het_file}")
	het_df = compute_het_summary(records, config, skip_malformed=skip_malformed)
	written = write_het_tables(outdir, het_df)
	n_flagged = len(possible_cross_contamination(het_df))
	print(f"HetFlag summary ({n_flagged:,} possible cross-contaminations):")
	_print_flag_counts(het_df, "HetFlag")
	for path in written.values():
		print(f"Table written to: {path}")
	return het_df


def cmd_summarize(args: argparse.Namespace) -> None:
	# Validate everything before touching any input
	comp_file = _require_file(args.comp_file, "-c/--comp_file")
	het_file = _require_file(args.het_file, "-e/--het_file")
	config = _config_from_args(args)
	outdir = Path(args.out)
	outdir.mkdir(parents=True, exist_ok=True)

	pairs_df = _summarize_pairs(comp_file, config, outdir, args.skip_malformed)
	het_df = _summarize_het(het_file, config, outdir, args.skip_malformed)

	if args.no_plots:
		return
	tasks = _pair_plot_tasks(pairs_df, config, outdir) + _het_plot_tasks(het_df, config, outdir)
	_run_plot_tasks(tasks, getattr(args, 'threads', 1))
	print(f"Summary plots written to {outdir}")


def cmd_pairs(args: argparse.Namespace) -> None:
	comp_file = _require_file(args.comp_file, "-c/--comp_file")
	config = _config_from_args(args)
	outdir = Path(args.out)
	outdir.mkdir(parents=True, exist_ok=True)

	pairs_df = _summarize_pairs(comp_file, config, outdir, args.skip_malformed)
	if args.no_plots:
		return
	_run_plot_tasks(_pair_plot_tasks(pairs_df, config, outdir), getattr(args, 'threads', 1))
	print(f"Match ratio plots written to {outdir}")


def cmd_het(args: argparse.Namespace) -> None:
	het_file = _require_file(args.het_file, "-e/--het_file")
	config = _config_from_args(args)
	outdir = Path(args.out)
	outdir.mkdir(parents=True, exist_ok=True)

	het_df = _summarize_het(het_file, config, outdir, args.skip_malformed)
	if args.no_plots:
		return
	_run_plot_tasks(_het_plot_tasks(het_df, config, outdir), getattr(args, 'threads', 1))
	print(f"Heterozygosity plots written to {outdir}")


def _add_common_arguments(sp: argparse.ArgumentParser) -> None:
	sp.add_argument("-o", "--out", default=".", help="Output directory for tables and plots [.]")
	sp.add_argument("--threads", type=int, default=1, help="Parallel plot generation processes")
	sp.add_argument("--no-plots", action="store_true", help="Only write the summary tables")
	sp.add_argument("--skip-malformed", action="store_true", help="Skip rows whose sample names do not have 7 '_'-separated fields instead of aborting")


def _add_comparison_arguments(sp: argparse.ArgumentParser) -> None:
	sp.add_argument("-c", "--comp_file", default=None, metavar="filename", help="Pairwise Comparison File from snpSniffer")
	sp.add_argument("-i", "--high_match_threshold", type=float, default=DEFAULT_HIGH_MATCH_THRESHOLD, metavar="Ratio", help="Match Ratio threshold to define a match [0.8]")
	sp.add_argument("-l", "--low_match_threshold", type=float, default=DEFAULT_LOW_MATCH_THRESHOLD, metavar="Ratio", help="Match Ratio threshold to define a non-match [0.6]")


def _add_het_arguments(sp: argparse.ArgumentParser) -> None:
	sp.add_argument("-e", "--het_file", default=None, metavar="filename", help="Heterozygous Summary File from snpSniffer")
	sp.add_argument("-t", "--het_threshold", type=float, default=DEFAULT_HET_THRESHOLD, metavar="Ratio", help="Heterozygous Rate threshold to suggest cross-contamination [0.6]")
	sp.add_argument("-g", "--genotypes_tested", type=float, default=DEFAULT_GENOTYPES_TESTED, metavar="INT", help="The number of genotypes tested [387]")


def build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="snpsniffer-qc", description="snpSniffer genotype-match QC summary")
	sub = p.add_subparsers(dest="command")
	sp = sub.add_parser("summarize", help="Summarize comparison and heterozygosity tables")
	_add_comparison_arguments(sp)
	_add_het_arguments(sp)
	_add_common_arguments(sp)
	sp.set_defaults(func=cmd_summarize, subparser=sp)

	sp2 = sub.add_parser("pairs", help="Summarize the pairwise comparison table only")
	_add_comparison_arguments(sp2)
	_add_common_arguments(sp2)
	sp2.set_defaults(func=cmd_pairs, subparser=sp2)

	sp3 = sub.add_parser("het", help="Summarize the heterozygosity table only")
	_add_het_arguments(sp3)
	_add_common_arguments(sp3)
	sp3.set_defaults(func=cmd_het, subparser=sp3)
	return p


def main(argv=None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)
	if not hasattr(args, 'func'):
		parser.print_help()
		return 1
	try:
		args.func(args)
	except ConfigurationError as exc:
		args.subparser.print_help(sys.stderr)
		print(f"Error: {exc}", file=sys.stderr)
		return 1
	except SnpSnifferQCError as exc:
		print(f"Error: {exc}", file=sys.stderr)
		return 1
	return 0


if __name__ == "__main__":  # pragma: no cover
	sys.exit(main())
