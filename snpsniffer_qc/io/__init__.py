"""I/O subpackage.

Readers for the snpSniffer comparison / heterozygosity tables and writers
for the summary tables.
"""

from .snpsniffer_reader import (  # noqa: F401
	ComparisonReader,
	HetReader,
	read_comparison_file,
	read_het_file,
)
from .summary_writer import (  # noqa: F401
	ALL_PAIRS_FILENAME,
	MATCH_ERRORS_FILENAME,
	HET_RATE_FILENAME,
	CROSS_CONTAMINATION_FILENAME,
	write_pair_tables,
	write_het_tables,
	write_summary_tables,
)

__all__ = [
	"ComparisonReader",
	"HetReader",
	"read_comparison_file",
	"read_het_file",
	"ALL_PAIRS_FILENAME",
	"MATCH_ERRORS_FILENAME",
	"HET_RATE_FILENAME",
	"CROSS_CONTAMINATION_FILENAME",
	"write_pair_tables",
	"write_het_tables",
	"write_summary_tables",
]
