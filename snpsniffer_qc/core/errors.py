"""Exception types raised across snpsniffer_qc."""

from __future__ import annotations

__all__ = [
	"SnpSnifferQCError",
	"ConfigurationError",
	"ParseError",
	"InputFormatError",
]


class SnpSnifferQCError(Exception):
	"""Base class for all errors reported by the toolkit."""


class ConfigurationError(SnpSnifferQCError):
	"""Missing input paths or inconsistent thresholds."""


class ParseError(SnpSnifferQCError, ValueError):
	"""A sample token or ordered pair does not decompose as expected."""

	def __init__(self, message: str, token: str = ""):
		super().__init__(message)
		self.token = token


class InputFormatError(SnpSnifferQCError, ValueError):
	"""An input table does not have the fixed snpSniffer column layout."""
