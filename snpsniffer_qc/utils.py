"""Small utility helpers used across the snpsniffer_qc package.

Pure-Python string helpers with no heavy dependencies, easy to unit-test.
"""
from typing import Tuple

from .core.errors import ParseError


def split_ordered_pair(ordered_pair: str, sep: str = "-") -> Tuple[str, str]:
    """Split an ``File1-File2`` ordered pair into its two sample tokens.

    Sample tokens are assumed not to contain ``sep``; there is no escaping in
    the snpSniffer output, so anything other than exactly two parts raises
    ParseError instead of guessing where the boundary is.
    """
    parts = str(ordered_pair).split(sep)
    if len(parts) != 2:
        raise ParseError(
            f"Ordered pair {ordered_pair!r} splits into {len(parts)} parts on {sep!r}, expected 2",
            token=str(ordered_pair),
        )
    return parts[0], parts[1]


def sorted_pair_label(first: str, second: str, sep: str = "-") -> str:
    """Join two labels with the (ordinal) smaller one first.

    Example: sorted_pair_label('WGS', 'Exome') -> 'Exome-WGS'
    """
    if first < second:
        return f"{first}{sep}{second}"
    return f"{second}{sep}{first}"


def shared_calls_set_name(min_shared_calls: int) -> str:
    """Name used for plot files restricted to pairs with >= n shared calls."""
    if min_shared_calls <= 0:
        return "All"
    return f"SharedCalls{min_shared_calls}plus"


__all__ = [
    "split_ordered_pair",
    "sorted_pair_label",
    "shared_calls_set_name",
]
