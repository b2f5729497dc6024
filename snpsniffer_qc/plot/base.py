"""Base plotting utilities shared across QC plot modules.

This module centralises style configuration and the one chart shape every
summary plot uses: a per-category box plot overlaid with jittered points and
dashed threshold lines. Each helper returns a matplotlib Figure when an
``output_path`` is not provided; otherwise the figure is saved and closed
(to avoid memory accumulation in batch runs) and ``None`` is returned.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple, List

import matplotlib
import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd
import numpy as np

__all__ = [
	"set_plot_style",
	"save_figure",
	"threshold_boxplot",
	"RATIO_TICKS",
]

RATIO_TICKS = [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]


def set_plot_style() -> None:
	"""Apply a unified visual style.

	Centralised so we can later expose style choices via configuration.
	"""
	sns.set_theme(style="whitegrid")
	plt.rcParams.update({
		"axes.titlesize": 13,
		"axes.labelsize": 16,
		"xtick.labelsize": 12,
		"ytick.labelsize": 12,
		"font.size": 10,
		"figure.dpi": 100,
	})


def save_figure(fig: plt.Figure, output_path: Optional[str]) -> Optional[plt.Figure]:
	"""Save figure if ``output_path`` provided else return it.

	Parameters
	----------
	fig : matplotlib.figure.Figure
		Figure to save or return.
	output_path : str | None
		Path to save. If None the figure is returned and *not* closed.
	"""
	if output_path:
		fig.savefig(output_path, bbox_inches="tight")
		plt.close(fig)
		return None
	return fig


def threshold_boxplot(
	data: pd.DataFrame,
	x: str,
	y: str,
	*,
	color_col: Optional[str] = None,
	thresholds: Sequence[float] = (),
	output_path: Optional[str] = None,
	title: str = "",
	xlabel: Optional[str] = None,
	ylabel: Optional[str] = None,
	yticks: Optional[Sequence[float]] = None,
	color_label: Optional[str] = None,
	color_limits: Tuple[float, float] = (0, 400),
	color_ticks: Optional[Sequence[float]] = None,
	cmap: str = "rainbow",
	point_color: str = "black",
	missing_color: str = "black",
	jitter: float = 0.365,
	point_size: float = 18,
	figsize: Tuple[float, float] = (8, 6),
	seed: int = 42,
) -> Optional[plt.Figure]:
	"""Box plot of ``y`` per ``x`` category with jittered points on top.

	Points are coloured along a continuous colour map by ``color_col`` (values
	clipped to ``color_limits``; missing values drawn in ``missing_color``) or
	drawn in ``point_color`` when ``color_col`` is None. Outliers are not drawn
	by the box plot since every point is already shown. Each value in
	``thresholds`` adds a dashed red horizontal line.
	"""
	required = {x, y} | ({color_col} if color_col else set())
	if not required.issubset(data.columns):
		raise ValueError(f"DataFrame must contain columns: {required}")
	set_plot_style()
	df = data.dropna(subset=[x]).copy()
	order: List[str] = sorted(df[x].astype(str).unique())
	df[x] = df[x].astype(str)
	fig, ax = plt.subplots(figsize=figsize)
	if order:
		sns.boxplot(
			data=df,
			x=x,
			y=y,
			order=order,
			showfliers=False,
			linewidth=1.5,
			boxprops={"facecolor": "white", "edgecolor": "black"},
			medianprops={"color": "black"},
			whiskerprops={"color": "black"},
			capprops={"color": "black"},
			ax=ax,
		)
	rng = np.random.default_rng(seed)
	positions = df[x].map({cat: i for i, cat in enumerate(order)}).to_numpy(dtype=float)
	xs = positions + rng.uniform(-jitter, jitter, size=len(df))
	ys = df[y].to_numpy(dtype=float)
	if color_col:
		colormap = matplotlib.colormaps[cmap].copy()
		colormap.set_bad(missing_color)
		values = np.ma.masked_invalid(df[color_col].to_numpy(dtype=float))
		sc = ax.scatter(
			xs, ys, c=values, cmap=colormap, vmin=color_limits[0], vmax=color_limits[1],
			s=point_size, edgecolors="none", plotnonfinite=True, zorder=3,
		)
		cbar = fig.colorbar(sc, ax=ax)
		cbar.set_label(color_label or color_col)
		if color_ticks is None:
			color_ticks = list(np.arange(color_limits[0], color_limits[1] + 1, 50))
		cbar.set_ticks(color_ticks)
	else:
		ax.scatter(xs, ys, color=point_color, s=point_size, edgecolors="none", zorder=3)
	for t in thresholds:
		ax.axhline(t, color="red", linestyle="--", linewidth=1)
	if yticks is not None:
		ax.set_yticks(list(yticks))
	ax.set_xlabel(xlabel or x)
	ax.set_ylabel(ylabel or y)
	if title:
		ax.set_title(title)
	for label in ax.get_xticklabels():
		label.set_rotation(45)
		label.set_ha("right")
	sns.despine(ax=ax)
	fig.tight_layout()
	return save_figure(fig, output_path)
