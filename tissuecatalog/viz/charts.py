# -*- coding: utf-8 -*-
"""Visualization functions for plotting per-tissue statistics."""

import matplotlib.pyplot as plt
import seaborn as sns


def plot_tissue_statistics(stats, figsize=(12, 6), include_background=False, y_log=False):
    """Plot the voxel count of every tissue as a bar in the tissue's color.

    Parameters:
    -----------
    stats : pandas.DataFrame
        Output of tissue_statistics
    figsize : tuple
        Figure size
    include_background : bool
        Whether to show id 0
    y_log : bool
        Whether to use logarithmic scale for y-axis

    Returns:
    --------
    fig : matplotlib.figure.Figure
        Figure object
    """
    data = stats if include_background else stats[stats["id"] > 0]
    data = data[data["voxels"] > 0]

    fig, ax = plt.subplots(figsize=figsize)

    if data.empty:
        ax.text(0.5, 0.5, "No labelled voxels", ha="center", va="center", transform=ax.transAxes)
    else:
        palette = {row["name"]: (row["r"], row["g"], row["b"]) for _, row in data.iterrows()}
        sns.barplot(data=data, x="name", y="voxels", hue="name", palette=palette, legend=False, ax=ax)
        ax.tick_params(axis="x", rotation=90)

    if y_log:
        ax.set_yscale("log")

    ax.set_title("Voxels per Tissue")
    ax.set_xlabel("Tissue")
    ax.set_ylabel("Voxels")
    fig.tight_layout()

    return fig
