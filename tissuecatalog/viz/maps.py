# -*- coding: utf-8 -*-
"""Functions to color label images and show a catalog's palette."""

import matplotlib.patches as mpatches
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap
from skimage.segmentation import mark_boundaries


def catalog_colormap(catalog):
    """Colormap whose entry i is the color of tissue id i."""
    return ListedColormap([record.color for record in catalog], name="tissues")


def label_image_rgb(labels, catalog):
    """Color a label image with the tissue colors.

    Parameters:
    -----------
    labels : numpy.ndarray
        Tissue id per pixel
    catalog : TissueCatalog
        Catalog the ids refer to

    Returns:
    --------
    rgb : numpy.ndarray
        Float image of shape labels.shape + (3,). Ids beyond the catalog are white.
    alpha : numpy.ndarray
        Tissue opacity per pixel, 0 on background
    """
    labels = np.asarray(labels).astype(np.int64)
    colors = np.array([record.color for record in catalog] + [(1.0, 1.0, 1.0)], dtype=float)
    opacities = np.array([0.0] + [record.opacity for record in list(catalog)[1:]] + [1.0], dtype=float)

    lookup = np.clip(labels, 0, len(catalog))
    return colors[lookup], opacities[lookup]


def plot_tissue_palette(catalog, figsize=(8, 10), columns=2, title=None):
    """Show every tissue of a catalog as a colored swatch with its id and name."""
    fig, ax = plt.subplots(figsize=figsize)

    rows = max(int(np.ceil(catalog.tissue_count / columns)), 1)
    for tissue_id in range(1, catalog.max_id + 1):
        record = catalog.get_record(tissue_id)
        col, row = divmod(tissue_id - 1, rows)
        swatch = mpatches.Rectangle((col, rows - row - 1), 0.15, 0.8, color=record.color)
        ax.add_patch(swatch)
        label = f"{tissue_id}: {record.name}" + (" (locked)" if record.locked else "")
        ax.text(col + 0.2, rows - row - 0.6, label, va="center", fontsize=8)

    ax.set_xlim(0, columns)
    ax.set_ylim(0, rows)
    ax.set_axis_off()
    ax.set_title(title if title else f"Tissues ({catalog.tissue_count})")

    return fig


def plot_label_slice(labels, catalog, image=None, title=None, figsize=(12, 10), show_boundaries=False, legend=True):
    """Plot a 2D label slice in tissue colors, optionally over a grey image.

    Parameters:
    -----------
    labels : numpy.ndarray
        2D tissue ids
    catalog : TissueCatalog
        Catalog the ids refer to
    image : numpy.ndarray, optional
        2D intensity image of the same shape shown below the labels
    title : str, optional
        Plot title
    figsize : tuple
        Figure size
    show_boundaries : bool
        Draw tissue boundaries in yellow
    legend : bool
        Add a legend with the tissues present in the slice

    Returns:
    --------
    fig : matplotlib.figure.Figure
        Figure object
    """
    labels = np.asarray(labels)
    if labels.ndim != 2:
        raise ValueError(f"Expected a 2D label slice, got shape {labels.shape}")

    rgb, alpha = label_image_rgb(labels, catalog)

    if image is not None:
        gray = np.asarray(image, dtype=float)
        gray_norm = (gray - gray.min()) / (gray.max() - gray.min() + 1e-10)
        base = np.stack([gray_norm, gray_norm, gray_norm], axis=2)
        alpha = alpha[..., np.newaxis]
        shown = base * (1 - alpha) + rgb * alpha
    else:
        shown = rgb

    if show_boundaries:
        shown = mark_boundaries(shown, labels, color=(1, 1, 0), mode="thick")

    fig, ax = plt.subplots(figsize=figsize)
    ax.imshow(shown)
    ax.set_title(title if title else "Tissue Labels")

    if legend:
        present = [int(v) for v in np.unique(labels) if 0 < v <= catalog.max_id]
        patches = [mpatches.Patch(color=catalog.get_color(v), label=catalog.get_name(v)) for v in present]
        if patches:
            ax.legend(handles=patches, loc="upper right", title="Tissues")

    return fig
