# -*- coding: utf-8 -*-
"""Basic statistics of a label volume per tissue."""

import warnings

import numpy as np


def tissue_statistics(labels, catalog):
    """Count the voxels of every tissue.

    Parameters:
    -----------
    labels : numpy.ndarray or ArrayLabelVolume
        Tissue id per voxel
    catalog : TissueCatalog
        Catalog the ids refer to

    Returns:
    --------
    stats : pandas.DataFrame
        The catalog table (id, name, r, g, b, opacity, locked) with added voxels and fraction columns
    """
    labels = np.asarray(getattr(labels, "labels", labels))
    counts = np.bincount(labels.ravel().astype(np.int64), minlength=len(catalog))

    unknown = int(counts[len(catalog) :].sum())
    if unknown:
        warnings.warn(f"{unknown} voxels carry ids beyond the catalog (max id {catalog.max_id})", stacklevel=2)

    stats = catalog.to_frame()
    stats["voxels"] = counts[: len(catalog)]
    total = labels.size
    stats["fraction"] = stats["voxels"] / total if total else 0.0

    return stats


def used_tissues(labels, catalog):
    """Ids of the tissues that label at least one voxel, background excluded."""
    stats = tissue_statistics(labels, catalog)
    used = stats[(stats["id"] > 0) & (stats["voxels"] > 0)]
    return used["id"].tolist()
