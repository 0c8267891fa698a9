# -*- coding: utf-8 -*-
"""Merges an externally edited tissue list into a live catalog without losing tissues the label volume refers to.

The candidate list may reorder, rename, drop or add tissues. Tissues of the live catalog that the candidate does not
mention are kept and moved to the front of the new catalog, right after the background, so no voxel label is ever left
pointing at a tissue that disappeared. Tissues that moved produce an old id -> new id table, which the label volume has
to apply before anybody sees the new catalog.
"""

import logging
import warnings

import numpy as np

from .constants import TISSUE_ID_DTYPE, TISSUES_SIZE_MAX

logger = logging.getLogger(__name__)


class ReconcileResult:
    """Outcome of a reconciliation."""

    def __init__(self, removed_range, index_map, permuted, carried_over):
        """Initialize the result.

        Parameters:
        -----------
        removed_range : int
            Number of tissues right after the background that were kept only because the candidate did not list them
        index_map : numpy.ndarray
            index_map[old_id] is the id the tissue has in the new catalog
        permuted : bool
            Whether index_map differs from the identity
        carried_over : list of int
            Old ids of the kept tissues, background excluded
        """
        self.removed_range = removed_range
        self.index_map = index_map
        self.permuted = permuted
        self.carried_over = carried_over

    def __str__(self):
        return f"ReconcileResult (removed_range: {self.removed_range}, permuted: {self.permuted})"


def _missing_ids(catalog, candidates):
    missing = set(range(catalog.max_id + 1))
    for record in candidates:
        old_id = catalog.tissue_id(record.name)
        if old_id > 0:
            missing.discard(old_id)
    return missing


def reconcile(catalog, candidates, label_volume=None):
    """Replace the content of a catalog with a candidate tissue list.

    Parameters:
    -----------
    catalog : TissueCatalog
        Live catalog; it is replaced in one step at the end
    candidates : list of TissueRecord
        New tissue list without background, in the desired id order
    label_volume : object, optional
        Owner of the voxel labels. Its `remap_labels(index_map)` is called before the catalog changes whenever
        tissues moved.

    Returns:
    --------
    result : ReconcileResult
    """
    old_records = list(catalog)

    # Dropping a candidate can add a carried-over tissue, so shrink until both fit together.
    kept = list(candidates)
    while True:
        missing = _missing_ids(catalog, kept)
        limit = TISSUES_SIZE_MAX - (len(missing) - 1)
        if len(kept) <= limit:
            break
        kept = kept[:limit]

    if len(kept) < len(candidates):
        warnings.warn(
            f"Only {len(kept)} of {len(candidates)} candidate tissues fit next to the {len(missing) - 1} kept ones",
            stacklevel=2,
        )

    carried = sorted(missing)
    merged = [old_records[old_id] for old_id in carried] + kept
    removed_range = len(carried) - 1

    index_map = np.arange(len(old_records), dtype=TISSUE_ID_DTYPE)
    permuted = False
    for new_id, record in enumerate(merged):
        old_id = catalog.tissue_id(record.name)
        if old_id > 0 and old_id != new_id:
            index_map[old_id] = new_id
            permuted = True

    if permuted:
        if label_volume is not None:
            label_volume.remap_labels(index_map)
        else:
            logger.warning("Tissue ids were permuted but no label volume was given to remap")

    catalog.replace_records(merged)

    logger.info(
        "Reconciled %d candidate tissues, %d kept from the previous list",
        len(candidates),
        removed_range,
    )

    return ReconcileResult(removed_range, index_map, permuted, carried[1:])


def purge_carried_over(catalog, label_volume, removed_range):
    """Drop the tissues a reconciliation kept only for safety.

    Removes ids 1..removed_range from the catalog and clears the matching voxels, shifting every other label down.

    Parameters:
    -----------
    catalog : TissueCatalog
        Catalog right after reconciliation
    label_volume : ArrayLabelVolume
        Volume whose labels are cleared and shifted
    removed_range : int
        ReconcileResult.removed_range
    """
    if removed_range <= 0:
        return

    label_volume.remove_leading_tissues(removed_range)
    catalog.remove_tissues(range(1, removed_range + 1))
