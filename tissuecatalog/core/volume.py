# -*- coding: utf-8 -*-
"""A label volume held in a numpy array.

Reconciliation only needs an object with a `remap_labels(index_map)` method; this class is the in-memory version of
that contract and the one used by the example script and the tests.
"""

import numpy as np

from .constants import TISSUE_ID_DTYPE


class ArrayLabelVolume:
    """Voxel labels referring to tissue ids of a catalog."""

    def __init__(self, labels):
        """Initialize the volume.

        Parameters:
        -----------
        labels : array-like of int
            Tissue id per voxel, any shape
        """
        self.labels = np.asarray(labels, dtype=TISSUE_ID_DTYPE)

    def remap_labels(self, index_map):
        """Rewrite every label through an old id -> new id table.

        Parameters:
        -----------
        index_map : array-like of int
            index_map[old_id] is the new id. Labels beyond the table are left as they are.
        """
        table = np.asarray(index_map, dtype=TISSUE_ID_DTYPE)
        inside = self.labels < len(table)
        self.labels[inside] = table[self.labels[inside]]

    def remove_leading_tissues(self, count):
        """Clear labels 1..count to background and shift higher labels down by count."""
        if count <= 0:
            return

        cleared = (self.labels >= 1) & (self.labels <= count)
        shifted = self.labels > count
        self.labels[shifted] -= count
        self.labels[cleared] = 0

    def label_counts(self):
        """Number of voxels per label value, indexed by label."""
        return np.bincount(self.labels.ravel().astype(np.int64))

    def __str__(self):
        return f"ArrayLabelVolume (shape: {self.labels.shape})"
