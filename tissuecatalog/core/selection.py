# -*- coding: utf-8 -*-
"""The set of currently selected tissues, kept consistent with a catalog that may shrink under it."""

import logging

logger = logging.getLogger(__name__)


class TissueSelection:
    """Selected tissue ids for one catalog.

    The selection outlives edits of the catalog: ids that became invalid after tissues were removed are hidden on
    read instead of being reported as errors.
    """

    def __init__(self, catalog):
        """Initialize an empty selection.

        Parameters:
        -----------
        catalog : TissueCatalog
            Catalog the ids refer to
        """
        self.catalog = catalog
        self._selection = set()

    def get(self):
        """Selected ids that are valid in the current catalog.

        Returns:
        --------
        ids : set of int
        """
        return {tissue_id for tissue_id in self._selection if self.catalog.is_valid_id(tissue_id)}

    def set(self, tissue_ids):
        """Replace the selection.

        The new selection is taken only if every id is valid; otherwise the previous selection stays as it was.

        Parameters:
        -----------
        tissue_ids : iterable of int
            Proposed selection

        Returns:
        --------
        accepted : bool
            Whether the selection was replaced
        """
        proposed = set(tissue_ids)
        logger.info("Selected tissues %d", len(proposed))
        if not all(self.catalog.is_valid_id(tissue_id) for tissue_id in proposed):
            return False

        self._selection = proposed
        return True

    def clear(self):
        """Deselect everything."""
        self._selection = set()

    def __contains__(self, tissue_id):
        return tissue_id in self.get()

    def __len__(self):
        return len(self.get())
