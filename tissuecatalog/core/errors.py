# -*- coding: utf-8 -*-
"""Exceptions raised while loading, saving and editing tissue catalogs."""


class TissueCatalogError(Exception):
    """Base exception for the package."""


class FormatViolation(TissueCatalogError, ValueError):
    """Malformed field, out-of-range length or unexpected token in a tissue file."""


class TissueFileNotFound(TissueCatalogError, FileNotFoundError):
    """A tissue file could not be opened."""


class UnrecognizedFormat(TissueCatalogError):
    """The input is neither a readable tissue list nor a color lookup table."""


class CapacityError(TissueCatalogError):
    """The catalog cannot hold any more tissues."""


class InvalidTissueId(TissueCatalogError, IndexError):
    """A tissue id outside 0..max_id was used for a structural operation."""

    def __init__(self, tissue_id, max_id):
        super().__init__(f"Tissue id {tissue_id} is not valid (max id {max_id})")
        self.tissue_id = tissue_id
        self.max_id = max_id
