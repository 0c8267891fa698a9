# -*- coding: utf-8 -*-
"""Defines the TissueRecord, one named and colored segmentation label class.

A tissue only carries what is needed to identify and display it: a name, an RGB color with channels in [0, 1],
an opacity and a lock flag. Its id is not stored on the record, it is the record's position in a TissueCatalog.
"""

from .constants import DEFAULT_OPACITY


class TissueRecord:
    """A single tissue entry of a catalog."""

    def __init__(self, name="", color=(0.0, 0.0, 0.0), opacity=DEFAULT_OPACITY, locked=False):
        """Initialize a TissueRecord.

        Parameters:
        -----------
        name : str
            Display name. Lookups by name are case-insensitive.
        color : tuple of float
            (r, g, b) with each channel in [0, 1]
        opacity : float
            Opacity in [0, 1]
        locked : bool
            Whether the tissue is protected against editing
        """
        self.name = name
        self.color = tuple(float(c) for c in color)
        self.opacity = float(opacity)
        self.locked = bool(locked)

        if len(self.color) != 3:
            raise ValueError(f"Tissue color needs three channels, got {len(self.color)}")

    @property
    def lower_name(self):
        """Name used as key in the catalog's name index."""
        return self.name.lower()

    @property
    def rgbo(self):
        """Color and opacity as a flat 4-tuple."""
        return (*self.color, self.opacity)

    def copy(self):
        """Create a copy of this record.

        Returns:
        --------
        record : TissueRecord
            Independent copy with the same fields
        """
        return TissueRecord(self.name, self.color, self.opacity, self.locked)

    def __eq__(self, other):
        if not isinstance(other, TissueRecord):
            return NotImplemented
        return (
            self.name == other.name
            and self.color == other.color
            and self.opacity == other.opacity
            and self.locked == other.locked
        )

    def __repr__(self):
        r, g, b = self.color
        lock = ", locked" if self.locked else ""
        return f"TissueRecord('{self.name}', ({r:.4f}, {g:.4f}, {b:.4f}), opacity={self.opacity:.4f}{lock})"
