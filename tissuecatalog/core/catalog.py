# -*- coding: utf-8 -*-
"""Defines the TissueCatalog, the ordered registry of tissues of a segmentation project.

Id 0 is the background and always exists. Tissues occupy the contiguous ids 1..N, so removing a tissue shifts every
tissue behind it down by one. A lower-cased name index is kept next to the records for lookups; it is derived data and
gets rebuilt from the records after every structural change.

Callers create and pass the catalog around explicitly, so several independent catalogs can live in one process.
"""

import logging

import pandas as pd

from .constants import DEFAULT_OPACITY, TISSUES_SIZE_MAX
from .defaults import DEFAULT_TISSUES
from .errors import CapacityError, InvalidTissueId
from .tissue import TissueRecord

logger = logging.getLogger(__name__)


class TissueCatalog:
    """An ordered collection of tissues with a reserved background at id 0."""

    def __init__(self, records=None):
        """Initialize a catalog.

        Parameters:
        -----------
        records : list of TissueRecord, optional
            Records including the background at position 0. If None, the catalog holds only the background.
        """
        self._records = [TissueRecord()]
        self._name_index = {}

        if records is not None:
            self.replace_records(records)

    @classmethod
    def default(cls):
        """Create a catalog populated with the clinical default palette."""
        catalog = cls()
        catalog.init_default_tissues()
        return catalog

    def init_default_tissues(self):
        """Replace the content with the clinical default palette."""
        records = [TissueRecord()]
        for name, color in DEFAULT_TISSUES:
            records.append(TissueRecord(name, color))
        self.replace_records(records)

    # counting

    @property
    def tissue_count(self):
        """Number of tissues, background excluded."""
        return len(self._records) - 1

    @property
    def max_id(self):
        """Largest valid tissue id."""
        return len(self._records) - 1

    def is_valid_id(self, tissue_id):
        """Whether 0 <= tissue_id <= max_id."""
        return 0 <= tissue_id <= self.max_id

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    @property
    def records(self):
        """Copies of all records, background first."""
        return [record.copy() for record in self._records]

    # record access

    def _check_id(self, tissue_id):
        if not self.is_valid_id(tissue_id):
            raise InvalidTissueId(tissue_id, self.max_id)

    def get_record(self, tissue_id):
        """Get the record of a tissue.

        Parameters:
        -----------
        tissue_id : int
            Id in 0..max_id

        Returns:
        --------
        record : TissueRecord
            The stored record (not a copy)

        Raises:
        -------
        InvalidTissueId
            If the id is out of range
        """
        self._check_id(tissue_id)
        return self._records[tissue_id]

    def get_record_or_default(self, tissue_id, default=None):
        """Get the record of a tissue, or `default` if the id is out of range."""
        if not self.is_valid_id(tissue_id):
            return default
        return self._records[tissue_id]

    def get_name(self, tissue_id):
        """Name of a tissue; "" for ids out of range."""
        record = self.get_record_or_default(tissue_id)
        return record.name if record is not None else ""

    def get_color(self, tissue_id):
        """Color of a tissue; black for ids out of range."""
        record = self.get_record_or_default(tissue_id)
        return record.color if record is not None else (0.0, 0.0, 0.0)

    def get_opacity(self, tissue_id):
        """Opacity of a tissue; DEFAULT_OPACITY for ids out of range."""
        record = self.get_record_or_default(tissue_id)
        return record.opacity if record is not None else DEFAULT_OPACITY

    def get_locked(self, tissue_id):
        """Lock state of a tissue; unlocked for ids out of range."""
        record = self.get_record_or_default(tissue_id)
        return record.locked if record is not None else False

    def set_name(self, tissue_id, name):
        """Rename a tissue and update its entry in the name index."""
        record = self.get_record(tissue_id)
        old_key = record.lower_name
        if self._name_index.get(old_key) == tissue_id:
            del self._name_index[old_key]
        record.name = name
        if tissue_id > 0:
            self._name_index[record.lower_name] = tissue_id

    def set_color(self, tissue_id, r, g, b):
        """Set the color of a tissue."""
        self.get_record(tissue_id).color = (float(r), float(g), float(b))

    def set_opacity(self, tissue_id, opacity):
        """Set the opacity of a tissue."""
        self.get_record(tissue_id).opacity = float(opacity)

    def set_locked(self, tissue_id, locked):
        """Lock or unlock a tissue."""
        self.get_record(tissue_id).locked = bool(locked)

    def set_all_locked(self, locked):
        """Lock or unlock every tissue except the background."""
        for record in self._records[1:]:
            record.locked = bool(locked)

    def tissue_id(self, name):
        """Look up a tissue id by name, ignoring case.

        Returns:
        --------
        tissue_id : int
            The id, or 0 if no tissue has that name. 0 is also the background id, so callers that need to tell
            "not found" apart must check for 0 explicitly.
        """
        return self._name_index.get(name.lower(), 0)

    # structural edits

    def add_tissue(self, record):
        """Append a tissue.

        Parameters:
        -----------
        record : TissueRecord
            Tissue to append; it is stored as given

        Returns:
        --------
        tissue_id : int
            Id of the new tissue
        """
        if self.tissue_count >= TISSUES_SIZE_MAX:
            raise CapacityError(f"Catalog is full ({TISSUES_SIZE_MAX} tissues)")

        self._records.append(record)
        tissue_id = self.tissue_count
        self._name_index[record.lower_name] = tissue_id
        return tissue_id

    def remove_tissue(self, tissue_id):
        """Remove one tissue; tissues behind it move down by one id."""
        self.remove_tissues([tissue_id])

    def remove_tissues(self, tissue_ids):
        """Remove several tissues at once.

        All ids are validated before anything is removed. Removal runs from the highest id down so that each pending
        id still points at the tissue it meant when the call was made.

        Parameters:
        -----------
        tissue_ids : iterable of int
            Ids in 1..max_id. The background cannot be removed.
        """
        targets = sorted(set(tissue_ids), reverse=True)
        for tissue_id in targets:
            if tissue_id == 0 or not self.is_valid_id(tissue_id):
                raise InvalidTissueId(tissue_id, self.max_id)

        for tissue_id in targets:
            del self._records[tissue_id]

        self._rebuild_name_index()

    def remove_all_tissues(self):
        """Reset to a catalog holding only the background."""
        self._records = [TissueRecord()]
        self._name_index = {}

    def replace_records(self, records):
        """Replace every record at once, background included.

        Parameters:
        -----------
        records : list of TissueRecord
            New content; records[0] becomes the background
        """
        records = list(records)
        if not records:
            raise ValueError("A catalog needs at least the background record")
        if len(records) - 1 > TISSUES_SIZE_MAX:
            raise CapacityError(f"{len(records) - 1} tissues exceed the maximum of {TISSUES_SIZE_MAX}")

        self._records = records
        self._rebuild_name_index()

    def _rebuild_name_index(self):
        self._name_index = {}
        for tissue_id in range(1, len(self._records)):
            self._name_index[self._records[tissue_id].lower_name] = tissue_id

    # display helpers

    def color_uchar(self, tissue_id):
        """Color of a tissue as 0-255 integers; white for ids beyond the catalog."""
        if not self.is_valid_id(tissue_id):
            return (255, 255, 255)
        return tuple(int(c * 255) for c in self._records[tissue_id].color)

    def blended_rgb(self, tissue_id, offset=0):
        """Color of a tissue blended with a grey level by its opacity.

        Parameters:
        -----------
        tissue_id : int
            Id in 0..max_id
        offset : int
            Grey level (0-255) the color is blended against

        Returns:
        --------
        rgb : tuple of int
            Blended 0-255 color
        """
        record = self.get_record(tissue_id)
        return tuple(int(offset + record.opacity * (255.0 * c - offset)) for c in record.color)

    def to_frame(self):
        """Tabular view of the catalog.

        Returns:
        --------
        frame : pandas.DataFrame
            One row per id with columns id, name, r, g, b, opacity, locked
        """
        rows = []
        for tissue_id, record in enumerate(self._records):
            r, g, b = record.color
            rows.append(
                {
                    "id": tissue_id,
                    "name": record.name,
                    "r": r,
                    "g": g,
                    "b": b,
                    "opacity": record.opacity,
                    "locked": record.locked,
                }
            )
        return pd.DataFrame(rows, columns=["id", "name", "r", "g", "b", "opacity", "locked"])

    def copy(self):
        """Create an independent copy of this catalog."""
        return TissueCatalog(self.records)

    def __str__(self):
        """String representation of the catalog."""
        return f"TissueCatalog ({self.tissue_count} tissues)"
