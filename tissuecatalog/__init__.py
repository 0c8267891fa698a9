# -*- coding: utf-8 -*-
# tissuecatalog/__init__.py

"""
tissuecatalog: Tissue lists for segmentation projects
=====================================================

tissuecatalog manages the named, colored label classes ("tissues") of a segmentation and keeps them consistent with
the label volume that refers to them by id.

Key features:
- Tissue catalog with a reserved background and case-insensitive name lookup
- Legacy binary, HDF5, readable text and default list formats
- Import of foreign color lookup tables
- Reconciliation of edited tissue lists with id remapping for the label volume
- Tissue selection, per-tissue statistics and plots
"""

__version__ = "0.1.0"
__author__ = "tissuecatalog developers"

from .core.catalog import TissueCatalog
from .core.errors import (
    CapacityError,
    FormatViolation,
    InvalidTissueId,
    TissueCatalogError,
    TissueFileNotFound,
    UnrecognizedFormat,
)
from .core.hierarchy import HierarchyItem, build_hierarchy_map
from .core.reconcile import ReconcileResult, purge_carried_over, reconcile
from .core.selection import TissueSelection
from .core.tissue import TissueRecord
from .core.volume import ArrayLabelVolume

from .io.binary import StreamFormat, load_tissue_locks, load_tissues, save_tissue_locks, save_tissues, sniff_format
from .io.hdf import (
    H5GroupStore,
    MemoryGroupStore,
    load_tissues_hdf,
    load_tissues_hdf_file,
    save_tissues_hdf,
    save_tissues_hdf_file,
)
from .io.lut import import_lut, read_lut_rows
from .io.text import (
    load_default_tissue_list,
    load_tissues_readable,
    parse_readable,
    save_default_tissue_list,
    save_tissues_readable,
)

from .stats.basic import tissue_statistics, used_tissues

from .viz.charts import plot_tissue_statistics
from .viz.maps import catalog_colormap, label_image_rgb, plot_label_slice, plot_tissue_palette
