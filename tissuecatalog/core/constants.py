# -*- coding: utf-8 -*-
"""Limits and format constants shared by the catalog and its codecs."""

# Tissue ids are stored as unsigned 16 bit integers.
TISSUES_SIZE_MAX = 65535
TISSUE_ID_DTYPE = "<u2"

# Names are read into a fixed 100 byte buffer by older readers.
MAX_NAME_LENGTH = 99

DEFAULT_OPACITY = 0.5

# Binary streams written at version >= 5 start with this float32 marker.
FORMAT_SENTINEL = 1.2345
OPACITY_VERSION = 5
CURRENT_VERSION = 5

TISSUES_GROUP = "/Tissues"
VERSION_ENTRY = "version"
BACKGROUND_ENTRY = "bkg_rgbo"

DUMMY_TISSUE_PREFIX = "DummyTissue"
