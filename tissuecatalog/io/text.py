# -*- coding: utf-8 -*-
"""Handles the line based tissue formats meant to be edited by hand.

Readable tissue list, used to exchange a project's tissues:

    V5
    N2
    C0.800000 0.000000 0.000000 0.500000 Artery
    C0.929412 0.839216 0.584314 0.500000 Bone

The `V` line and the opacity column are only present from version 5 on. Loading a readable list reconciles it with the
live catalog instead of replacing it, because the label volume still refers to the old ids. When the file is not a
readable list it is tried as a color lookup table.

Default tissue list, used for application wide defaults: one `name r g b opacity` line per tissue.
"""

import logging
import re
import warnings

from ..core.constants import CURRENT_VERSION, DEFAULT_OPACITY, OPACITY_VERSION, TISSUES_SIZE_MAX
from ..core.errors import FormatViolation, TissueFileNotFound
from ..core.reconcile import reconcile
from ..core.tissue import TissueRecord
from ..utils.helpers import ensure_parent_dir
from .lut import import_lut

logger = logging.getLogger(__name__)

_FLOAT = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_VERSION_LINE = re.compile(r"^V(\d+)\s*$")
_COUNT_LINE = re.compile(r"^N(\d+)\s*$")
_RECORD_LINE = re.compile(rf"^C\s*({_FLOAT})\s+({_FLOAT})\s+({_FLOAT})\s+(\S.*?)\s*$")
_RECORD_LINE_OPACITY = re.compile(rf"^C\s*({_FLOAT})\s+({_FLOAT})\s+({_FLOAT})\s+({_FLOAT})\s+(\S.*?)\s*$")


def _read_lines(filename):
    try:
        with open(filename, "r", encoding="utf-8", errors="replace") as f:
            return f.read().splitlines()
    except OSError as e:
        raise TissueFileNotFound(f"Cannot open {filename}: {e}") from e


def save_tissues_readable(catalog, filename, version=CURRENT_VERSION):
    """Write a catalog as a readable tissue list.

    Parameters:
    -----------
    catalog : TissueCatalog
        Catalog to write
    filename : str
        Path to the output file
    version : int
        Format version; 5 and above write the header line and opacities

    Returns:
    --------
    ok : bool
        False if the file could not be opened
    """
    try:
        ensure_parent_dir(filename)
        f = open(filename, "w", encoding="utf-8")
    except OSError as e:
        logger.error("Opening %s: %s", filename, e)
        return False

    with f:
        if version >= OPACITY_VERSION:
            f.write(f"V{version}\n")
        f.write(f"N{catalog.tissue_count}\n")
        for record in catalog.records[1:]:
            r, g, b = record.color
            if version >= OPACITY_VERSION:
                f.write(f"C{r:f} {g:f} {b:f} {record.opacity:f} {record.name}\n")
            else:
                f.write(f"C{r:f} {g:f} {b:f} {record.name}\n")

    return True


def parse_readable(lines):
    """Parse a readable tissue list.

    Parameters:
    -----------
    lines : list of str
        Lines of the file

    Returns:
    --------
    parsed : tuple or None
        (version, records) with records excluding background, or None if the text has no `N<count>` line and so is
        not a readable tissue list

    Raises:
    -------
    FormatViolation
        If a tissue line is malformed or fewer tissue lines than announced are present
    """
    content = [line for line in lines if line.strip()]
    pos = 0
    version = 0

    if pos < len(content):
        match = _VERSION_LINE.match(content[pos].strip())
        if match:
            version = int(match.group(1))
            pos += 1

    if pos >= len(content):
        return None
    match = _COUNT_LINE.match(content[pos].strip())
    if match is None:
        return None
    pos += 1

    count = int(match.group(1))
    if count > TISSUES_SIZE_MAX:
        warnings.warn(f"Tissue list announces {count} tissues, only {TISSUES_SIZE_MAX} are read", stacklevel=2)
        count = TISSUES_SIZE_MAX

    with_opacity = version >= OPACITY_VERSION
    pattern = _RECORD_LINE_OPACITY if with_opacity else _RECORD_LINE

    records = []
    for i in range(count):
        if pos >= len(content):
            raise FormatViolation(f"Tissue list announces {count} tissues but ends after {i}")
        line = content[pos].strip()
        pos += 1

        match = pattern.match(line)
        if match is None:
            raise FormatViolation(f"Malformed tissue line: '{line}'")

        fields = match.groups()
        color = tuple(float(v) for v in fields[:3])
        opacity = float(fields[3]) if with_opacity else DEFAULT_OPACITY
        records.append(TissueRecord(fields[-1], color, opacity))

    return version, records


def load_tissues_readable(catalog, filename, label_volume=None, rng=None):
    """Load a readable tissue list or a color lookup table and reconcile it with the catalog.

    On failure the catalog is left unchanged; callers typically fall back to catalog.init_default_tissues().

    Parameters:
    -----------
    catalog : TissueCatalog
        Live catalog
    filename : str
        Path to the file
    label_volume : object, optional
        Owner of the voxel labels, notified through remap_labels when ids move
    rng : numpy.random.Generator, optional
        Color source for placeholder tissues of lookup tables

    Returns:
    --------
    result : ReconcileResult

    Raises:
    -------
    TissueFileNotFound
        If the file cannot be opened
    FormatViolation
        If a readable list is malformed
    UnrecognizedFormat
        If the file is neither a readable list nor a lookup table
    """
    lines = _read_lines(filename)

    parsed = parse_readable(lines)
    if parsed is None:
        candidates = import_lut(lines, rng=rng)
        logger.info("Imported %d tissues from lookup table %s", len(candidates), filename)
    else:
        version, candidates = parsed
        logger.info("Read %d tissues from %s (version %d)", len(candidates), filename, version)

    return reconcile(catalog, candidates, label_volume=label_volume)


def save_default_tissue_list(catalog, filename):
    """Write the catalog as a default tissue list; spaces in names become underscores.

    Returns:
    --------
    ok : bool
        False if the file could not be opened
    """
    try:
        ensure_parent_dir(filename)
        f = open(filename, "w", encoding="utf-8")
    except OSError as e:
        logger.error("Opening %s: %s", filename, e)
        return False

    with f:
        for record in catalog.records[1:]:
            r, g, b = record.color
            name = record.name.replace(" ", "_")
            f.write(f"{name} {r:f} {g:f} {b:f} {record.opacity:f}\n")

    return True


def load_default_tissue_list(catalog, filename):
    """Replace the catalog with a default tissue list.

    Entries are read while they have the `name r g b opacity` shape; anything after the first entry that does not is
    ignored. If the file cannot be opened the catalog is reset to the clinical default palette.

    Returns:
    --------
    loaded : bool
        False if the file could not be opened
    """
    try:
        with open(filename, "r", encoding="utf-8", errors="replace") as f:
            tokens = f.read().split()
    except OSError as e:
        logger.warning("Opening %s: %s, using the built-in default tissues", filename, e)
        catalog.init_default_tissues()
        return False

    records = [TissueRecord()]
    pos = 0
    while pos + 5 <= len(tokens) and len(records) <= TISSUES_SIZE_MAX:
        try:
            r, g, b, opacity = (float(token) for token in tokens[pos + 1 : pos + 5])
        except ValueError:
            break
        records.append(TissueRecord(tokens[pos], (r, g, b), opacity))
        pos += 5

    catalog.replace_records(records)
    logger.info("Read %d default tissues from %s", len(records) - 1, filename)
    return True
