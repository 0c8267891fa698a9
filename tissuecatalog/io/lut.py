# -*- coding: utf-8 -*-
"""Imports color lookup tables written by other tools (FreeSurfer style LUTs).

Rows look like `<label> <name> <r> <g> <b> <a>` with tab or space separators and 0-255 color channels. There is no
header; a table is recognized by its `0 Unknown` row. The rows are parsed once into a DataFrame and then analysed in
three passes: detection, largest label, and building the tissue list. Labels missing from the table become
placeholder tissues so that the resulting ids are contiguous.
"""

import logging
import re
import warnings

import numpy as np
import pandas as pd

from ..core.constants import DEFAULT_OPACITY, DUMMY_TISSUE_PREFIX, TISSUES_SIZE_MAX
from ..core.errors import UnrecognizedFormat
from ..core.tissue import TissueRecord

logger = logging.getLogger(__name__)

LUT_COLUMNS = ["label", "name", "r", "g", "b", "a"]

_ROW_PATTERN = re.compile(r"^\s*(-?\d+)\s+(\S+)\s+(\d+)\s+(\d+)\s+(\d+)\s+(\d+)\s*$")


def read_lut_rows(lines):
    """Parse the usable rows of a lookup table.

    Lines that do not have the six expected fields (comments, blank lines, headers) are skipped.

    Parameters:
    -----------
    lines : iterable of str
        Text lines of the table

    Returns:
    --------
    rows : pandas.DataFrame
        Columns label, name, r, g, b, a in file order
    """
    parsed = []
    for line in lines:
        match = _ROW_PATTERN.match(line)
        if match is None:
            continue
        label, name, r, g, b, a = match.groups()
        parsed.append((int(label), name, int(r), int(g), int(b), int(a)))

    rows = pd.DataFrame(parsed, columns=LUT_COLUMNS)
    return rows.astype({"label": "int64", "r": "int64", "g": "int64", "b": "int64", "a": "int64"})


def detect_lut(rows):
    """Whether the rows contain the `0 Unknown` row that marks a lookup table."""
    if rows.empty:
        return False
    return bool(((rows["label"] == 0) & (rows["name"] == "Unknown")).any())


def lut_max_label(rows):
    """Largest label in the table, capped at the maximum tissue id."""
    if rows.empty:
        return 0
    max_label = int(rows["label"].max())
    if max_label > TISSUES_SIZE_MAX:
        warnings.warn(f"Lookup table labels above {TISSUES_SIZE_MAX} are dropped", stacklevel=2)
        max_label = TISSUES_SIZE_MAX
    return max(max_label, 0)


def build_lut_candidates(rows, rng=None):
    """Turn lookup table rows into a contiguous tissue list.

    Parameters:
    -----------
    rows : pandas.DataFrame
        Output of read_lut_rows
    rng : numpy.random.Generator, optional
        Color source for placeholder tissues

    Returns:
    --------
    candidates : list of TissueRecord
        Tissues for labels 1..max label, without background
    """
    if rng is None:
        rng = np.random.default_rng()

    max_label = lut_max_label(rows)
    by_label = rows[(rows["label"] >= 1) & (rows["label"] <= max_label)].drop_duplicates("label").set_index("label")

    candidates = []
    dummy = 1
    for label in range(1, max_label + 1):
        if label in by_label.index:
            row = by_label.loc[label]
            color = (row["r"] / 255.0, row["g"] / 255.0, row["b"] / 255.0)
            candidates.append(TissueRecord(row["name"], color, row["a"] / 255.0))
        else:
            candidates.append(TissueRecord(f"{DUMMY_TISSUE_PREFIX}{dummy}", rng.random(3), DEFAULT_OPACITY))
            dummy += 1

    if dummy > 1:
        logger.info("Lookup table has %d unused labels, filled with placeholder tissues", dummy - 1)

    return candidates


def import_lut(lines, rng=None):
    """Read a lookup table into a candidate tissue list.

    Parameters:
    -----------
    lines : iterable of str
        Text lines of the table
    rng : numpy.random.Generator, optional
        Color source for placeholder tissues

    Returns:
    --------
    candidates : list of TissueRecord

    Raises:
    -------
    UnrecognizedFormat
        If the text has no `0 Unknown` row
    """
    rows = read_lut_rows(lines)
    if not detect_lut(rows):
        raise UnrecognizedFormat("No '0 Unknown' row found, input is not a color lookup table")

    return build_lut_candidates(rows, rng=rng)
