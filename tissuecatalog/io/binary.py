# -*- coding: utf-8 -*-
"""Reads and writes the legacy binary tissue stream embedded in project files.

The stream has no delimiters; fields follow each other in a fixed order and the layout depends on a version number
that the caller supplies:

- tissue count: uint16 for version >= 1, a single byte for version 0
- version >= 5 only: the float32 marker 1.2345 and a uint16 version
- background: r, g, b as float32, plus opacity if the stream version is >= 5
- per tissue, in id order from 1: r, g, b, opacity (version >= 5), int32 name length, name bytes

Older streams have no marker. The reader always takes four bytes after the count and checks them against the marker;
if they differ they are the background's red channel. Lock flags live in a separate stream of one byte per tissue.

All values are little-endian.
"""

import enum
import logging

import numpy as np

from ..core.constants import (
    CURRENT_VERSION,
    DEFAULT_OPACITY,
    FORMAT_SENTINEL,
    MAX_NAME_LENGTH,
    OPACITY_VERSION,
)
from ..core.errors import CapacityError, FormatViolation
from ..core.tissue import TissueRecord
from ..utils.helpers import ScopedTimer

logger = logging.getLogger(__name__)

_FLOAT = np.dtype("<f4")
_UINT16 = np.dtype("<u2")
_INT32 = np.dtype("<i4")

SENTINEL_BYTES = np.array(FORMAT_SENTINEL, dtype=_FLOAT).tobytes()


class StreamFormat(enum.Enum):
    """Layout family of a binary tissue stream."""

    UNVERSIONED = "unversioned"
    VERSIONED = "versioned"


def sniff_format(raw):
    """Classify a stream by the four bytes that follow the tissue count.

    The comparison is bit-exact against the float32 marker. A version 0 stream whose background red channel happens to
    be exactly 1.2345 is indistinguishable from a marker and is read as versioned.

    Parameters:
    -----------
    raw : bytes
        The four bytes read after the count

    Returns:
    --------
    stream_format : StreamFormat
    """
    if len(raw) != 4:
        raise FormatViolation(f"Format marker needs 4 bytes, got {len(raw)}")
    if bytes(raw) == SENTINEL_BYTES:
        return StreamFormat.VERSIONED
    return StreamFormat.UNVERSIONED


def _read_exact(fp, size, what):
    data = fp.read(size)
    if data is None or len(data) != size:
        raise FormatViolation(f"Unexpected end of tissue stream while reading {what}")
    return data


def _read_floats(fp, count, what):
    values = np.frombuffer(_read_exact(fp, count * _FLOAT.itemsize, what), dtype=_FLOAT)
    return [float(v) for v in values]


def _read_scalar(fp, dtype, what):
    return int(np.frombuffer(_read_exact(fp, dtype.itemsize, what), dtype=dtype)[0])


def _pack(values, dtype):
    return np.asarray(values, dtype=dtype).tobytes()


def _decode_name(raw):
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        # streams written by older releases use the local 8 bit code page
        return raw.decode("latin-1")


def save_tissues(catalog, fp, version=CURRENT_VERSION):
    """Write a catalog to a binary stream.

    Parameters:
    -----------
    catalog : TissueCatalog
        Catalog to write
    fp : binary file object
        Destination, positioned where the tissue block starts
    version : int
        Project format version. 0 writes the count as one byte; 5 and above add the marker and opacities.
    """
    count = catalog.tissue_count
    with_opacity = version >= OPACITY_VERSION

    if version > 0:
        fp.write(_pack(count, _UINT16))
    else:
        if count > 255:
            raise CapacityError(f"Version 0 streams hold at most 255 tissues, catalog has {count}")
        fp.write(bytes([count]))

    if with_opacity:
        fp.write(SENTINEL_BYTES)
        fp.write(_pack(version, _UINT16))

    records = catalog.records
    background = records[0]
    fp.write(_pack(background.rgbo if with_opacity else background.color, _FLOAT))

    for record in records[1:]:
        fp.write(_pack(record.rgbo if with_opacity else record.color, _FLOAT))
        name = record.name.encode("utf-8")
        if len(name) > MAX_NAME_LENGTH:
            raise FormatViolation(f"Tissue name '{record.name}' is longer than {MAX_NAME_LENGTH} bytes")
        fp.write(_pack(len(name), _INT32))
        fp.write(name)

    logger.info("Wrote %d tissues (version %d)", count, version)


def load_tissues(catalog, fp, version=CURRENT_VERSION):
    """Read a catalog from a binary stream.

    Nothing is changed in the catalog unless the whole block decodes. Lock flags are reset; read them afterwards
    with load_tissue_locks.

    Parameters:
    -----------
    catalog : TissueCatalog
        Catalog to replace
    fp : binary file object
        Source, positioned where the tissue block starts
    version : int
        Project format version the stream was written with. Only decides the width of the count.

    Returns:
    --------
    opacity_version : int
        Version found after the marker, 0 for unversioned streams

    Raises:
    -------
    FormatViolation
        On truncated data or a name length outside 0..99
    """
    with ScopedTimer("Read tissue stream"):
        if version > 0:
            count = _read_scalar(fp, _UINT16, "tissue count")
        else:
            count = _read_exact(fp, 1, "tissue count")[0]

        head = _read_exact(fp, 4, "format marker")
        if sniff_format(head) is StreamFormat.VERSIONED:
            opacity_version = _read_scalar(fp, _UINT16, "stream version")
            background_color = _read_floats(fp, 3, "background color")
        else:
            opacity_version = 0
            first = float(np.frombuffer(head, dtype=_FLOAT)[0])
            background_color = [first] + _read_floats(fp, 2, "background color")

        with_opacity = opacity_version >= OPACITY_VERSION
        background_opacity = _read_floats(fp, 1, "background opacity")[0] if with_opacity else DEFAULT_OPACITY
        records = [TissueRecord("", background_color, background_opacity)]

        for tissue_id in range(1, count + 1):
            color = _read_floats(fp, 3, f"color of tissue {tissue_id}")
            opacity = _read_floats(fp, 1, f"opacity of tissue {tissue_id}")[0] if with_opacity else DEFAULT_OPACITY
            size = _read_scalar(fp, _INT32, f"name length of tissue {tissue_id}")
            if size < 0 or size > MAX_NAME_LENGTH:
                raise FormatViolation(f"Name length {size} of tissue {tissue_id} is outside 0..{MAX_NAME_LENGTH}")
            name = _decode_name(_read_exact(fp, size, f"name of tissue {tissue_id}"))
            records.append(TissueRecord(name, color, opacity))

    catalog.replace_records(records)
    logger.info("Read %d tissues (stream version %d)", count, opacity_version)
    return opacity_version


def save_tissue_locks(catalog, fp):
    """Write one lock byte per tissue, background excluded."""
    fp.write(bytes(1 if record.locked else 0 for record in catalog.records[1:]))


def load_tissue_locks(catalog, fp):
    """Read one lock byte per tissue of the catalog, background excluded.

    Raises:
    -------
    FormatViolation
        If the stream holds fewer bytes than the catalog has tissues
    """
    flags = _read_exact(fp, catalog.tissue_count, "lock flags")
    catalog.set_locked(0, False)
    for tissue_id, flag in enumerate(flags, start=1):
        catalog.set_locked(tissue_id, flag != 0)
