# -*- coding: utf-8 -*-
"""Reads and writes tissue lists in the group-per-tissue layout of hierarchical (HDF5) project files.

Layout below the tissue group:

    /Tissues/version        int, format version
    /Tissues/bkg_rgbo       4 floats, background color and opacity
    /Tissues/<name>/rgbo    4 floats
    /Tissues/<name>/index   int, id of the tissue when it was saved
    /Tissues/<name>         attribute "path", folders above the tissue in the hierarchy

The codec talks to a small group-store interface so that the same code drives an HDF5 file through h5py or a plain
in-memory tree.
"""

import logging
import os
import posixpath
import warnings
from abc import ABC, abstractmethod

import h5py
import numpy as np

from ..core.constants import (
    BACKGROUND_ENTRY,
    CURRENT_VERSION,
    DEFAULT_OPACITY,
    DUMMY_TISSUE_PREFIX,
    TISSUES_GROUP,
    TISSUES_SIZE_MAX,
    VERSION_ENTRY,
)
from ..core.errors import FormatViolation, TissueFileNotFound
from ..core.hierarchy import build_hierarchy_map
from ..core.tissue import TissueRecord
from ..utils.helpers import ScopedTimer, sanitize_group_name

logger = logging.getLogger(__name__)


def _normalize(path):
    path = posixpath.normpath("/" + path.strip("/"))
    return path


class GroupStore(ABC):
    """Interface of a hierarchical key/value store.

    Paths are absolute and "/" separated. Missing paths raise KeyError.
    """

    @abstractmethod
    def create_group(self, path):
        pass

    @abstractmethod
    def exists(self, path):
        pass

    @abstractmethod
    def delete(self, path):
        pass

    @abstractmethod
    def write(self, path, values):
        pass

    @abstractmethod
    def write_attribute(self, path, name, value):
        pass

    @abstractmethod
    def list_group(self, path):
        pass

    @abstractmethod
    def read(self, path):
        pass

    @abstractmethod
    def read_attribute(self, path, name, default=None):
        pass

    def close(self):
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class MemoryGroupStore(GroupStore):
    """Group store kept in dictionaries. Children are listed in name order, like HDF5 does."""

    def __init__(self):
        self.groups = {"/"}
        self.datasets = {}
        self.attributes = {}

    def _require_parent(self, path):
        parent = posixpath.dirname(path)
        if parent not in self.groups:
            raise KeyError(f"Group '{parent}' does not exist")

    def create_group(self, path):
        path = _normalize(path)
        if path in self.groups:
            return
        self._require_parent(path)
        self.groups.add(path)

    def exists(self, path):
        path = _normalize(path)
        return path in self.groups or path in self.datasets

    def delete(self, path):
        path = _normalize(path)
        if not self.exists(path):
            raise KeyError(f"'{path}' does not exist")
        prefix = path + "/"
        self.groups = {g for g in self.groups if g != path and not g.startswith(prefix)}
        self.datasets = {k: v for k, v in self.datasets.items() if k != path and not k.startswith(prefix)}
        self.attributes = {k: v for k, v in self.attributes.items() if k != path and not k.startswith(prefix)}

    def write(self, path, values):
        path = _normalize(path)
        self._require_parent(path)
        self.datasets[path] = np.array(values)

    def write_attribute(self, path, name, value):
        path = _normalize(path)
        if not self.exists(path):
            raise KeyError(f"'{path}' does not exist")
        self.attributes.setdefault(path, {})[name] = value

    def list_group(self, path):
        path = _normalize(path)
        if path not in self.groups:
            raise KeyError(f"Group '{path}' does not exist")
        children = {posixpath.basename(p) for p in self.groups | set(self.datasets) if posixpath.dirname(p) == path}
        children.discard("")
        return sorted(children)

    def read(self, path):
        path = _normalize(path)
        if path not in self.datasets:
            raise KeyError(f"Dataset '{path}' does not exist")
        return self.datasets[path].copy()

    def read_attribute(self, path, name, default=None):
        path = _normalize(path)
        if not self.exists(path):
            raise KeyError(f"'{path}' does not exist")
        return self.attributes.get(path, {}).get(name, default)


class H5GroupStore(GroupStore):
    """Group store backed by an HDF5 file."""

    def __init__(self, filename, mode="r"):
        """Open an HDF5 file.

        Parameters:
        -----------
        filename : str
            Path to the file
        mode : str
            h5py file mode: "r", "r+", "a" or "w"
        """
        self.filename = filename
        self.file = h5py.File(filename, mode)

    def create_group(self, path):
        self.file.require_group(_normalize(path))

    def exists(self, path):
        return _normalize(path) in self.file

    def delete(self, path):
        del self.file[_normalize(path)]

    def write(self, path, values):
        path = _normalize(path)
        if path in self.file:
            del self.file[path]
        self.file.create_dataset(path, data=np.asarray(values))

    def write_attribute(self, path, name, value):
        self.file[_normalize(path)].attrs[name] = value

    def list_group(self, path):
        return list(self.file[_normalize(path)].keys())

    def read(self, path):
        return np.asarray(self.file[_normalize(path)][()])

    def read_attribute(self, path, name, default=None):
        value = self.file[_normalize(path)].attrs.get(name, default)
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def close(self):
        if self.file:
            self.file.close()


def save_tissues_hdf(catalog, store, hierarchy=None, version=CURRENT_VERSION):
    """Write a catalog into a group store.

    Parameters:
    -----------
    catalog : TissueCatalog
        Catalog to write
    store : GroupStore
        Destination; an existing tissue group is replaced
    hierarchy : HierarchyItem, optional
        Tree used to compute the "path" attribute of each tissue. Without it every path is "".
    version : int
        Value written to /Tissues/version
    """
    paths = build_hierarchy_map(hierarchy)

    records = catalog.records
    names = [sanitize_group_name(record.name) for record in records[1:]]
    for index, name in enumerate(names, start=1):
        if not name:
            raise FormatViolation(f"Tissue {index} has no name and cannot be stored as a group")

    if store.exists(TISSUES_GROUP):
        store.delete(TISSUES_GROUP)
    store.create_group(TISSUES_GROUP)

    store.write(f"{TISSUES_GROUP}/{VERSION_ENTRY}", np.array([version], dtype=np.int32))
    store.write(f"{TISSUES_GROUP}/{BACKGROUND_ENTRY}", np.array(records[0].rgbo, dtype=np.float32))

    for index, (name, record) in enumerate(zip(names, records[1:]), start=1):
        group = f"{TISSUES_GROUP}/{name}"
        if store.exists(group):
            warnings.warn(f"Tissue name '{name}' is used more than once, only the last one is kept", stacklevel=2)
        store.create_group(group)
        store.write_attribute(group, "path", paths.get(name, ""))
        store.write(f"{group}/rgbo", np.array(record.rgbo, dtype=np.float32))
        store.write(f"{group}/index", np.array([index], dtype=np.int32))

    logger.info("Wrote %d tissues to group store", catalog.tissue_count)


def _read_rgbo(store, path):
    rgbo = np.ravel(store.read(path)).astype(float)
    if rgbo.size != 4:
        raise FormatViolation(f"'{path}' holds {rgbo.size} values, expected 4")
    return [float(v) for v in rgbo]


def _read_int(store, path):
    values = np.ravel(store.read(path))
    if values.size < 1:
        raise FormatViolation(f"'{path}' is empty")
    return int(values[0])


def load_tissues_hdf(catalog, store, rng=None):
    """Read a catalog from a group store.

    Each tissue group is placed at the id stored in its "index" entry. Ids missing between 1 and the largest index
    are filled with placeholder tissues. A store without tissue groups yields a single red "Tissue1".

    Parameters:
    -----------
    catalog : TissueCatalog
        Catalog to replace
    store : GroupStore
        Source
    rng : numpy.random.Generator, optional
        Color source for placeholder tissues

    Returns:
    --------
    version : int or None
        Value of /Tissues/version, None if absent

    Raises:
    -------
    FormatViolation
        If the tissue group or a tissue entry is missing or malformed
    """
    with ScopedTimer("Read tissue list"):
        try:
            names = store.list_group(TISSUES_GROUP)
        except KeyError as e:
            raise FormatViolation(f"No '{TISSUES_GROUP}' group in store") from e

        version = None
        background = TissueRecord()
        placed = {}

        try:
            for name in names:
                if name == VERSION_ENTRY:
                    version = _read_int(store, f"{TISSUES_GROUP}/{VERSION_ENTRY}")
                elif name == BACKGROUND_ENTRY:
                    rgbo = _read_rgbo(store, f"{TISSUES_GROUP}/{BACKGROUND_ENTRY}")
                    background = TissueRecord("", rgbo[:3], rgbo[3])
                else:
                    group = f"{TISSUES_GROUP}/{name}"
                    index = _read_int(store, f"{group}/index")
                    rgbo = _read_rgbo(store, f"{group}/rgbo")
                    if index < 1 or index > TISSUES_SIZE_MAX:
                        raise FormatViolation(f"Tissue '{name}' has index {index} outside 1..{TISSUES_SIZE_MAX}")
                    if index in placed:
                        raise FormatViolation(f"Tissues '{placed[index].name}' and '{name}' share index {index}")
                    placed[index] = TissueRecord(name, rgbo[:3], rgbo[3])
        except KeyError as e:
            raise FormatViolation(f"Incomplete tissue entry: {e}") from e

    records = [background]
    if not placed:
        records.append(TissueRecord("Tissue1", (1.0, 0.0, 0.0), DEFAULT_OPACITY))
    else:
        if rng is None:
            rng = np.random.default_rng()
        dummy = 1
        for index in range(1, max(placed) + 1):
            if index in placed:
                records.append(placed[index])
            else:
                records.append(TissueRecord(f"{DUMMY_TISSUE_PREFIX}{dummy}", rng.random(3), DEFAULT_OPACITY))
                dummy += 1
        if dummy > 1:
            warnings.warn(f"{dummy - 1} tissue indices were missing and filled with placeholders", stacklevel=2)

    catalog.replace_records(records)
    logger.info("Read %d tissues from group store (version %s)", catalog.tissue_count, version)
    return version


def save_tissues_hdf_file(catalog, filename, hierarchy=None, naked=False, version=CURRENT_VERSION):
    """Write a catalog into an HDF5 file.

    Parameters:
    -----------
    catalog : TissueCatalog
        Catalog to write
    filename : str
        Project file name. Unless `naked`, the data goes to the file with the same stem and a ".h5" suffix.
    hierarchy : HierarchyItem, optional
        Tree for the "path" attributes
    naked : bool
        Write to `filename` itself
    version : int
        Format version to record

    Returns:
    --------
    ok : bool
        False if the file could not be opened or the catalog cannot be stored
    """
    filename = os.fspath(filename)
    target = filename if naked else os.path.splitext(filename)[0] + ".h5"

    try:
        store = H5GroupStore(target, "a")
    except OSError as e:
        logger.error("Opening %s: %s", target, e)
        return False

    with store:
        try:
            save_tissues_hdf(catalog, store, hierarchy=hierarchy, version=version)
        except FormatViolation as e:
            logger.error("Writing %s: %s", target, e)
            return False
    return True


def load_tissues_hdf_file(catalog, filename, rng=None):
    """Read a catalog from an HDF5 file.

    Returns:
    --------
    version : int or None
        Stored format version

    Raises:
    -------
    TissueFileNotFound
        If the file cannot be opened
    FormatViolation
        If the content is malformed
    """
    try:
        store = H5GroupStore(filename, "r")
    except OSError as e:
        raise TissueFileNotFound(f"Cannot open {filename}: {e}") from e

    with store:
        return load_tissues_hdf(catalog, store, rng=rng)
