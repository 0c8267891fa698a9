# -*- coding: utf-8 -*-
"""Tests for the hierarchical tissue groups, in memory and in HDF5 files."""

import numpy as np
import pytest

from tissuecatalog import (
    FormatViolation,
    H5GroupStore,
    HierarchyItem,
    MemoryGroupStore,
    TissueCatalog,
    TissueFileNotFound,
    TissueRecord,
    build_hierarchy_map,
    load_tissues_hdf,
    load_tissues_hdf_file,
    save_tissues_hdf,
    save_tissues_hdf_file,
)
from tissuecatalog.io.hdf import GroupStore


@pytest.fixture
def hierarchy():
    """root / Soft / {A}, root / Hard / Skeleton / {B}; C is not in the tree."""
    root = HierarchyItem("root", is_folder=True)
    root.add_folder("Soft").add_leaf("A")
    root.add_folder("Hard").add_folder("Skeleton").add_leaf("B")
    return root


def _write_tissue(store, name, index, rgbo=(1.0, 0.0, 0.0, 0.5)):
    store.create_group(f"/Tissues/{name}")
    store.write(f"/Tissues/{name}/index", np.array([index], dtype=np.int32))
    store.write(f"/Tissues/{name}/rgbo", np.array(rgbo, dtype=np.float32))


def test_hierarchy_map(hierarchy):
    """Paths list the folders from the direct parent upwards, root excluded."""
    paths = build_hierarchy_map(hierarchy)
    assert paths == {"A": "Soft", "B": "Skeleton/Hard"}
    assert build_hierarchy_map(None) == {}


def test_memory_round_trip(abc_catalog, hierarchy):
    """Saving and loading through a memory store restores names, colors and opacities."""
    store = MemoryGroupStore()
    save_tissues_hdf(abc_catalog, store, hierarchy=hierarchy, version=5)

    assert store.list_group("/Tissues") == ["A", "B", "C", "bkg_rgbo", "version"]
    assert store.read_attribute("/Tissues/A", "path") == "Soft"
    assert store.read_attribute("/Tissues/B", "path") == "Skeleton/Hard"
    assert store.read_attribute("/Tissues/C", "path") == "", "Tissues outside the tree get an empty path."

    restored = TissueCatalog()
    assert load_tissues_hdf(restored, store) == 5
    assert restored.records == abc_catalog.records


def test_load_places_tissues_by_index():
    """Stored indices decide the ids, not the enumeration order."""
    store = MemoryGroupStore()
    store.create_group("/Tissues")
    _write_tissue(store, "Alpha", 3)
    _write_tissue(store, "Beta", 1)
    _write_tissue(store, "Gamma", 2)

    catalog = TissueCatalog()
    assert load_tissues_hdf(catalog, store) is None, "No version entry was written."
    assert [catalog.get_name(i) for i in range(1, 4)] == ["Beta", "Gamma", "Alpha"]
    assert catalog.tissue_id("alpha") == 3


def test_empty_group_gives_single_tissue():
    """Without tissue groups the catalog gets one red Tissue1."""
    store = MemoryGroupStore()
    store.create_group("/Tissues")
    store.write("/Tissues/version", np.array([5], dtype=np.int32))
    store.write("/Tissues/bkg_rgbo", np.array([0.0, 0.0, 0.0, 0.25], dtype=np.float32))

    catalog = TissueCatalog.default()
    load_tissues_hdf(catalog, store)
    assert catalog.tissue_count == 1
    assert catalog.get_record(1) == TissueRecord("Tissue1", (1.0, 0.0, 0.0), 0.5)
    assert catalog.get_opacity(0) == 0.25


def test_index_gap_is_filled():
    """A missing index becomes a placeholder so ids stay contiguous."""
    store = MemoryGroupStore()
    store.create_group("/Tissues")
    _write_tissue(store, "First", 1)
    _write_tissue(store, "Third", 3)

    catalog = TissueCatalog()
    with pytest.warns(UserWarning):
        load_tissues_hdf(catalog, store, rng=np.random.default_rng(0))
    assert [catalog.get_name(i) for i in range(1, 4)] == ["First", "DummyTissue1", "Third"]


def test_invalid_entries_are_rejected():
    """Duplicate or non-positive indices and missing groups fail without touching the catalog."""
    catalog = TissueCatalog.default()

    with pytest.raises(FormatViolation):
        load_tissues_hdf(catalog, MemoryGroupStore())

    store = MemoryGroupStore()
    store.create_group("/Tissues")
    _write_tissue(store, "One", 1)
    _write_tissue(store, "Other", 1)
    with pytest.raises(FormatViolation):
        load_tissues_hdf(catalog, store)

    store = MemoryGroupStore()
    store.create_group("/Tissues")
    _write_tissue(store, "Zero", 0)
    with pytest.raises(FormatViolation):
        load_tissues_hdf(catalog, store)

    store = MemoryGroupStore()
    store.create_group("/Tissues")
    store.create_group("/Tissues/NoData")
    with pytest.raises(FormatViolation):
        load_tissues_hdf(catalog, store)

    assert catalog.tissue_count == 82


def test_separators_in_names_are_replaced():
    """Slashes and backslashes cannot appear in group names."""
    catalog = TissueCatalog()
    catalog.add_tissue(TissueRecord("Left/Right\\Up", (0.5, 0.5, 0.5)))
    store = MemoryGroupStore()
    save_tissues_hdf(catalog, store)
    assert "Left_Right_Up" in store.list_group("/Tissues")


def test_h5_file_round_trip(tmp_path, abc_catalog, hierarchy):
    """The project's .h5 companion file round-trips the catalog."""
    ok = save_tissues_hdf_file(abc_catalog, tmp_path / "project.prj", hierarchy=hierarchy)
    assert ok
    target = tmp_path / "project.h5"
    assert target.exists(), "Non-naked saves write to the .h5 file."

    with H5GroupStore(str(target)) as store:
        assert store.read_attribute("/Tissues/B", "path") == "Skeleton/Hard"

    restored = TissueCatalog()
    assert load_tissues_hdf_file(restored, str(target)) == 5
    assert restored.records == abc_catalog.records


def test_h5_save_replaces_previous_tissues(tmp_path, abc_catalog):
    """Saving again into the same file drops tissues that no longer exist."""
    target = str(tmp_path / "tissues.h5")
    assert save_tissues_hdf_file(abc_catalog, target, naked=True)

    abc_catalog.remove_tissue(1)
    assert save_tissues_hdf_file(abc_catalog, target, naked=True)

    restored = TissueCatalog()
    load_tissues_hdf_file(restored, target)
    assert [restored.get_name(i) for i in range(1, restored.max_id + 1)] == ["B", "C"]


def test_missing_h5_file(tmp_path):
    """Opening a missing file is reported as TissueFileNotFound."""
    with pytest.raises(TissueFileNotFound):
        load_tissues_hdf_file(TissueCatalog(), str(tmp_path / "absent.h5"))


def test_rejected_save_keeps_previous_tissues(tmp_path, abc_catalog):
    """A catalog with an unnamed tissue is refused before the stored tissues are touched."""
    unnamed = TissueCatalog()
    unnamed.add_tissue(TissueRecord("", (0.1, 0.2, 0.3)))
    unnamed.add_tissue(TissueRecord("Lung", (0.2, 0.4, 0.9)))

    store = MemoryGroupStore()
    save_tissues_hdf(abc_catalog, store)
    with pytest.raises(FormatViolation):
        save_tissues_hdf(unnamed, store)

    restored = TissueCatalog()
    load_tissues_hdf(restored, store)
    assert restored.records == abc_catalog.records, "Earlier tissues must still be loadable."

    target = str(tmp_path / "tissues.h5")
    assert save_tissues_hdf_file(abc_catalog, target, naked=True)
    assert save_tissues_hdf_file(unnamed, target, naked=True) is False, "The file wrapper reports failure as False."

    restored = TissueCatalog()
    load_tissues_hdf_file(restored, target)
    assert restored.records == abc_catalog.records


def test_incomplete_store_cannot_be_created():
    """A store missing part of the interface fails on construction."""

    class ReadOnlyStore(GroupStore):
        def list_group(self, path):
            return []

    with pytest.raises(TypeError):
        ReadOnlyStore()
