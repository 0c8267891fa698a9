# -*- coding: utf-8 -*-
"""Testing Working Document!

Just a workspace document to walk through the functionality of the library.
"""

import logging
import os

import numpy as np

from tissuecatalog import (
    ArrayLabelVolume,
    FormatViolation,
    HierarchyItem,
    TissueCatalog,
    TissueFileNotFound,
    TissueRecord,
    TissueSelection,
    UnrecognizedFormat,
    load_tissues_hdf_file,
    load_tissues_readable,
    plot_label_slice,
    plot_tissue_statistics,
    purge_carried_over,
    save_tissues_hdf_file,
    save_tissues_readable,
    tissue_statistics,
)


def run_example(tissue_list_path=None):
    """Run Example."""
    output_dir = "output"
    os.makedirs(output_dir, exist_ok=True)

    print("Creating a small catalog...")
    catalog = TissueCatalog()
    for name, color in [("Skin", (0.75, 0.61, 0.47)), ("Bone", (0.93, 0.84, 0.58)), ("Fat", (0.98, 0.98, 0.22))]:
        catalog.add_tissue(TissueRecord(name, color))
    print(catalog)

    labels = np.zeros((64, 64), dtype=np.uint16)
    labels[8:56, 8:56] = catalog.tissue_id("Skin")
    labels[16:48, 16:48] = catalog.tissue_id("Fat")
    labels[24:40, 24:40] = catalog.tissue_id("Bone")
    volume = ArrayLabelVolume(labels)

    selection = TissueSelection(catalog)
    selection.set({1, 3})

    print("\nSaving readable list and HDF5 tissue groups...")
    readable_path = os.path.join(output_dir, "tissues.txt")
    save_tissues_readable(catalog, readable_path)

    root = HierarchyItem("root", is_folder=True)
    hard = root.add_folder("Hard")
    hard.add_leaf("Bone")
    soft = root.add_folder("Soft")
    soft.add_leaf("Skin")
    soft.add_leaf("Fat")
    save_tissues_hdf_file(catalog, os.path.join(output_dir, "project.h5"), hierarchy=root, naked=True)

    print("\nReloading HDF5 tissue groups into a second catalog...")
    restored = TissueCatalog()
    load_tissues_hdf_file(restored, os.path.join(output_dir, "project.h5"))
    print(restored)

    source = tissue_list_path if tissue_list_path else readable_path
    if tissue_list_path is None:
        # reorder and drop "Skin" to show reconciliation
        with open(readable_path, "w", encoding="utf-8") as f:
            f.write("V5\nN3\n")
            f.write("C0.930000 0.840000 0.580000 0.500000 Bone\n")
            f.write("C0.980000 0.980000 0.220000 0.500000 Fat\n")
            f.write("C0.200000 0.400000 0.900000 0.500000 Lung\n")

    print(f"\nReconciling with {source}...")
    try:
        result = load_tissues_readable(catalog, source, label_volume=volume)
    except (TissueFileNotFound, FormatViolation, UnrecognizedFormat) as e:
        print(f"Could not load {source}: {e}; falling back to default tissues")
        catalog.init_default_tissues()
        return

    print(result)
    for tissue_id in range(1, catalog.max_id + 1):
        print(f"  {tissue_id}: {catalog.get_name(tissue_id)}")
    print(f"Selection after reconciliation: {sorted(selection.get())}")

    if result.removed_range > 0:
        print(f"\nPurging {result.removed_range} tissues missing from the file...")
        purge_carried_over(catalog, volume, result.removed_range)

    stats = tissue_statistics(volume, catalog)
    print(stats[["id", "name", "voxels", "fraction"]])

    fig1 = plot_label_slice(volume.labels, catalog, show_boundaries=True)
    fig1.savefig(os.path.join(output_dir, "1_labels.png"))

    fig2 = plot_tissue_statistics(stats)
    fig2.savefig(os.path.join(output_dir, "2_tissue_statistics.png"))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_example()
