# -*- coding: utf-8 -*-
"""Tests for reconciling edited tissue lists with a live catalog and its label volume."""

import numpy as np
import pytest

from tissuecatalog import ArrayLabelVolume, TissueRecord, purge_carried_over, reconcile
from tissuecatalog.core.constants import TISSUES_SIZE_MAX


class RecordingVolume:
    """Label owner that records what the catalog looked like when it was told to remap."""

    def __init__(self, catalog):
        self.catalog = catalog
        self.calls = []

    def remap_labels(self, index_map):
        names = [self.catalog.get_name(i) for i in range(1, self.catalog.max_id + 1)]
        self.calls.append((list(index_map), names))


def _candidates(*names):
    return [TissueRecord(name, (0.5, 0.5, 0.5)) for name in names]


def test_permutation_remaps_before_replacement(abc_catalog):
    """Swapping A and B produces the remap table and notifies before the catalog changes."""
    volume = RecordingVolume(abc_catalog)
    result = reconcile(abc_catalog, _candidates("B", "A", "C"), label_volume=volume)

    assert result.permuted
    assert result.index_map.tolist() == [0, 2, 1, 3]
    assert result.removed_range == 0
    assert volume.calls == [([0, 2, 1, 3], ["A", "B", "C"])], "Volume must see the old catalog when remapping."
    assert [abc_catalog.get_name(i) for i in range(1, 4)] == ["B", "A", "C"]
    assert abc_catalog.tissue_id("A") == 2


def test_identity_reconciliation(abc_catalog):
    """Reconciling against the same names keeps ids and records."""
    before = abc_catalog.records
    volume = RecordingVolume(abc_catalog)
    result = reconcile(abc_catalog, [r.copy() for r in before[1:]], label_volume=volume)

    assert result.removed_range == 0
    assert not result.permuted
    assert result.carried_over == []
    assert volume.calls == [], "No remap is needed when nothing moved."
    assert abc_catalog.records == before


def test_missing_tissues_are_carried_over(abc_catalog):
    """Tissues absent from the candidate are kept at the front with their original records."""
    abc_catalog.set_locked(2, True)
    original_a = abc_catalog.get_record(1).copy()
    original_b = abc_catalog.get_record(2).copy()

    result = reconcile(abc_catalog, _candidates("D", "c"), label_volume=RecordingVolume(abc_catalog))

    assert result.removed_range == 2
    assert result.carried_over == [1, 2]
    assert abc_catalog.get_record(1) == original_a
    assert abc_catalog.get_record(2) == original_b, "Carried over tissues keep color, opacity and lock."
    assert [abc_catalog.get_name(i) for i in range(1, 5)] == ["A", "B", "D", "c"]
    assert result.index_map.tolist() == [0, 1, 2, 4]
    assert abc_catalog.get_color(0) == (0.125, 0.25, 0.5), "Background is carried over."


def test_new_tissues_are_appended(abc_catalog):
    """Names unknown to the live catalog simply become new tissues."""
    result = reconcile(abc_catalog, _candidates("A", "B", "C", "Lung"))
    assert result.removed_range == 0
    assert not result.permuted
    assert abc_catalog.tissue_id("lung") == 4


def test_volume_labels_follow_permutation(abc_catalog):
    """An array volume rewrites its labels through the remap table."""
    volume = ArrayLabelVolume(np.array([[0, 1, 2], [3, 2, 1]]))
    reconcile(abc_catalog, _candidates("C", "A", "B"), label_volume=volume)

    assert volume.labels.tolist() == [[0, 2, 3], [1, 3, 2]]
    assert abc_catalog.get_name(int(volume.labels[0, 1])) == "A"


def test_purge_carried_over(abc_catalog):
    """Purging drops the kept tissues and clears their voxels."""
    volume = ArrayLabelVolume(np.array([0, 1, 2, 3]))
    result = reconcile(abc_catalog, _candidates("C", "D"), label_volume=volume)
    assert result.removed_range == 2
    assert volume.labels.tolist() == [0, 1, 2, 3], "C kept its position, no remap expected."

    purge_carried_over(abc_catalog, volume, result.removed_range)
    assert [abc_catalog.get_name(i) for i in range(1, abc_catalog.max_id + 1)] == ["C", "D"]
    assert volume.labels.tolist() == [0, 0, 0, 1]
    assert abc_catalog.get_name(int(volume.labels[3])) == "C"


def test_full_candidate_list_keeps_known_tissues(abc_catalog):
    """A candidate list that fills the catalog is cut before any known tissue is dropped."""
    volume = ArrayLabelVolume(np.array([1, 2, 3]))
    candidates = _candidates(*(f"New{i}" for i in range(TISSUES_SIZE_MAX - 1))) + _candidates("A")

    with pytest.warns(UserWarning):
        result = reconcile(abc_catalog, candidates, label_volume=volume)

    assert abc_catalog.max_id == TISSUES_SIZE_MAX
    assert result.removed_range == 3, "A was cut from the candidates, so it is carried over like B and C."
    assert [abc_catalog.tissue_id(name) for name in "ABC"] == [1, 2, 3]
    assert volume.labels.tolist() == [1, 2, 3]
    assert abc_catalog.get_name(abc_catalog.max_id) == f"New{TISSUES_SIZE_MAX - 4}"


def test_full_candidate_list_moves_matched_tissue(abc_catalog):
    """A known tissue that survives the cut is moved and its voxels follow it."""
    volume = ArrayLabelVolume(np.array([1, 2, 3]))
    candidates = _candidates("A") + _candidates(*(f"New{i}" for i in range(TISSUES_SIZE_MAX)))

    with pytest.warns(UserWarning):
        result = reconcile(abc_catalog, candidates, label_volume=volume)

    assert abc_catalog.max_id == TISSUES_SIZE_MAX
    assert result.removed_range == 2
    assert [abc_catalog.get_name(int(v)) for v in volume.labels] == ["A", "B", "C"]
    assert abc_catalog.tissue_id("A") == 3
