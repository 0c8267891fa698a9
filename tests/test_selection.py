# -*- coding: utf-8 -*-
"""Tests for the tissue selection."""

from tissuecatalog import TissueRecord, TissueSelection


def test_selection_is_filtered_after_shrink(abc_catalog):
    """Ids that became invalid are hidden on read."""
    abc_catalog.add_tissue(TissueRecord("D"))
    abc_catalog.add_tissue(TissueRecord("E"))
    selection = TissueSelection(abc_catalog)
    assert selection.set({1, 2, 5})

    abc_catalog.remove_tissues([4, 5])
    assert abc_catalog.max_id == 3
    assert selection.get() == {1, 2}
    assert 5 not in selection
    assert len(selection) == 2


def test_invalid_selection_is_rejected(abc_catalog):
    """A proposal with any invalid id leaves the previous selection in place."""
    selection = TissueSelection(abc_catalog)
    assert selection.set({1, 2})
    assert not selection.set({1, 7})
    assert selection.get() == {1, 2}


def test_selection_may_include_background(abc_catalog):
    """Id 0 is valid and can be selected; clear empties the selection."""
    selection = TissueSelection(abc_catalog)
    assert selection.set([0, 3])
    assert selection.get() == {0, 3}
    selection.clear()
    assert selection.get() == set()
