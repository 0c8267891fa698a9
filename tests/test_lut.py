# -*- coding: utf-8 -*-
"""Tests for importing foreign color lookup tables."""

import numpy as np
import pytest

from tissuecatalog import UnrecognizedFormat, import_lut, read_lut_rows
from tissuecatalog.core.constants import TISSUES_SIZE_MAX
from tissuecatalog.io.lut import build_lut_candidates, detect_lut, lut_max_label


def test_read_rows_skips_comments(lut_lines):
    """Only six-field rows are kept, in file order."""
    rows = read_lut_rows(lut_lines)
    assert list(rows["label"]) == [0, 1, 3, 5]
    assert list(rows.columns) == ["label", "name", "r", "g", "b", "a"]


def test_detection(lut_lines):
    """Tables are recognised by their '0 Unknown' row."""
    assert detect_lut(read_lut_rows(lut_lines))
    assert not detect_lut(read_lut_rows(lut_lines[3:])), "Table without Unknown row must not be detected."
    assert not detect_lut(read_lut_rows([]))


def test_import_fills_gaps(lut_lines):
    """Missing labels become placeholders; present labels are copied with 0-255 channels scaled."""
    candidates = import_lut(lut_lines, rng=np.random.default_rng(1))
    assert [c.name for c in candidates] == [
        "Left-Cerebral-White-Matter",
        "DummyTissue1",
        "Left-Cerebral-Cortex",
        "DummyTissue2",
        "Left-Lateral-Ventricle",
    ]

    cortex = candidates[2]
    assert cortex.color == pytest.approx((205 / 255.0, 62 / 255.0, 78 / 255.0))
    assert cortex.opacity == pytest.approx(1.0)
    assert candidates[4].opacity == pytest.approx(51 / 255.0)

    dummy = candidates[1]
    assert dummy.opacity == 0.5
    assert all(0.0 <= c <= 1.0 for c in dummy.color)


def test_placeholder_colors_follow_generator(lut_lines):
    """Placeholder colors are reproducible with a seeded generator."""
    first = import_lut(lut_lines, rng=np.random.default_rng(7))
    second = import_lut(lut_lines, rng=np.random.default_rng(7))
    assert first[1].color == second[1].color


def test_import_without_unknown_row_is_rejected(lut_lines):
    """A table lacking the '0 Unknown' row is not this format."""
    with pytest.raises(UnrecognizedFormat):
        import_lut(lut_lines[3:])


def test_duplicate_labels_keep_first():
    """When a label appears twice, the first row wins."""
    candidates = import_lut(["0 Unknown 0 0 0 0", "1 First 255 0 0 255", "1 Second 0 255 0 255"])
    assert [c.name for c in candidates] == ["First"]


def test_max_label_is_capped():
    """Labels beyond the id width are dropped."""
    rows = read_lut_rows(["0 Unknown 0 0 0 0", "3 Small 1 2 3 4", f"{TISSUES_SIZE_MAX + 5} Huge 1 2 3 4"])
    with pytest.warns(UserWarning):
        assert lut_max_label(rows) == TISSUES_SIZE_MAX


def test_build_candidates_without_gaps():
    """A contiguous table maps one to one."""
    rows = read_lut_rows(["0 Unknown 0 0 0 0", "1 A 255 255 255 255", "2 B 0 0 0 0"])
    candidates = build_lut_candidates(rows)
    assert [c.name for c in candidates] == ["A", "B"]
    assert candidates[1].opacity == 0.0
