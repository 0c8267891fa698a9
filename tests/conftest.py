# -*- coding: utf-8 -*-
"""Shared fixtures for the tissuecatalog test suite."""

import matplotlib
import pytest

matplotlib.use("Agg")

from tissuecatalog import TissueCatalog, TissueRecord  # noqa: E402


@pytest.fixture
def abc_catalog():
    """Catalog [background, A, B, C] with colors that survive float32 storage."""
    catalog = TissueCatalog()
    catalog.set_color(0, 0.125, 0.25, 0.5)
    catalog.add_tissue(TissueRecord("A", (1.0, 0.0, 0.0), 0.5))
    catalog.add_tissue(TissueRecord("B", (0.0, 1.0, 0.0), 0.25))
    catalog.add_tissue(TissueRecord("C", (0.0, 0.0, 1.0), 0.75))
    return catalog


@pytest.fixture
def lut_lines():
    """A small lookup table with a comment, a gap at label 2 and a gap at label 4."""
    return [
        "#No. Label Name:                            R   G   B   A",
        "",
        "0\tUnknown\t0\t0\t0\t0",
        "1\tLeft-Cerebral-White-Matter\t245\t245\t245\t0",
        "3\tLeft-Cerebral-Cortex\t205\t62\t78\t255",
        "5\tLeft-Lateral-Ventricle\t120\t18\t134\t51",
    ]
