# -*- coding: utf-8 -*-
"""The core package holds the tissue catalog and the logic that keeps it consistent.

It defines tissue records, the catalog with its name index, the selection, the hierarchy tree used for export and the
reconciliation of edited tissue lists with a label volume.
"""
