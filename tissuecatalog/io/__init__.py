# -*- coding: utf-8 -*-
"""The io package contains the readers and writers of every tissue list format.

Binary project streams, hierarchical HDF5 groups, readable text lists, default lists and foreign lookup tables.
"""
